"""Root exception type."""

from __future__ import annotations


class FieldcheckError(Exception):
    """Base class for all errors raised by Fieldcheck's outer surfaces."""
