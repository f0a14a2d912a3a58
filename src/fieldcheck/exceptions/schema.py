"""Schema-related exceptions."""

from __future__ import annotations

from fieldcheck.exceptions.base import FieldcheckError


class SchemaError(FieldcheckError, ValueError):
    """Raised when a schema or record file cannot be loaded or compiled."""
