"""Configuration-related exceptions."""

from __future__ import annotations

from fieldcheck.exceptions.base import FieldcheckError


class ConfigError(FieldcheckError, ValueError):
    """Raised when a fieldcheck.yaml file is missing or invalid."""
