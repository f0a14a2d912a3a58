"""Shared exception hierarchy for Fieldcheck."""

from __future__ import annotations

from .base import FieldcheckError
from .config import ConfigError
from .model import InvalidModelError
from .schema import SchemaError

__all__ = [
    "ConfigError",
    "FieldcheckError",
    "InvalidModelError",
    "SchemaError",
]
