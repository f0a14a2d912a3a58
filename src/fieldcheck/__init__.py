"""Fieldcheck: declarative per-field validation that reports failures as data."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version

from fieldcheck.checks import FieldChecker, IntegerChecker, RealChecker, TextChecker, TimestampChecker
from fieldcheck.exceptions import ConfigError, FieldcheckError, InvalidModelError, SchemaError
from fieldcheck.exceptions.validation import ValidationError, errors_by_field, format_errors
from fieldcheck.validatable import Validatable, ensure_valid
from fieldcheck.validator import Validator

__all__ = [
    "ConfigError",
    "FieldChecker",
    "FieldcheckError",
    "IntegerChecker",
    "InvalidModelError",
    "RealChecker",
    "SchemaError",
    "TextChecker",
    "TimestampChecker",
    "Validatable",
    "ValidationError",
    "Validator",
    "__version__",
    "ensure_valid",
    "errors_by_field",
    "format_errors",
]

try:
    __version__ = version("fieldcheck")
except PackageNotFoundError:
    __version__ = "0.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
