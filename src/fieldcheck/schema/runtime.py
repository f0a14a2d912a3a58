"""Run compiled field specs against plain mapping records."""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from datetime import date, datetime, time
from typing import Any

from fieldcheck.checks import CHECKERS, FieldChecker
from fieldcheck.constants.schema import SHAPE_MISMATCH_REASONS
from fieldcheck.exceptions.validation import ValidationError
from fieldcheck.rules import InvalidFormat
from fieldcheck.schema.compiler import FieldSpec
from fieldcheck.schema.operations import CHECK_OPERATIONS
from fieldcheck.validator import Validator

logger = logging.getLogger(__name__)

# Sentinel for values that cannot be read as the declared shape.
_MISMATCH = object()


class RecordSchema:
    """A compiled schema; validates mapping records field by field.

    Keys missing from a record count as absent values.
    """

    def __init__(self, fields: tuple[FieldSpec, ...], source_path: str = "<schema>") -> None:
        self.fields = fields
        self.source_path = source_path

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(spec.name for spec in self.fields)

    def validate(self, record: Mapping[str, Any]) -> list[ValidationError]:
        """Return the record's errors in field declaration order."""
        values = {spec.name: coerce_value(spec.shape, record.get(spec.name)) for spec in self.fields}
        present = {name: (None if value is _MISMATCH else value) for name, value in values.items()}
        validator = Validator()
        for spec in self.fields:
            value = values[spec.name]
            if value is _MISMATCH:
                reason = SHAPE_MISMATCH_REASONS[spec.shape]
                validator.declare(
                    spec.name,
                    record.get(spec.name),
                    lambda checker, reason=reason: checker.custom(lambda _: False, InvalidFormat(reason=reason)),
                )
                continue
            validator.declare(
                spec.name,
                value,
                lambda checker, spec=spec: _run_checks(checker, spec, present),
                CHECKERS[spec.shape],
            )
        errors = validator.errors()
        logger.debug("Validated record against %s: %d error(s)", self.source_path, len(errors))
        return errors


class SchemaModel:
    """Adapts a record and a schema into a validatable model."""

    def __init__(self, schema: RecordSchema, record: Mapping[str, Any]) -> None:
        self.schema = schema
        self.record = record

    def validate(self) -> list[ValidationError]:
        return self.schema.validate(self.record)


def _run_checks(checker: FieldChecker, spec: FieldSpec, values: Mapping[str, Any]) -> None:
    for check in spec.checks:
        CHECK_OPERATIONS[check.name](checker, check, values)


def coerce_value(shape: str, value: Any) -> Any:
    """Read a raw record value as ``shape``.

    Returns ``None`` for absent values and a private sentinel when the value
    does not fit the shape.
    """
    if value is None or shape == "any":
        return value
    if shape == "text":
        return value if isinstance(value, str) else _MISMATCH
    if isinstance(value, bool):
        return _MISMATCH
    if shape == "integer":
        return value if isinstance(value, int) else _MISMATCH
    if shape == "real":
        return _coerce_real(value)
    return _coerce_timestamp(value)


def _coerce_real(value: Any) -> Any:
    if not isinstance(value, (int, float)):
        return _MISMATCH
    try:
        number = float(value)
    except OverflowError:
        return _MISMATCH
    return _MISMATCH if math.isnan(number) else number


def _coerce_timestamp(value: Any) -> Any:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            return _MISMATCH
    return _MISMATCH
