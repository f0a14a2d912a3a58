"""Validator: collects per-field checker output into one ordered error list.

Usage::

    def check_name(name: TextChecker) -> None:
        name.required()
        name.not_empty()
        name.max_length(DEFAULT_MAX_NAME_LENGTH)

    validator = Validator()
    validator.text("name", user.name, check_name)
    validator.integer("age", user.age, lambda age: age.range(18, 120))
    errors = validator.errors()
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, tzinfo
from functools import partial
from typing import Any

from fieldcheck.checks import FieldChecker, IntegerChecker, RealChecker, TextChecker, TimestampChecker
from fieldcheck.exceptions.validation import ValidationError

logger = logging.getLogger(__name__)


class Validator:
    """Per-validation-call collector.

    Create one per ``validate()`` call. Fields are checked in the order they
    are declared and declarations never affect each other, so the resulting
    list is ordered by field and then by check.
    """

    def __init__(self) -> None:
        self._errors: list[ValidationError] = []

    def declare[C: FieldChecker](
        self,
        field: str,
        value: Any,
        checks: Callable[[C], object],
        checker: Callable[[str, Any], C] = FieldChecker,  # type: ignore[assignment]
    ) -> None:
        """Run ``checks`` against a fresh checker for ``field`` and keep its errors."""
        field_checker = checker(field, value)
        checks(field_checker)
        found = field_checker.errors()
        self._errors.extend(found)
        logger.debug("Checked field %s: %d error(s)", field, len(found))

    def text(self, field: str, value: str | None, checks: Callable[[TextChecker], object]) -> None:
        self.declare(field, value, checks, TextChecker)

    def integer(self, field: str, value: int | None, checks: Callable[[IntegerChecker], object]) -> None:
        self.declare(field, value, checks, IntegerChecker)

    def real(self, field: str, value: float | None, checks: Callable[[RealChecker], object]) -> None:
        self.declare(field, value, checks, RealChecker)

    def timestamp(
        self,
        field: str,
        value: datetime | None,
        checks: Callable[[TimestampChecker], object],
        *,
        clock: Callable[[tzinfo | None], datetime] | None = None,
    ) -> None:
        """Declare a timestamp field; ``clock`` overrides how "now" is read."""
        checker = TimestampChecker if clock is None else partial(TimestampChecker, clock=clock)
        self.declare(field, value, checks, checker)

    def errors(self) -> list[ValidationError]:
        """Return all errors collected so far, in declaration order."""
        return list(self._errors)

    def is_valid(self) -> bool:
        return not self._errors
