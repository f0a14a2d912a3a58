"""Checks that apply to a value of any shape."""

from __future__ import annotations

from typing import Any

from fieldcheck.exceptions.validation import ValidationError
from fieldcheck.rules import NotMatching, Required, Rule
from fieldcheck.types import Predicate


class FieldChecker:
    """Runs an ordered set of checks against one named value.

    Every check decides pass/fail on its own and appends at most one error;
    a failing check never stops later ones. Apart from :meth:`required`,
    checks pass silently when the value is ``None``, so leaving out
    ``required()`` makes a field optional.
    """

    def __init__(self, field: str, value: Any) -> None:
        self.field = field
        self.value = value
        self._errors: list[ValidationError] = []

    def _fail(self, rule: Rule) -> None:
        self._errors.append(ValidationError(field=self.field, rule=rule))

    def required(self) -> None:
        """Fail when the value is absent."""
        if self.value is None:
            self._fail(Required())

    def matches(self, other_value: Any, other_field_name: str) -> None:
        """Fail when both values are present and differ."""
        if self.value is None or other_value is None:
            return
        if self.value != other_value:
            self._fail(NotMatching(other_field=other_field_name))

    def custom(self, predicate: Predicate, rule: Rule) -> None:
        """Fail with ``rule`` when ``predicate(value)`` is false.

        The predicate also sees absent values and decides for itself how to
        treat them.
        """
        if not predicate(self.value):
            self._fail(rule)

    def errors(self) -> list[ValidationError]:
        """Return the errors recorded so far, in check order."""
        return list(self._errors)
