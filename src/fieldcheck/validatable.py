"""The single capability a model exposes: produce its validation errors."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from fieldcheck.exceptions import InvalidModelError
from fieldcheck.exceptions.validation import ValidationError


@runtime_checkable
class Validatable(Protocol):
    """Anything with a zero-argument ``validate()`` returning ordered errors.

    Implementations build a fresh :class:`~fieldcheck.validator.Validator`
    on every call, so repeated calls on an unchanged model return equal
    lists.
    """

    def validate(self) -> list[ValidationError]: ...


def ensure_valid(model: Validatable) -> None:
    """Raise :class:`InvalidModelError` if ``model`` reports any errors."""
    errors = model.validate()
    if errors:
        raise InvalidModelError(errors)
