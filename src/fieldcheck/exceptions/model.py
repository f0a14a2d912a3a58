"""Exception for callers that treat validation failures as fatal."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fieldcheck.exceptions.base import FieldcheckError

if TYPE_CHECKING:
    from fieldcheck.exceptions.validation import ValidationError


class InvalidModelError(FieldcheckError, ValueError):
    """Raised by :func:`fieldcheck.ensure_valid` when a model has errors.

    The full ordered error list is kept on ``errors``.
    """

    def __init__(self, errors: list[ValidationError]) -> None:
        self.errors: tuple[ValidationError, ...] = tuple(errors)
        count = len(self.errors)
        noun = "error" if count == 1 else "errors"
        super().__init__(f"validation failed with {count} {noun}")
