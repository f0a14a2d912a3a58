"""Field checkers, one class per value shape.

Each shape only exposes the checks that make sense for it, so ``range`` is
not available on text and ``not_empty`` is not available on numbers.
"""

from __future__ import annotations

from fieldcheck.checks.base import FieldChecker
from fieldcheck.checks.numeric import IntegerChecker, RealChecker
from fieldcheck.checks.temporal import TimestampChecker
from fieldcheck.checks.text import TextChecker

CHECKERS: dict[str, type[FieldChecker]] = {
    "any": FieldChecker,
    "text": TextChecker,
    "integer": IntegerChecker,
    "real": RealChecker,
    "timestamp": TimestampChecker,
}

__all__ = [
    "CHECKERS",
    "FieldChecker",
    "IntegerChecker",
    "RealChecker",
    "TextChecker",
    "TimestampChecker",
]
