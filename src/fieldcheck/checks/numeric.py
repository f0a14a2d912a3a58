"""Range checks for integral and real values."""

from __future__ import annotations

import math

from fieldcheck.checks.base import FieldChecker
from fieldcheck.rules import OutOfRange


class IntegerChecker(FieldChecker):
    """Field checker for ``int`` values."""

    value: int | None

    def range(self, min: int, max: int) -> None:  # noqa: A002
        """Fail when the value is outside the inclusive ``[min, max]`` range."""
        if self.value is not None and (self.value < min or self.value > max):
            self._fail(OutOfRange(min=min, max=max))


class RealChecker(FieldChecker):
    """Field checker for ``float`` values."""

    value: float | None

    def range(self, min: float, max: float) -> None:  # noqa: A002
        """Fail when the value is outside the inclusive ``[min, max]`` range.

        The reported bounds are truncated to integers, so ``range(0.5, 9.9)``
        reports ``OutOfRange(min=0, max=9)``. Bounds must be finite.
        """
        if not (_is_finite(min) and _is_finite(max)):
            raise ValueError(f"range bounds for {self.field} must be finite, got [{min}, {max}]")
        if self.value is not None and (self.value < min or self.value > max):
            self._fail(OutOfRange(min=int(min), max=int(max)))


def _is_finite(bound: float) -> bool:
    # ints are always finite; math.isfinite would overflow on very large ones
    return not isinstance(bound, float) or math.isfinite(bound)
