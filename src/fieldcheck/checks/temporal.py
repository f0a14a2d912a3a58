"""Checks comparing timestamps against the current time."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, tzinfo

from fieldcheck.checks.base import FieldChecker
from fieldcheck.constants.patterns import NOT_FUTURE_REASON, NOT_PAST_REASON
from fieldcheck.rules import InvalidFormat


def _system_now(tz: tzinfo | None) -> datetime:
    return datetime.now(tz)


class TimestampChecker(FieldChecker):
    """Field checker for ``datetime`` values.

    "Now" is read once per check through ``clock``. Timezone-aware values are
    compared against an aware "now" in the value's own zone, naive values
    against local time.
    """

    value: datetime | None

    def __init__(
        self,
        field: str,
        value: datetime | None,
        clock: Callable[[tzinfo | None], datetime] = _system_now,
    ) -> None:
        super().__init__(field, value)
        self._clock = clock

    def _now(self) -> datetime:
        assert self.value is not None
        return self._clock(self.value.tzinfo)

    def not_future(self) -> None:
        """Fail when the value is strictly after now."""
        if self.value is not None and self.value > self._now():
            self._fail(InvalidFormat(reason=NOT_FUTURE_REASON))

    def not_past(self) -> None:
        """Fail when the value is strictly before now."""
        if self.value is not None and self.value < self._now():
            self._fail(InvalidFormat(reason=NOT_PAST_REASON))
