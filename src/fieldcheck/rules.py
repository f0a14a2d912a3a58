"""The closed set of failure kinds a check can report.

Each rule is a frozen dataclass carrying exactly the data its message needs.
Equality is structural: two rules are equal when they are the same kind with
equal payloads.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import ClassVar

from fieldcheck.types import RuleKind


@dataclass(frozen=True)
class _BaseRule:
    kind: ClassVar[RuleKind]

    def payload(self) -> dict[str, object]:
        """Return the rule's message parameters keyed by name."""
        return {item.name: getattr(self, item.name) for item in fields(self)}


@dataclass(frozen=True)
class Required(_BaseRule):
    """Value is absent."""

    kind: ClassVar[RuleKind] = "required"


@dataclass(frozen=True)
class Empty(_BaseRule):
    """Text is empty or whitespace-only."""

    kind: ClassVar[RuleKind] = "empty"


@dataclass(frozen=True)
class TooLong(_BaseRule):
    """Trimmed text exceeds ``max`` characters."""

    kind: ClassVar[RuleKind] = "too_long"
    max: int


@dataclass(frozen=True)
class TooShort(_BaseRule):
    """Trimmed text is shorter than ``min`` characters."""

    kind: ClassVar[RuleKind] = "too_short"
    min: int


@dataclass(frozen=True)
class OutOfRange(_BaseRule):
    """Number falls outside the inclusive ``[min, max]`` range."""

    kind: ClassVar[RuleKind] = "out_of_range"
    min: int
    max: int


@dataclass(frozen=True)
class InvalidFormat(_BaseRule):
    kind: ClassVar[RuleKind] = "invalid_format"
    reason: str


@dataclass(frozen=True)
class BusinessRule(_BaseRule):
    """Domain-specific violation; the reason is the whole message."""

    kind: ClassVar[RuleKind] = "business_rule"
    reason: str


@dataclass(frozen=True)
class Custom(_BaseRule):
    kind: ClassVar[RuleKind] = "custom"
    message: str


@dataclass(frozen=True)
class InvalidEmail(_BaseRule):
    kind: ClassVar[RuleKind] = "invalid_email"


@dataclass(frozen=True)
class InvalidURL(_BaseRule):
    kind: ClassVar[RuleKind] = "invalid_url"


@dataclass(frozen=True)
class InvalidPhoneNumber(_BaseRule):
    kind: ClassVar[RuleKind] = "invalid_phone_number"


@dataclass(frozen=True)
class NotUnique(_BaseRule):
    """Value is already in use.

    Never produced by the engine itself; callers attach it through
    ``custom()`` once they have checked their own store.
    """

    kind: ClassVar[RuleKind] = "not_unique"


@dataclass(frozen=True)
class NotMatching(_BaseRule):
    """Value differs from the value of ``other_field``."""

    kind: ClassVar[RuleKind] = "not_matching"
    other_field: str


type Rule = (
    Required
    | Empty
    | TooLong
    | TooShort
    | OutOfRange
    | InvalidFormat
    | BusinessRule
    | Custom
    | InvalidEmail
    | InvalidURL
    | InvalidPhoneNumber
    | NotUnique
    | NotMatching
)

RULE_TYPES: tuple[type[_BaseRule], ...] = (
    Required,
    Empty,
    TooLong,
    TooShort,
    OutOfRange,
    InvalidFormat,
    BusinessRule,
    Custom,
    InvalidEmail,
    InvalidURL,
    InvalidPhoneNumber,
    NotUnique,
    NotMatching,
)

RULES_BY_KIND: dict[str, type[_BaseRule]] = {rule_type.kind: rule_type for rule_type in RULE_TYPES}
