"""Cross-module type aliases."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Literal

type ValueShape = Literal["any", "text", "integer", "real", "timestamp"]
type RuleKind = Literal[
    "required",
    "empty",
    "too_long",
    "too_short",
    "out_of_range",
    "invalid_format",
    "business_rule",
    "custom",
    "invalid_email",
    "invalid_url",
    "invalid_phone_number",
    "not_unique",
    "not_matching",
]

type Predicate = Callable[[Any], bool]

type JsonScalar = str | int | float | bool | None
type JsonValue = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
type JsonObject = dict[str, JsonValue]
