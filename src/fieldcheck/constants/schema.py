"""Allowed keys and check keywords for declarative record schemas."""

from __future__ import annotations

ALLOWED_TOP_KEYS: frozenset[str] = frozenset({"fields"})
ALLOWED_FIELD_KEYS: frozenset[str] = frozenset({"name", "type", "checks"})
REQUIRED_FIELD_KEYS: tuple[str, ...] = ("name",)

DEFAULT_SHAPE: str = "any"
VALID_SHAPES: frozenset[str] = frozenset({"any", "text", "integer", "real", "timestamp"})

COMMON_CHECKS: frozenset[str] = frozenset({"required", "matches", "one_of"})
SHAPE_CHECKS: dict[str, frozenset[str]] = {
    "any": COMMON_CHECKS,
    "text": COMMON_CHECKS
    | frozenset({"not_empty", "max_length", "min_length", "email", "url", "phone", "pattern"}),
    "integer": COMMON_CHECKS | frozenset({"range"}),
    "real": COMMON_CHECKS | frozenset({"range"}),
    "timestamp": COMMON_CHECKS | frozenset({"not_future", "not_past"}),
}

# Checks usable as a bare string (no parameters).
BARE_CHECKS: frozenset[str] = frozenset(
    {"required", "not_empty", "email", "url", "phone", "not_future", "not_past"}
)

MAX_LENGTH_PRESETS: frozenset[str] = frozenset({"name", "description", "password"})
MIN_LENGTH_PRESETS: frozenset[str] = frozenset({"password"})

ONE_OF_REASON_PREFIX: str = "must be one of"
TIMESTAMP_PARSE_REASON: str = "must be an ISO-8601 timestamp"

SHAPE_MISMATCH_REASONS: dict[str, str] = {
    "text": "must be text",
    "integer": "must be an integer",
    "real": "must be a number",
    "timestamp": TIMESTAMP_PARSE_REASON,
}
