"""Configuration filenames and allowed-key sets."""

from __future__ import annotations

CONFIG_FILENAME: str = "fieldcheck.yaml"

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset({"limits", "phone"})
ALLOWED_LIMIT_KEYS: tuple[str, ...] = (
    "max_name_length",
    "max_description_length",
    "min_password_length",
    "max_password_length",
)
ALLOWED_PHONE_KEYS: frozenset[str] = frozenset({"allow_international"})

# Upper bound accepted for configured length limits.
MAX_CONFIGURED_LENGTH: int = 1_000_000
