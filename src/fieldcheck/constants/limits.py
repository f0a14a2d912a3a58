"""Default length limits exposed for reuse by model code."""

from __future__ import annotations

DEFAULT_MAX_NAME_LENGTH: int = 50
DEFAULT_MAX_DESCRIPTION_LENGTH: int = 500
DEFAULT_MIN_PASSWORD_LENGTH: int = 8
DEFAULT_MAX_PASSWORD_LENGTH: int = 128
