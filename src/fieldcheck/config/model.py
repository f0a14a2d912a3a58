"""Config data model for Fieldcheck."""

from __future__ import annotations

from dataclasses import dataclass

from fieldcheck.constants.limits import (
    DEFAULT_MAX_DESCRIPTION_LENGTH,
    DEFAULT_MAX_NAME_LENGTH,
    DEFAULT_MAX_PASSWORD_LENGTH,
    DEFAULT_MIN_PASSWORD_LENGTH,
)


@dataclass(frozen=True)
class LengthLimits:
    """Length presets referenced by name from record schemas."""

    max_name_length: int = DEFAULT_MAX_NAME_LENGTH
    max_description_length: int = DEFAULT_MAX_DESCRIPTION_LENGTH
    min_password_length: int = DEFAULT_MIN_PASSWORD_LENGTH
    max_password_length: int = DEFAULT_MAX_PASSWORD_LENGTH

    def max_preset(self, name: str) -> int:
        """Resolve a ``max_length`` preset (``name``, ``description``, ``password``)."""
        return getattr(self, f"max_{name}_length")

    def min_preset(self, name: str) -> int:
        """Resolve a ``min_length`` preset (``password``)."""
        return getattr(self, f"min_{name}_length")


@dataclass(frozen=True)
class FieldcheckConfig:
    """Resolved config."""

    limits: LengthLimits = LengthLimits()
    allow_international_phone: bool = True
