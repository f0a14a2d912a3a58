"""Config file validation.

Config documents are checked with the same engine records are: every
problem becomes a :class:`ValidationError` keyed by its dotted config path.
"""

from __future__ import annotations

import difflib
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from fieldcheck.checks import FieldChecker, IntegerChecker
from fieldcheck.config.document import read_config_document
from fieldcheck.constants.config import (
    ALLOWED_CONFIG_KEYS,
    ALLOWED_LIMIT_KEYS,
    ALLOWED_PHONE_KEYS,
    MAX_CONFIGURED_LENGTH,
)
from fieldcheck.constants.limits import DEFAULT_MAX_PASSWORD_LENGTH, DEFAULT_MIN_PASSWORD_LENGTH
from fieldcheck.exceptions import ConfigError
from fieldcheck.exceptions.validation import ValidationError
from fieldcheck.rules import BusinessRule, Custom, InvalidFormat
from fieldcheck.validator import Validator


def validate_config_file(path: Path) -> list[ValidationError]:
    """Validate a fieldcheck.yaml file and return all errors. Never raises."""
    try:
        raw = read_config_document(path)
    except ConfigError as exc:
        return [ValidationError(field=str(path), rule=Custom(message=str(exc)))]
    return validate_config_data(raw)


def validate_config_data(raw: Any) -> list[ValidationError]:
    """Validate a parsed config document."""
    validator = Validator()
    validator.declare("config", raw, _is_mapping_check)
    if not isinstance(raw, dict):
        return validator.errors()

    _check_known_keys(validator, "", raw, ALLOWED_CONFIG_KEYS)

    limits = raw.get("limits")
    validator.declare("limits", limits, _is_mapping_check)
    if isinstance(limits, dict):
        _check_known_keys(validator, "limits.", limits, ALLOWED_LIMIT_KEYS)
        for key in ALLOWED_LIMIT_KEYS:
            if key in limits:
                _check_length_limit(validator, f"limits.{key}", limits[key])
        _check_password_bounds(validator, limits)

    phone = raw.get("phone")
    validator.declare("phone", phone, _is_mapping_check)
    if isinstance(phone, dict):
        _check_known_keys(validator, "phone.", phone, ALLOWED_PHONE_KEYS)
        if "allow_international" in phone:
            validator.declare(
                "phone.allow_international",
                phone["allow_international"],
                lambda checker: checker.custom(
                    lambda value: isinstance(value, bool), InvalidFormat(reason="expected a boolean")
                ),
            )

    return validator.errors()


def _is_mapping_check(checker: FieldChecker) -> None:
    checker.custom(lambda value: value is None or isinstance(value, dict), InvalidFormat(reason="expected a mapping"))


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _check_known_keys(validator: Validator, prefix: str, raw: dict[str, Any], allowed: Iterable[str]) -> None:
    allowed_keys = frozenset(allowed)
    for key in sorted(raw.keys(), key=str):
        validator.declare(
            f"{prefix}{key}",
            key,
            lambda checker, key=key: checker.custom(
                lambda value: value in allowed_keys,
                Custom(message=f"unknown key `{prefix}{key}`{_suggest_key(str(key), allowed_keys)}"),
            ),
        )


def _check_length_limit(validator: Validator, field: str, value: Any) -> None:
    validator.declare(
        field,
        value,
        lambda checker: checker.custom(_is_int, InvalidFormat(reason="expected a positive integer")),
    )
    if _is_int(value):
        validator.integer(field, value, lambda checker: checker.range(1, MAX_CONFIGURED_LENGTH))


def _check_password_bounds(validator: Validator, limits: dict[str, Any]) -> None:
    minimum = limits.get("min_password_length", DEFAULT_MIN_PASSWORD_LENGTH)
    maximum = limits.get("max_password_length", DEFAULT_MAX_PASSWORD_LENGTH)
    if not (_is_int(minimum) and _is_int(maximum)):
        return

    def check(checker: IntegerChecker) -> None:
        checker.custom(
            lambda value: value <= maximum,
            BusinessRule(reason="min_password_length cannot exceed max_password_length"),
        )

    validator.integer("limits.min_password_length", minimum, check)


def _suggest_key(key: str, allowed: frozenset[str]) -> str:
    """Return a ``did you mean`` hint for a mistyped key, or an empty string."""
    matches = difflib.get_close_matches(key, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f" (did you mean `{matches[0]}`?)"
    return ""
