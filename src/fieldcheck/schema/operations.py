"""Check operations: map compiled check names to checker calls.

Only registered names can be used from a schema.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from fieldcheck.checks import FieldChecker
from fieldcheck.constants.schema import ONE_OF_REASON_PREFIX
from fieldcheck.rules import InvalidFormat
from fieldcheck.schema.compiler import CompiledCheck

type CheckOperation = Callable[[Any, CompiledCheck, Mapping[str, Any]], None]


def run_required(checker: FieldChecker, check: CompiledCheck, values: Mapping[str, Any]) -> None:
    checker.required()


def run_matches(checker: FieldChecker, check: CompiledCheck, values: Mapping[str, Any]) -> None:
    other = check.params["field"]
    checker.matches(values.get(other), other)


def run_one_of(checker: FieldChecker, check: CompiledCheck, values: Mapping[str, Any]) -> None:
    """Fail when a present value is not among the declared choices."""
    choices = check.params["choices"]
    reason = f"{ONE_OF_REASON_PREFIX} {', '.join(str(choice) for choice in choices)}"
    checker.custom(lambda value: value is None or value in choices, InvalidFormat(reason=reason))


def run_pattern(checker: Any, check: CompiledCheck, values: Mapping[str, Any]) -> None:
    """Fail when present text does not fully match the declared regex."""
    regex = check.params["regex"]
    checker.custom(
        lambda value: value is None or regex.fullmatch(value) is not None,
        InvalidFormat(reason=check.params["reason"]),
    )


def _delegate(method: str) -> CheckOperation:
    """Build an operation that calls ``method`` on the checker with the check's params."""

    def run(checker: Any, check: CompiledCheck, values: Mapping[str, Any]) -> None:
        getattr(checker, method)(**check.params)

    run.__name__ = f"run_{method}"
    return run


CHECK_OPERATIONS: dict[str, CheckOperation] = {
    "required": run_required,
    "matches": run_matches,
    "one_of": run_one_of,
    "not_empty": _delegate("not_empty"),
    "max_length": _delegate("max_length"),
    "min_length": _delegate("min_length"),
    "email": _delegate("matches_email"),
    "url": _delegate("matches_url"),
    "phone": _delegate("matches_phone_number"),
    "pattern": run_pattern,
    "range": _delegate("range"),
    "not_future": _delegate("not_future"),
    "not_past": _delegate("not_past"),
}
