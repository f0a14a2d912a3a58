"""Tests for checks available on every value shape."""

from __future__ import annotations

from fieldcheck.checks import FieldChecker, TextChecker
from fieldcheck.exceptions.validation import ValidationError
from fieldcheck.rules import BusinessRule, NotMatching, Required


def test_required_fails_only_on_absent_value() -> None:
    checker = FieldChecker("name", None)
    checker.required()
    assert checker.errors() == [ValidationError("name", Required())]

    checker = FieldChecker("name", "John")
    checker.required()
    assert checker.errors() == []


def test_required_passes_for_falsy_present_values() -> None:
    for value in ("", 0, False, []):
        checker = FieldChecker("field", value)
        checker.required()
        assert checker.errors() == []


def test_matches_equal_values_pass() -> None:
    checker = FieldChecker("confirmPassword", "password123")
    checker.matches("password123", "password")
    assert checker.errors() == []


def test_matches_unequal_values_fail() -> None:
    checker = FieldChecker("confirmPassword", "password123")
    checker.matches("differentPassword", "password")
    assert checker.errors() == [ValidationError("confirmPassword", NotMatching(other_field="password"))]


def test_matches_passes_when_either_side_is_absent() -> None:
    checker = FieldChecker("confirmPassword", None)
    checker.matches("password123", "password")
    assert checker.errors() == []

    checker = FieldChecker("confirmPassword", "password123")
    checker.matches(None, "password")
    assert checker.errors() == []


def test_custom_predicate_attaches_caller_rule() -> None:
    reserved = BusinessRule(reason="Username 'admin' is reserved")

    checker = FieldChecker("username", "admin")
    checker.custom(lambda value: value != "admin", reserved)
    assert checker.errors() == [ValidationError("username", reserved)]

    checker = FieldChecker("username", "john")
    checker.custom(lambda value: value != "admin", reserved)
    assert checker.errors() == []


def test_custom_predicate_sees_absent_values() -> None:
    seen: list[object] = []

    def predicate(value: object) -> bool:
        seen.append(value)
        return value is not None

    checker = FieldChecker("agreeToTerms", None)
    checker.custom(predicate, BusinessRule(reason="You must agree to the terms and conditions"))
    assert seen == [None]
    assert len(checker.errors()) == 1


def test_failed_check_does_not_stop_later_checks() -> None:
    checker = TextChecker("password", "")
    checker.required()
    checker.not_empty()
    checker.min_length(8)
    assert [error.rule.kind for error in checker.errors()] == ["empty", "too_short"]
    assert all(error.field == "password" for error in checker.errors())


def test_errors_returns_a_copy() -> None:
    checker = FieldChecker("name", None)
    checker.required()
    snapshot = checker.errors()
    snapshot.clear()
    assert len(checker.errors()) == 1
