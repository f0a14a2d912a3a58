"""Tests for integral and real range checks."""

from __future__ import annotations

import math

import pytest

from fieldcheck.checks import IntegerChecker, RealChecker
from fieldcheck.rules import OutOfRange


@pytest.mark.parametrize("value", [18, 25, 65])
def test_integer_range_inclusive_bounds_pass(value: int) -> None:
    checker = IntegerChecker("age", value)
    checker.range(min=18, max=65)
    assert checker.errors() == []


@pytest.mark.parametrize("value", [17, 66, 10, 70])
def test_integer_range_outside_fails(value: int) -> None:
    checker = IntegerChecker("age", value)
    checker.range(min=18, max=65)
    assert [error.rule for error in checker.errors()] == [OutOfRange(min=18, max=65)]


def test_real_range() -> None:
    checker = RealChecker("price", 19.99)
    checker.range(0.0, 100.0)
    assert checker.errors() == []

    for value in (-5.0, 150.0):
        checker = RealChecker("price", value)
        checker.range(0.0, 100.0)
        assert len(checker.errors()) == 1


def test_real_range_reports_truncated_bounds() -> None:
    checker = RealChecker("ratio", 9.95)
    checker.range(0.5, 9.9)
    assert [error.rule for error in checker.errors()] == [OutOfRange(min=0, max=9)]
    assert checker.errors()[0].description == "ratio must be between 0 and 9"


def test_real_range_compares_with_exact_bounds() -> None:
    checker = RealChecker("ratio", 9.85)
    checker.range(0.5, 9.9)
    assert checker.errors() == []


def test_range_skips_absent_value() -> None:
    checker = IntegerChecker("age", None)
    checker.range(0, 1)
    assert checker.errors() == []


@pytest.mark.parametrize(("low", "high"), [(0.0, math.inf), (-math.inf, 0.0), (math.nan, 1.0)])
def test_real_range_rejects_non_finite_bounds(low: float, high: float) -> None:
    checker = RealChecker("score", -1.0)
    with pytest.raises(ValueError, match="must be finite"):
        checker.range(low, high)
    assert checker.errors() == []


def test_real_range_handles_non_finite_value() -> None:
    for value in (math.inf, -math.inf):
        checker = RealChecker("score", value)
        checker.range(0.0, 1.0)
        assert [error.rule for error in checker.errors()] == [OutOfRange(min=0, max=1)]


def test_real_range_accepts_large_integer_bounds() -> None:
    checker = RealChecker("mass", 1e300)
    checker.range(0, 10**400)
    assert checker.errors() == []
