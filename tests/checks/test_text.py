"""Tests for text checks: emptiness, length and formats."""

from __future__ import annotations

import pytest

from fieldcheck.checks import TextChecker
from fieldcheck.rules import Empty, InvalidEmail, InvalidPhoneNumber, InvalidURL, TooLong, TooShort

FLAG_US = "\U0001f1fa\U0001f1f8"
COMBINING_ACUTE = chr(0x301)
DECOMPOSED_E = "e" + COMBINING_ACUTE
FAMILY = chr(0x200D).join(["\U0001f468", "\U0001f469", "\U0001f467"])
IDEOGRAPHIC_SPACE = chr(0x3000)
NO_BREAK_SPACE = chr(0xA0)


def _rules(checker: TextChecker) -> list[object]:
    return [error.rule for error in checker.errors()]


@pytest.mark.parametrize("value", ["", "   ", "\t\n "])
def test_not_empty_fails_on_blank_text(value: str) -> None:
    checker = TextChecker("name", value)
    checker.not_empty()
    assert _rules(checker) == [Empty()]


def test_not_empty_passes_on_text_and_absent_value() -> None:
    for value in ("John", None):
        checker = TextChecker("name", value)
        checker.not_empty()
        assert checker.errors() == []


def test_max_length() -> None:
    checker = TextChecker("name", "John")
    checker.max_length(10)
    assert checker.errors() == []

    checker = TextChecker("name", "a" * 11)
    checker.max_length(10)
    assert _rules(checker) == [TooLong(max=10)]


def test_min_length() -> None:
    checker = TextChecker("name", "Jo")
    checker.min_length(3)
    assert _rules(checker) == [TooShort(min=3)]

    checker = TextChecker("name", "John")
    checker.min_length(3)
    assert checker.errors() == []


def test_length_boundaries_pass() -> None:
    checker = TextChecker("code", "abcde")
    checker.max_length(5)
    checker.min_length(5)
    assert checker.errors() == []


def test_length_is_measured_on_trimmed_text() -> None:
    checker = TextChecker("name", "  abc  ")
    checker.max_length(3)
    checker.min_length(4)
    assert _rules(checker) == [TooShort(min=4)]


@pytest.mark.parametrize(
    "email",
    ["test@example.com", "user.name@example.com", "user+tag@example.co.uk", "test123@subdomain.example.com"],
)
def test_valid_emails(email: str) -> None:
    checker = TextChecker("email", email)
    checker.matches_email()
    assert checker.errors() == []


@pytest.mark.parametrize(
    "email",
    ["notanemail", "@example.com", "test@", "test@.com", "test@example", "test @example.com", "a@b.com\n"],
)
def test_invalid_emails(email: str) -> None:
    checker = TextChecker("email", email)
    checker.matches_email()
    assert _rules(checker) == [InvalidEmail()]


@pytest.mark.parametrize(
    "url",
    [
        "https://example.com",
        "http://subdomain.example.com",
        "https://example.com/path/to/resource",
        "https://example.com:8080",
    ],
)
def test_valid_urls(url: str) -> None:
    checker = TextChecker("url", url)
    checker.matches_url()
    assert checker.errors() == []


@pytest.mark.parametrize(
    "url",
    ["not a url", "://example.com", "example.com", "mailto:user@example.com", "http://[::1", "https:// example.com"],
)
def test_invalid_urls(url: str) -> None:
    checker = TextChecker("url", url)
    checker.matches_url()
    assert _rules(checker) == [InvalidURL()]


@pytest.mark.parametrize(
    "phone",
    ["123-456-7890", "(123) 456-7890", "123.456.7890", "+1 123 456 7890", "+44 20 7946 0958"],
)
def test_valid_international_phone_numbers(phone: str) -> None:
    checker = TextChecker("phone", phone)
    checker.matches_phone_number(allow_international=True)
    assert checker.errors() == []


@pytest.mark.parametrize("phone", ["123", "abcd-efg-hijk", "123-456-7890123456"])
def test_invalid_phone_numbers(phone: str) -> None:
    checker = TextChecker("phone", phone)
    checker.matches_phone_number()
    assert _rules(checker) == [InvalidPhoneNumber()]


def test_domestic_phone_numbers_need_exactly_ten_digits() -> None:
    checker = TextChecker("phone", "(123) 456-7890")
    checker.matches_phone_number(allow_international=False)
    assert checker.errors() == []

    for phone in ("+1 123 456 7890", "123-4567"):
        checker = TextChecker("phone", phone)
        checker.matches_phone_number(allow_international=False)
        assert _rules(checker) == [InvalidPhoneNumber()]


def test_format_checks_skip_absent_values() -> None:
    checker = TextChecker("contact", None)
    checker.matches_email()
    checker.matches_url()
    checker.matches_phone_number()
    checker.max_length(1)
    checker.min_length(5)
    assert checker.errors() == []


@pytest.mark.parametrize("value", [FLAG_US, DECOMPOSED_E, FAMILY])
def test_length_counts_user_perceived_characters(value: str) -> None:
    checker = TextChecker("initial", value)
    checker.max_length(1)
    checker.min_length(1)
    assert checker.errors() == []


def test_length_counts_each_cluster_once() -> None:
    checker = TextChecker("name", f"Jos{DECOMPOSED_E} {FLAG_US}")
    checker.max_length(5)
    assert _rules(checker) == [TooLong(max=5)]


@pytest.mark.parametrize("value", [IDEOGRAPHIC_SPACE + NO_BREAK_SPACE, " \x85 ", "\x0b\x0c\r"])
def test_not_empty_trims_unicode_whitespace_and_line_breaks(value: str) -> None:
    checker = TextChecker("name", value)
    checker.not_empty()
    assert _rules(checker) == [Empty()]


@pytest.mark.parametrize("separator", ["\x1c", "\x1d", "\x1e", "\x1f"])
def test_information_separators_are_not_trimmed(separator: str) -> None:
    checker = TextChecker("name", separator)
    checker.not_empty()
    checker.min_length(1)
    assert checker.errors() == []

    checker = TextChecker("name", f"{separator}ab{separator}")
    checker.max_length(2)
    assert _rules(checker) == [TooLong(max=2)]
