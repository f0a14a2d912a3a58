"""Checks for text values."""

from __future__ import annotations

from urllib.parse import urlsplit

from fieldcheck.checks.base import FieldChecker
from fieldcheck.constants.patterns import (
    EMAIL_PATTERN,
    GRAPHEME_PATTERN,
    PHONE_CLEANUP_PATTERN,
    PHONE_DOMESTIC_PATTERN,
    PHONE_INTERNATIONAL_PATTERN,
    TRIMMED_WHITESPACE,
    URL_WHITESPACE_PATTERN,
)
from fieldcheck.rules import Empty, InvalidEmail, InvalidPhoneNumber, InvalidURL, TooLong, TooShort


class TextChecker(FieldChecker):
    """Field checker for ``str`` values.

    Emptiness and length checks look at the text with surrounding whitespace
    and line breaks trimmed. Length counts user-perceived characters, so a
    flag emoji or a letter with a combining accent counts as one.
    """

    value: str | None

    def not_empty(self) -> None:
        """Fail when the text is empty or whitespace-only."""
        if self.value is not None and not _trimmed(self.value):
            self._fail(Empty())

    def max_length(self, limit: int) -> None:
        """Fail when the trimmed text is longer than ``limit``."""
        if self.value is not None and _length(self.value) > limit:
            self._fail(TooLong(max=limit))

    def min_length(self, limit: int) -> None:
        """Fail when the trimmed text is shorter than ``limit``."""
        if self.value is not None and _length(self.value) < limit:
            self._fail(TooShort(min=limit))

    def matches_email(self) -> None:
        if self.value is not None and not EMAIL_PATTERN.fullmatch(self.value):
            self._fail(InvalidEmail())

    def matches_url(self) -> None:
        """Fail unless the text is a URL with both a scheme and a host."""
        if self.value is not None and not _is_url(self.value):
            self._fail(InvalidURL())

    def matches_phone_number(self, allow_international: bool = True) -> None:
        """Fail unless the text is a phone number once separators are removed.

        International numbers allow a leading ``+`` and 7-15 digits; domestic
        numbers must be exactly 10 digits.
        """
        if self.value is None:
            return
        cleaned = PHONE_CLEANUP_PATTERN.sub("", self.value)
        pattern = PHONE_INTERNATIONAL_PATTERN if allow_international else PHONE_DOMESTIC_PATTERN
        if not pattern.fullmatch(cleaned):
            self._fail(InvalidPhoneNumber())


def _trimmed(text: str) -> str:
    return text.strip(TRIMMED_WHITESPACE)


def _length(text: str) -> int:
    return len(GRAPHEME_PATTERN.findall(_trimmed(text)))


def _is_url(text: str) -> bool:
    # urlsplit quietly drops some whitespace; a URI never contains any.
    if URL_WHITESPACE_PATTERN.search(text):
        return False
    try:
        parts = urlsplit(text)
        host = parts.hostname
    except ValueError:
        return False
    return bool(parts.scheme) and bool(host)
