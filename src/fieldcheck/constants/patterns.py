"""Format patterns used by text checks.

These must stay byte-for-byte stable: stored records and client-side forms
validate against the same expressions.
"""

from __future__ import annotations

import re

import regex

EMAIL_PATTERN: re.Pattern[str] = re.compile(r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")

PHONE_CLEANUP_PATTERN: re.Pattern[str] = re.compile(r"[\s\-().]")
PHONE_INTERNATIONAL_PATTERN: re.Pattern[str] = re.compile(r"^\+?[0-9]{7,15}$")
PHONE_DOMESTIC_PATTERN: re.Pattern[str] = re.compile(r"^[0-9]{10}$")

URL_WHITESPACE_PATTERN: re.Pattern[str] = re.compile(r"\s")

NOT_FUTURE_REASON: str = "cannot be in the future"
NOT_PAST_REASON: str = "cannot be in the past"

# One user-perceived character (extended grapheme cluster).
GRAPHEME_PATTERN: regex.Pattern[str] = regex.compile(r"\X")

# Unicode Zs separators plus tab and line breaks (U+000A-U+000D, U+0085,
# U+2028, U+2029). Information separators U+001C-U+001F are kept.
TRIMMED_WHITESPACE: str = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006"
    "\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000"
)
