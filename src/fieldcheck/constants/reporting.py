"""Constants for stdout and JSON report formatting."""

from __future__ import annotations

VALID_OUTPUT_FORMATS: frozenset[str] = frozenset({"text", "json"})
DEFAULT_OUTPUT_FORMAT: str = "text"

ANSI_RED: str = "\033[31m"
ANSI_GREEN: str = "\033[32m"
ANSI_DIM: str = "\033[2m"
ANSI_RESET: str = "\033[0m"

SUGGESTION_INDENT: str = "    "
