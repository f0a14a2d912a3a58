"""Human-readable stdout reporter for validation results."""

from __future__ import annotations

from fieldcheck.constants.branding import VALID_SUMMARY
from fieldcheck.constants.reporting import ANSI_DIM, ANSI_GREEN, ANSI_RED, ANSI_RESET, SUGGESTION_INDENT
from fieldcheck.exceptions.validation import ValidationError


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


class TextReporter:
    """Formats validation errors as one line each, with suggestions beneath."""

    def __init__(self, errors: list[ValidationError], *, color: bool = True, source: str | None = None) -> None:
        self._errors = errors
        self._color = color
        self._source = source

    def _paint(self, text: str, color: str) -> str:
        return _colorize(text, color) if self._color else text

    def render(self) -> str:
        lines: list[str] = []
        if self._source:
            lines.append(self._source)
        if not self._errors:
            lines.append(self._paint(VALID_SUMMARY, ANSI_GREEN))
            return "\n".join(lines)

        for error in self._errors:
            lines.append(f"{self._paint(error.field, ANSI_RED)}: {error.description}")
            suggestion = error.recovery_suggestion
            if suggestion:
                lines.append(f"{SUGGESTION_INDENT}{self._paint(suggestion, ANSI_DIM)}")

        count = len(self._errors)
        lines.append(f"{count} validation error{'s' if count != 1 else ''}")
        return "\n".join(lines)
