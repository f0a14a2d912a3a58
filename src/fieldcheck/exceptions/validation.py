"""Structured validation error model: one field paired with one violated rule."""

from __future__ import annotations

from dataclasses import dataclass

from fieldcheck.constants.messages import DESCRIPTION_TEMPLATES, SUGGESTION_TEMPLATES
from fieldcheck.rules import Rule
from fieldcheck.types import JsonObject


@dataclass(frozen=True)
class ValidationError:
    """A single validation failure.

    Message text is derived from ``rule`` on every access, so the template
    table in :mod:`fieldcheck.constants.messages` is the only place wording
    lives.
    """

    field: str
    rule: Rule

    @property
    def description(self) -> str:
        """Human-readable description of the failure."""
        template = DESCRIPTION_TEMPLATES[self.rule.kind]
        return template.format(field=self.field, **self.rule.payload())

    @property
    def recovery_suggestion(self) -> str | None:
        """Generic advice for fixing the value, or ``None`` when none applies."""
        template = SUGGESTION_TEMPLATES.get(self.rule.kind)
        if template is None:
            return None
        return template.format(field=self.field, **self.rule.payload())

    def format(self) -> str:
        """Format as a single-line message."""
        return f"[{self.rule.kind}] {self.field}: {self.description}"

    def to_dict(self) -> JsonObject:
        """Return a JSON-serializable representation."""
        return {
            "field": self.field,
            "rule": self.rule.kind,
            "params": self.rule.payload(),  # type: ignore[dict-item]
            "description": self.description,
            "suggestion": self.recovery_suggestion,
        }


def format_errors(errors: list[ValidationError]) -> str:
    """Format errors one per line, keeping declaration order."""
    return "\n".join(error.format() for error in errors)


def errors_by_field(errors: list[ValidationError]) -> dict[str, list[ValidationError]]:
    """Group errors by field name, preserving first-seen field order."""
    grouped: dict[str, list[ValidationError]] = {}
    for error in errors:
        grouped.setdefault(error.field, []).append(error)
    return grouped
