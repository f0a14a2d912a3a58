"""JSON rendering of validation results."""

from __future__ import annotations

import json

from fieldcheck.exceptions.validation import ValidationError
from fieldcheck.types import JsonObject


def build_report(errors: list[ValidationError]) -> JsonObject:
    """Build the JSON-serializable report payload, keeping error order."""
    return {
        "valid": not errors,
        "error_count": len(errors),
        "errors": [error.to_dict() for error in errors],
    }


def render_json(errors: list[ValidationError]) -> str:
    return json.dumps(build_report(errors), indent=2)
