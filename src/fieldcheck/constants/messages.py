"""English message templates keyed by rule kind.

Templates are rendered with ``str.format`` using ``field`` plus the rule
payload. A missing suggestion entry means no generic advice applies.
"""

from __future__ import annotations

DESCRIPTION_TEMPLATES: dict[str, str] = {
    "required": "{field} is required",
    "empty": "{field} cannot be empty",
    "too_long": "{field} is too long (maximum {max} characters)",
    "too_short": "{field} is too short (minimum {min} characters)",
    "out_of_range": "{field} must be between {min} and {max}",
    "invalid_format": "{field} has invalid format: {reason}",
    "business_rule": "{reason}",
    "custom": "{message}",
    "invalid_email": "{field} must be a valid email address",
    "invalid_url": "{field} must be a valid URL",
    "invalid_phone_number": "{field} must be a valid phone number",
    "not_unique": "{field} must be unique",
    "not_matching": "{field} must match {other_field}",
}

SUGGESTION_TEMPLATES: dict[str, str] = {
    "required": "Please provide a value for {field}",
    "empty": "Enter a non-empty value for {field}",
    "too_long": "Shorten {field} to {max} characters or less",
    "too_short": "Lengthen {field} to at least {min} characters",
    "out_of_range": "Choose a value between {min} and {max}",
    "invalid_format": "Check the format: {reason}",
    "invalid_email": "Enter a valid email address (e.g., user@example.com)",
    "invalid_url": "Enter a valid URL (e.g., https://example.com)",
    "invalid_phone_number": "Enter a valid phone number",
    "not_unique": "This {field} is already in use",
    "not_matching": "Ensure {field} matches {other_field}",
}
