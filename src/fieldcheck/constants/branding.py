"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "FIELDCHECK"
CLI_DESCRIPTION: str = f"{BRAND_NAME} record validator"
VALID_SUMMARY: str = "No validation errors"
