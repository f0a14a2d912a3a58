"""Shared constants for Fieldcheck."""
