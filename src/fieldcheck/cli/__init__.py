"""Command-line interface for Fieldcheck."""
