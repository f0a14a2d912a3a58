"""Renderers for validation results."""

from .json_report import build_report, render_json
from .stdout import TextReporter

__all__ = ["TextReporter", "build_report", "render_json"]
