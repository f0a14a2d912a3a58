"""Shared pytest fixtures for Fieldcheck tests."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, tzinfo
from pathlib import Path

import pytest

FIXED_NOW = datetime(2024, 6, 15, 12, 0, 0)


@pytest.fixture
def fixed_clock() -> Callable[[tzinfo | None], datetime]:
    """Return a clock pinned to FIXED_NOW in whatever zone is requested."""

    def clock(tz: tzinfo | None) -> datetime:
        return FIXED_NOW if tz is None else FIXED_NOW.replace(tzinfo=tz)

    return clock


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a helper that writes text into ``tmp_path`` and returns the path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


USER_SCHEMA_YAML = """\
fields:
  - name: name
    type: text
    checks: [required, not_empty, {max_length: name}]
  - name: email
    type: text
    checks: [required, email]
  - name: age
    type: integer
    checks: [required, {range: [18, 120]}]
  - name: password
    type: text
    checks: [required, {min_length: password}, {max_length: password}]
  - name: confirm_password
    type: text
    checks: [{matches: password}]
"""


@pytest.fixture
def user_schema_path(write_file: Callable[[str, str], Path]) -> Path:
    return write_file("user.schema.yaml", USER_SCHEMA_YAML)
