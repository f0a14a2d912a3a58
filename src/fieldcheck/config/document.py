"""Reading raw config documents from disk."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from fieldcheck.exceptions import ConfigError


def read_config_document(path: Path) -> Any:
    """Read and parse a config file, raising ConfigError if it is unreadable.

    An empty file parses to an empty mapping.
    """
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Failed to read config file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc
    return {} if raw is None else raw
