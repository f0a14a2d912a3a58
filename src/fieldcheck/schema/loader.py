"""Load record schemas and records from YAML files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from fieldcheck.config import FieldcheckConfig
from fieldcheck.exceptions import SchemaError
from fieldcheck.schema.compiler import compile_schema
from fieldcheck.schema.runtime import RecordSchema

logger = logging.getLogger(__name__)


def _read_yaml(path: Path, label: str) -> Any:
    try:
        return yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise SchemaError(f"Failed to read {label} file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise SchemaError(f"Invalid YAML in {label} file {path}: {exc}") from exc


def load_schema(path: Path, config: FieldcheckConfig | None = None) -> RecordSchema:
    """Read and compile a schema file. Raises SchemaError on any problem."""
    fields = compile_schema(_read_yaml(path, "schema"), str(path), config)
    logger.debug("Loaded schema %s with %d field(s)", path, len(fields))
    return RecordSchema(fields, source_path=str(path))


def load_record(path: Path) -> dict[str, Any]:
    """Read a record mapping from a YAML or JSON file."""
    raw = _read_yaml(path, "record")
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise SchemaError(f"Record file {path} must contain a mapping, got {type(raw).__name__}")
    return raw
