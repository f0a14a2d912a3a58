"""Config loading and normalization for Fieldcheck."""

from __future__ import annotations

import logging
from pathlib import Path

from fieldcheck.config.document import read_config_document
from fieldcheck.config.model import FieldcheckConfig, LengthLimits
from fieldcheck.config.validator import validate_config_data
from fieldcheck.constants.config import ALLOWED_LIMIT_KEYS, CONFIG_FILENAME
from fieldcheck.exceptions import ConfigError
from fieldcheck.exceptions.validation import format_errors

logger = logging.getLogger(__name__)


def load_config(config_path: Path | None = None, *, root: Path | None = None) -> FieldcheckConfig:
    """Load config from an explicit path, or from ``fieldcheck.yaml`` under ``root``.

    Without an explicit path a missing file means defaults. Raises ConfigError
    when the file cannot be read or fails validation.
    """
    if config_path is None:
        if root is None:
            return FieldcheckConfig()
        candidate = root.resolve() / CONFIG_FILENAME
        if not candidate.exists():
            return FieldcheckConfig()
        config_path = candidate

    path = config_path.resolve()
    raw = read_config_document(path)
    errors = validate_config_data(raw)
    if errors:
        raise ConfigError(f"Invalid config file at {path}:\n{format_errors(errors)}")

    limits_raw = raw.get("limits") or {}
    phone_raw = raw.get("phone") or {}
    config = FieldcheckConfig(
        limits=LengthLimits(**{key: limits_raw[key] for key in ALLOWED_LIMIT_KEYS if key in limits_raw}),
        allow_international_phone=phone_raw.get("allow_international", True),
    )
    logger.debug("Loaded config from %s", path)
    return config
