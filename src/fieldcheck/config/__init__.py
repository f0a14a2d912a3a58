"""Configuration loading and validation for Fieldcheck."""

from __future__ import annotations

from fieldcheck.config.document import read_config_document
from fieldcheck.config.loader import load_config
from fieldcheck.config.model import FieldcheckConfig, LengthLimits
from fieldcheck.config.validator import validate_config_data, validate_config_file

__all__ = [
    "FieldcheckConfig",
    "LengthLimits",
    "load_config",
    "read_config_document",
    "validate_config_data",
    "validate_config_file",
]
