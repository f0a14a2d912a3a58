"""Compiler: turn a parsed YAML schema into typed field specs.

Raises SchemaError on the first violation; a schema either compiles as a
whole or not at all.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any

from fieldcheck.config import FieldcheckConfig
from fieldcheck.constants.schema import (
    ALLOWED_FIELD_KEYS,
    ALLOWED_TOP_KEYS,
    BARE_CHECKS,
    DEFAULT_SHAPE,
    MAX_LENGTH_PRESETS,
    MIN_LENGTH_PRESETS,
    REQUIRED_FIELD_KEYS,
    SHAPE_CHECKS,
    VALID_SHAPES,
)
from fieldcheck.exceptions import SchemaError
from fieldcheck.types import ValueShape


@dataclass(frozen=True)
class CompiledCheck:
    """One check with its parameters resolved."""

    name: str
    params: dict[str, Any]


@dataclass(frozen=True)
class FieldSpec:
    """A declared field: its name, value shape and ordered checks."""

    name: str
    shape: ValueShape
    checks: tuple[CompiledCheck, ...]


def compile_schema(
    data: Any,
    source_path: str,
    config: FieldcheckConfig | None = None,
) -> tuple[FieldSpec, ...]:
    """Validate and compile a schema document into field specs, in declared order."""
    config = config or FieldcheckConfig()
    if not isinstance(data, dict):
        raise SchemaError(f"{source_path}: schema must be a mapping, got {type(data).__name__}")

    unknown_top = set(data.keys()) - ALLOWED_TOP_KEYS
    if unknown_top:
        raise SchemaError(f"{source_path}: unknown top-level keys: {sorted(unknown_top, key=str)}")

    fields_raw = data.get("fields")
    if not isinstance(fields_raw, list) or not fields_raw:
        raise SchemaError(f"{source_path}: 'fields' must be a non-empty list")

    specs = tuple(_compile_field(raw, index, source_path, config) for index, raw in enumerate(fields_raw))

    seen: set[str] = set()
    for spec in specs:
        if spec.name in seen:
            raise SchemaError(f"{source_path}: duplicate field '{spec.name}'")
        seen.add(spec.name)

    for spec in specs:
        for check in spec.checks:
            if check.name == "matches" and check.params["field"] not in seen:
                raise SchemaError(
                    f"{source_path}: field '{spec.name}' matches undeclared field '{check.params['field']}'"
                )
    return specs


def _compile_field(raw: Any, index: int, path: str, config: FieldcheckConfig) -> FieldSpec:
    where = f"{path}: fields[{index}]"
    if not isinstance(raw, dict):
        raise SchemaError(f"{where} must be a mapping")

    unknown = set(raw.keys()) - ALLOWED_FIELD_KEYS
    if unknown:
        raise SchemaError(f"{where}: unknown keys: {sorted(unknown, key=str)}")
    for key in REQUIRED_FIELD_KEYS:
        if key not in raw:
            raise SchemaError(f"{where}: missing required key '{key}'")

    name = raw["name"]
    if not isinstance(name, str) or not name.strip():
        raise SchemaError(f"{where}: 'name' must be a non-empty string")

    shape = raw.get("type", DEFAULT_SHAPE)
    if not isinstance(shape, str) or shape not in VALID_SHAPES:
        raise SchemaError(f"{where}: type must be one of {sorted(VALID_SHAPES)}, got {shape!r}")

    checks_raw = raw.get("checks", [])
    if checks_raw is None:
        checks_raw = []
    if not isinstance(checks_raw, list):
        raise SchemaError(f"{where}: 'checks' must be a list")

    where = f"{path}: field '{name}'"
    checks = tuple(_compile_check(entry, shape, where, config) for entry in checks_raw)
    return FieldSpec(name=name, shape=shape, checks=checks)


def _compile_check(entry: Any, shape: str, where: str, config: FieldcheckConfig) -> CompiledCheck:
    if isinstance(entry, str):
        name, param, bare = entry, None, True
    elif isinstance(entry, dict) and len(entry) == 1:
        ((name, param),) = entry.items()
        bare = False
    else:
        raise SchemaError(f"{where}: each check must be a name or a single-key mapping, got {entry!r}")

    allowed = SHAPE_CHECKS[shape]
    if name not in allowed:
        raise SchemaError(f"{where}: check {name!r} is not available for type '{shape}'; allowed: {sorted(allowed)}")
    if bare and name not in BARE_CHECKS:
        raise SchemaError(f"{where}: check '{name}' requires a parameter")

    if name == "max_length":
        return CompiledCheck(name, {"limit": _length_param(param, MAX_LENGTH_PRESETS, config.limits.max_preset, where)})
    if name == "min_length":
        return CompiledCheck(name, {"limit": _length_param(param, MIN_LENGTH_PRESETS, config.limits.min_preset, where)})
    if name == "range":
        return CompiledCheck(name, _range_params(param, shape, where))
    if name == "phone":
        return CompiledCheck(name, {"allow_international": _phone_param(param, config, where)})
    if name == "matches":
        if not isinstance(param, str) or not param:
            raise SchemaError(f"{where}: 'matches' must name another field")
        return CompiledCheck(name, {"field": param})
    if name == "one_of":
        if not isinstance(param, list) or not param:
            raise SchemaError(f"{where}: 'one_of' must be a non-empty list")
        return CompiledCheck(name, {"choices": tuple(param)})
    if name == "pattern":
        return CompiledCheck(name, _pattern_params(param, where))
    if not bare and param is not None:
        raise SchemaError(f"{where}: check '{name}' takes no parameter")
    return CompiledCheck(name, {})


def _length_param(param: Any, presets: frozenset[str], resolve: Any, where: str) -> int:
    if isinstance(param, str):
        if param not in presets:
            raise SchemaError(f"{where}: unknown length preset {param!r}; expected one of {sorted(presets)}")
        return resolve(param)
    if isinstance(param, bool) or not isinstance(param, int) or param < 0:
        raise SchemaError(f"{where}: length limit must be a non-negative integer or preset name, got {param!r}")
    return param


def _range_params(param: Any, shape: str, where: str) -> dict[str, Any]:
    if not isinstance(param, list) or len(param) != 2:
        raise SchemaError(f"{where}: 'range' must be a [min, max] pair")
    number_types: tuple[type, ...] = (int,) if shape == "integer" else (int, float)
    if any(isinstance(bound, bool) or not isinstance(bound, number_types) for bound in param):
        raise SchemaError(f"{where}: 'range' bounds must be {'integers' if shape == 'integer' else 'numbers'}")
    if any(isinstance(bound, float) and not math.isfinite(bound) for bound in param):
        raise SchemaError(f"{where}: 'range' bounds must be finite")
    minimum, maximum = param
    if minimum > maximum:
        raise SchemaError(f"{where}: 'range' min {minimum} is greater than max {maximum}")
    return {"min": minimum, "max": maximum}


def _phone_param(param: Any, config: FieldcheckConfig, where: str) -> bool:
    if param is None:
        return config.allow_international_phone
    if not isinstance(param, dict) or set(param.keys()) != {"allow_international"}:
        raise SchemaError(f"{where}: 'phone' options must be a mapping with 'allow_international'")
    allow = param["allow_international"]
    if not isinstance(allow, bool):
        raise SchemaError(f"{where}: 'phone.allow_international' must be a boolean")
    return allow


def _pattern_params(param: Any, where: str) -> dict[str, Any]:
    if not isinstance(param, dict) or set(param.keys()) != {"regex", "reason"}:
        raise SchemaError(f"{where}: 'pattern' must be a mapping with 'regex' and 'reason'")
    regex, reason = param["regex"], param["reason"]
    if not isinstance(regex, str) or not isinstance(reason, str) or not reason.strip():
        raise SchemaError(f"{where}: 'pattern.regex' and 'pattern.reason' must be non-empty strings")
    try:
        compiled = re.compile(regex)
    except re.error as exc:
        raise SchemaError(f"{where}: invalid pattern regex {regex!r}: {exc}") from exc
    return {"regex": compiled, "reason": reason}
