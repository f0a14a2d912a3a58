"""Declarative record schemas compiled onto the validation engine."""

from __future__ import annotations

from fieldcheck.schema.compiler import CompiledCheck, FieldSpec, compile_schema
from fieldcheck.schema.loader import load_record, load_schema
from fieldcheck.schema.runtime import RecordSchema, SchemaModel

__all__ = [
    "CompiledCheck",
    "FieldSpec",
    "RecordSchema",
    "SchemaModel",
    "compile_schema",
    "load_record",
    "load_schema",
]
