"""Shared type aliases for Fieldcheck."""

from .common import JsonObject, JsonScalar, JsonValue, Predicate, RuleKind, ValueShape

__all__ = [
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "Predicate",
    "RuleKind",
    "ValueShape",
]
