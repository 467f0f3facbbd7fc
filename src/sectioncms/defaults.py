"""Default-data derivation: build a minimal valid instance of a schema node."""

import math
from collections.abc import Mapping
from typing import Any

from .enums import Kind
from .introspect import declared_default, resolve
from .nodes import MISSING, SchemaNode


def derive_default(node: SchemaNode) -> Any:
    """Derive the default JSON value for a schema node.

    Objects get every field key, optional ones included, so binding never
    meets a missing key. Arrays default to ``[]``, strings to ``""``, numbers
    to ``0`` and booleans to ``False``; unresolved nodes fall back to ``""``.
    A non-null declared default takes precedence and is completed against the
    schema, so ``Field(default_factory=Badge)`` and ``.default({})`` style
    declarations both yield full objects.
    """
    kind, inner = resolve(node)
    declared = declared_default(node)

    if kind is Kind.OBJECT:
        if isinstance(declared, Mapping):
            from .normalizer import normalize

            return normalize(inner, declared)
        return {name: derive_default(field) for name, field in inner.fields.items()}

    if kind is Kind.ARRAY:
        if isinstance(declared, (list, tuple)):
            from .normalizer import normalize

            return normalize(inner, list(declared))
        return []

    if kind is Kind.STRING:
        if isinstance(declared, str) and (not inner.choices or declared in inner.choices):
            return declared
        return kind_default(inner)

    if kind is Kind.NUMBER:
        if is_number(declared):
            return declared
        return 0

    if kind is Kind.BOOLEAN:
        if isinstance(declared, bool):
            return declared
        return False

    if declared is not MISSING and declared is not None:
        return declared
    return ""


def kind_default(node: SchemaNode) -> Any:
    """Default for the node's kind, ignoring any declared default."""
    kind, inner = resolve(node)
    if kind is Kind.STRING:
        return inner.choices[0] if inner.choices else ""
    if kind is Kind.NUMBER:
        return 0
    if kind is Kind.BOOLEAN:
        return False
    if kind is Kind.ARRAY:
        return []
    if kind is Kind.OBJECT:
        return {name: derive_default(field) for name, field in inner.fields.items()}
    return ""


def is_number(value: Any) -> bool:
    """Whether ``value`` is a finite JSON number. Booleans, NaN and infinities are not."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not isinstance(value, float) or math.isfinite(value)
