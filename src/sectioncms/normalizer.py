"""Data normalization: repair stored values so their shape matches the schema.

``normalize`` is pure (the input is never mutated), idempotent, and never
raises. Every genuine shape mismatch is reported to the optional
``Diagnostics`` collector; filling a missing or null value is not a repair.
"""

import logging
import math
from collections.abc import Mapping
from typing import Any, Iterable

from .defaults import derive_default, is_number, kind_default
from .diagnostics import Diagnostics
from .enums import DiagnosticKind, Kind
from .introspect import resolve
from .legacy import upgrade
from .nodes import MISSING, SchemaNode
from .utils import FieldPath, PathSegment, as_path

logger = logging.getLogger(__name__)


def normalize(
    node: SchemaNode,
    value: Any,
    diagnostics: Diagnostics | None = None,
    path: Iterable[PathSegment] | str = (),
) -> Any:
    """Normalize ``value`` against ``node``.

    Args:
        node: Schema node the value is bound to (wrappers allowed)
        value: Arbitrary JSON value, or ``MISSING`` for an absent key
        diagnostics: Collector for repair events (optional)
        path: Location of the value, used in diagnostics

    Returns:
        A value whose runtime shape matches the node's kind
    """
    return _normalize(node, value, diagnostics, as_path(path))


def _normalize(node: SchemaNode, value: Any, diagnostics: Diagnostics | None, path: FieldPath) -> Any:
    kind, inner = resolve(node)

    if value is MISSING:
        return derive_default(node)

    if kind is Kind.OBJECT:
        return _normalize_object(node, inner, value, diagnostics, path)
    if kind is Kind.ARRAY:
        return _normalize_array(node, inner, value, diagnostics, path)
    if kind is Kind.STRING:
        return _normalize_string(inner, value, diagnostics, path)
    if kind is Kind.NUMBER:
        return _normalize_number(inner, value, diagnostics, path)
    if kind is Kind.BOOLEAN:
        if isinstance(value, bool):
            return value
        if value is not None:
            _repair(diagnostics, path, f"expected boolean, got {_describe(value)}")
        return False

    return value


def _normalize_object(node, inner, value, diagnostics, path):
    if not isinstance(value, Mapping):
        if value is not None:
            _repair(diagnostics, path, f"expected object, got {_describe(value)}")
        return derive_default(node)

    result = {}
    for name, field in inner.fields.items():
        result[name] = _normalize(field, value.get(name, MISSING), diagnostics, path + (name,))

    if diagnostics is not None:
        for key in value:
            if key not in inner.fields:
                diagnostics.record(
                    DiagnosticKind.DROPPED_KEY, path + (str(key),), "key is not part of the schema"
                )
    return result


def _normalize_array(node, inner, value, diagnostics, path):
    if value is None:
        return derive_default(node)

    if not isinstance(value, (list, tuple)):
        element_kind, _ = resolve(inner.element)
        if _scalar_matches(element_kind, value):
            _repair(diagnostics, path, f"wrapped single {element_kind.value} value in a list")
            return [_normalize(inner.element, value, diagnostics, path + (0,))]
        _repair(diagnostics, path, f"expected array, got {_describe(value)}")
        return []

    return [
        _normalize(inner.element, item, diagnostics, path + (index,))
        for index, item in enumerate(value)
    ]


def _normalize_string(inner, value, diagnostics, path):
    if isinstance(value, str):
        if inner.choices and value not in inner.choices:
            _repair(diagnostics, path, f"{value!r} is not one of {list(inner.choices)}")
            return kind_default(inner)
        return value
    if value is not None:
        _repair(diagnostics, path, f"expected string, got {_describe(value)}")
    return kind_default(inner)


def _normalize_number(inner, value, diagnostics, path):
    if is_number(value):
        if inner.integer and isinstance(value, float) and value.is_integer():
            return int(value)
        return value
    if value is not None:
        _repair(diagnostics, path, f"expected number, got {_describe(value)}")
    return 0


def _scalar_matches(kind: Kind, value: Any) -> bool:
    if kind is Kind.STRING:
        return isinstance(value, str)
    if kind is Kind.NUMBER:
        return is_number(value)
    if kind is Kind.BOOLEAN:
        return isinstance(value, bool)
    return False


def _repair(diagnostics: Diagnostics | None, path: FieldPath, message: str) -> None:
    if diagnostics is not None:
        diagnostics.record(DiagnosticKind.REPAIR, path, message)
    else:
        logger.debug(f"Repaired {'.'.join(map(str, path)) or '<root>'}: {message}")


def _describe(value: Any) -> str:
    if isinstance(value, float) and not math.isfinite(value):
        return f"non-finite number {value}"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, (list, tuple)):
        return "array"
    return type(value).__name__


def normalize_document(contract, raw: Any, diagnostics: Diagnostics | None = None) -> Any:
    """Load-time repair of a stored section's data.

    Known historical layouts of the contract's type are upgraded first, then
    the result is normalized against the contract's root schema.
    """
    upgraded = upgrade(contract.type_id, raw, diagnostics)
    return normalize(contract.root_schema, upgraded, diagnostics)
