"""Schema introspection: resolve a (possibly wrapped) node to its canonical kind."""

import logging
from collections.abc import Mapping
from typing import Any

from .consts import MAX_UNWRAP_DEPTH
from .enums import Kind
from .nodes import (
    MISSING,
    NO_META,
    WRAPPER_TYPES,
    DefaultedNode,
    FieldMeta,
    NullableNode,
    OptionalNode,
    ScalarNode,
    SchemaNode,
)

logger = logging.getLogger(__name__)

_SCALAR_KINDS = (Kind.STRING, Kind.NUMBER, Kind.BOOLEAN)


def _has_fields(node: Any) -> bool:
    return isinstance(getattr(node, "fields", None), Mapping)


def _has_element(node: Any) -> bool:
    return getattr(node, "element", None) is not None


def _unwrap_once(node: Any) -> Any:
    if isinstance(node, WRAPPER_TYPES):
        return node.inner
    return None


def resolve(node: SchemaNode) -> tuple[Kind, SchemaNode]:
    """Resolve a schema node to ``(kind, unwrapped_node)``.

    Modifier wrappers are peeled off one at a time. Structural shape wins over
    declared tags: a node exposing a field mapping is an object and a node
    exposing an element schema is an array, whatever else it claims to be.
    Resolution never raises; anything without a structural or scalar signal
    resolves to ``Kind.UNKNOWN``.
    """
    current = node
    for _ in range(MAX_UNWRAP_DEPTH):
        if _has_fields(current):
            return Kind.OBJECT, current
        if _has_element(current):
            return Kind.ARRAY, current

        inner = _unwrap_once(current)
        if inner is not None:
            if inner is current:
                break
            current = inner
            continue

        if isinstance(current, ScalarNode) and current.kind in _SCALAR_KINDS:
            return current.kind, current
        break
    else:
        logger.warning(f"Wrapper chain deeper than {MAX_UNWRAP_DEPTH}, resolving to unknown")

    return Kind.UNKNOWN, current


def kind_of(node: SchemaNode) -> Kind:
    return resolve(node)[0]


def declared_default(node: SchemaNode) -> Any:
    """Return the first declared default along the wrapper chain, or ``MISSING``."""
    current = node
    for _ in range(MAX_UNWRAP_DEPTH):
        if isinstance(current, DefaultedNode):
            return current.default
        inner = _unwrap_once(current)
        if inner is None or inner is current:
            break
        current = inner
    return MISSING


def is_optional(node: SchemaNode) -> bool:
    current = node
    for _ in range(MAX_UNWRAP_DEPTH):
        if isinstance(current, (OptionalNode, DefaultedNode, NullableNode)):
            return True
        inner = _unwrap_once(current)
        if inner is None or inner is current:
            break
        current = inner
    return False


def meta_of(node: SchemaNode) -> FieldMeta:
    """Return the outermost presentation annotations found on the chain."""
    current = node
    for _ in range(MAX_UNWRAP_DEPTH):
        meta = getattr(current, "meta", NO_META)
        if meta != NO_META:
            return meta
        inner = _unwrap_once(current)
        if inner is None or inner is current:
            break
        current = inner
    return NO_META


def object_fields(node: SchemaNode) -> Mapping[str, SchemaNode]:
    kind, inner = resolve(node)
    if kind is Kind.OBJECT:
        return inner.fields
    return {}


def element_of(node: SchemaNode) -> SchemaNode | None:
    kind, inner = resolve(node)
    if kind is Kind.ARRAY:
        return inner.element
    return None


def schema_at(node: SchemaNode, path) -> SchemaNode | None:
    """Follow a field path through the schema tree.

    Names step into object fields and indices into array elements. Returns
    ``None`` when the path leaves the schema.
    """
    current = node
    for segment in path:
        kind, inner = resolve(current)
        if isinstance(segment, int) and not isinstance(segment, bool):
            if kind is not Kind.ARRAY:
                return None
            current = inner.element
        elif kind is Kind.OBJECT and segment in inner.fields:
            current = inner.fields[segment]
        else:
            return None
    return current


def describe(node: SchemaNode) -> dict[str, Any]:
    """Plain-data view of a schema node, as served to hosting UIs."""
    kind, inner = resolve(node)
    meta = meta_of(node)
    default = declared_default(node)

    description: dict[str, Any] = {"kind": kind.value, "optional": is_optional(node)}
    if default is not MISSING:
        description["default"] = default
    if meta.widget:
        description["widget"] = meta.widget
    if meta.label:
        description["label"] = meta.label
    if meta.help_text:
        description["help_text"] = meta.help_text

    if kind is Kind.OBJECT:
        description["fields"] = {name: describe(field) for name, field in inner.fields.items()}
    elif kind is Kind.ARRAY:
        description["element"] = describe(inner.element)
    elif isinstance(inner, ScalarNode):
        if inner.integer:
            description["integer"] = True
        if inner.choices:
            description["choices"] = list(inner.choices)
    return description
