"""Schema node AST.

Content schemas are compiled once into this tree (see ``compiler``). The
structural variants are ``ObjectNode``, ``ArrayNode``, ``ScalarNode`` and
``UnknownNode``. ``OptionalNode``, ``DefaultedNode``, ``NullableNode`` and
``EffectNode`` are transient modifier wrappers that the introspector unwraps
before anything is classified.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Mapping

from .enums import Kind


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


@dataclass(frozen=True)
class FieldMeta:
    """Presentation annotations carried alongside a field's schema."""

    widget: str | None = None
    bucket: str | None = None
    label: str | None = None
    help_text: str | None = None


NO_META = FieldMeta()


class SchemaNode:
    """Marker base class for every node of the schema tree"""

    meta: FieldMeta


@dataclass(frozen=True)
class ObjectNode(SchemaNode):
    fields: Mapping[str, SchemaNode]
    meta: FieldMeta = NO_META


@dataclass(frozen=True)
class ArrayNode(SchemaNode):
    element: SchemaNode
    meta: FieldMeta = NO_META


@dataclass(frozen=True)
class ScalarNode(SchemaNode):
    kind: Kind
    integer: bool = False
    choices: tuple = ()
    meta: FieldMeta = NO_META


@dataclass(frozen=True)
class UnknownNode(SchemaNode):
    reason: str = ""
    meta: FieldMeta = NO_META


@dataclass(frozen=True)
class OptionalNode(SchemaNode):
    inner: SchemaNode
    meta: FieldMeta = NO_META


@dataclass(frozen=True)
class DefaultedNode(SchemaNode):
    inner: SchemaNode
    default: Any = field(default=None)
    meta: FieldMeta = NO_META


@dataclass(frozen=True)
class NullableNode(SchemaNode):
    inner: SchemaNode
    meta: FieldMeta = NO_META


@dataclass(frozen=True)
class EffectNode(SchemaNode):
    inner: SchemaNode
    name: str = ""
    meta: FieldMeta = NO_META


WRAPPER_TYPES = (OptionalNode, DefaultedNode, NullableNode, EffectNode)


def with_meta(node: SchemaNode, meta: FieldMeta) -> SchemaNode:
    if meta == NO_META:
        return node
    return replace(node, meta=meta)


# Shorthand constructors, mostly useful for ad-hoc schemas and tests.


def string(*choices: str) -> ScalarNode:
    return ScalarNode(Kind.STRING, choices=tuple(choices))


def number(integer: bool = False) -> ScalarNode:
    return ScalarNode(Kind.NUMBER, integer=integer)


def boolean() -> ScalarNode:
    return ScalarNode(Kind.BOOLEAN)


def array(element: SchemaNode) -> ArrayNode:
    return ArrayNode(element)


def obj(fields: Mapping[str, SchemaNode] | None = None, **kwargs: SchemaNode) -> ObjectNode:
    return ObjectNode({**(fields or {}), **kwargs})


def optional(inner: SchemaNode) -> OptionalNode:
    return OptionalNode(inner)


def nullable(inner: SchemaNode) -> NullableNode:
    return NullableNode(inner)


def defaulted(inner: SchemaNode, default: Any) -> DefaultedNode:
    return DefaultedNode(inner, default)


def effect(inner: SchemaNode, name: str = "") -> EffectNode:
    return EffectNode(inner, name)
