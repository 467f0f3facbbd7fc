"""Compile pydantic content models into the schema node AST.

The compiler runs once per contract at registration time, so nothing at
render time has to reflect over pydantic internals.
"""

import logging
import types
from collections.abc import Sequence
from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, List, Literal, Union, get_args, get_origin

from pydantic import BaseModel
from pydantic.fields import FieldInfo
from pydantic.functional_validators import (
    AfterValidator,
    BeforeValidator,
    PlainValidator,
    WrapValidator,
)
from pydantic_core import to_jsonable_python

from .consts import MAX_MODEL_DEPTH
from .enums import Kind
from .nodes import (
    ArrayNode,
    DefaultedNode,
    EffectNode,
    FieldMeta,
    NullableNode,
    ObjectNode,
    OptionalNode,
    ScalarNode,
    SchemaNode,
    UnknownNode,
    with_meta,
)

logger = logging.getLogger(__name__)

_VALIDATOR_TYPES = (AfterValidator, BeforeValidator, PlainValidator, WrapValidator)
_SEQUENCE_ORIGINS = (list, List, tuple, set, frozenset, Sequence)
_UNION_ORIGINS = (Union, types.UnionType)


def compile_model(model: type[BaseModel], *, _stack: tuple = ()) -> SchemaNode:
    """Compile a pydantic model class into an ``ObjectNode``.

    Fields keep their declared order. Fields touched by ``field_validator``
    are wrapped in an ``EffectNode``; a model carrying ``model_validator``
    hooks is wrapped as a whole.
    """
    if len(_stack) >= MAX_MODEL_DEPTH or model in _stack:
        logger.debug(f"Cutting recursive model {model.__name__} at depth {len(_stack)}")
        return UnknownNode(f"recursive model {model.__name__}")

    stack = _stack + (model,)
    validated = _validated_field_names(model)

    fields: dict[str, SchemaNode] = {}
    for name, info in model.model_fields.items():
        node = compile_field(info, _stack=stack)
        if name in validated or "*" in validated:
            node = EffectNode(node, name=f"{model.__name__}.{name}")
        fields[name] = node

    node: SchemaNode = ObjectNode(fields)
    if model.__pydantic_decorators__.model_validators:
        node = EffectNode(node, name=model.__name__)
    return node


def compile_field(info: FieldInfo, *, _stack: tuple = ()) -> SchemaNode:
    node = compile_annotation(info.annotation, _stack=_stack)

    if any(isinstance(item, _VALIDATOR_TYPES) for item in info.metadata):
        node = EffectNode(node)

    if not info.is_required():
        default = _field_default(info)
        node = OptionalNode(node) if default is None else DefaultedNode(node, default)

    return with_meta(node, _field_meta(info))


def compile_annotation(annotation: Any, *, _stack: tuple = ()) -> SchemaNode:
    """Compile a single type annotation. Unsupported types become ``UnknownNode``."""
    if annotation is None or annotation is type(None):
        return UnknownNode("none type")
    if annotation is Any or annotation is object:
        return UnknownNode("any")

    origin = get_origin(annotation)
    args = get_args(annotation)

    if origin is Annotated:
        node = compile_annotation(args[0], _stack=_stack)
        if any(isinstance(item, _VALIDATOR_TYPES) for item in args[1:]):
            node = EffectNode(node)
        return node

    if origin in _UNION_ORIGINS:
        members = [arg for arg in args if arg is not type(None)]
        nullable = len(members) < len(args)
        if len(members) == 1:
            node = compile_annotation(members[0], _stack=_stack)
        else:
            node = UnknownNode(f"union of {len(members)} types")
        return NullableNode(node) if nullable else node

    if origin is Literal:
        return _compile_choices(args)

    if origin in _SEQUENCE_ORIGINS:
        if origin is tuple and not (len(args) == 2 and args[1] is Ellipsis):
            return UnknownNode("fixed-length tuple")
        element = compile_annotation(args[0], _stack=_stack) if args else UnknownNode("untyped element")
        return ArrayNode(element)

    if isinstance(annotation, type):
        if issubclass(annotation, BaseModel):
            return compile_model(annotation, _stack=_stack)
        if issubclass(annotation, bool):
            return ScalarNode(Kind.BOOLEAN)
        if issubclass(annotation, Enum):
            return _compile_choices(tuple(member.value for member in annotation))
        if issubclass(annotation, str):
            return ScalarNode(Kind.STRING)
        if issubclass(annotation, int):
            return ScalarNode(Kind.NUMBER, integer=True)
        if issubclass(annotation, (float, Decimal)):
            return ScalarNode(Kind.NUMBER)

    return UnknownNode(f"unsupported annotation {annotation!r}")


def _compile_choices(values: tuple) -> SchemaNode:
    if values and all(isinstance(v, str) for v in values):
        return ScalarNode(Kind.STRING, choices=tuple(values))
    if values and all(isinstance(v, bool) for v in values):
        return ScalarNode(Kind.BOOLEAN)
    if values and all(isinstance(v, int) and not isinstance(v, bool) for v in values):
        return ScalarNode(Kind.NUMBER, integer=True)
    return UnknownNode("mixed literal")


def _validated_field_names(model: type[BaseModel]) -> set[str]:
    names: set[str] = set()
    for decorator in model.__pydantic_decorators__.field_validators.values():
        names.update(decorator.info.fields)
    return names


def _field_default(info: FieldInfo) -> Any:
    if info.default_factory is not None:
        try:
            default = info.default_factory()
        except TypeError:
            # factories that take the validated data cannot be evaluated here
            return None
    else:
        default = info.default
    return to_jsonable_python(default)


def _field_meta(info: FieldInfo) -> FieldMeta:
    extra = info.json_schema_extra if isinstance(info.json_schema_extra, dict) else {}
    return FieldMeta(
        widget=extra.get("widget"),
        bucket=extra.get("bucket"),
        label=info.title,
        help_text=info.description,
    )
