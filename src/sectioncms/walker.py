"""Form synthesis: walk a schema tree in lock-step with a document.

Every field is read through the normalizer before a control is built for it,
and a repaired value is written back at its path so later mutations address
the same shape the control was rendered from.
"""

import json
import logging
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass, field, replace
from typing import Any, Iterable

from .classifier import classify
from .consts import GROUP_TITLES, MAX_IMAGE_LIST_ITEMS
from .defaults import derive_default
from .diagnostics import Diagnostics
from .document import ContentDocument
from .editor_schema import Control, ControlGroup, Form, ItemBlock
from .enums import DiagnosticKind, Kind, UIGroup, WidgetKind
from .introspect import meta_of, resolve
from .nodes import MISSING, SchemaNode
from .normalizer import normalize
from .utils import FieldPath, PathSegment, as_path, field_label, format_path, get_at, set_at

logger = logging.getLogger(__name__)

GROUP_ORDER = (UIGroup.CONTENT, UIGroup.CALL_TO_ACTION, UIGroup.MEDIA, UIGroup.ADVANCED)
COLLAPSED_BY_DEFAULT = frozenset({UIGroup.ADVANCED})


@dataclass
class WalkContext:
    bucket: str | None = None
    diagnostics: Diagnostics = field(default_factory=Diagnostics)
    toggled: set[tuple[FieldPath, UIGroup]] = field(default_factory=set)
    page_links: list[str] = field(default_factory=list)

    def is_collapsed(self, path: Iterable[PathSegment], group: UIGroup) -> bool:
        collapsed = group in COLLAPSED_BY_DEFAULT
        if (tuple(path), group) in self.toggled:
            return not collapsed
        return collapsed

    def toggle(self, path: Iterable[PathSegment], group: UIGroup) -> bool:
        """Flip a group's collapsed state and return the new state."""
        key = (tuple(path), group)
        if key in self.toggled:
            self.toggled.discard(key)
        else:
            self.toggled.add(key)
        return self.is_collapsed(key[0], group)


def walk(
    node: SchemaNode,
    path: Iterable[PathSegment] | str = (),
    document: Any = None,
    context: WalkContext | None = None,
) -> list[ControlGroup]:
    """Build the bound control groups for ``node`` located at ``path`` in ``document``.

    Args:
        node: Schema node to render (wrappers allowed)
        path: Location of the node's value inside ``document``
        document: The mutable data the controls are bound to
        context: Session state (bucket, diagnostics, toggled groups, known pages)

    Returns:
        Non-empty UI groups in display order; advanced groups start collapsed
    """
    context = context or WalkContext()
    path = as_path(path)
    kind, inner = resolve(node)

    if kind is not Kind.OBJECT:
        return _group([_control(node, path, document, context)], path, context)

    value = _read(node, path, document, context)
    if not isinstance(get_at(document, path), Mapping):
        # the root mapping cannot be replaced in place
        logger.warning(f"Rendering detached copy of unbound object at {format_path(path) or '<root>'}")
        return _walk_fields(inner, (), value, context)
    return _walk_fields(inner, path, document, context)


def _walk_fields(
    inner, path: FieldPath, document: Any, context: WalkContext
) -> list[ControlGroup]:
    controls = [
        _control(field_node, path + (name,), document, context)
        for name, field_node in inner.fields.items()
    ]
    return _group(controls, path, context)


def _walk_object(
    node: SchemaNode, path: FieldPath, document: Any, context: WalkContext
) -> list[ControlGroup]:
    kind, inner = resolve(node)
    if kind is not Kind.OBJECT:
        return _group([_control(node, path, document, context)], path, context)
    return _walk_fields(inner, path, document, context)


def _group(controls: list[Control], path: FieldPath, context: WalkContext) -> list[ControlGroup]:
    groups = []
    for group in GROUP_ORDER:
        members = [control for control in controls if control.group is group]
        if not members:
            continue
        groups.append(
            ControlGroup(
                id=group,
                title=GROUP_TITLES[group.value],
                collapsed=context.is_collapsed(path, group),
                controls=members,
            )
        )
    return groups


def _read(node: SchemaNode, path: FieldPath, document: Any, context: WalkContext) -> Any:
    raw = get_at(document, path)
    value = normalize(node, raw, context.diagnostics, path)
    if raw is MISSING or type(raw) is not type(value) or raw != value:
        if not path and isinstance(raw, MutableMapping) and isinstance(value, Mapping):
            raw.clear()
            raw.update(value)
        else:
            set_at(document, path, value)
    return value


def _control(node: SchemaNode, path: FieldPath, document: Any, context: WalkContext) -> Control:
    kind, inner = resolve(node)
    meta = meta_of(node)
    element_kind = resolve(inner.element)[0] if kind is Kind.ARRAY else None
    choices = getattr(inner, "choices", ())

    classification = classify(
        path,
        kind,
        meta.bucket or context.bucket,
        element_kind=element_kind,
        hint=meta.widget,
        choices=choices,
    )

    if kind is Kind.UNKNOWN:
        reason = getattr(inner, "reason", "") or "no structural or scalar signal"
        context.diagnostics.record(
            DiagnosticKind.RESOLUTION_FAILURE, path, f"{reason}, rendering as plain text"
        )

    value = _read(node, path, document, context)
    attrs: dict[str, Any] = {
        "widget": classification.widget,
        "path": list(path),
        "key": format_path(path),
        "label": meta.label or field_label(path),
        "group": classification.group,
        "help_text": meta.help_text,
        "bucket": classification.bucket,
    }

    if kind is Kind.OBJECT:
        attrs["children"] = _walk_fields(inner, path, document, context)
    elif kind is Kind.ARRAY:
        attrs.update(_array_attrs(inner, classification.widget, path, value, document, context))
    else:
        attrs["value"] = value
        if classification.widget is WidgetKind.SELECT:
            attrs["options"] = list(choices)
        elif classification.widget is WidgetKind.LINK:
            attrs["options"] = list(context.page_links)
        if kind is Kind.UNKNOWN and not isinstance(value, str):
            attrs["value"] = json.dumps(value, default=str, ensure_ascii=False)
            attrs["read_only"] = True

    return Control(**attrs)


def _array_attrs(
    inner, widget: WidgetKind, path: FieldPath, value: list, document: Any, context: WalkContext
) -> dict[str, Any]:
    element = inner.element

    if widget is WidgetKind.OBJECT_LIST:
        last = len(value) - 1
        items = [
            ItemBlock(
                index=index,
                label=f"Item {index + 1}",
                path=list(path + (index,)),
                groups=_walk_object(element, path + (index,), document, context),
                can_move_up=index > 0,
                can_move_down=index < last,
            )
            for index in range(len(value))
        ]
        return {
            "items": items,
            "item_default": derive_default(element),
            "add_label": f"Add {field_label(path).lower()} item",
        }

    if widget is WidgetKind.IMAGE_LIST:
        return {"value": list(value), "max_items": MAX_IMAGE_LIST_ITEMS}

    return {
        "value": list(value),
        "item_default": derive_default(element),
        "add_label": "Add item",
    }


def _raw_dump(data: Any) -> str:
    return json.dumps(data, indent=2, default=str, ensure_ascii=False)


def build_form(
    contract,
    document: ContentDocument,
    context: WalkContext | None = None,
    *,
    repair_threshold: int = 0,
) -> Form:
    """Render the full editing form for a section document.

    An unregistered section type (``contract is None``) yields a read-only
    fallback form carrying a dump of the stored data instead of raising.
    """
    context = context or WalkContext()

    if contract is None:
        context.diagnostics.record(
            DiagnosticKind.UNKNOWN_CONTRACT,
            (),
            f"No contract registered for section type {document.section_type!r}",
        )
        return Form(
            type_id=document.section_type,
            label=document.section_type,
            published=document.published,
            order_index=document.order_index,
            fallback=_raw_dump(document.data),
            diagnostics=context.diagnostics.events,
        )

    if context.bucket is None and contract.bucket:
        context = replace(context, bucket=contract.bucket)
    if not isinstance(document.data, Mapping):
        document.data = normalize(contract.root_schema, document.data, context.diagnostics)

    groups = walk(contract.root_schema, (), document.data, context)
    return Form(
        type_id=contract.type_id,
        label=contract.label,
        description=contract.metadata.description,
        published=document.published,
        order_index=document.order_index,
        groups=groups,
        repair_warning=context.diagnostics.looks_corrupted(repair_threshold),
        diagnostics=context.diagnostics.events,
    )
