"""Field classification: choose a widget kind and a UI group for a field."""

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable

from .consts import (
    ADVANCED_PREFIXES,
    BUCKET_APP_SCREENSHOTS,
    BUCKET_COUPLE_PHOTOS,
    COUPLE_PHOTO_KEYWORDS,
    CTA_KEYWORDS,
    DEFAULT_BUCKET,
    IMAGE_KEYWORDS,
    IMAGE_LIST_KEYWORDS,
    LINK_NAMES,
    LINK_SUFFIXES,
    LONG_TEXT_KEYWORDS,
    MEDIA_KEYWORDS,
    SCREENSHOT_KEYWORDS,
)
from .enums import Kind, UIGroup, WidgetKind
from .utils import FieldPath, PathSegment, as_path, field_name, format_path, to_snake

logger = logging.getLogger(__name__)

_HINT_COMPATIBILITY = {
    Kind.STRING: {
        WidgetKind.TEXT,
        WidgetKind.LONG_TEXT,
        WidgetKind.IMAGE,
        WidgetKind.ICON,
        WidgetKind.LINK,
        WidgetKind.SELECT,
    },
    Kind.NUMBER: {WidgetKind.NUMBER},
    Kind.BOOLEAN: {WidgetKind.TOGGLE},
    Kind.ARRAY: {WidgetKind.IMAGE_LIST, WidgetKind.PRIMITIVE_LIST},
    Kind.UNKNOWN: {WidgetKind.TEXT, WidgetKind.LONG_TEXT},
}

_MEDIA_WIDGETS = (WidgetKind.IMAGE, WidgetKind.IMAGE_LIST)


@dataclass(frozen=True)
class Classification:
    widget: WidgetKind
    group: UIGroup
    bucket: str | None = None


def classify(
    path: Iterable[PathSegment] | str,
    kind: Kind,
    bucket: str | None = None,
    *,
    element_kind: Kind | None = None,
    hint: str | None = None,
    choices: tuple = (),
) -> Classification:
    """Classify a field from its path, resolved kind and declared bucket.

    Args:
        path: Field path (segments or dotted string)
        kind: Resolved kind of the field's schema node
        bucket: Declared upload bucket for media widgets (section or field level)
        element_kind: Resolved kind of the element schema, for arrays
        hint: Explicit widget annotation carried by the schema, if any
        choices: Allowed values of an enumerated string field

    Returns:
        Classification with widget kind, UI group and media bucket

    Notes:
        - Objects are always nested groups, whatever the field is called
        - A compatible explicit hint beats the name heuristics
        - Same inputs always give the same classification
    """
    return _classify(as_path(path), Kind(kind), bucket, element_kind, hint, bool(choices))


@lru_cache(maxsize=4096)
def _classify(
    path: FieldPath,
    kind: Kind,
    bucket: str | None,
    element_kind: Kind | None,
    hint: str | None,
    has_choices: bool,
) -> Classification:
    widget = _widget_for(path, kind, element_kind, hint, has_choices)
    group = ui_group(path, kind)
    media_bucket = resolve_bucket(path, bucket) if widget in _MEDIA_WIDGETS else None
    return Classification(widget=widget, group=group, bucket=media_bucket)


def _widget_for(
    path: FieldPath,
    kind: Kind,
    element_kind: Kind | None,
    hint: str | None,
    has_choices: bool,
) -> WidgetKind:
    if kind is Kind.OBJECT:
        return WidgetKind.NESTED_OBJECT_GROUP

    hinted = _hinted_widget(path, kind, element_kind, hint)
    if hinted is not None:
        return hinted

    name = field_name(path)
    lowered = name.lower()

    if kind is Kind.ARRAY:
        if element_kind is Kind.OBJECT:
            return WidgetKind.OBJECT_LIST
        if element_kind is Kind.STRING:
            # nested string arrays such as images.women count as image lists
            segments = [s.lower() for s in path if isinstance(s, str)]
            joined = ".".join(segments)
            if any(s in COUPLE_PHOTO_KEYWORDS for s in segments) or any(
                k in joined for k in IMAGE_LIST_KEYWORDS
            ):
                return WidgetKind.IMAGE_LIST
        return WidgetKind.PRIMITIVE_LIST

    if kind is Kind.STRING:
        if any(k in lowered for k in IMAGE_KEYWORDS):
            return WidgetKind.IMAGE
        if "icon" in lowered:
            return WidgetKind.ICON
        if is_link_name(name):
            return WidgetKind.LINK
        if any(k in lowered for k in LONG_TEXT_KEYWORDS):
            return WidgetKind.LONG_TEXT
        if has_choices:
            return WidgetKind.SELECT
        return WidgetKind.TEXT

    if kind is Kind.NUMBER:
        return WidgetKind.NUMBER

    if kind is Kind.BOOLEAN:
        return WidgetKind.TOGGLE

    logger.warning(f"No widget for unresolved field {format_path(path)}, using plain text")
    return WidgetKind.TEXT


def _hinted_widget(
    path: FieldPath, kind: Kind, element_kind: Kind | None, hint: str | None
) -> WidgetKind | None:
    if not hint:
        return None

    try:
        widget = WidgetKind(hint)
    except ValueError:
        logger.warning(f"Ignoring unknown widget hint {hint!r} on {format_path(path)}")
        return None

    allowed = _HINT_COMPATIBILITY.get(kind, set())
    if kind is Kind.ARRAY and element_kind is not Kind.STRING:
        allowed = {WidgetKind.PRIMITIVE_LIST} if element_kind is not Kind.OBJECT else set()

    if widget not in allowed:
        logger.warning(
            f"Widget hint {hint!r} does not fit {kind.value} field {format_path(path)}, ignoring"
        )
        return None
    return widget


def is_link_name(name: str) -> bool:
    key = to_snake(name)
    return key in LINK_NAMES or key.endswith(LINK_SUFFIXES)


def ui_group(path: Iterable[PathSegment] | str, kind: Kind) -> UIGroup:
    """Assign the UI group a field is listed under. Has no effect on binding."""
    name = field_name(path)
    lowered = name.lower()
    first_token = to_snake(name).split("_", 1)[0]

    if kind is Kind.BOOLEAN or first_token in ADVANCED_PREFIXES:
        return UIGroup.ADVANCED
    if any(k in lowered for k in CTA_KEYWORDS):
        return UIGroup.CALL_TO_ACTION
    if any(k in lowered for k in MEDIA_KEYWORDS):
        return UIGroup.MEDIA
    return UIGroup.CONTENT


def resolve_bucket(path: Iterable[PathSegment] | str, declared: str | None = None) -> str:
    """Pick the upload bucket for a media field."""
    joined = format_path(as_path(path)).lower()
    segments = [s.lower() for s in as_path(path) if isinstance(s, str)]

    if any(segment in COUPLE_PHOTO_KEYWORDS for segment in segments):
        return BUCKET_COUPLE_PHOTOS
    if any(k in joined for k in SCREENSHOT_KEYWORDS):
        return BUCKET_APP_SCREENSHOTS
    return declared or DEFAULT_BUCKET
