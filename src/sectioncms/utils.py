"""Utility functions for the section CMS"""

import logging
import re
from collections.abc import Mapping, MutableMapping
from pathlib import Path
from typing import Any, Iterable, Union

from .consts import LABEL_OVERRIDES
from .nodes import MISSING

logger = logging.getLogger(__name__)

PathSegment = Union[str, int]
FieldPath = tuple[PathSegment, ...]

_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")


def canonicalify(p: Path | str) -> Path:
    return Path(p).expanduser().resolve()


def ensure_path(p: Path | str) -> Path:
    path = canonicalify(p)
    path.mkdir(parents=True, exist_ok=True)
    return path


def to_snake(name: str) -> str:
    """Normalize a field name to lower snake case.

    Examples:
        >>> to_snake("buttonText")
        'button_text'
        >>> to_snake("secondary Link")
        'secondary_link'
    """
    return re.sub(r"\s+", "_", _CAMEL_BOUNDARY.sub(r"\1_\2", name)).lower()


def as_path(path: Iterable[PathSegment] | str) -> FieldPath:
    """Coerce a dotted string or an iterable of segments to a ``FieldPath``.

    Dotted strings are split on ``.``; purely numeric segments become array
    indices. Callers that need a field literally named ``"0"`` must pass a
    sequence of segments instead of a dotted string.
    """
    if isinstance(path, str):
        if not path:
            return ()
        return tuple(int(part) if part.isdigit() else part for part in path.split("."))
    return tuple(path)


def format_path(path: Iterable[PathSegment]) -> str:
    return ".".join(str(segment) for segment in path)


def field_name(path: Iterable[PathSegment] | str) -> str:
    """Return the last named (non-index) segment of a path."""
    for segment in reversed(as_path(path)):
        if isinstance(segment, str):
            return segment
    return ""


def field_label(path: Iterable[PathSegment] | str) -> str:
    """Build a human-readable label from a field path.

    Examples:
        >>> field_label("data.cta")
        'Call to action'
        >>> field_label(("data", "titleHighlight"))
        'Title Highlight'
        >>> field_label("data.category_id")
        'Category id'
    """
    name = field_name(path)
    if not name:
        return "Field"

    override = LABEL_OVERRIDES.get(to_snake(name))
    if override:
        return override

    readable = re.sub(r"([A-Z])", r" \1", name.replace("_", " ")).strip()
    readable = re.sub(r"\s+", " ", readable)
    return readable[:1].upper() + readable[1:]


def get_at(document: Any, path: Iterable[PathSegment]) -> Any:
    """Read the value stored at ``path``, or ``MISSING`` when it does not exist."""
    current = document
    for segment in path:
        if isinstance(segment, int) and not isinstance(segment, bool):
            if not isinstance(current, list) or not 0 <= segment < len(current):
                return MISSING
            current = current[segment]
        elif isinstance(current, Mapping) and segment in current:
            current = current[segment]
        else:
            return MISSING
    return current


def set_at(document: Any, path: Iterable[PathSegment], value: Any) -> bool:
    """Write ``value`` at ``path`` in place. The parent container must exist."""
    segments = tuple(path)
    if not segments:
        return False

    parent = get_at(document, segments[:-1])
    last = segments[-1]
    if isinstance(last, int) and not isinstance(last, bool):
        if not isinstance(parent, list) or not 0 <= last < len(parent):
            return False
    elif not isinstance(parent, MutableMapping):
        return False

    parent[last] = value
    return True


def validation_messages(e: Exception) -> list[tuple[str, str]]:
    """Flatten a pydantic ``ValidationError`` into ``(location, message)`` pairs."""
    from pydantic import ValidationError

    if not isinstance(e, ValidationError):
        return [("", str(e))]

    messages = []
    for error in e.errors():
        loc = " -> ".join(str(item) for item in error.get("loc", []))
        messages.append((loc, error.get("msg", "")))
    return messages


def format_validation_error(e: Exception, title: str = "Validation failed:") -> str:
    lines = [title]
    for loc, msg in validation_messages(e):
        lines.append(f"  - {loc}: {msg}" if loc else f"  - {msg}")
    return "\n".join(lines)
