"""Structured diagnostics for repairs and fallbacks.

Events are collected so callers and tests can inspect them, and mirrored to
the ``sectioncms`` loggers.
"""

import logging
from typing import Iterable, Iterator

from pydantic import BaseModel

from .enums import DiagnosticKind
from .utils import PathSegment, format_path

logger = logging.getLogger(__name__)

_LEVELS = {
    DiagnosticKind.RESOLUTION_FAILURE: logging.WARNING,
    DiagnosticKind.CLASSIFICATION_FALLBACK: logging.WARNING,
    DiagnosticKind.REPAIR: logging.INFO,
    DiagnosticKind.DROPPED_KEY: logging.INFO,
    DiagnosticKind.LEGACY_UPGRADE: logging.INFO,
    DiagnosticKind.UNKNOWN_CONTRACT: logging.WARNING,
    DiagnosticKind.MUTATION_REJECTED: logging.WARNING,
}


class Diagnostic(BaseModel):
    kind: DiagnosticKind
    path: str
    message: str


class Diagnostics:
    def __init__(self) -> None:
        self._events: list[Diagnostic] = []

    def record(
        self,
        kind: DiagnosticKind,
        path: Iterable[PathSegment] | str,
        message: str,
    ) -> Diagnostic:
        dotted = path if isinstance(path, str) else format_path(path)
        event = Diagnostic(kind=kind, path=dotted, message=message)
        self._events.append(event)
        logger.log(_LEVELS.get(kind, logging.INFO), f"[{kind.value}] {dotted or '<root>'}: {message}")
        return event

    def of_kind(self, kind: DiagnosticKind) -> list[Diagnostic]:
        return [event for event in self._events if event.kind is kind]

    def repair_count(self) -> int:
        return len(self.of_kind(DiagnosticKind.REPAIR))

    def looks_corrupted(self, threshold: int) -> bool:
        """Whether repairs are frequent enough to be worth showing the author."""
        return threshold > 0 and self.repair_count() >= threshold

    def extend(self, other: "Diagnostics") -> None:
        self._events.extend(other.events)

    def clear(self) -> None:
        self._events.clear()

    @property
    def events(self) -> list[Diagnostic]:
        return list(self._events)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(list(self._events))

    def __len__(self) -> int:
        return len(self._events)
