"""Upgrades for historical data layouts of specific section types.

Upgrades run before generic normalization and only rewrite layouts that are
known to exist in stored content. The input is never mutated.
"""

import copy
import logging
from collections.abc import Mapping
from typing import Any, Callable

from .diagnostics import Diagnostics
from .enums import DiagnosticKind

logger = logging.getLogger(__name__)

Upgrader = Callable[[dict, "Diagnostics | None"], dict]

HERO_IMAGE_GROUPS = ("women", "men", "grid")


def _record(diagnostics: Diagnostics | None, path: tuple, message: str) -> None:
    if diagnostics is not None:
        diagnostics.record(DiagnosticKind.LEGACY_UPGRADE, path, message)
    else:
        logger.debug(f"Legacy upgrade at {'.'.join(map(str, path))}: {message}")


def _upgrade_hero(data: dict, diagnostics: Diagnostics | None) -> dict:
    images = data.get("images")
    if not isinstance(images, Mapping):
        return data

    for group in HERO_IMAGE_GROUPS:
        items = images.get(group)
        if not isinstance(items, list):
            continue
        for index, item in enumerate(items):
            if isinstance(item, str):
                items[index] = {"image": item, "alt": ""}
                _record(diagnostics, ("images", group, index), "plain image path wrapped as {image, alt}")
    return data


def _upgrade_pricing_faq(data: dict, diagnostics: Diagnostics | None) -> dict:
    legacy_text = data.pop("cta_text", None)
    legacy_link = data.pop("cta_link", None)
    cta = data.get("cta")

    if not isinstance(cta, Mapping) and (legacy_text or legacy_link):
        data["cta"] = {
            "text": legacy_text if isinstance(legacy_text, str) else "",
            "link": legacy_link if isinstance(legacy_link, str) else "",
            "buttonText": "",
            "show": True,
        }
        _record(diagnostics, ("cta",), "flat cta_text/cta_link moved into cta")
    elif isinstance(cta, dict):
        title = cta.get("title")
        if not cta.get("text") and isinstance(title, str):
            cta["text"] = title
            _record(diagnostics, ("cta", "text"), "cta.title renamed to cta.text")
        cta.pop("title", None)
    return data


def _upgrade_content(data: dict, diagnostics: Diagnostics | None) -> dict:
    sections = data.get("sections")
    if not isinstance(sections, list):
        return data

    for section_index, section in enumerate(sections):
        if not isinstance(section, Mapping):
            continue
        items = section.get("items")
        if not isinstance(items, list):
            continue
        for index, item in enumerate(items):
            if isinstance(item, str):
                items[index] = {"text": item, "icon": "", "show": True}
                _record(
                    diagnostics,
                    ("sections", section_index, "items", index),
                    "plain text item wrapped as {text, icon, show}",
                )
    return data


UPGRADERS: dict[str, Upgrader] = {
    "hero": _upgrade_hero,
    "pricing-faq": _upgrade_pricing_faq,
    "content": _upgrade_content,
}


def upgrade(type_id: str, raw: Any, diagnostics: Diagnostics | None = None) -> Any:
    """Return ``raw`` with the known legacy layouts of ``type_id`` upgraded.

    Values that are not mappings and types without an upgrader are returned
    unchanged; shape repair is left to the normalizer.
    """
    upgrader = UPGRADERS.get(type_id)
    if upgrader is None or not isinstance(raw, Mapping):
        return raw
    return upgrader(copy.deepcopy(dict(raw)), diagnostics)
