from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel

from .diagnostics import Diagnostic
from .enums import UIGroup, WidgetKind
from .utils import PathSegment


class Control(BaseModel):
    widget: WidgetKind
    path: list[PathSegment]
    key: str
    label: str
    group: UIGroup
    value: Any = None
    help_text: Optional[str] = None
    bucket: Optional[str] = None
    options: list[str] = []
    children: list[ControlGroup] = []
    items: list[ItemBlock] = []
    item_default: Any = None
    max_items: Optional[int] = None
    add_label: Optional[str] = None
    read_only: bool = False


class ControlGroup(BaseModel):
    id: UIGroup
    title: str
    collapsed: bool = False
    controls: list[Control]


class ItemBlock(BaseModel):
    index: int
    label: str
    path: list[PathSegment]
    groups: list[ControlGroup]
    can_move_up: bool
    can_move_down: bool


class Form(BaseModel):
    type_id: str
    label: str
    description: str = ""
    published: bool = False
    order_index: int = 0
    groups: list[ControlGroup] = []
    fallback: Optional[str] = None
    repair_warning: bool = False
    diagnostics: list[Diagnostic] = []


Control.model_rebuild()
