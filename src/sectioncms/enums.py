"""Enumeration type definitions"""

from enum import Enum


class Kind(str, Enum):
    """Canonical kind of a schema node after unwrapping"""

    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    UNKNOWN = "unknown"


class WidgetKind(str, Enum):
    TEXT = "text"
    LONG_TEXT = "long_text"
    IMAGE = "image"
    ICON = "icon"
    LINK = "link"
    SELECT = "select"
    NUMBER = "number"
    TOGGLE = "toggle"
    PRIMITIVE_LIST = "primitive_list"
    IMAGE_LIST = "image_list"
    OBJECT_LIST = "object_list"
    NESTED_OBJECT_GROUP = "nested_object_group"


class UIGroup(str, Enum):
    CONTENT = "content"
    CALL_TO_ACTION = "call_to_action"
    MEDIA = "media"
    ADVANCED = "advanced"


class DiagnosticKind(str, Enum):
    RESOLUTION_FAILURE = "resolution_failure"
    CLASSIFICATION_FALLBACK = "classification_fallback"
    REPAIR = "repair"
    DROPPED_KEY = "dropped_key"
    LEGACY_UPGRADE = "legacy_upgrade"
    UNKNOWN_CONTRACT = "unknown_contract"
    MUTATION_REJECTED = "mutation_rejected"
