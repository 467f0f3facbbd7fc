"""Blocks shared by several section types."""

from pydantic import BaseModel, Field


def alt_field(**kwargs):
    return Field(default="", json_schema_extra={"widget": "text"}, **kwargs)


def icon_field(**kwargs):
    return Field(default="", json_schema_extra={"widget": "icon"}, **kwargs)


class Badge(BaseModel):
    text: str = ""
    icon: str = ""
    show: bool = False


class ImageItem(BaseModel):
    image: str = ""
    alt: str = ""


class Platform(BaseModel):
    label: str = ""
    name: str = ""
    iconImage: str = ""
    iconAlt: str = alt_field()
    coming: bool = True
    show: bool = True


class IconText(BaseModel):
    text: str = ""
    icon: str = ""
    show: bool = True


class TitledBlock(BaseModel):
    title: str = ""
    titleHighlight: str = ""
    subtitle: str = ""
    badge: Badge = Field(default_factory=Badge)
