from typing import Any

from pydantic import BaseModel, Field


class ContentDocument(BaseModel):
    """A section being edited: its type, placement and the schema-bound data."""

    section_type: str = Field(min_length=1)
    order_index: int = Field(default=0, ge=0)
    published: bool = False
    data: Any = Field(default_factory=dict)
