from typing import Any, Protocol

from pydantic import BaseModel


class StoreResult(BaseModel):
    success: bool
    content_id: int | None = None
    error: str | None = None


class StoredSection(BaseModel):
    id: int
    page_id: int
    section_type: str
    data: Any
    published: bool
    order_index: int


class KnownPage(BaseModel):
    slug: str
    title: str
    id: int | None = None


class ContentStore(Protocol):
    def create_content(
        self,
        page_id: int,
        type_id: str,
        data: Any,
        published: bool,
        order_index: int,
    ) -> StoreResult: ...

    def update_content(
        self,
        content_id: int,
        data: Any,
        published: bool,
        order_index: int,
    ) -> StoreResult: ...

    def get_content(self, content_id: int) -> StoredSection | None: ...

    def list_known_pages(self) -> list[KnownPage]: ...
