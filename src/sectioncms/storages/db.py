import logging
from typing import Any

from peewee import PeeweeException

from .base import KnownPage, StoredSection, StoreResult

logger = logging.getLogger(__name__)


class DBContentStore:
    """Content store backed by the peewee ``Page``/``Section`` tables."""

    def create_content(
        self,
        page_id: int,
        type_id: str,
        data: Any,
        published: bool,
        order_index: int,
    ) -> StoreResult:
        from ..db import save_section
        from ..models import Page

        try:
            if Page.get_or_none(Page.id == page_id) is None:
                return StoreResult(success=False, error=f"Page {page_id} does not exist")
            section_id = save_section(page_id, type_id, data, published, order_index)
        except PeeweeException as e:
            logger.error(f"Failed to create {type_id} section on page {page_id}: {e}")
            return StoreResult(success=False, error=str(e))
        return StoreResult(success=True, content_id=section_id)

    def update_content(
        self,
        content_id: int,
        data: Any,
        published: bool,
        order_index: int,
    ) -> StoreResult:
        from ..db import update_section

        try:
            updated = update_section(content_id, data, published, order_index)
        except PeeweeException as e:
            logger.error(f"Failed to update section {content_id}: {e}")
            return StoreResult(success=False, error=str(e))
        if not updated:
            return StoreResult(success=False, error=f"Section {content_id} does not exist")
        return StoreResult(success=True, content_id=content_id)

    def get_content(self, content_id: int) -> StoredSection | None:
        from ..models import Section

        section = Section.get_or_none(Section.id == content_id)
        if section is None:
            return None
        return StoredSection(
            id=section.id,
            page_id=section.page_id,
            section_type=section.section_type,
            data=section.content,
            published=section.published,
            order_index=section.order_index,
        )

    def list_known_pages(self) -> list[KnownPage]:
        from ..models import Page

        return [
            KnownPage(slug=page.slug, title=page.title, id=page.id)
            for page in Page.select().order_by(Page.slug)
        ]
