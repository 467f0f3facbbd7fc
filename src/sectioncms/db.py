"""Database initialization and operations."""

import logging
from pathlib import Path

from playhouse.pool import PooledSqliteDatabase

from .consts import DB_MAX_CONNECTIONS, DB_PRAGMAS, DB_STALE_TIMEOUT
from .models import Page, Section, database_proxy

logger = logging.getLogger(__name__)

database = None


def init_db(db_path: str):
    """Initialize database connection pool."""
    global database

    db_file = Path(db_path)
    db_dir = db_file.parent
    if db_dir and not db_dir.exists():
        db_dir.mkdir(parents=True, exist_ok=True)
        logger.info(f"Created database directory: {db_dir}")

    database = PooledSqliteDatabase(
        db_path,
        max_connections=DB_MAX_CONNECTIONS,
        stale_timeout=DB_STALE_TIMEOUT,
        pragmas=DB_PRAGMAS,
        check_same_thread=False,
    )

    database_proxy.initialize(database)
    logger.info(f"Database connection pool initialized: {db_path}")


def create_tables():
    """Create database tables."""
    database.create_tables([Page, Section], safe=True)
    logger.info("Database tables created")


def close_db():
    """Close database connection."""
    global database
    if database:
        database.close()
        logger.info("Database connection closed")


def ensure_page(slug: str, title: str = "") -> Page:
    """Return the page with ``slug``, creating it when missing."""
    page, created = Page.get_or_create(slug=slug, defaults={"title": title or slug})
    if created:
        logger.info(f"Page created: {slug}")
    return page


def save_section(
    page_id: int,
    section_type: str,
    content: dict,
    published: bool = False,
    order_index: int = 0,
) -> int:
    """Save section."""
    with database.atomic():
        section = Section.create(
            page=page_id,
            section_type=section_type,
            content=content,
            published=published,
            order_index=order_index,
        )
        logger.info(f"Section saved: {section.id} ({section_type})")
        return section.id


def update_section(
    section_id: int,
    content: dict,
    published: bool,
    order_index: int,
) -> bool:
    """Update section content and placement. Returns False when it does not exist."""
    with database.atomic():
        section = Section.get_or_none(Section.id == section_id)
        if section is None:
            return False
        section.content = content
        section.published = published
        section.order_index = order_index
        section.save()
        logger.info(f"Section updated: {section_id}")
        return True
