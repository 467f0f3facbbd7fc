from unittest.mock import patch

import pytest
from peewee import IntegrityError, OperationalError

from sectioncms.db import close_db, create_tables, ensure_page, init_db, save_section
from sectioncms.normalizer import normalize_document
from sectioncms.registry import default_registry
from sectioncms.storages import DBContentStore


@pytest.fixture
def store(tmp_path):
    init_db(str(tmp_path / "db" / "sections.db"))
    create_tables()
    yield DBContentStore()
    close_db()


def test_hero_default_round_trips(store):
    hero = default_registry().get_contract("hero")
    page = ensure_page("home", "Home")

    created = store.create_content(page.id, "hero", hero.new_data(), False, 0)
    assert created.success

    loaded = store.get_content(created.content_id)
    assert loaded.section_type == "hero"
    assert loaded.page_id == page.id
    assert normalize_document(hero, loaded.data) == hero.default_data


def test_create_requires_existing_page(store):
    result = store.create_content(999, "hero", {}, False, 0)
    assert not result.success
    assert "999" in result.error


def test_update_content(store):
    page = ensure_page("pricing")
    section_id = save_section(page.id, "pricing-faq", {"title": "Old"})

    result = store.update_content(section_id, {"title": "New"}, True, 4)

    assert result.success
    assert result.content_id == section_id
    loaded = store.get_content(section_id)
    assert loaded.data == {"title": "New"}
    assert loaded.published is True
    assert loaded.order_index == 4


def test_update_missing_section(store):
    result = store.update_content(12345, {}, False, 0)
    assert not result.success
    assert "12345" in result.error


def test_get_missing_section(store):
    assert store.get_content(12345) is None


def test_list_known_pages(store):
    ensure_page("pricing", "Pricing")
    ensure_page("about", "About")
    ensure_page("home", "Home")
    ensure_page("home", "Ignored")

    pages = store.list_known_pages()
    assert [page.slug for page in pages] == ["about", "home", "pricing"]
    assert [page.title for page in pages] == ["About", "Home", "Pricing"]
    assert all(page.id is not None for page in pages)


def test_ensure_page_defaults_title_to_slug(store):
    assert ensure_page("careers").title == "careers"


def test_create_reports_database_errors(store):
    page = ensure_page("home")

    with patch("sectioncms.db.save_section", side_effect=OperationalError("database is locked")):
        result = store.create_content(page.id, "hero", {}, False, 0)

    assert not result.success
    assert result.error == "database is locked"


def test_update_reports_database_errors(store):
    with patch("sectioncms.db.update_section", side_effect=IntegrityError("constraint failed")):
        result = store.update_content(1, {}, False, 0)

    assert not result.success
    assert result.error == "constraint failed"
