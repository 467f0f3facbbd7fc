"""Tests for media references and page links"""

from unittest.mock import Mock

import pytest

from sectioncms.media import list_known_pages, page_links, public_url, resolve_reference
from sectioncms.storages.base import KnownPage

BASE_URL = "https://cdn.example.com"


def test_public_url():
    assert (
        public_url("https://cdn.example.com/", "blog-images", "/posts/a.png")
        == "https://cdn.example.com/storage/v1/object/public/blog-images/posts/a.png"
    )


@pytest.mark.parametrize(
    "bucket,raw,expected",
    [
        (
            "hero-images",
            "a.png",
            "https://cdn.example.com/storage/v1/object/public/hero-images/a.png",
        ),
        (
            "hero-images",
            "couple-photos/2024/b.png",
            "https://cdn.example.com/storage/v1/object/public/couple-photos/2024/b.png",
        ),
        (
            "hero-images",
            "  a.png  ",
            "https://cdn.example.com/storage/v1/object/public/hero-images/a.png",
        ),
        (
            "hero-images",
            "https://other.example.com/storage/v1/object/public/user-uploads/c.png",
            "https://other.example.com/storage/v1/object/public/user-uploads/c.png",
        ),
        ("hero-images", "https://images.example.com/c.png", ""),
        ("hero-images", "unknown-bucket/c.png", ""),
        ("hero-images", "", ""),
        ("hero-images", None, ""),
        ("hero-images", 42, ""),
    ],
)
def test_resolve_reference(bucket, raw, expected):
    assert resolve_reference(bucket, raw, BASE_URL) == expected


def test_page_links():
    pages = [KnownPage(slug="home", title="Home"), KnownPage(slug="pricing", title="Pricing")]
    assert page_links(pages) == ["/", "/pricing"]


def test_list_known_pages_reads_store():
    store = Mock()
    store.list_known_pages.return_value = [KnownPage(slug="about", title="About")]
    assert list_known_pages(store) == [KnownPage(slug="about", title="About")]
