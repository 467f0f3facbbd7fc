"""Media and link references used by image and link widgets."""

import logging
from typing import Iterable

from .consts import HOME_PAGE_SLUG, KNOWN_BUCKETS, STORAGE_PUBLIC_PATH
from .storages.base import ContentStore, KnownPage

logger = logging.getLogger(__name__)


def public_url(base_url: str, bucket: str, path: str) -> str:
    return f"{base_url.rstrip('/')}/{STORAGE_PUBLIC_PATH}/{bucket}/{path.lstrip('/')}"


def resolve_reference(bucket: str, raw: str, base_url: str) -> str:
    """Turn a stored media reference into a displayable URL.

    Args:
        bucket: Upload bucket of the field, used for bare file names
        raw: Stored value, a bare file name, a ``bucket/path`` reference or a URL
        base_url: Public base URL of the object storage

    Returns:
        The public URL, or ``""`` when the reference cannot be displayed

    Examples:
        >>> resolve_reference("hero-images", "a.png", "https://cdn.example.com")
        'https://cdn.example.com/storage/v1/object/public/hero-images/a.png'
        >>> resolve_reference("hero-images", "couple-photos/x/b.png", "https://cdn.example.com")
        'https://cdn.example.com/storage/v1/object/public/couple-photos/x/b.png'
    """
    if not isinstance(raw, str):
        return ""
    reference = raw.strip()
    if not reference:
        return ""

    if reference.startswith(("http://", "https://")):
        if f"/{STORAGE_PUBLIC_PATH}/" in reference:
            return reference
        logger.debug(f"Ignoring external media URL {reference}")
        return ""

    if "/" in reference:
        parts = [part for part in reference.split("/") if part]
        if len(parts) > 1 and parts[0] in KNOWN_BUCKETS:
            return public_url(base_url, parts[0], "/".join(parts[1:]))
        return ""

    return public_url(base_url, bucket, reference)


def list_known_pages(store: ContentStore) -> list[KnownPage]:
    return store.list_known_pages()


def page_links(pages: Iterable[KnownPage]) -> list[str]:
    """Site-relative links for link-widget autocompletion."""
    return ["/" if page.slug == HOME_PAGE_SLUG else f"/{page.slug}" for page in pages]
