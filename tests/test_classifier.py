"""Tests for field classification"""

import pytest

from sectioncms.classifier import Classification, classify, is_link_name, resolve_bucket, ui_group
from sectioncms.consts import (
    BUCKET_APP_SCREENSHOTS,
    BUCKET_BLOG_IMAGES,
    BUCKET_COUPLE_PHOTOS,
    BUCKET_HERO_IMAGES,
)
from sectioncms.enums import Kind, UIGroup, WidgetKind


@pytest.mark.parametrize(
    "path,kind,widget",
    [
        ("title", Kind.STRING, WidgetKind.TEXT),
        ("backgroundImage", Kind.STRING, WidgetKind.IMAGE),
        ("steps.0.image", Kind.STRING, WidgetKind.IMAGE),
        ("badge.icon", Kind.STRING, WidgetKind.ICON),
        ("cta.link", Kind.STRING, WidgetKind.LINK),
        ("secondaryLink", Kind.STRING, WidgetKind.LINK),
        ("href", Kind.STRING, WidgetKind.LINK),
        ("description", Kind.STRING, WidgetKind.LONG_TEXT),
        ("faqs.2.answer", Kind.STRING, WidgetKind.LONG_TEXT),
        ("rating", Kind.NUMBER, WidgetKind.NUMBER),
        ("showTitle", Kind.BOOLEAN, WidgetKind.TOGGLE),
        ("image", Kind.OBJECT, WidgetKind.NESTED_OBJECT_GROUP),
        ("tags", Kind.ARRAY, WidgetKind.PRIMITIVE_LIST),
        ("legacy", Kind.UNKNOWN, WidgetKind.TEXT),
    ],
)
def test_classify_widget(path, kind, widget):
    assert classify(path, kind).widget is widget


def test_classify_arrays_by_element_kind():
    assert classify("stats", Kind.ARRAY, element_kind=Kind.OBJECT).widget is WidgetKind.OBJECT_LIST
    assert (
        classify("images", Kind.ARRAY, element_kind=Kind.OBJECT).widget is WidgetKind.OBJECT_LIST
    )
    assert (
        classify("screenshots", Kind.ARRAY, element_kind=Kind.STRING).widget
        is WidgetKind.IMAGE_LIST
    )
    assert (
        classify("images.women", Kind.ARRAY, element_kind=Kind.STRING).widget
        is WidgetKind.IMAGE_LIST
    )
    assert (
        classify("keywords", Kind.ARRAY, element_kind=Kind.STRING).widget
        is WidgetKind.PRIMITIVE_LIST
    )
    assert (
        classify("photos", Kind.ARRAY, element_kind=Kind.NUMBER).widget
        is WidgetKind.PRIMITIVE_LIST
    )


@pytest.mark.parametrize(
    "path",
    [("images", "grid"), ("gallery", "items"), ("hero", "women"), ("app", "screenshots", "ios")],
)
def test_classify_nested_string_array_under_media_path(path):
    classification = classify(path, Kind.ARRAY, element_kind=Kind.STRING)
    assert classification.widget is WidgetKind.IMAGE_LIST
    assert classification.bucket is not None


def test_classify_enumerated_string_is_select():
    assert classify("layout", Kind.STRING, choices=("grid", "list")).widget is WidgetKind.SELECT


def test_name_heuristics_use_field_name_only():
    """Parent names do not leak into the widget of a child field"""
    assert classify("heroImage.alt", Kind.STRING).widget is WidgetKind.TEXT
    assert classify(("links", 0, "label"), Kind.STRING).widget is WidgetKind.TEXT


class TestHints:
    """Tests for explicit widget hints"""

    def test_hint_overrides_name_heuristics(self):
        assert classify("imageAlt", Kind.STRING).widget is WidgetKind.IMAGE
        assert classify("imageAlt", Kind.STRING, hint="text").widget is WidgetKind.TEXT

    def test_hint_for_unnamed_widget(self):
        assert classify("story", Kind.STRING, hint="long_text").widget is WidgetKind.LONG_TEXT
        assert classify("quote", Kind.STRING, hint="icon").widget is WidgetKind.ICON

    def test_incompatible_hint_is_ignored(self):
        assert classify("rating", Kind.NUMBER, hint="image").widget is WidgetKind.NUMBER
        assert (
            classify("stats", Kind.ARRAY, element_kind=Kind.OBJECT, hint="image_list").widget
            is WidgetKind.OBJECT_LIST
        )

    def test_unknown_hint_is_ignored(self):
        assert classify("title", Kind.STRING, hint="fancy").widget is WidgetKind.TEXT

    def test_hint_never_changes_object_widget(self):
        assert classify("cta", Kind.OBJECT, hint="text").widget is WidgetKind.NESTED_OBJECT_GROUP


@pytest.mark.parametrize(
    "path,kind,group",
    [
        ("title", Kind.STRING, UIGroup.CONTENT),
        ("subtitle", Kind.STRING, UIGroup.CONTENT),
        ("cta", Kind.OBJECT, UIGroup.CALL_TO_ACTION),
        ("cta.buttonText", Kind.STRING, UIGroup.CALL_TO_ACTION),
        ("cta.link", Kind.STRING, UIGroup.CALL_TO_ACTION),
        ("backgroundImage", Kind.STRING, UIGroup.MEDIA),
        ("logo", Kind.STRING, UIGroup.MEDIA),
        ("badge.icon", Kind.STRING, UIGroup.MEDIA),
        ("show", Kind.BOOLEAN, UIGroup.ADVANCED),
        ("featured", Kind.BOOLEAN, UIGroup.ADVANCED),
        ("isImportant", Kind.STRING, UIGroup.ADVANCED),
        ("enableAnimation", Kind.STRING, UIGroup.ADVANCED),
    ],
)
def test_ui_group(path, kind, group):
    assert ui_group(path, kind) is group
    assert classify(path, kind).group is group


class TestBuckets:
    """Tests for media bucket selection"""

    def test_declared_bucket_is_used(self):
        assert resolve_bucket("featured_image", BUCKET_BLOG_IMAGES) == BUCKET_BLOG_IMAGES

    def test_default_bucket(self):
        assert resolve_bucket("image") == BUCKET_HERO_IMAGES

    def test_couple_photo_segments(self):
        assert resolve_bucket(("images", "women", 0, "image")) == BUCKET_COUPLE_PHOTOS
        assert resolve_bucket("images.men", BUCKET_HERO_IMAGES) == BUCKET_COUPLE_PHOTOS

    def test_screenshots_anywhere_on_path(self):
        assert resolve_bucket(("screenshots", 1, "image")) == BUCKET_APP_SCREENSHOTS

    def test_bucket_only_for_media_widgets(self):
        assert classify("image", Kind.STRING).bucket == BUCKET_HERO_IMAGES
        assert classify("title", Kind.STRING, BUCKET_BLOG_IMAGES).bucket is None
        assert (
            classify("screenshots", Kind.ARRAY, element_kind=Kind.STRING).bucket
            == BUCKET_APP_SCREENSHOTS
        )


def test_classify_is_deterministic():
    first = classify(("steps", 0, "image"), Kind.STRING, BUCKET_HERO_IMAGES)
    second = classify("steps.0.image", Kind.STRING, BUCKET_HERO_IMAGES)
    assert first == second
    assert first == Classification(WidgetKind.IMAGE, UIGroup.MEDIA, BUCKET_HERO_IMAGES)


def test_is_link_name():
    assert is_link_name("url")
    assert is_link_name("ctaLink")
    assert is_link_name("privacy_url")
    assert not is_link_name("linkedin")
    assert not is_link_name("title")
