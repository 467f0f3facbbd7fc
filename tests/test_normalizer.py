"""Tests for data normalization"""

import copy

import pytest

from sectioncms.diagnostics import Diagnostics
from sectioncms.enums import DiagnosticKind
from sectioncms.nodes import (
    MISSING,
    UnknownNode,
    array,
    boolean,
    nullable,
    number,
    obj,
    optional,
    string,
)
from sectioncms.normalizer import normalize, normalize_document
from sectioncms.registry import default_registry

REGISTRY = default_registry()

MESSY_VALUES = [
    None,
    "text",
    42,
    4.5,
    True,
    [],
    [1, "two", None, {"a": 1}],
    {},
    {"title": 7, "images": "x", "cta": [], "unexpected": {"deep": 1}},
]


def _leaves_are_typed(node_value_pairs):
    for kind, value in node_value_pairs:
        if kind == "string":
            assert isinstance(value, str)
        elif kind == "number":
            assert isinstance(value, (int, float)) and not isinstance(value, bool)
        elif kind == "boolean":
            assert isinstance(value, bool)


GALLERY = REGISTRY.get_contract("gallery")


class TestGallery:
    """Repair scenarios for stored gallery sections"""

    def test_images_not_an_array(self):
        data = normalize_document(GALLERY, {"images": "not-an-array"})
        assert data["images"] == []

    def test_image_items_with_wrong_leaf_types(self):
        data = normalize_document(GALLERY, {"images": [{"image": 42, "alt": None}]})
        assert data["images"] == [{"image": "", "alt": "", "title": "", "story": ""}]

    def test_missing_fields_are_filled(self):
        data = normalize_document(GALLERY, {})
        assert data == GALLERY.new_data()

    def test_repairs_are_reported(self):
        diagnostics = Diagnostics()
        normalize_document(GALLERY, {"images": [{"image": 42, "alt": None}]}, diagnostics)

        repairs = diagnostics.of_kind(DiagnosticKind.REPAIR)
        assert [event.path for event in repairs] == ["images.0.image"]


@pytest.mark.parametrize("type_id", REGISTRY.list_type_ids())
@pytest.mark.parametrize("raw", MESSY_VALUES)
def test_normalize_document_is_idempotent_and_valid(type_id, raw):
    contract = REGISTRY.get_contract(type_id)
    once = normalize_document(contract, raw)
    twice = normalize_document(contract, once)

    assert once == twice
    assert set(once) == set(contract.model.model_fields)


@pytest.mark.parametrize("type_id", ["hero", "gallery", "testimonials", "pricing-plans"])
def test_normalized_messy_data_validates(type_id):
    contract = REGISTRY.get_contract(type_id)
    contract.validate(normalize_document(contract, MESSY_VALUES[-1]))


def test_normalize_never_mutates_input():
    node = obj(tags=array(string()), meta=obj(count=number()))
    raw = {"tags": "solo", "meta": {"count": "3", "extra": True}, "gone": 1}
    before = copy.deepcopy(raw)
    normalize(node, raw)
    assert raw == before


class TestLeaves:
    """String, number and boolean leaves always come out typed"""

    def test_strings(self):
        assert normalize(string(), "ok") == "ok"
        assert normalize(string(), 5) == ""
        assert normalize(string(), None) == ""
        assert normalize(string("a", "b"), "b") == "b"
        assert normalize(string("a", "b"), "c") == "a"

    def test_numbers(self):
        assert normalize(number(), 2.5) == 2.5
        assert normalize(number(), "2") == 0
        assert normalize(number(), True) == 0
        assert normalize(number(integer=True), 3.0) == 3
        assert isinstance(normalize(number(integer=True), 3.0), int)

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_numbers_are_repaired(self, value):
        diagnostics = Diagnostics()

        once = normalize(obj(count=number()), {"count": value}, diagnostics)

        assert once == {"count": 0}
        assert normalize(obj(count=number()), once) == once
        assert len(diagnostics.of_kind(DiagnosticKind.REPAIR)) == 1

    def test_non_finite_number_is_not_wrapped_into_a_list(self):
        assert normalize(array(number()), float("nan")) == []

    def test_booleans(self):
        assert normalize(boolean(), True) is True
        assert normalize(boolean(), "true") is False
        assert normalize(boolean(), 1) is False

    def test_unknown_passes_through(self):
        value = {"anything": [1, 2]}
        assert normalize(UnknownNode(), value) == value

    def test_missing_gives_default(self):
        assert normalize(obj(a=string(), b=boolean()), MISSING) == {"a": "", "b": False}


class TestArrays:
    """Array repair rules"""

    def test_matching_scalar_is_wrapped(self):
        diagnostics = Diagnostics()
        assert normalize(array(string()), "a.png", diagnostics) == ["a.png"]
        assert len(diagnostics.of_kind(DiagnosticKind.REPAIR)) == 1

    def test_mismatched_scalar_becomes_empty(self):
        assert normalize(array(string()), 5) == []
        assert normalize(array(obj(a=string())), "x") == []
        assert normalize(array(number()), {"a": 1}) == []

    def test_null_is_not_a_repair(self):
        diagnostics = Diagnostics()
        assert normalize(nullable(array(string())), None, diagnostics) == []
        assert len(diagnostics) == 0

    def test_elements_are_normalized(self):
        assert normalize(array(number()), [1, "2", None]) == [1, 0, 0]
        assert normalize(array(obj(a=string())), [{}, None]) == [{"a": ""}, {"a": ""}]

    def test_wrapped_scalar_goes_through_element_schema(self):
        node = array(string("a", "b"))
        once = normalize(node, "z")

        assert once == ["a"]
        assert normalize(node, once) == once

    def test_wrapped_integer_is_coerced_like_an_element(self):
        assert normalize(array(number(integer=True)), 3.0) == [3]


class TestObjects:
    """Object repair rules"""

    def test_unknown_keys_are_dropped(self):
        diagnostics = Diagnostics()
        result = normalize(obj(title=string()), {"title": "x", "legacy": 1}, diagnostics)

        assert result == {"title": "x"}
        dropped = diagnostics.of_kind(DiagnosticKind.DROPPED_KEY)
        assert [event.path for event in dropped] == ["legacy"]

    def test_non_object_is_replaced(self):
        diagnostics = Diagnostics()
        assert normalize(obj(a=string()), ["a"], diagnostics) == {"a": ""}
        assert diagnostics.repair_count() == 1

    def test_optional_object_null_is_filled_silently(self):
        diagnostics = Diagnostics()
        node = obj(cta=optional(obj(text=string(), link=string())))
        assert normalize(node, {"cta": None}, diagnostics) == {"cta": {"text": "", "link": ""}}
        assert diagnostics.repair_count() == 0

    def test_nested_paths_in_diagnostics(self):
        diagnostics = Diagnostics()
        node = obj(steps=array(obj(title=string())))
        normalize(node, {"steps": [{"title": "ok"}, {"title": 3}]}, diagnostics)
        assert [event.path for event in diagnostics] == ["steps.1.title"]


def test_leaves_are_typed_for_hero():
    hero = REGISTRY.get_contract("hero")
    data = normalize_document(
        hero,
        {
            "title": 1,
            "showTagline": "yes",
            "badge": {"text": None, "show": 1},
            "stats": [{"text": 3, "show": "no"}],
        },
    )
    _leaves_are_typed(
        [
            ("string", data["title"]),
            ("boolean", data["showTagline"]),
            ("string", data["badge"]["text"]),
            ("boolean", data["badge"]["show"]),
            ("string", data["stats"][0]["text"]),
            ("boolean", data["stats"][0]["show"]),
        ]
    )
