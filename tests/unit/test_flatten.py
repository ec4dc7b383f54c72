"""
Unit tests for flatten / unflatten
"""

import pytest

from locale_sync.utils.flatten import flatten, unflatten, set_nested


class TestFlatten:
    """Test cases for flatten"""

    def test_flatten_nested_document(self):
        doc = {"a": {"b": "Bonjour", "c": {"d": "Salut"}}, "e": "Titre"}

        assert flatten(doc) == {"a.b": "Bonjour", "a.c.d": "Salut", "e": "Titre"}

    def test_flatten_keeps_reference_order(self):
        doc = {"z": "1", "a": {"y": "2", "b": "3"}, "m": "4"}

        assert list(flatten(doc)) == ["z", "a.y", "a.b", "m"]

    def test_lists_and_scalars_are_leaves(self):
        doc = {"items": ["one", {"nested": "two"}], "count": 3, "enabled": True, "empty": None}

        flat = flatten(doc)

        assert flat == {"items": ["one", {"nested": "two"}], "count": 3, "enabled": True, "empty": None}

    def test_empty_object_is_a_leaf(self):
        assert flatten({"a": {"b": "x"}, "meta": {}}) == {"a.b": "x", "meta": {}}
        assert flatten({}) == {}


class TestUnflatten:
    """Test cases for unflatten and set_nested"""

    @pytest.mark.parametrize("doc", [
        {"a": {"b": "Bonjour"}},
        {"a": "1", "b": {"c": {"d": {"e": "deep"}}}, "f": {"g": "x", "h": "y"}},
        {"title": "Titre", "count": 2, "flag": False, "nothing": None},
        {"a": {"b": "x"}, "meta": {}, "plural": {"one": {}}},
    ])
    def test_round_trip(self, doc):
        assert unflatten(flatten(doc)) == doc

    def test_set_nested_replaces_scalar_in_the_way(self):
        doc = {"a": "scalar"}

        set_nested(doc, "a.b", "value")

        assert doc == {"a": {"b": "value"}}

    def test_set_nested_overrides_existing_leaf(self):
        doc = {"a": {"b": "old", "c": "keep"}}

        set_nested(doc, "a.b", "new")

        assert doc == {"a": {"b": "new", "c": "keep"}}

    def test_dotted_keys_are_ambiguous(self):
        # A key containing a dot is split on the way back
        assert unflatten(flatten({"a.b": "x"})) == {"a": {"b": "x"}}
