"""
Tests for feature snapshots and their rendering.
"""

import pytest

from smartparse.feature import Feature
from smartparse.snapshot import FeatureSnapshot, ValueSnapshot, line_separated_format
from smartparse.typed_value import TypedValue


class TestValueSnapshot:
    """Fixture-form typed values."""

    @pytest.mark.parametrize("data,kind,value", [
        ({"String": "foo"}, "String", "foo"),
        ({"Bool": False}, "Bool", False),
        ({"I64": -52}, "I64", -52),
        ({"F64": 80.1}, "F64", 80.1),
        ({"F64": 3}, "F64", 3.0),
        ({"Null": None}, "Null", None),
        ("Null", "Null", None),
    ])
    def test_from_dict(self, data, kind, value):
        snapshot = ValueSnapshot.from_dict(data)
        assert snapshot.kind == kind
        assert snapshot.value == value

    @pytest.mark.parametrize("data", [
        {"Str": "foo"},
        {"I64": 1.5},
        {"I64": True},
        {"I64": 2 ** 64},
        {"Bool": "true"},
        {"String": 1},
        {"Null": 0},
        {"String": "a", "I64": 1},
        "String",
        None,
    ])
    def test_from_dict_rejects_invalid(self, data):
        with pytest.raises(ValueError):
            ValueSnapshot.from_dict(data)

    def test_from_typed(self):
        assert ValueSnapshot.from_typed(TypedValue.str("x")) == ValueSnapshot("String", "x")
        assert ValueSnapshot.from_typed(TypedValue.null()) == ValueSnapshot("Null")
        assert ValueSnapshot.from_typed(TypedValue.i64(1)) != ValueSnapshot("F64", 1.0)

    @pytest.mark.parametrize("snapshot,text", [
        (ValueSnapshot("Null"), "null"),
        (ValueSnapshot("String", "foo"), '"foo"'),
        (ValueSnapshot("Bool", True), "true"),
        (ValueSnapshot("I64", -52), "-52"),
        (ValueSnapshot("F64", 80.1), "80.1"),
        (ValueSnapshot("F64", 3882.0), "3882"),
    ])
    def test_str(self, snapshot, text):
        assert str(snapshot) == text

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            ValueSnapshot("Float", 1.0)


class TestFeatureSnapshot:
    """Fixture-form features."""

    def test_from_feature_does_not_fill_cache(self):
        feature = Feature("k", "1.50")
        snapshot = FeatureSnapshot.from_feature(feature)
        assert snapshot == FeatureSnapshot("k", ValueSnapshot("F64", 1.5))
        assert not feature.is_resolved

    def test_from_dict_key_defaults_to_empty(self):
        snapshot = FeatureSnapshot.from_dict({"value": {"I64": 1}})
        assert snapshot.key == ""

    def test_from_dict_requires_value(self):
        with pytest.raises(ValueError):
            FeatureSnapshot.from_dict({"key": "a"})
        with pytest.raises(ValueError):
            FeatureSnapshot.from_dict({"key": 1, "value": "Null"})

    def test_str(self):
        assert str(FeatureSnapshot("", ValueSnapshot("String", "INFO"))) == 'Feature("INFO")'
        assert str(FeatureSnapshot("b", ValueSnapshot("I64", 100))) == "Feature(key: b, value: 100)"


class TestLineSeparatedFormat:
    """One item per line inside brackets."""

    def test_no_indent(self):
        assert line_separated_format(["a", "b"]) == "[\n\ta\n\tb\n]"

    def test_indent(self):
        assert line_separated_format(["a"], 1) == "[\n\t\ta\n\t]"

    def test_empty(self):
        assert line_separated_format([], 2) == "[\n\t\t]"
