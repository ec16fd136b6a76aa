"""
Snapshots: plain, comparable copies of features.

Snapshots are what the declarative fixtures are written in and what failure
reports print. A snapshot holds only the key and the typed value, so two
features with different raw text but the same inferred value produce equal
snapshots.
"""

from typing import Any, Dict, Iterable

from .feature import Feature
from .typed_value import Type, TypedValue

KINDS = ("Null", "String", "Bool", "I64", "F64")

_KIND_BY_TYPE = {
    Type.NULL: "Null",
    Type.STR: "String",
    Type.BOOL: "Bool",
    Type.I64: "I64",
    Type.F64: "F64",
}


class ValueSnapshot:
    """A typed value in fixture form: one of Null, String, Bool, I64 or F64."""

    __slots__ = ("kind", "value")

    def __init__(self, kind: str, value: Any = None):
        if kind not in KINDS:
            raise ValueError(f"Unknown value kind: {kind!r} (expected one of {', '.join(KINDS)})")
        self.kind = kind
        self.value = value

    @classmethod
    def from_typed(cls, typed_value: TypedValue) -> "ValueSnapshot":
        return cls(_KIND_BY_TYPE[typed_value.type], typed_value.value)

    @classmethod
    def from_dict(cls, data: Any) -> "ValueSnapshot":
        """
        Build from fixture data such as {"String": "foo"} or {"I64": 100}.

        "Null" may also be written as a bare string.

        Raises:
            ValueError: If the data is not exactly one known kind with a payload of the right type
        """
        if data == "Null":
            return cls("Null")
        if not isinstance(data, dict) or len(data) != 1:
            raise ValueError(f"Value must be an object with exactly one kind, got: {data!r}")

        kind, value = next(iter(data.items()))
        if kind == "Null":
            if value is not None:
                raise ValueError(f"Null takes no payload, got: {value!r}")
            return cls("Null")
        if kind == "String" and isinstance(value, str):
            return cls(kind, value)
        if kind == "Bool" and isinstance(value, bool):
            return cls(kind, value)
        if kind == "I64" and isinstance(value, int) and not isinstance(value, bool):
            return cls(kind, TypedValue.i64(value).value)
        if kind == "F64" and isinstance(value, (int, float)) and not isinstance(value, bool):
            return cls(kind, float(value))
        if kind not in KINDS:
            raise ValueError(f"Unknown value kind: {kind!r}")
        raise ValueError(f"Invalid payload for {kind}: {value!r}")

    def __eq__(self, other):
        if not isinstance(other, ValueSnapshot):
            return NotImplemented
        return self.kind == other.kind and self.value == other.value

    def __repr__(self):
        return f"ValueSnapshot({self.kind!r}, {self.value!r})"

    def __str__(self):
        if self.kind == "Null":
            return "null"
        if self.kind == "String":
            return f'"{self.value}"'
        if self.kind == "Bool":
            return "true" if self.value else "false"
        if self.kind == "F64":
            text = repr(self.value)
            # Whole floats print without a fraction: 3882.0 -> 3882
            return text[:-2] if text.endswith(".0") else text
        return str(self.value)


class FeatureSnapshot:
    """A feature reduced to its key and typed value."""

    __slots__ = ("key", "value")

    def __init__(self, key: str, value: ValueSnapshot):
        self.key = key
        self.value = value

    @classmethod
    def from_feature(cls, feature: Feature) -> "FeatureSnapshot":
        # Read-only: the snapshot must not fill the feature's cache.
        return cls(feature.key, ValueSnapshot.from_typed(feature.typed_value_no_cache()))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FeatureSnapshot":
        """Build from fixture data: {"key": "a", "value": {"I64": 1}}. The key defaults to ""."""
        if not isinstance(data, dict) or "value" not in data:
            raise ValueError(f"Feature must be an object with a 'value', got: {data!r}")
        key = data.get("key", "")
        if not isinstance(key, str):
            raise ValueError(f"Feature key must be a string, got: {key!r}")
        return cls(key, ValueSnapshot.from_dict(data["value"]))

    def __eq__(self, other):
        if not isinstance(other, FeatureSnapshot):
            return NotImplemented
        return self.key == other.key and self.value == other.value

    def __repr__(self):
        return f"FeatureSnapshot({self.key!r}, {self.value!r})"

    def __str__(self):
        if not self.key:
            return f"Feature({self.value})"
        return f"Feature(key: {self.key}, value: {self.value})"


def line_separated_format(items: Iterable[Any], tabs: int = 0) -> str:
    """
    Render items one per line inside brackets:

        [
        \t<item>
        \t<item>
        ]

    Each line is additionally indented by `tabs` tabs.
    """
    indent = "\t" * tabs
    lines = ["["]
    for item in items:
        lines.append(f"{indent}\t{item}")
    lines.append(f"{indent}]")
    return "\n".join(lines)
