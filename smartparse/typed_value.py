"""
Typed value inference.

Classifies a raw string into one of a fixed set of primitive kinds.
Numbers are tried before keywords, and only whole-string matches count:
"123abc" is a string, not a partially parsed integer.
"""

import re
from enum import Enum
from typing import Any

I64_MIN = -(2 ** 63)
I64_MAX = 2 ** 63 - 1

# ASCII digits only; str.isdigit and int() would also accept other scripts
# and "_" separators.
INT_RE = re.compile(r"[+-]?[0-9]+")
FLOAT_RE = re.compile(
    r"[+-]?(?:"
    r"(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|(?i:inf|infinity|nan)"
    r")"
)

NULL_WORDS = {"null", "nil"}
FALSE_WORDS = {"False", "false"}
TRUE_WORDS = {"True", "true"}


class Type(Enum):
    """The tag of a TypedValue, without its payload."""

    NULL = "null"
    STR = "str"
    BOOL = "bool"
    I64 = "i64"
    F64 = "f64"


class TypedValue:
    """An inferred value: exactly one Type tag plus its payload."""

    __slots__ = ("_type", "_value")

    def __init__(self, value_type: Type, value: Any = None):
        self._type = value_type
        self._value = value

    @classmethod
    def null(cls) -> "TypedValue":
        return cls(Type.NULL)

    @classmethod
    def str(cls, value: str) -> "TypedValue":
        return cls(Type.STR, value)

    @classmethod
    def bool(cls, value: bool) -> "TypedValue":
        return cls(Type.BOOL, value)

    @classmethod
    def i64(cls, value: int) -> "TypedValue":
        if not I64_MIN <= value <= I64_MAX:
            raise ValueError(f"{value} does not fit in a signed 64-bit integer")
        return cls(Type.I64, value)

    @classmethod
    def f64(cls, value: float) -> "TypedValue":
        return cls(Type.F64, float(value))

    @property
    def type(self) -> Type:
        return self._type

    @property
    def value(self) -> Any:
        return self._value

    def primitive_type(self) -> Type:
        return self._type

    def __eq__(self, other):
        if not isinstance(other, TypedValue):
            return NotImplemented
        # Tag first, so I64(1) != F64(1.0) and Bool(True) != I64(1).
        return self._type is other._type and self._value == other._value

    def __hash__(self):
        return hash((self._type, self._value))

    def __repr__(self):
        if self._type is Type.NULL:
            return "TypedValue.null()"
        return f"TypedValue.{self._type.value}({self._value!r})"


def _parse_i64(raw: str):
    if not INT_RE.fullmatch(raw):
        return None
    # More than 19 significant digits never fits; long runs would also trip int()'s digit limit.
    significant = raw.lstrip("+-").lstrip("0")
    if len(significant) > 19:
        return None
    value = int(significant or "0")
    if raw.startswith("-"):
        value = -value
    if not I64_MIN <= value <= I64_MAX:
        return None
    return value


def _parse_f64(raw: str):
    if not FLOAT_RE.fullmatch(raw):
        return None
    return float(raw)


def infer(raw: str) -> TypedValue:
    """
    Infer the typed value of a raw string.

    Trial order, first match wins: signed 64-bit integer, 64-bit float,
    null keywords ("null", "nil"), boolean keywords ("true", "True",
    "false", "False"), and finally the unchanged string.
    Never raises, and never strips whitespace.
    """
    value = _parse_i64(raw)
    if value is not None:
        return TypedValue.i64(value)

    number = _parse_f64(raw)
    if number is not None:
        return TypedValue.f64(number)

    if raw in NULL_WORDS:
        return TypedValue.null()
    if raw in FALSE_WORDS:
        return TypedValue.bool(False)
    if raw in TRUE_WORDS:
        return TypedValue.bool(True)

    return TypedValue.str(raw)
