"""
JSON object identifier.

Turns the top-level entries of a JSON object into typed features.
Only flat values are supported for now: nested arrays and objects are
skipped, as are numbers that fit neither a signed 64-bit integer nor a
finite 64-bit float.
"""

import json
import math
from typing import Any, List, Optional

from ..feature import Feature, Source
from ..logger import get_logger
from ..typed_value import I64_MAX, I64_MIN, TypedValue
from .common import Identifier


class _OutOfRange:
    """Marker for a JSON number that has no 64-bit representation."""

    def __init__(self, literal: str):
        self.literal = literal

    def __repr__(self):
        return f"<out of range number {self.literal}>"


def _parse_int(literal: str):
    # Checked on the literal so huge inputs never reach int()'s digit limit.
    digits = literal.lstrip("-")
    if len(digits) > 19:
        return _OutOfRange(literal)
    value = int(literal)
    if not I64_MIN <= value <= I64_MAX:
        return _OutOfRange(literal)
    return value


def _parse_float(literal: str):
    value = float(literal)
    if math.isinf(value):
        return _OutOfRange(literal)
    return value


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def _canonical(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


class JsonIdentifier(Identifier):
    """Identifies features in records that are JSON objects."""

    name = "json"
    source = Source.JSON

    def applicable(self, text: str) -> bool:
        # Cheap pre-filter; also keeps bare scalars like "42" away from the parser.
        return text.lstrip().startswith("{")

    def extract(self, text: str) -> Optional[List[Feature]]:
        logger = get_logger()
        try:
            document = json.loads(
                text,
                parse_int=_parse_int,
                parse_float=_parse_float,
                parse_constant=_reject_constant,
            )
        except (ValueError, RecursionError) as e:
            logger.debug("Input is not valid JSON, declining", error=str(e))
            return None

        if not isinstance(document, dict):
            return None

        features = []
        for key, value in document.items():
            typed_value = self._typed(value)
            if typed_value is None:
                reason = "number_out_of_range" if isinstance(value, _OutOfRange) else "nested"
                logger.record_skipped_value(reason)
                logger.debug("Skipping JSON value", key=key, reason=reason)
                continue
            features.append(
                Feature.new_typed(key, _canonical(value), typed_value).source(self.source)
            )
        return features

    @staticmethod
    def _typed(value: Any) -> Optional[TypedValue]:
        if value is None:
            return TypedValue.null()
        # bool before int: True is an int in Python.
        if isinstance(value, bool):
            return TypedValue.bool(value)
        if isinstance(value, str):
            return TypedValue.str(value)
        if isinstance(value, int):
            return TypedValue.i64(value)
        if isinstance(value, float):
            return TypedValue.f64(value)
        # Arrays, objects, and out of range numbers.
        return None
