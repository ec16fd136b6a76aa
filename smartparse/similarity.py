"""
Similarity between features.

The score is one of four discrete tiers. Keys must match exactly before
anything else is compared; after that, matching types score higher than
mismatched ones, and matching values score highest. Raw text is never
compared: "1.50" and "1.5" both infer to F64(1.5) and are equivalent.
"""

from typing import List, Optional, Sequence

from .feature import Feature
from .snapshot import line_separated_format

DIFFERENT_KEY = 0.0
DIFFERENT_TYPE = 0.3
DIFFERENT_VALUE = 0.7
EQUIVALENT = 1.0


class FeatureMismatchError(AssertionError):
    """Raised when two feature collections are not similarity-equal."""

    def __init__(self, message: str, expected, actual, unmatched=None):
        super().__init__(message)
        self.expected = expected
        self.actual = actual
        self.unmatched = unmatched


def similarity(a: Feature, b: Feature) -> float:
    """
    Return how similar a and b are, in [0.0, 1.0].

    1.0 means a and b are equivalent. 0.0 means they cannot be grouped in
    any form; anything above 0.0 means there is some similarity.

    Resolves (and caches) the typed value of both features once their keys match.
    """
    if a.key != b.key:
        return DIFFERENT_KEY

    if a.value_type() != b.value_type():
        return DIFFERENT_TYPE

    if a.typed_value() != b.typed_value():
        return DIFFERENT_VALUE

    return EQUIVALENT


def _first_fit(expected: Sequence[Feature], actual: Sequence[Feature]):
    """Return (partner indices, first expected feature left without a partner)."""
    claimed = set()
    partners = []
    for expected_item in expected:
        for index, actual_item in enumerate(actual):
            if index in claimed:
                continue
            if similarity(expected_item, actual_item) == EQUIVALENT:
                claimed.add(index)
                partners.append(index)
                break
        else:
            return partners, expected_item
    return partners, None


def match_features(expected: Sequence[Feature], actual: Sequence[Feature]) -> Optional[List[int]]:
    """
    Pair every expected feature with a distinct equivalent actual feature.

    Greedy and first-fit: each expected feature claims the first unclaimed
    actual feature scoring EQUIVALENT. No backtracking is done.

    Returns:
        For each expected feature, the index of its actual partner,
        or None if the sizes differ or some expected feature has no partner
    """
    if len(expected) != len(actual):
        return None
    partners, unmatched = _first_fit(expected, actual)
    if unmatched is not None:
        return None
    return partners


def assert_similarity_equal(expected: Sequence[Feature], actual: Sequence[Feature]) -> None:
    """
    Assert that two feature collections are equivalent, ignoring order.

    Raises:
        FeatureMismatchError: If the sizes differ or an expected feature
            finds no equivalent partner
    """
    listing = (
        f"expected: {line_separated_format(expected)}\n"
        f"actual: {line_separated_format(actual)}"
    )

    if len(expected) != len(actual):
        raise FeatureMismatchError(
            f"Expected {len(expected)} features, got {len(actual)}\n{listing}",
            expected,
            actual,
        )

    _, unmatched = _first_fit(expected, actual)
    if unmatched is not None:
        raise FeatureMismatchError(
            f"No equivalent feature for: {unmatched!r}\n{listing}",
            expected,
            actual,
            unmatched=unmatched,
        )
