"""
Feature identification.

identify() runs a fixed-priority chain of identifiers and returns the
result of the first one that accepts the record, even when that result is
empty. There is no backtracking: "{}" yields no features and is never
tokenized.
"""

from typing import List, Optional, Sequence

from ..feature import Feature
from ..logger import get_logger
from .common import Identifier
from .json_object import JsonIdentifier
from .tokenize import FeatureTransform, IdentityTransform, TokenizeIdentifier

DEFAULT_IDENTIFIERS = (JsonIdentifier(), TokenizeIdentifier())

__all__ = [
    "DEFAULT_IDENTIFIERS",
    "FeatureTransform",
    "IdentityTransform",
    "Identifier",
    "JsonIdentifier",
    "TokenizeIdentifier",
    "identify",
]


def identify(text: str, identifiers: Optional[Sequence[Identifier]] = None) -> List[Feature]:
    """
    Extract features from a record.

    Args:
        text: The record, e.g. a JSON object or a log line
        identifiers: Identifiers to try in priority order
            (default: JSON, then whitespace tokenizing)

    Returns:
        Features from the first identifier that did not decline,
        or an empty list if all of them declined
    """
    logger = get_logger()
    if identifiers is None:
        identifiers = DEFAULT_IDENTIFIERS

    for identifier in identifiers:
        features = identifier.identify(text)
        if features is None:
            continue
        logger.record_identification(identifier.name, len(features))
        logger.debug("Record identified", identifier=identifier.name, features=len(features))
        return features

    logger.warning("No identifier accepted the record", identifiers=[i.name for i in identifiers])
    return []
