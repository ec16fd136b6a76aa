"""
smartparse extracts typed key/value features from loosely structured
records (JSON objects or free-form log lines) and scores how similar two
features are. These are the building blocks for grouping similar records.
"""

__version__ = "0.1.0"

from .feature import Feature, Metadata, Source
from .identifiers import identify
from .similarity import FeatureMismatchError, assert_similarity_equal, match_features, similarity
from .typed_value import Type, TypedValue, infer

__all__ = [
    "Feature",
    "FeatureMismatchError",
    "Metadata",
    "Source",
    "Type",
    "TypedValue",
    "assert_similarity_equal",
    "identify",
    "infer",
    "match_features",
    "similarity",
]
