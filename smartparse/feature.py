"""
Features: key/value observations extracted from a record.

A Feature keeps the raw text it was built from and infers its typed value
only when something asks for it. Most features get discarded by a consumer
before their type matters, so inference is deferred and cached once done.

The cache is filled with an unsynchronized write. To share a Feature
across threads, call typed_value() once before sharing, or have readers
use typed_value_no_cache().
"""

from typing import Optional

from .typed_value import Type, TypedValue, infer


class Source:
    """Provenance tag: which identifier produced a feature."""

    __slots__ = ("kind", "name")

    JSON: "Source"
    TOKENIZE: "Source"

    def __init__(self, kind: str, name: Optional[str] = None):
        self.kind = kind
        self.name = name

    @classmethod
    def custom(cls, name: str) -> "Source":
        return cls("custom", name)

    def __eq__(self, other):
        if not isinstance(other, Source):
            return NotImplemented
        return self.kind == other.kind and self.name == other.name

    def __hash__(self):
        return hash((self.kind, self.name))

    def __repr__(self):
        if self.kind == "custom":
            return f"Source.custom({self.name!r})"
        return f"Source.{self.kind.upper()}"


Source.JSON = Source("json")
Source.TOKENIZE = Source("tokenize")


class Metadata:
    """Per-feature bookkeeping that plays no part in similarity."""

    __slots__ = ("source",)

    def __init__(self, source: Optional[Source] = None):
        self.source = source

    def __eq__(self, other):
        if not isinstance(other, Metadata):
            return NotImplemented
        return self.source == other.source

    def __repr__(self):
        return f"Metadata(source={self.source!r})"


class Feature:
    """A single key/value observation. An empty key means a whole-value feature."""

    __slots__ = ("_key", "_raw_value", "_typed_value", "metadata")

    def __init__(self, key: str, raw_value: str):
        self._key = key
        self._raw_value = raw_value
        self._typed_value: Optional[TypedValue] = None
        self.metadata = Metadata()

    @classmethod
    def new_typed(cls, key: str, raw_value: str, typed_value: TypedValue) -> "Feature":
        """
        Create a Feature whose typed value is already known.

        Used by identifiers that learn the type while parsing (JSON),
        so the raw value is not inferred a second time.
        """
        feature = cls(key, raw_value)
        feature._typed_value = typed_value
        return feature

    @property
    def key(self) -> str:
        return self._key

    @property
    def raw_value(self) -> str:
        return self._raw_value

    @property
    def is_resolved(self) -> bool:
        """Whether the typed value has been computed and cached."""
        return self._typed_value is not None

    def typed_value(self) -> TypedValue:
        """Return the typed value, inferring and caching it on first use."""
        if self._typed_value is None:
            self._typed_value = infer(self._raw_value)
        return self._typed_value

    def typed_value_no_cache(self) -> TypedValue:
        """Return the typed value without filling the cache."""
        if self._typed_value is not None:
            return self._typed_value
        return infer(self._raw_value)

    def value_type(self) -> Type:
        return self.typed_value().primitive_type()

    def source(self, source: Source) -> "Feature":
        """Set the source (e.g. Source.JSON) and return the feature for chaining."""
        self.metadata.source = source
        return self

    def similarity(self, other: "Feature") -> float:
        """Shortcut for smartparse.similarity.similarity(self, other)."""
        from .similarity import similarity

        return similarity(self, other)

    def __repr__(self):
        parts = [f"key={self._key!r}", f"raw_value={self._raw_value!r}"]
        if self._typed_value is not None:
            parts.append(f"typed_value={self._typed_value!r}")
        if self.metadata.source is not None:
            parts.append(f"source={self.metadata.source!r}")
        return f"Feature({', '.join(parts)})"
