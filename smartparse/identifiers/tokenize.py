"""
Whitespace tokenizer: the fallback identifier.

Every record can be tokenized, so this identifier never declines.
Tokens carry no key; deriving keys from token content (e.g. "k=v") is
left to later stages.

Whitespace is Unicode White_Space. The ASCII separators 0x1C-0x1F, which
str.split() also breaks on, stay inside tokens.
"""

import re
from typing import Any, List

from ..feature import Feature, Source
from .common import Identifier

TOKEN_RE = re.compile(
    r"[^\t\n\x0b\x0c\r \x85\xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000]+"
)


class FeatureTransform:
    """Turns a token into a keyless Feature with its type left unresolved."""

    def __call__(self, token: str) -> Feature:
        return Feature("", token).source(Source.TOKENIZE)


class IdentityTransform:
    """Returns the token unchanged."""

    def __call__(self, token: str) -> str:
        return token


class TokenizeIdentifier(Identifier):
    """Splits a record on runs of whitespace, one output per token."""

    name = "tokenize"
    source = Source.TOKENIZE

    def __init__(self, transform=None):
        self.transform = transform if transform is not None else FeatureTransform()

    def applicable(self, text: str) -> bool:
        return True

    def tokenize(self, text: str) -> List[Any]:
        return [self.transform(token) for token in TOKEN_RE.findall(text)]

    def extract(self, text: str) -> List[Feature]:
        return self.tokenize(text)

    @classmethod
    def tokens(cls, text: str) -> List[str]:
        """The raw tokens of text, without building features."""
        return cls(IdentityTransform()).tokenize(text)
