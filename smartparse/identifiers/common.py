"""Shared base for all feature identifiers."""

from typing import List, Optional

from ..feature import Feature, Source


class Identifier:
    """
    A strategy that either declines a record or converts all of it into features.

    Subclasses set `name` and `source`, and implement `applicable` and
    `extract`. `extract` may still decline (return None) when it finds out
    late that the input is not what `applicable` guessed, e.g. invalid JSON.
    """

    name = "identifier"
    source: Optional[Source] = None

    def applicable(self, text: str) -> bool:
        raise NotImplementedError

    def extract(self, text: str) -> Optional[List[Feature]]:
        raise NotImplementedError

    def identify(self, text: str) -> Optional[List[Feature]]:
        """Return the features found in text, or None if this identifier declines it.

        An empty list is not a decline: the identifier handled the record
        and found nothing.
        """
        if not self.applicable(text):
            return None
        return self.extract(text)

    def __repr__(self):
        return f"{type(self).__name__}()"
