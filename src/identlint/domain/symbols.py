"""Character membership tests built from configured symbol strings."""

from __future__ import annotations

import unicodedata
from collections.abc import Iterable

from pydantic import BaseModel, Field

# Surrogates and control characters cannot appear in a sane identifier.
_UNSAFE_CATEGORIES = frozenset({"Cs", "Cc"})


class SymbolSet(BaseModel):
    """Set of individual characters permitted in an identifier."""

    model_config = {"frozen": True}

    characters: frozenset[str] = Field(default_factory=frozenset)

    @classmethod
    def build(cls, symbols: Iterable[str]) -> SymbolSet:
        """Split every configured string into characters and union them.

        Characters that cannot be represented safely are dropped.
        """
        chars = {
            ch
            for symbol in symbols
            for ch in symbol
            if unicodedata.category(ch) not in _UNSAFE_CATEGORIES
        }
        return cls(characters=frozenset(chars))

    def __contains__(self, char: object) -> bool:
        return char in self.characters

    def __len__(self) -> int:
        return len(self.characters)

    def allows(self, char: str) -> bool:
        return char in self.characters
