# suggestion_engine.py
# Candidates for a word that failed lookup: prefix matches first, and when
# there are none, the first words of the dictionary so the caller always has
# something to show (unless the dictionary is empty).

from __future__ import annotations

from typing import List

from dictionary_index.core.protocols import DEFAULT_SUGGESTION_LIMIT, WordIndex
from dictionary_index.utils.normalizer import normalize_word


class SuggestionEngine:
    """Stateless; works against either index through WordIndex."""

    def __init__(self, limit: int = DEFAULT_SUGGESTION_LIMIT) -> None:
        self.limit = limit

    def suggest(self, index: WordIndex, query: str, limit: int | None = None) -> List[str]:
        n = self.limit if limit is None else limit
        q = normalize_word(query)
        if q:
            hits = index.prefix_suggestions(q, n)
            if hits:
                return hits
        return index.first_n(n)


def suggest(index: WordIndex, query: str, limit: int = DEFAULT_SUGGESTION_LIMIT) -> List[str]:
    """Module-level shortcut for SuggestionEngine().suggest()."""
    return SuggestionEngine(limit).suggest(index, query)
