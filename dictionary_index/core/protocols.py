# dictionary_index/core/protocols.py
"""
Protocol interfaces shared by the two word indexes.

OrderedIndex (tree) and HashIndex (chained hash table) both satisfy WordIndex,
so the suggestion engine, the SpellChecker context and the benchmark only
depend on this contract and never on a concrete index.
Keep this file stable.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterator, List, Protocol, runtime_checkable
from typing_extensions import NotRequired, TypedDict


DEFAULT_SUGGESTION_LIMIT = 10


class InsertOutcome(Enum):
    """Result of inserting a word. A duplicate is an outcome, not an error."""

    INSERTED = "inserted"
    ALREADY_EXISTS = "already_exists"


class IndexMethod(str, Enum):
    """Names accepted on the CLI and in line-protocol requests."""

    BST = "bst"
    HASHMAP = "hashmap"

    @classmethod
    def parse(cls, value: "str | IndexMethod | None") -> "IndexMethod":
        """Only 'hashmap' selects the hash index; anything else is the tree."""
        if isinstance(value, IndexMethod):
            return value
        if value and value.strip().lower() == cls.HASHMAP.value:
            return cls.HASHMAP
        return cls.BST


# Protocols ------------------------------------------------------------------

@runtime_checkable
class WordIndex(Protocol):
    """Minimal interface both indexes implement."""

    def insert(self, word: str) -> InsertOutcome:
        ...

    def contains(self, word: str) -> bool:
        ...

    def to_sorted_sequence(self) -> List[str]:
        """All words, ascending."""
        ...

    def prefix_suggestions(
        self, prefix: str, limit: int = DEFAULT_SUGGESTION_LIMIT
    ) -> List[str]:
        """Up to `limit` words starting with `prefix`, ascending."""
        ...

    def first_n(self, limit: int = DEFAULT_SUGGESTION_LIMIT) -> List[str]:
        ...

    def clear(self) -> None:
        ...

    def __len__(self) -> int:
        ...

    def __iter__(self) -> Iterator[str]:
        ...


# Typed line-protocol payloads -----------------------------------------------

class CheckResponse(TypedDict):
    found: bool
    word: str
    timeMs: float
    method: str
    suggestions: NotRequired[List[str]]


class AddResponse(TypedDict):
    success: bool
    word: str
    message: str
    timeMs: float


class ListResponse(TypedDict):
    words: List[str]
    count: int
    timeMs: float
