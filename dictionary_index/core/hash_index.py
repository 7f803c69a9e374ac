# hash_index.py
# Separate-chaining hash table over normalized words.
# Two variants:
# - resizing (default): FNV-1a, power-of-two capacity starting at 1024,
#   doubles once the load factor would pass 0.75
# - fixed: polynomial hash (h*31 + c) mod 10007, never resizes
# Buckets carry no ordering, so anything surfaced alphabetically is sorted
# on the way out.

from __future__ import annotations

import heapq
import logging
from typing import Callable, Dict, Iterable, Iterator, List, Optional

from dictionary_index.core.protocols import DEFAULT_SUGGESTION_LIMIT, InsertOutcome
from dictionary_index.utils.normalizer import normalize_word, require_word

logger = logging.getLogger(__name__)

HashFunc = Callable[[str], int]

HASHMAP_INITIAL_SIZE = 1024
HASHMAP_LOAD_FACTOR = 0.75
FIXED_TABLE_SIZE = 10007  # prime

_FNV_OFFSET = 0x811C9DC5
_FNV_PRIME = 0x01000193


def fnv1a_hash(s: str) -> int:
    """32-bit FNV-1a over the UTF-8 bytes of `s`.

    Lone surrogates (undecodable bytes kept by the loader) are hashed too.
    """
    h = _FNV_OFFSET
    for b in s.encode("utf-8", "surrogatepass"):
        h ^= b
        h = (h * _FNV_PRIME) & 0xFFFFFFFF
    return h


def polynomial_hash(s: str) -> int:
    """h = h*31 + c, reduced mod FIXED_TABLE_SIZE at every step."""
    h = 0
    for ch in s:
        h = (h * 31 + ord(ch)) % FIXED_TABLE_SIZE
    return h


def _next_power_of_two(n: int) -> int:
    p = 1
    while p < n:
        p <<= 1
    return p


class _Entry:
    """One link of a bucket chain."""

    __slots__ = ("word", "next")

    def __init__(self, word: str, nxt: Optional["_Entry"]) -> None:
        self.word = word
        self.next = nxt


class HashIndex:
    """Hash table word index with chaining and optional doubling."""

    def __init__(
        self,
        capacity: int = HASHMAP_INITIAL_SIZE,
        *,
        resize: bool = True,
        load_factor: float = HASHMAP_LOAD_FACTOR,
        hash_func: HashFunc = fnv1a_hash,
        words: Iterable[str] = (),
    ) -> None:
        if not capacity or capacity <= 0:
            capacity = HASHMAP_INITIAL_SIZE
        if not 0.0 < load_factor <= 1.0:
            raise ValueError(f"load_factor must be in (0, 1], got {load_factor}")
        if resize:
            capacity = _next_power_of_two(capacity)
        self._capacity = capacity
        self._resize = resize
        self._load_factor = load_factor
        self._hash = hash_func
        self._buckets: List[Optional[_Entry]] = [None] * capacity
        self._count = 0
        self.insert_many(words)

    @classmethod
    def fixed(cls, words: Iterable[str] = ()) -> "HashIndex":
        """Fixed-size prime table with the polynomial hash, no resizing."""
        return cls(
            FIXED_TABLE_SIZE, resize=False, hash_func=polynomial_hash, words=words
        )

    # internals ---------------------------------------------------------
    def _slot(self, word: str, capacity: Optional[int] = None) -> int:
        return self._hash(word) % (capacity or self._capacity)

    def _find(self, word: str, slot: int) -> bool:
        e = self._buckets[slot]
        while e is not None:
            if e.word == word:
                return True
            e = e.next
        return False

    def _rehash(self, new_capacity: int) -> None:
        """
        Redistribute every entry into a fresh bucket array.
        The old table is only replaced once the new one is complete, so a
        MemoryError part-way through leaves the index as it was.
        """
        fresh: List[Optional[_Entry]] = [None] * new_capacity
        for head in self._buckets:
            e = head
            while e is not None:
                s = self._slot(e.word, new_capacity)
                fresh[s] = _Entry(e.word, fresh[s])
                e = e.next
        logger.debug(
            "hash index resized %d -> %d (%d words)",
            self._capacity,
            new_capacity,
            self._count,
        )
        self._buckets = fresh
        self._capacity = new_capacity

    # insertion -----------------------------------------------------
    def insert(self, word: str) -> InsertOutcome:
        """
        Add a word at the head of its bucket chain.
        Duplicates are found by scanning the whole chain first.
        Raises InvalidWordError for blank input.
        """
        w = require_word(word)
        slot = self._slot(w)
        if self._find(w, slot):
            return InsertOutcome.ALREADY_EXISTS

        if self._resize and self._count + 1 > self._capacity * self._load_factor:
            self._rehash(self._capacity * 2)
            slot = self._slot(w)

        self._buckets[slot] = _Entry(w, self._buckets[slot])
        self._count += 1
        return InsertOutcome.INSERTED

    def insert_many(self, words: Iterable[str]) -> int:
        added = 0
        for w in words:
            if self.insert(w) is InsertOutcome.INSERTED:
                added += 1
        return added

    # lookup ---------------------------------------------------------
    def contains(self, word: str) -> bool:
        w = normalize_word(word)
        if not w:
            return False
        return self._find(w, self._slot(w))

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    # enumeration ---------------------------------------------------------
    def _scan(self) -> Iterator[str]:
        """Every word in bucket/chain order (unspecified)."""
        for head in self._buckets:
            e = head
            while e is not None:
                yield e.word
                e = e.next

    def __iter__(self) -> Iterator[str]:
        return iter(self.to_sorted_sequence())

    def to_sorted_sequence(self) -> List[str]:
        return sorted(self._scan())

    def first_n(self, limit: int = DEFAULT_SUGGESTION_LIMIT) -> List[str]:
        if limit <= 0:
            return []
        return heapq.nsmallest(limit, self._scan())

    def prefix_suggestions(
        self, prefix: str, limit: int = DEFAULT_SUGGESTION_LIMIT
    ) -> List[str]:
        """Filter an unsorted scan, then sort only the matches."""
        if limit <= 0:
            return []
        p = normalize_word(prefix)
        return heapq.nsmallest(limit, (w for w in self._scan() if w.startswith(p)))

    # convenience/debugging -----------------------------------------------------
    def __len__(self) -> int:
        return self._count

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def load_factor(self) -> float:
        return self._count / self._capacity

    def chain_stats(self) -> Dict[str, float]:
        """Bucket usage summary (used buckets, longest chain, load factor)."""
        used = 0
        longest = 0
        for head in self._buckets:
            n = 0
            e = head
            while e is not None:
                n += 1
                e = e.next
            if n:
                used += 1
                longest = max(longest, n)
        return {
            "capacity": self._capacity,
            "count": self._count,
            "used_buckets": used,
            "longest_chain": longest,
            "load_factor": round(self.load_factor, 4),
        }

    def clear(self) -> None:
        self._buckets = [None] * self._capacity
        self._count = 0

    def __repr__(self) -> str:
        return f"HashIndex(size={self._count}, capacity={self._capacity})"
