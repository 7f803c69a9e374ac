# spellchecker.py
"""
SpellChecker - application facade and request context.

Purpose:
 - Own the DictionaryStore and the (lazily built) indexes
 - Build an index from the word file only the first time it is needed
 - Simple public API for CLI/line protocol/tests:
     check(word, method), add(word, method), list_words(method)
 - Apply the configured persistence policy after every successful add

One instance is passed to every request handler instead of keeping
process-wide globals. Not thread safe.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from dictionary_index.core.hash_index import HASHMAP_INITIAL_SIZE, HashIndex
from dictionary_index.core.ordered_index import OrderedIndex
from dictionary_index.core.protocols import (
    DEFAULT_SUGGESTION_LIMIT,
    IndexMethod,
    WordIndex,
)
from dictionary_index.core.suggestion_engine import SuggestionEngine
from dictionary_index.errors import PersistenceError
from dictionary_index.utils.dictionary_store import DictionaryStore, PersistPolicy
from dictionary_index.utils.normalizer import normalize_word

logger = logging.getLogger(__name__)

MSG_ADDED = "Word added successfully"
MSG_EXISTS = "Word already exists"
MSG_REQUIRED = "Word is required"
MSG_NOT_SAVED = "Word added to memory, but failed to save to file"


def _ms_since(t0: float) -> float:
    return (time.perf_counter() - t0) * 1000.0


@dataclass
class CheckResult:
    word: str
    found: bool
    method: str
    elapsed_ms: float
    suggestions: List[str] = field(default_factory=list)


@dataclass
class AddResult:
    word: str
    added: bool
    persisted: bool
    message: str
    method: str
    elapsed_ms: float
    error: Optional[str] = None


@dataclass
class ListResult:
    words: List[str]
    method: str
    elapsed_ms: float

    @property
    def count(self) -> int:
        return len(self.words)


class SpellChecker:
    """Facade exposing check/add/list over one word file and two indexes."""

    def __init__(
        self,
        store: DictionaryStore,
        policy: PersistPolicy | str = PersistPolicy.REWRITE,
        *,
        hash_capacity: int = HASHMAP_INITIAL_SIZE,
        hash_resize: bool = True,
        max_suggestions: int = DEFAULT_SUGGESTION_LIMIT,
    ) -> None:
        self.store = store
        self.policy = PersistPolicy.parse(policy)
        self.hash_capacity = hash_capacity
        self.hash_resize = hash_resize
        self.suggester = SuggestionEngine(max_suggestions)
        self._indexes: Dict[IndexMethod, WordIndex] = {}

    @classmethod
    def from_config(cls, cfg) -> "SpellChecker":
        """Build from a utils.config_manager.Config."""
        return cls(
            DictionaryStore(cfg["dictionary_path"]),
            cfg.persist_policy,
            hash_capacity=cfg["hash_capacity"],
            hash_resize=cfg["hash_resize"],
            max_suggestions=cfg["max_suggestions"],
        )

    # Loading ---------------------------------------------------------
    def new_index(self, method: IndexMethod) -> WordIndex:
        """Empty index of the given kind, sized by this checker's settings."""
        if method is IndexMethod.HASHMAP:
            if self.hash_resize:
                return HashIndex(self.hash_capacity)
            return HashIndex.fixed()
        return OrderedIndex()

    def builders(self) -> Dict[str, Callable[[], WordIndex]]:
        """Index factories keyed by method name, for the comparison benchmark."""
        return {m.value: (lambda m=m: self.new_index(m)) for m in IndexMethod}

    def ensure_loaded(self, method: IndexMethod | str | None = None) -> WordIndex:
        """Return the index for `method`, reading the word file on first use."""
        m = IndexMethod.parse(method)
        idx = self._indexes.get(m)
        if idx is not None:
            return idx

        t0 = time.perf_counter()
        words = self.store.load_all()
        idx = self.new_index(m)
        added = idx.insert_many(words)
        self._indexes[m] = idx
        logger.info(
            "loaded %d words (%d unique) into %s in %.3fms",
            len(words),
            added,
            m.value,
            _ms_since(t0),
        )
        return idx

    def is_loaded(self, method: IndexMethod | str | None = None) -> bool:
        return IndexMethod.parse(method) in self._indexes

    @property
    def warnings(self) -> List[str]:
        return self.store.warnings

    # Public API ---------------------------------------------------------
    def check(self, word: str, method: IndexMethod | str | None = None) -> CheckResult:
        m = IndexMethod.parse(method)
        idx = self.ensure_loaded(m)
        w = normalize_word(word)

        t0 = time.perf_counter()
        found = idx.contains(w)
        elapsed = _ms_since(t0)

        res = CheckResult(word=w, found=found, method=m.value, elapsed_ms=elapsed)
        if not found and w:
            res.suggestions = self.suggester.suggest(idx, w)
        return res

    def add(self, word: str, method: IndexMethod | str | None = None) -> AddResult:
        """
        Insert a new word and persist it with the configured policy.
        A failed write is reported in the result; the word stays in memory.
        """
        m = IndexMethod.parse(method)
        idx = self.ensure_loaded(m)
        w = normalize_word(word)
        if not w:
            return AddResult(w, False, False, MSG_REQUIRED, m.value, 0.0)

        t0 = time.perf_counter()
        if idx.contains(w):
            return AddResult(w, False, False, MSG_EXISTS, m.value, _ms_since(t0))

        # keep every loaded index in step with the file
        for other in self._indexes.values():
            other.insert(w)

        try:
            self._persist(idx, w)
        except PersistenceError as e:
            logger.warning("'%s' kept in memory only: %s", w, e)
            return AddResult(
                w, True, False, MSG_NOT_SAVED, m.value, _ms_since(t0), error=str(e)
            )
        return AddResult(w, True, True, MSG_ADDED, m.value, _ms_since(t0))

    def _persist(self, idx: WordIndex, word: str) -> None:
        if self.policy is PersistPolicy.APPEND:
            self.store.append_one(word)
        else:
            self.store.persist_sorted(idx.to_sorted_sequence())

    def list_words(self, method: IndexMethod | str | None = None) -> ListResult:
        m = IndexMethod.parse(method)
        idx = self.ensure_loaded(m)
        t0 = time.perf_counter()
        words = idx.to_sorted_sequence()
        return ListResult(words=words, method=m.value, elapsed_ms=_ms_since(t0))

    def suggest(self, word: str, method: IndexMethod | str | None = None) -> List[str]:
        return self.suggester.suggest(self.ensure_loaded(method), word)

    def close(self) -> None:
        """Drop every loaded index."""
        for idx in self._indexes.values():
            idx.clear()
        self._indexes.clear()
