# dictionary_store.py - persistence layer for the word list

# Moves words between the backing text file and memory:
# - one normalized word per line, newline terminated, no header
# - load keeps file order and duplicates (indexes de-duplicate on insert)
# - two write policies: full sorted rewrite, or append a single line
# No locking: a concurrent external writer racing a load/persist cycle is
# not supported.

from __future__ import annotations

import logging
import os
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Union

from dictionary_index.errors import PersistenceError
from dictionary_index.utils.normalizer import normalize_word, require_word

logger = logging.getLogger(__name__)

# bytes that do not decode are carried as lone surrogates and written back
# unchanged, so a rewrite never alters lines it did not add
_ERRORS = "surrogateescape"

DICT_FILE = "dictionary.txt"

PathLike = Union[str, "os.PathLike[str]"]


class PersistPolicy(str, Enum):
    """How an added word reaches the file."""

    REWRITE = "rewrite"  # sort everything and overwrite
    APPEND = "append"  # one new line at the end

    @classmethod
    def parse(cls, value: "str | PersistPolicy") -> "PersistPolicy":
        if isinstance(value, PersistPolicy):
            return value
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(
                f"unknown persist policy {value!r} (expected 'rewrite' or 'append')"
            ) from None


class DictionaryStore:
    """Reads and writes one newline-delimited word file."""

    def __init__(self, path: PathLike = DICT_FILE, encoding: str = "utf-8") -> None:
        self.path = Path(path)
        self.encoding = encoding
        self.warnings: List[str] = []

    def exists(self) -> bool:
        return self.path.is_file()

    # Loading -------------------------------------------------
    def load_all(self) -> List[str]:
        """
        Return every non-blank line, trimmed and lowercased, in file order.
        A missing file is not fatal: the warning is logged, kept on
        self.warnings for the caller, and an empty list comes back.
        """
        if not self.exists():
            msg = f"could not open dictionary file {self.path}; starting empty"
            logger.warning(msg)
            self.warnings.append(msg)
            return []

        words: List[str] = []
        with open(self.path, "r", encoding=self.encoding, errors=_ERRORS) as f:
            for line in f:
                w = normalize_word(line)
                if w:
                    words.append(w)
        logger.debug("loaded %d words from %s", len(words), self.path)
        return words

    # Writing -------------------------------------------------
    def persist_sorted(self, words: Iterable[str]) -> int:
        """
        Sort `words` and overwrite the file, one word per line.
        Returns the number of records written.
        """
        ordered = sorted(words)
        try:
            with open(
                self.path, "w", encoding=self.encoding, errors=_ERRORS, newline="\n"
            ) as f:
                for w in ordered:
                    f.write(w + "\n")
        except OSError as e:
            logger.error("persist_sorted failed: %s", e)
            raise PersistenceError(self.path, e) from e
        logger.debug("rewrote %s (%d words)", self.path, len(ordered))
        return len(ordered)

    def append_one(self, word: str) -> None:
        """Append a single record without touching the rest of the file."""
        w = require_word(word)
        try:
            with open(
                self.path, "a", encoding=self.encoding, errors=_ERRORS, newline="\n"
            ) as f:
                f.write(w + "\n")
        except OSError as e:
            logger.error("append_one failed: %s", e)
            raise PersistenceError(self.path, e) from e
        logger.debug("appended %r to %s", w, self.path)

    def __repr__(self) -> str:
        return f"DictionaryStore({str(self.path)!r})"
