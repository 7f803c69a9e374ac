# errors.py - exception hierarchy for the dictionary index

from __future__ import annotations


class DictionaryError(Exception):
    """Base class for every error raised by dictionary_index."""


class InvalidWordError(DictionaryError, ValueError):
    """Raised when input normalizes to an empty word."""

    def __init__(self, raw: str):
        super().__init__(f"not a dictionary word: {raw!r}")
        self.raw = raw


class PersistenceError(DictionaryError):
    """The backing word file could not be written."""

    def __init__(self, path, cause: OSError):
        super().__init__(f"could not write {path}: {cause}")
        self.path = path
        self.cause = cause


class ConfigError(DictionaryError):
    """Bad configuration key or value."""
