"""
dictionary_index

Spell-checking over a plain newline-delimited word list, backed by either
an unbalanced binary search tree (OrderedIndex) or a chained hash table
(HashIndex) behind one contract.
"""

from dictionary_index.core.hash_index import HashIndex
from dictionary_index.core.ordered_index import OrderedIndex
from dictionary_index.core.protocols import IndexMethod, InsertOutcome, WordIndex
from dictionary_index.core.spellchecker import SpellChecker
from dictionary_index.core.suggestion_engine import SuggestionEngine
from dictionary_index.errors import (
    ConfigError,
    DictionaryError,
    InvalidWordError,
    PersistenceError,
)
from dictionary_index.utils.dictionary_store import DictionaryStore, PersistPolicy
from dictionary_index.utils.normalizer import normalize_word

__all__ = [
    "HashIndex",
    "OrderedIndex",
    "IndexMethod",
    "InsertOutcome",
    "WordIndex",
    "SpellChecker",
    "SuggestionEngine",
    "DictionaryStore",
    "PersistPolicy",
    "normalize_word",
    "DictionaryError",
    "InvalidWordError",
    "PersistenceError",
    "ConfigError",
]

__version__ = "0.1.0"
