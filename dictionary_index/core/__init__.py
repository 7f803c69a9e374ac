"""
dictionary_index.core

The two word indexes and what sits directly on top of them:
 - OrderedIndex (BST) and HashIndex (separate chaining)
 - the shared WordIndex contract
 - SuggestionEngine (prefix matches, first-N fallback)
 - SpellChecker facade with lazy index loading
 - build/search comparison harness
"""

from .hash_index import HashIndex
from .ordered_index import OrderedIndex
from .protocols import IndexMethod, InsertOutcome, WordIndex
from .spellchecker import AddResult, CheckResult, ListResult, SpellChecker
from .suggestion_engine import SuggestionEngine

__all__ = [
    "HashIndex",
    "OrderedIndex",
    "IndexMethod",
    "InsertOutcome",
    "WordIndex",
    "SpellChecker",
    "CheckResult",
    "AddResult",
    "ListResult",
    "SuggestionEngine",
]
