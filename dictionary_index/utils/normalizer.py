# dictionary_index/utils/normalizer.py

from __future__ import annotations

from typing import Optional

from dictionary_index.errors import InvalidWordError

_ASCII_UPPER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def normalize_word(s: Optional[str]) -> str:
    """Trim surrounding whitespace and fold ASCII letters to lowercase.

    Non-ASCII characters are left alone. Returns "" for None/blank input.
    """
    if not s:
        return ""
    return s.strip().translate(_ASCII_UPPER)


def require_word(s: Optional[str]) -> str:
    """Like normalize_word() but rejects input that normalizes to nothing."""
    w = normalize_word(s)
    if not w:
        raise InvalidWordError(s or "")
    return w
