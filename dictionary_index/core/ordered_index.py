# ordered_index.py
# Unbalanced binary search tree over normalized words.
# Nodes live in an index-based arena (parallel lists) instead of linked objects:
# - no per-node objects, clear() drops the whole tree at once
# - every walk uses an explicit stack, so a linear-depth tree (pre-sorted
#   input file) cannot exhaust the interpreter's recursion limit
# Sorted order falls out of the in-order traversal; no rebalancing is done.

from __future__ import annotations

from typing import Iterable, Iterator, List

from dictionary_index.core.protocols import DEFAULT_SUGGESTION_LIMIT, InsertOutcome
from dictionary_index.utils.normalizer import normalize_word, require_word

_NIL = -1  # "no child"


class OrderedIndex:
    """
    BST word index used by the SpellChecker for:
     - exact lookup (O(log n) on average, O(n) for sorted input)
     - alphabetical listing and full-rewrite persistence
     - prefix suggestions that come out already sorted
    """

    __slots__ = ("_words", "_left", "_right", "_root")

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._words: List[str] = []
        self._left: List[int] = []
        self._right: List[int] = []
        self._root = _NIL
        self.insert_many(words)

    # insertion -----------------------------------------------------
    def _new_node(self, word: str) -> int:
        self._words.append(word)
        self._left.append(_NIL)
        self._right.append(_NIL)
        return len(self._words) - 1

    def insert(self, word: str) -> InsertOutcome:
        """
        Insert a word as a new leaf.
        Equal words are left alone and reported as ALREADY_EXISTS.
        Raises InvalidWordError for blank input.
        """
        w = require_word(word)
        if self._root == _NIL:
            self._root = self._new_node(w)
            return InsertOutcome.INSERTED

        i = self._root
        while True:
            cur = self._words[i]
            if w == cur:
                return InsertOutcome.ALREADY_EXISTS
            if w < cur:
                nxt = self._left[i]
                if nxt == _NIL:
                    self._left[i] = self._new_node(w)
                    return InsertOutcome.INSERTED
            else:
                nxt = self._right[i]
                if nxt == _NIL:
                    self._right[i] = self._new_node(w)
                    return InsertOutcome.INSERTED
            i = nxt

    def insert_many(self, words: Iterable[str]) -> int:
        """Bulk insert, returns how many words were new."""
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
        i = self._root
        while i != _NIL:
            cur = self._words[i]
            if w == cur:
                return True
            i = self._left[i] if w < cur else self._right[i]
        return False

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    # traversal ---------------------------------------------------------
    def _inorder(self) -> Iterator[str]:
        """Left, self, right with an explicit stack."""
        stack: List[int] = []
        i = self._root
        while stack or i != _NIL:
            while i != _NIL:
                stack.append(i)
                i = self._left[i]
            i = stack.pop()
            yield self._words[i]
            i = self._right[i]

    def __iter__(self) -> Iterator[str]:
        return self._inorder()

    def to_sorted_sequence(self) -> List[str]:
        return list(self._inorder())

    def first_n(self, limit: int = DEFAULT_SUGGESTION_LIMIT) -> List[str]:
        out: List[str] = []
        if limit <= 0:
            return out
        for w in self._inorder():
            out.append(w)
            if len(out) >= limit:
                break
        return out

    def prefix_suggestions(
        self, prefix: str, limit: int = DEFAULT_SUGGESTION_LIMIT
    ) -> List[str]:
        """
        Words starting with `prefix`, alphabetically, at most `limit`.
        Matches form one contiguous run of the in-order sequence, so the walk
        skips left subtrees below the prefix and stops after the run ends.
        """
        p = normalize_word(prefix)
        out: List[str] = []
        if limit <= 0:
            return out

        stack: List[int] = []
        i = self._root
        while stack or i != _NIL:
            while i != _NIL:
                stack.append(i)
                # everything left of a node smaller than the prefix is smaller too
                i = self._left[i] if self._words[i] >= p else _NIL
            i = stack.pop()
            w = self._words[i]
            if w.startswith(p):
                out.append(w)
                if len(out) >= limit:
                    break
            elif w > p:
                break
            i = self._right[i]
        return out

    # convenience/debugging -----------------------------------------------------
    def __len__(self) -> int:
        return len(self._words)

    def height(self) -> int:
        """Longest root-to-leaf path in nodes (0 when empty)."""
        if self._root == _NIL:
            return 0
        best = 0
        stack = [(self._root, 1)]
        while stack:
            i, depth = stack.pop()
            if depth > best:
                best = depth
            for child in (self._left[i], self._right[i]):
                if child != _NIL:
                    stack.append((child, depth + 1))
        return best

    def clear(self) -> None:
        """Release every node in one go."""
        self._words = []
        self._left = []
        self._right = []
        self._root = _NIL

    def __repr__(self) -> str:
        return f"OrderedIndex(size={len(self)}, height={self.height()})"
