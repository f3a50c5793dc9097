# matching_core/zeroset.py
"""
Fixed-capacity integer set used to track the uncovered zero cells of the cost
matrix while searching for a prime.

- Members live in 64-bit words; only non-empty words are chained in a doubly
  linked list (head insertion), so `any()` never scans empty words.
- add / remove / any are O(1) amortized.
- The set does not know about the matrix: callers keep it in sync with the
  cover state themselves.
"""
from __future__ import annotations
from typing import Iterator, List, Optional

WORD_BITS = 64
WORD_MASK = (1 << WORD_BITS) - 1

# (shift, mask) steps of the floored binary logarithm
_LOG2_STEPS = (
    (32, 0xFFFFFFFF00000000),
    (16, 0x00000000FFFF0000),
    (8, 0x000000000000FF00),
    (4, 0x00000000000000F0),
    (2, 0x000000000000000C),
    (1, 0x0000000000000002),
)


def floor_log2(value: int) -> int:
    """Floored binary logarithm of a positive value below 2**64."""
    if value <= 0 or value > WORD_MASK:
        raise ValueError(f"floor_log2 needs 0 < value < 2**64, got {value}")
    rc = 0
    for shift, mask in _LOG2_STEPS:
        if value & mask:
            rc |= shift
            value >>= shift
    return rc


class IndexedZeroSet:
    def __init__(self, capacity: int):
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self.capacity = capacity
        n_words = (capacity >> 6) + (1 if capacity & 63 else 0)
        self._words: List[int] = [0] * n_words
        self._prev: List[Optional[int]] = [None] * n_words
        self._next: List[Optional[int]] = [None] * n_words
        self._first: Optional[int] = None
        self._size = 0

    def _check(self, index: int) -> None:
        if not 0 <= index < self.capacity:
            raise IndexError(f"index {index} outside [0, {self.capacity})")

    def add(self, index: int) -> None:
        self._check(index)
        w = index >> 6
        bit = 1 << (index & 63)
        old = self._words[w]
        if old & bit:
            return
        self._words[w] = old | bit
        self._size += 1
        if not old:
            # word became non-empty: splice in at the head
            if self._first is not None:
                self._prev[self._first] = w
            self._prev[w] = None
            self._next[w] = self._first
            self._first = w

    def remove(self, index: int) -> None:
        self._check(index)
        w = index >> 6
        bit = 1 << (index & 63)
        old = self._words[w]
        if not old & bit:
            return
        self._words[w] = old & ~bit
        self._size -= 1
        if not self._words[w]:
            # word became empty: splice out
            p, n = self._prev[w], self._next[w]
            if p is not None:
                self._next[p] = n
            if n is not None:
                self._prev[n] = p
            if self._first == w:
                self._first = n
            self._prev[w] = None
            self._next[w] = None

    def any(self) -> Optional[int]:
        """Some member, or None when the set is empty. No ordering guarantee."""
        if self._first is None:
            return None
        w = self._first
        word = self._words[w]
        return floor_log2(word & -word) + (w << 6)

    def __contains__(self, index: int) -> bool:
        if not 0 <= index < self.capacity:
            return False
        return bool(self._words[index >> 6] >> (index & 63) & 1)

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._first is not None

    def __iter__(self) -> Iterator[int]:
        w = self._first
        while w is not None:
            word = self._words[w]
            while word:
                low = word & -word
                yield floor_log2(low) + (w << 6)
                word ^= low
            w = self._next[w]

    def __repr__(self) -> str:
        return f"IndexedZeroSet(capacity={self.capacity}, size={self._size})"
