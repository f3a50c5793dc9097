# matching_core/marks.py
from __future__ import annotations
from enum import IntEnum
from typing import List, Optional
import numpy as np

from matching_core.models import CellPosition


class Mark(IntEnum):
    NONE = 0
    STAR = 1
    PRIME = 2


class MarkGrid:
    """
    Per-cell marks plus row/column cover flags for one solve.

    Invariant: at most one STAR per row and per column.
    """

    def __init__(self, n_rows: int, n_cols: int):
        self.n_rows = n_rows
        self.n_cols = n_cols
        self.marks = np.zeros((n_rows, n_cols), dtype=np.int8)
        self.row_covered = np.zeros(n_rows, dtype=bool)
        self.col_covered = np.zeros(n_cols, dtype=bool)

    @classmethod
    def for_matrix(cls, cost: np.ndarray) -> "MarkGrid":
        return cls(*cost.shape)

    def star_zeros(self, cost: np.ndarray) -> int:
        """Greedy row-major starring of independent zeros. Returns the number starred."""
        used_cols = np.zeros(self.n_cols, dtype=bool)
        count = 0
        for i in range(self.n_rows):
            for j in np.flatnonzero(cost[i] == 0):
                if not used_cols[j]:
                    self.marks[i, j] = Mark.STAR
                    used_cols[j] = True
                    count += 1
                    break
        return count

    def is_done(self) -> bool:
        """Cover every column holding a star; done when that covers n columns."""
        self.col_covered[:] = (self.marks == Mark.STAR).any(axis=0)
        return int(self.col_covered.sum()) == self.n_rows

    def _first(self, line: np.ndarray, mark: Mark) -> Optional[int]:
        idx = np.flatnonzero(line == mark)
        return int(idx[0]) if idx.size else None

    def star_in_row(self, row: int) -> Optional[int]:
        return self._first(self.marks[row], Mark.STAR)

    def star_in_col(self, col: int) -> Optional[int]:
        return self._first(self.marks[:, col], Mark.STAR)

    def prime_in_row(self, row: int) -> Optional[int]:
        return self._first(self.marks[row], Mark.PRIME)

    def is_uncovered(self, row: int, col: int) -> bool:
        return not self.row_covered[row] and not self.col_covered[col]

    def star_count(self) -> int:
        return int((self.marks == Mark.STAR).sum())

    def clear_primes(self) -> None:
        self.marks[self.marks == Mark.PRIME] = Mark.NONE

    def reset_covers(self) -> None:
        self.row_covered[:] = False
        self.col_covered[:] = False

    def starred_positions(self) -> List[CellPosition]:
        """One position per row holding a star, in row order."""
        out = []
        for i in range(self.n_rows):
            j = self.star_in_row(i)
            if j is not None:
                out.append(CellPosition(i, j))
        return out
