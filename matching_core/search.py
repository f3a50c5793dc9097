# matching_core/search.py
"""
Prime search: find an uncovered zero with no star in its row.

Uncovered zeros are kept in an IndexedZeroSet keyed by row * n_cols + col and
patched incrementally each time a row is covered and a column uncovered,
instead of rescanning the whole matrix.
"""
from __future__ import annotations
from typing import Optional
import numpy as np

from matching_core.marks import Mark, MarkGrid
from matching_core.models import CellPosition
from matching_core.zeroset import IndexedZeroSet


def build_zero_set(cost: np.ndarray, grid: MarkGrid) -> IndexedZeroSet:
    n, m = cost.shape
    zeros = IndexedZeroSet(n * m)
    uncovered = (cost == 0) & ~grid.row_covered[:, None] & ~grid.col_covered[None, :]
    # row-major flattening matches the set's row * m + col keys
    for idx in np.flatnonzero(uncovered):
        zeros.add(int(idx))
    return zeros


def _sync(zeros: IndexedZeroSet, grid: MarkGrid, row: int, col: int) -> None:
    idx = row * grid.n_cols + col
    if grid.is_uncovered(row, col):
        zeros.add(idx)
    else:
        zeros.remove(idx)


def find_prime(cost: np.ndarray, grid: MarkGrid) -> Optional[CellPosition]:
    """
    Prime uncovered zeros until one has no star in its row and return it.

    Every primed zero that does have a star covers its row and uncovers the
    star's column. Returns None when no uncovered zero is left; covers and
    primes are left in place for the caller to rebalance and retry.
    """
    zeros = build_zero_set(cost, grid)
    while True:
        p = zeros.any()
        if p is None:
            return None

        row, col = divmod(p, grid.n_cols)
        grid.marks[row, col] = Mark.PRIME

        star_col = grid.star_in_row(row)
        if star_col is None:
            return CellPosition(row, col)

        grid.row_covered[row] = True
        grid.col_covered[star_col] = False

        for i in np.flatnonzero(cost[:, star_col] == 0):
            if i != row:
                _sync(zeros, grid, int(i), star_col)
        for j in np.flatnonzero(cost[row] == 0):
            if j != star_col:
                _sync(zeros, grid, row, int(j))
        _sync(zeros, grid, row, star_col)
