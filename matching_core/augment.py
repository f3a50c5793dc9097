# matching_core/augment.py
from __future__ import annotations
from typing import List

from matching_core.errors import InvariantViolation
from matching_core.marks import Mark, MarkGrid
from matching_core.models import CellPosition


def alternating_path(grid: MarkGrid, prime: CellPosition) -> List[CellPosition]:
    """prime, star in its column, prime in that star's row, ... until a column has no star."""
    path = [prime]
    col = prime.col
    row = grid.star_in_col(col)
    while row is not None:
        path.append(CellPosition(row, col))
        col = grid.prime_in_row(row)
        if col is None:
            raise InvariantViolation(f"starred row {row} on the alternating path has no prime")
        path.append(CellPosition(row, col))
        row = grid.star_in_col(col)
    return path


def augment(grid: MarkGrid, prime: CellPosition) -> List[CellPosition]:
    """
    Flip stars along the alternating path ending at `prime`, then clear all
    primes and covers. The star count grows by exactly one.
    """
    path = alternating_path(grid, prime)
    for row, col in path:
        grid.marks[row, col] = Mark.NONE if grid.marks[row, col] == Mark.STAR else Mark.STAR
    grid.clear_primes()
    grid.reset_covers()
    return path
