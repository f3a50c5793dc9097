# FILE: matching_core/hungarian.py
"""
O(n^3) Hungarian / Kuhn-Munkres implementation for rectangular integer cost matrices.

- Minimizes total cost.
- Accepts n x m matrices with 1 <= n <= m; every row gets a distinct column.
- Works on a private copy; the caller's matrix is never modified.
- When several optimal matchings exist, which one is returned is unspecified.
"""
from __future__ import annotations
import logging
from typing import List, Optional, Tuple
import numpy as np

from matching_core.augment import augment
from matching_core.cost import as_cost_matrix, rebalance, reduce_rows
from matching_core.errors import InvariantViolation
from matching_core.marks import MarkGrid
from matching_core.models import CellPosition, MatchResult, SolverConfig
from matching_core.search import find_prime
from matching_core.validation import is_valid_matching

logger = logging.getLogger(__name__)


def _run(cost: np.ndarray, config: SolverConfig) -> Tuple[List[CellPosition], int, int]:
    n, m = cost.shape

    # Step 1: row reduction
    reduce_rows(cost)

    # Step 2: greedy stars
    grid = MarkGrid.for_matrix(cost)
    seeded = grid.star_zeros(cost)
    logger.debug("%dx%d: %d initial stars", n, m, seeded)

    phases = 0
    rebalances = 0

    while not grid.is_done():
        stars_before = grid.star_count()
        prime = find_prime(cost, grid)
        while prime is None:
            # Step 6: adjust matrix, retry with covers and primes kept
            rebalance(cost, grid.row_covered, grid.col_covered)
            rebalances += 1
            prime = find_prime(cost, grid)

        path = augment(grid, prime)
        phases += 1
        logger.debug("phase %d: augmenting path of %d cells from %s", phases, len(path), tuple(prime))

        if config.check_invariants and grid.star_count() != stars_before + 1:
            raise InvariantViolation(
                f"augmentation changed star count from {stars_before} to {grid.star_count()}"
            )

    assignment = grid.starred_positions()
    if config.check_invariants and not is_valid_matching(assignment, n, m):
        raise InvariantViolation(f"final stars are not a valid matching: {assignment}")
    return assignment, phases, rebalances


def solve(matrix, config: Optional[SolverConfig] = None) -> List[CellPosition]:
    """Optimal assignment as one (row, col) per row, in row order."""
    return match(matrix, config).assignment


def match(matrix, config: Optional[SolverConfig] = None) -> MatchResult:
    """Solve and report the total cost against the original weights."""
    config = config or SolverConfig()
    cost = as_cost_matrix(matrix)
    original = cost.copy()

    assignment, phases, rebalances = _run(cost, config)
    total = int(sum(int(original[r, c]) for r, c in assignment))
    logger.info(
        "matched %dx%d: total cost %d after %d phase(s), %d rebalance(s)",
        original.shape[0], original.shape[1], total, phases, rebalances,
    )
    return MatchResult(assignment=assignment, total_cost=total, phases=phases, rebalances=rebalances)


def hungarian(cost_matrix) -> List[int]:
    """assign[row] = col chosen for that row."""
    return match(cost_matrix).columns()
