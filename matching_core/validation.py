# FILE: matching_core/validation.py
from __future__ import annotations
from itertools import permutations
from typing import Iterable, Optional, Sequence, Tuple
import numpy as np


def is_valid_matching(assignment: Sequence[Tuple[int, int]], n_rows: int, n_cols: int) -> bool:
    """Exactly one pair per row 0..n-1, in range, no column used twice."""
    if len(assignment) != n_rows:
        return False
    rows = [r for r, _ in assignment]
    cols = [c for _, c in assignment]
    if sorted(rows) != list(range(n_rows)):
        return False
    if any(c < 0 or c >= n_cols for c in cols):
        return False
    return len(set(cols)) == len(cols)


def total_cost(matrix, assignment: Iterable[Tuple[int, int]]) -> int:
    t = np.asarray(matrix)
    return int(sum(int(t[r, c]) for r, c in assignment))


def brute_force_min_cost(matrix) -> Optional[int]:
    """
    Minimum total over every injective row -> column choice.
    Exponential; meant for checking small matrices only.
    """
    t = np.asarray(matrix)
    n, m = t.shape
    if n > m:
        return None
    best = None
    for cols in permutations(range(m), n):
        s = sum(int(t[i, j]) for i, j in enumerate(cols))
        if best is None or s < best:
            best = s
    return best


def run_self_test():
    """
    Run a basic suite of self-tests.
    """
    results = {"tests": []}
    from matching_core.hungarian import match
    from matching_core.io import random_matrix
    from matching_core.zeroset import IndexedZeroSet

    matrix = [[4, 1, 3], [2, 0, 5], [3, 2, 2]]
    res = match(matrix)
    results["tests"].append(("3x3 full matching", is_valid_matching(res.assignment, 3, 3)))
    results["tests"].append(("3x3 optimal", res.total_cost == brute_force_min_cost(matrix)))

    rect = random_matrix(4, 6, rng=np.random.default_rng(7))
    res = match(rect)
    results["tests"].append(("4x6 optimal", res.total_cost == brute_force_min_cost(rect)))

    zs = IndexedZeroSet(130)
    for i in (3, 64, 129):
        zs.add(i)
    zs.remove(64)
    results["tests"].append(("Zero set any()", zs.any() in (3, 129)))
    return results
