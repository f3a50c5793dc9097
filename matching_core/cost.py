# matching_core/cost.py
from __future__ import annotations
import logging
import numpy as np

from matching_core.errors import InvalidMatrix, InvalidShape, InvariantViolation

logger = logging.getLogger(__name__)

INT64_MAX = int(np.iinfo(np.int64).max)


def as_cost_matrix(matrix) -> np.ndarray:
    """
    Validate `matrix` and return a private int64 copy of it.

    Accepts nested sequences, numpy arrays and DataFrames. Floats are accepted
    only when every value is integral.
    """
    try:
        arr = np.array(matrix)
    except ValueError as e:
        raise InvalidShape("matrix rows must all have the same length") from e

    if arr.ndim != 2:
        raise InvalidShape(f"matrix must be 2-D, got {arr.ndim} dimension(s)")
    n, m = arr.shape
    if n == 0 or m == 0:
        raise InvalidShape(f"matrix must be non-empty, got {n}x{m}")
    if n > m:
        raise InvalidShape(f"matrix must have no more rows than columns, got {n}x{m}")

    kind = arr.dtype.kind
    if kind == "f":
        if not np.isfinite(arr).all():
            raise InvalidMatrix("matrix values must be finite")
        if not (arr == np.floor(arr)).all():
            raise InvalidMatrix("matrix values must be integers")
        if np.abs(arr).max() >= 2.0 ** 63:
            raise InvalidMatrix("matrix values must fit in 64-bit integers")
    elif kind == "u":
        if int(arr.max()) > INT64_MAX:
            raise InvalidMatrix("matrix values must fit in 64-bit integers")
    elif kind == "O":
        try:
            arr = arr.astype(np.int64)
        except (TypeError, ValueError, OverflowError) as e:
            raise InvalidMatrix("matrix values must be 64-bit integers") from e
    elif kind not in "bi":
        raise InvalidMatrix(f"matrix values must be integers, got dtype {arr.dtype}")
    cost = arr.astype(np.int64)

    if int(cost.max()) - int(cost.min()) > INT64_MAX:
        raise InvalidMatrix("matrix value range does not fit in 64-bit integers")
    return cost


def reduce_rows(cost: np.ndarray) -> np.ndarray:
    """Subtract each row's minimum from that row, in place."""
    cost -= cost.min(axis=1, keepdims=True)
    return cost


def rebalance(cost: np.ndarray, row_covered: np.ndarray, col_covered: np.ndarray) -> int:
    """
    Add the smallest uncovered value to covered rows and subtract it from
    uncovered columns, in place. Returns the amount.
    """
    uncovered = ~row_covered[:, None] & ~col_covered[None, :]
    if not uncovered.any():
        raise InvariantViolation("rebalance called with every cell covered")

    k = int(cost[uncovered].min())
    if k <= 0:
        raise InvariantViolation(f"rebalance would not expose a new zero (minimum {k})")
    if row_covered.any() and int(cost[row_covered].max()) > INT64_MAX - k:
        raise InvariantViolation("rebalance overflows 64-bit weights")

    cost[row_covered, :] += k
    cost[:, ~col_covered] -= k
    logger.debug("rebalanced by %d (%d rows, %d cols covered)", k, int(row_covered.sum()), int(col_covered.sum()))
    return k
