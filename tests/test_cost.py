import numpy as np
import pytest

from matching_core.cost import INT64_MAX, as_cost_matrix, rebalance, reduce_rows
from matching_core.errors import InvalidMatrix, InvalidShape, InvariantViolation


def test_reduce_rows_example():
    cost = np.array([[4, 1, 3], [2, 0, 5], [3, 2, 2]], dtype=np.int64)
    reduce_rows(cost)
    assert cost.tolist() == [[3, 0, 2], [2, 0, 5], [1, 0, 0]]


def test_reduce_rows_is_idempotent():
    rng = np.random.default_rng(0)
    for _ in range(20):
        cost = rng.integers(-50, 50, size=(4, 7))
        once = reduce_rows(cost.copy())
        twice = reduce_rows(once.copy())
        assert (once == twice).all()
        assert (once.min(axis=1) == 0).all()


def test_rebalance_example():
    cost = np.array([[3, 0, 2], [2, 0, 5], [1, 0, 0]], dtype=np.int64)
    rows = np.array([False, False, True])
    cols = np.array([False, True, False])
    k = rebalance(cost, rows, cols)
    assert k == 2
    assert cost.tolist() == [[1, 0, 0], [0, 0, 3], [1, 2, 0]]


def test_rebalance_without_uncovered_cells():
    cost = np.array([[1, 2], [3, 4]], dtype=np.int64)
    with pytest.raises(InvariantViolation):
        rebalance(cost, np.array([True, True]), np.array([False, False]))


def test_rebalance_with_uncovered_zero_makes_no_progress():
    cost = np.array([[0, 2], [3, 4]], dtype=np.int64)
    with pytest.raises(InvariantViolation):
        rebalance(cost, np.array([False, False]), np.array([False, False]))


def test_rebalance_overflow():
    cost = np.array([[INT64_MAX, 0], [5, 7]], dtype=np.int64)
    with pytest.raises(InvariantViolation):
        rebalance(cost, np.array([True, False]), np.array([False, False]))


def test_as_cost_matrix_copies():
    src = np.array([[1, 2], [3, 4]])
    cost = as_cost_matrix(src)
    cost[0, 0] = 99
    assert src[0, 0] == 1
    assert cost.dtype == np.int64


def test_as_cost_matrix_shapes():
    for bad in ([1, 2, 3], [[1], [2]], [[]], [], [[1, 2], [3]]):
        with pytest.raises(InvalidShape):
            as_cost_matrix(bad)


def test_as_cost_matrix_values():
    assert as_cost_matrix([[True, False]]).tolist() == [[1, 0]]
    assert as_cost_matrix([[2.0, -3.0]]).tolist() == [[2, -3]]
    bad_inputs = [
        [[1.5, 2]],
        [[float("nan"), 1]],
        [["x", "y"]],
        [[10 ** 30, 1]],
        [[None, 1]],
        [[1 + 5j, 2]],  # imaginary part must not be dropped
        np.array([[1, 2]], dtype="timedelta64[s]"),
    ]
    for bad in bad_inputs:
        with pytest.raises(InvalidMatrix):
            as_cost_matrix(bad)


def test_as_cost_matrix_value_range():
    with pytest.raises(InvalidMatrix):
        as_cost_matrix([[INT64_MAX, -INT64_MAX]])
