import math

import numpy as np
import pytest

from viscproc.errors import EmptyMatrixError
from viscproc.reduction import average, decay_weights, reduce_columns
from viscproc.shaping import shape


def test_zero_decay_gives_column_means():
    grid = np.array([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0], [7.0, 8.0, 9.0]])
    cols = reduce_columns(grid, 0.0)
    assert np.allclose(cols, grid.mean(axis=0))


def test_single_cell_grid_ignores_decay():
    g = shape([3.5])
    for d in (0.0, 0.1, 5.0, -2.0):
        assert reduce_columns(g, d).tolist() == [3.5]


def test_decay_weights_row_zero_heaviest():
    w = decay_weights(4, 0.5)
    assert w[0] == 1.0
    assert np.all(np.diff(w) < 0)
    assert math.isclose(w[3], math.exp(-1.5))


def test_negative_decay_favours_later_rows():
    w = decay_weights(3, -1.0)
    assert np.all(np.diff(w) > 0)


def test_reduce_matches_weighted_sum():
    grid = np.array([[2.0, 0.0], [4.0, 1.0]])
    d = 0.1
    cols = reduce_columns(grid, d)
    expected0 = (2.0 + 4.0 * math.exp(-d)) / 2
    expected1 = (0.0 + 1.0 * math.exp(-d)) / 2
    assert math.isclose(cols[0], expected0)
    assert math.isclose(cols[1], expected1)


def test_reduce_empty_matrix_raises():
    with pytest.raises(EmptyMatrixError):
        reduce_columns(np.empty((0, 0)), 0.1)
    with pytest.raises(EmptyMatrixError):
        reduce_columns(np.empty((3, 0)), 0.1)


def test_average():
    assert average([7.25]) == 7.25
    assert average([4.0, 5.0, 6.0]) == 5.0


def test_average_empty_raises():
    with pytest.raises(EmptyMatrixError):
        average([])
    with pytest.raises(ZeroDivisionError):
        average(np.array([]))


def test_reduce_rejects_one_dimensional_input():
    with pytest.raises(EmptyMatrixError, match="2-D"):
        reduce_columns(np.array([1.0, 2.0, 3.0]), 0.1)
