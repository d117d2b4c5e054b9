import math

import numpy as np
import pytest

from matstats.arithmetic import Operator, x_op_y
from matstats.validation import INT_MAX


@pytest.fixture
def real_matrix():
    return np.array([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])


@pytest.fixture
def int_matrix():
    return np.array([[1, 2, 3], [4, 5, 6]])


def test_add_recycles_down_columns(real_matrix):
    y = np.array([10.0, 20.0])
    result = x_op_y(real_matrix, y, "+")
    np.testing.assert_allclose(result, real_matrix + y[:, None])


def test_add_by_row_recycles_along_rows(real_matrix):
    y = np.array([10.0, 20.0, 30.0])
    result = x_op_y(real_matrix, y, Operator.ADD, by_row=True)
    np.testing.assert_allclose(result, real_matrix + y[None, :])


def test_commute_subtraction_negates(real_matrix):
    y = np.array([0.5, 7.0])
    forward = x_op_y(real_matrix, y, "-")
    backward = x_op_y(real_matrix, y, "-", commute=True)
    np.testing.assert_allclose(backward, -forward)


def test_multiply_matches_broadcast(real_matrix):
    y = np.array([2.0, 3.0])
    np.testing.assert_allclose(x_op_y(real_matrix, y, "*"), real_matrix * y[:, None])


def test_integer_add_keeps_integer_dtype(int_matrix):
    y = np.array([1, 2])
    result = x_op_y(int_matrix, y, "+")
    assert result.dtype.kind == "i"
    np.testing.assert_array_equal(result, int_matrix + y[:, None])


def test_integer_division_is_float(int_matrix):
    result = x_op_y(int_matrix, np.array([2, 2]), "/")
    assert result.dtype.kind == "f"
    np.testing.assert_allclose(result, int_matrix / 2)


def test_division_by_zero_gives_infinity():
    result = x_op_y(np.array([[1.0], [-1.0]]), np.array([0.0]), "/")
    assert result[0, 0] == math.inf
    assert result[1, 0] == -math.inf


def test_subsetting_rows_and_cols(real_matrix):
    y = np.array([100.0])
    result = x_op_y(real_matrix, y, "+", xrows=[1], xcols=[0, 2])
    assert result.shape == (1, 2)
    np.testing.assert_allclose(result, real_matrix[[1]][:, [0, 2]] + 100.0)


def test_na_rm_add_returns_other_operand():
    x = np.array([[math.nan, 1.0]])
    y = np.array([5.0])
    result = x_op_y(x, y, "+", na_rm=True)
    assert result[0, 0] == y[0]
    assert result[0, 1] == 6.0


def test_without_na_rm_missing_propagates():
    x = np.array([[math.nan, 1.0]])
    result = x_op_y(x, np.array([5.0]), "+")
    assert math.isnan(result[0, 0])


def test_na_rm_does_not_apply_to_subtraction():
    x = np.array([[math.nan]])
    result = x_op_y(x, np.array([5.0]), "-", na_rm=True)
    assert math.isnan(result[0, 0])


def test_missing_row_index_on_integer_matrix(int_matrix):
    y = np.array([7])
    plain = x_op_y(int_matrix, y, "+", xrows=[None, 0])
    assert np.isnan(plain[0]).all()
    np.testing.assert_array_equal(plain[1], int_matrix[0] + 7)
    removed = x_op_y(int_matrix, y, "*", xrows=[None], na_rm=True)
    np.testing.assert_array_equal(removed[0], [7, 7, 7])


def test_missing_y_index_gives_nan(real_matrix):
    result = x_op_y(real_matrix, np.array([1.0]), "+", yidxs=[None])
    assert np.isnan(result).all()


def test_integer_overflow_warns_and_is_missing():
    x = np.array([[INT_MAX, 1]])
    with pytest.warns(RuntimeWarning):
        result = x_op_y(x, np.array([1]), "+")
    assert math.isnan(result[0, 0])
    assert result[0, 1] == 2


def test_empty_y_selection_raises(real_matrix):
    with pytest.raises(ValueError):
        x_op_y(real_matrix, np.array([1.0]), "+", yidxs=[])


def test_unknown_operator_raises(real_matrix):
    with pytest.raises(ValueError):
        x_op_y(real_matrix, np.array([1.0]), "%")


def test_non_matrix_x_raises():
    with pytest.raises(ValueError):
        x_op_y(np.array([1.0, 2.0]), np.array([1.0]), "+")


def test_string_y_raises(real_matrix):
    with pytest.raises(TypeError):
        x_op_y(real_matrix, np.array(["a"]), "+")