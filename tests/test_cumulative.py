import math

import numpy as np
import pytest

from matstats.cumulative import col_cumprods, row_cumprods


@pytest.fixture
def real_matrix():
    return np.array([[1.5, 2.0, -3.0, 0.5], [4.0, -1.0, 2.5, 2.0], [0.0, 3.0, 1.0, 7.0]])


@pytest.fixture
def int_matrix():
    return np.array([[1, 2, 3], [4, -5, 6], [7, 8, 0], [2, 2, 2]])


def test_row_cumprods_real_matches_numpy(real_matrix):
    result = row_cumprods(real_matrix)
    np.testing.assert_allclose(result, np.cumprod(real_matrix, axis=1))


def test_col_cumprods_real_matches_numpy(real_matrix):
    result = col_cumprods(real_matrix)
    np.testing.assert_allclose(result, np.cumprod(real_matrix, axis=0))


def test_integer_result_stays_integer(int_matrix):
    result = row_cumprods(int_matrix)
    assert result.dtype.kind == "i"
    np.testing.assert_array_equal(result, np.cumprod(int_matrix, axis=1))


def test_col_cumprods_integer(int_matrix):
    result = col_cumprods(int_matrix)
    assert result.dtype.kind == "i"
    np.testing.assert_array_equal(result, np.cumprod(int_matrix, axis=0))


def test_subset_rows_and_columns(real_matrix):
    result = row_cumprods(real_matrix, rows=[2, 0], cols=[3, 1])
    expected = np.cumprod(real_matrix[np.ix_([2, 0], [3, 1])], axis=1)
    np.testing.assert_allclose(result, expected)


def test_missing_index_propagates_in_integer_row(int_matrix):
    result = row_cumprods(int_matrix, cols=[0, None, 1])
    assert result.shape == (4, 3)
    np.testing.assert_array_equal(result[:, 0], int_matrix[:, 0])
    assert np.isnan(result[:, 1:]).all()


def test_missing_first_row_makes_whole_integer_column_missing(int_matrix):
    result = col_cumprods(int_matrix, rows=[None, 0, 1])
    assert np.isnan(result).all()


def test_real_nan_propagates():
    x = np.array([[2.0, math.nan, 3.0]])
    result = row_cumprods(x)
    assert result[0, 0] == 2.0
    assert np.isnan(result[0, 1:]).all()


def test_integer_overflow_warns_and_sets_missing():
    big = 2**20
    x = np.array([[big, big, 1]])
    with pytest.warns(RuntimeWarning, match="Integer overflow"):
        result = row_cumprods(x)
    assert result[0, 0] == big
    assert np.isnan(result[0, 1:]).all()


def test_empty_selection_keeps_shape(real_matrix):
    result = row_cumprods(real_matrix, rows=[])
    assert result.shape == (0, 4)
    result = col_cumprods(real_matrix, cols=[])
    assert result.shape == (3, 0)


def test_cumprod_last_column_is_row_product(real_matrix):
    result = row_cumprods(real_matrix)
    np.testing.assert_allclose(result[:, -1], np.prod(real_matrix, axis=1))


def test_logical_rejected():
    with pytest.raises(TypeError):
        row_cumprods(np.array([[True, False]]))


def test_vector_rejected():
    with pytest.raises(ValueError):
        col_cumprods(np.array([1.0, 2.0]))


def test_out_of_range_index_rejected(real_matrix):
    with pytest.raises(IndexError):
        row_cumprods(real_matrix, rows=[5])