import math

import numpy as np
import pytest

from matstats.medians import col_medians, row_medians


@pytest.fixture
def real_matrix():
    rng = np.random.default_rng(7)
    return rng.normal(size=(6, 5))


@pytest.fixture
def int_matrix():
    rng = np.random.default_rng(11)
    return rng.integers(-50, 50, size=(5, 4))


def test_row_medians_match_numpy_for_reals(real_matrix):
    result = row_medians(real_matrix)
    np.testing.assert_allclose(result, np.median(real_matrix, axis=1))


def test_row_medians_match_numpy_for_integers(int_matrix):
    result = row_medians(int_matrix)
    np.testing.assert_allclose(result, np.median(int_matrix, axis=1))


def test_odd_count_picks_middle_value():
    assert row_medians([[3, 1, 2]]).tolist() == [2.0]


def test_col_medians_equal_row_medians_of_transpose(real_matrix):
    np.testing.assert_allclose(col_medians(real_matrix), row_medians(real_matrix.T))


def test_missing_value_gives_nan_without_na_rm():
    x = np.array([[1.0, math.nan, 3.0], [4.0, 5.0, 6.0]])
    result = row_medians(x)
    assert math.isnan(result[0])
    assert result[1] == 5.0


def test_missing_value_removed_with_na_rm():
    x = np.array([[1.0, math.nan, 3.0, 7.0], [4.0, 5.0, 6.0, math.nan]])
    result = row_medians(x, na_rm=True)
    np.testing.assert_allclose(result, np.nanmedian(x, axis=1))


def test_all_missing_gives_nan_with_na_rm():
    x = np.array([[math.nan, math.nan], [1.0, 2.0]])
    result = row_medians(x, na_rm=True)
    assert math.isnan(result[0])
    assert result[1] == 1.5 or result[1] == np.median([1.0, 2.0])


def test_has_na_false_ignores_na_rm(real_matrix):
    result = row_medians(real_matrix, na_rm=True, has_na=False)
    np.testing.assert_allclose(result, np.median(real_matrix, axis=1))


def test_subsetting_matches_submatrix(real_matrix):
    rows = [4, 0, 2]
    cols = [1, 3]
    result = row_medians(real_matrix, rows=rows, cols=cols)
    expected = np.median(real_matrix[np.ix_(rows, cols)], axis=1)
    np.testing.assert_allclose(result, expected)
    col_result = col_medians(real_matrix, rows=rows, cols=cols)
    np.testing.assert_allclose(
        col_result, np.median(real_matrix[np.ix_(rows, cols)], axis=0)
    )


def test_missing_column_index_gives_nan(int_matrix):
    result = row_medians(int_matrix, cols=[0, None])
    assert all(math.isnan(v) for v in result)
    kept = row_medians(int_matrix, cols=[0, None], na_rm=True)
    np.testing.assert_allclose(kept, int_matrix[:, 0].astype(float))


def test_empty_selection_gives_nan(int_matrix):
    result = row_medians(int_matrix, cols=[])
    assert len(result) == int_matrix.shape[0]
    assert all(math.isnan(v) for v in result)


def test_logical_matrix_rejected():
    with pytest.raises(TypeError):
        row_medians([[True, False]])


def test_vector_rejected():
    with pytest.raises(ValueError):
        row_medians([1.0, 2.0])


def test_out_of_range_index_rejected(int_matrix):
    with pytest.raises(IndexError):
        col_medians(int_matrix, cols=[10])