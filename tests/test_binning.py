import math

import numpy as np
import pytest

from matstats.binning import bin_means


def test_left_closed_bins_take_lower_boundary():
    means, counts = bin_means([10.0, 20.0, 30.0], [1.0, 2.0, 3.0], [1.0, 2.0, 3.0])
    assert means.tolist() == [10.0, 20.0]
    assert counts.tolist() == [1, 1]


def test_right_closed_bins_take_upper_boundary():
    means, counts = bin_means(
        [10.0, 20.0, 30.0], [1.0, 2.0, 3.0], [1.0, 2.0, 3.0], right=True
    )
    assert means.tolist() == [20.0, 30.0]
    assert counts.tolist() == [1, 1]


def test_without_count_returns_means_only():
    result = bin_means([10.0, 20.0, 30.0], [1.0, 2.0, 3.0], [1.0, 2.0, 3.0], count=False)
    assert isinstance(result, np.ndarray)
    assert result.tolist() == [10.0, 20.0]


def test_empty_bins_are_nan_with_zero_count():
    means, counts = bin_means([5.0, 7.0], [0.5, 0.6], [0.0, 1.0, 2.0, 3.0])
    assert means[0] == pytest.approx(np.mean([5.0, 7.0]))
    assert math.isnan(means[1]) and math.isnan(means[2])
    assert counts.tolist() == [2, 0, 0]


def test_means_match_members_and_counts_cover_in_range_points():
    rng = np.random.default_rng(1)
    x = np.sort(rng.uniform(0, 10, 200))
    y = rng.normal(size=200)
    bx = np.linspace(0, 10, 6)
    means, counts = bin_means(y, x, bx)
    assert counts.sum() == np.sum((x >= bx[0]) & (x < bx[-1]))
    for k in range(5):
        members = y[(x >= bx[k]) & (x < bx[k + 1])]
        assert counts[k] == members.size
        assert means[k] == pytest.approx(members.mean())


def test_points_outside_all_bins_are_ignored():
    means, counts = bin_means([1.0, 2.0, 3.0], [-5.0, 0.5, 50.0], [0.0, 1.0])
    assert counts.tolist() == [1]
    assert means.tolist() == [2.0]


def test_integer_inputs_are_accepted():
    means, counts = bin_means([1, 3], [0, 0], [0, 1])
    assert counts.tolist() == [2]
    assert means[0] == pytest.approx(2.0)


def test_too_few_boundaries():
    with pytest.raises(ValueError):
        bin_means([1.0], [1.0], [1.0])


def test_length_mismatch():
    with pytest.raises(ValueError):
        bin_means([1.0, 2.0], [1.0], [0.0, 2.0])


def test_logical_refused():
    with pytest.raises(TypeError):
        bin_means([True], [1.0], [0.0, 2.0])


def test_bad_flag():
    with pytest.raises(ValueError):
        bin_means([1.0], [1.0], [0.0, 2.0], right=2)