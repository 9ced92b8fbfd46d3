import numpy as np
import pytest

from natbreaks import InvalidArgument
from natbreaks.core import build_matrices, extract_breaks


def test_table_shapes_and_sentinels(clustered_values):
    values = np.array(clustered_values)
    lower_class_limits, variance_combinations = build_matrices(values, 3)

    assert lower_class_limits.shape == (7, 4)
    assert variance_combinations.shape == (7, 4)
    assert np.issubdtype(lower_class_limits.dtype, np.integer)

    assert not lower_class_limits[0].any()
    assert not lower_class_limits[:, 0].any()
    assert lower_class_limits[1, 1:].tolist() == [1, 1, 1]
    assert lower_class_limits[1:, 1].tolist() == [1] * 6

    assert variance_combinations[1, 1] == 0.0
    # one value cannot be split into two or more classes
    assert np.isinf(variance_combinations[1, 2:]).all()
    assert np.isinf(variance_combinations[2, 3])


def test_single_class_column_is_prefix_variance(clustered_values):
    values = np.array(clustered_values)
    _, variance_combinations = build_matrices(values, 2)

    for length in range(1, len(values) + 1):
        prefix = values[:length]
        expected = np.square(prefix).sum() - prefix.sum() ** 2 / length
        assert variance_combinations[length, 1] == pytest.approx(expected)


def test_boundary_of_clusters(clustered_values):
    lower_class_limits, variance_combinations = build_matrices(np.array(clustered_values), 2)

    # the last class starts at the fourth sorted value
    assert lower_class_limits[6, 2] == 4
    assert variance_combinations[6, 2] == pytest.approx(4.0)


def test_build_rejects_unsorted():
    with pytest.raises(InvalidArgument):
        build_matrices(np.array([3.0, 1.0, 2.0]), 2)


def test_build_rejects_bad_class_count():
    with pytest.raises(InvalidArgument):
        build_matrices(np.array([1.0, 2.0]), 3)
    with pytest.raises(InvalidArgument):
        build_matrices(np.array([1.0, 2.0]), 0)


def test_build_rejects_empty_and_nan():
    with pytest.raises(InvalidArgument):
        build_matrices(np.array([]), 1)
    with pytest.raises(InvalidArgument):
        build_matrices(np.array([1.0, np.nan]), 1)


def test_extract_walks_boundaries(clustered_values):
    values = np.array(clustered_values)
    lower_class_limits, _ = build_matrices(values, 2)

    breaks = extract_breaks(values, lower_class_limits, 2)
    assert breaks.tolist() == [1.0, 3.0, 102.0]


def test_extract_single_class_skips_walk():
    values = np.array([2.0, 4.0, 8.0])
    lower_class_limits, _ = build_matrices(values, 1)
    assert extract_breaks(values, lower_class_limits, 1).tolist() == [2.0, 8.0]


def test_extract_rejects_mismatched_table(clustered_values):
    values = np.array(clustered_values)
    lower_class_limits, _ = build_matrices(values, 2)
    with pytest.raises(InvalidArgument):
        extract_breaks(values, lower_class_limits, 3)
