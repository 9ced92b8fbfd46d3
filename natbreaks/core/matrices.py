# matrices.py
import logging

import numba
import numpy as np

from natbreaks.errors import InvalidArgument, NumericOverflow
from natbreaks.utils.data import check_class_count

logger = logging.getLogger(__name__)


@numba.njit
def compute_matrices(data, n_classes):
    n_data = data.shape[0]
    # lower_class_limits[l, j]: 1-based start of the j-th class over the first l values
    lower_class_limits = np.zeros((n_data + 1, n_classes + 1), dtype=np.int64)
    # variance_combinations[l, j]: minimal total variance for the first l values in j classes
    variance_combinations = np.zeros((n_data + 1, n_classes + 1))

    for j in range(1, n_classes + 1):
        lower_class_limits[1, j] = 1
        for l in range(2, n_data + 1):
            variance_combinations[l, j] = np.inf
    # a single value cannot fill more than one class
    for j in range(2, n_classes + 1):
        variance_combinations[1, j] = np.inf

    for l in range(2, n_data + 1):
        sum_values = 0.0
        sum_squares = 0.0
        count = 0
        variance = 0.0

        # walk the start of the last class downward from l to 1
        for m in range(1, l + 1):
            lower_class_limit = l - m + 1
            val = data[lower_class_limit - 1]

            count += 1
            sum_values += val
            sum_squares += val * val
            variance = sum_squares - (sum_values * sum_values) / count

            prev = lower_class_limit - 1
            if prev == 0:
                continue

            for j in range(2, n_classes + 1):
                candidate = variance + variance_combinations[prev, j - 1]
                # non-strict: ties move the boundary earlier
                if variance_combinations[l, j] >= candidate:
                    lower_class_limits[l, j] = lower_class_limit
                    variance_combinations[l, j] = candidate

        lower_class_limits[l, 1] = 1
        variance_combinations[l, 1] = variance

    return lower_class_limits, variance_combinations


def check_finite_variances(variance_combinations, n_classes):
    """
    Make sure every reachable cell of the variance table is finite.

    Cells with more classes than values keep their infinite sentinel and are
    not checked.

    Raises:
        NumericOverflow: If any reachable cell is inf or NaN
    """
    rows, cols = np.indices(variance_combinations.shape)
    feasible = (rows >= 1) & (cols >= 1) & (cols <= rows)
    if not np.all(np.isfinite(variance_combinations[feasible])):
        raise NumericOverflow(
            "Accumulated variance overflowed; values are too large in magnitude to classify"
        )


def build_matrices(sorted_values, n_classes):
    """
    Build the lower class limit and variance tables for sorted values.

    Args:
        sorted_values (np.ndarray): Finite values sorted ascending
        n_classes (int): Number of classes, 1 <= n_classes <= len(sorted_values)

    Returns:
        tuple: (lower_class_limits, variance_combinations), both of shape
            (n + 1, n_classes + 1)

    Raises:
        InvalidArgument: If the values are empty, unsorted or non-finite, or
            n_classes is out of range
        NumericOverflow: If the variance accumulation is no longer finite
    """
    data = np.ascontiguousarray(sorted_values, dtype=np.float64)
    if data.ndim != 1 or data.size == 0:
        raise InvalidArgument("Values must be a non-empty one-dimensional sequence")
    if not np.all(np.isfinite(data)):
        raise InvalidArgument("Values must be finite")
    if np.any(data[1:] < data[:-1]):
        raise InvalidArgument("Values must be sorted ascending")

    n_classes = check_class_count(n_classes, data.size)

    logger.debug(f"Building {data.size + 1}x{n_classes + 1} jenks matrices")
    lower_class_limits, variance_combinations = compute_matrices(data, n_classes)
    check_finite_variances(variance_combinations, n_classes)

    return lower_class_limits, variance_combinations
