# breaks.py
import numba
import numpy as np

from natbreaks.errors import InvalidArgument


@numba.njit
def _walk_breaks(data, lower_class_limits, n_classes):
    n_data = data.shape[0]
    breaks = np.empty(n_classes + 1)
    # the backtrack never produces the outer bounds, so set them explicitly
    breaks[n_classes] = data[n_data - 1]
    breaks[0] = data[0]

    row = n_data
    col = n_classes
    while col > 1:
        lower_class_limit = lower_class_limits[row, col]
        breaks[col - 1] = data[lower_class_limit - 2]
        row = lower_class_limit - 1
        col -= 1

    return breaks


def extract_breaks(sorted_values, lower_class_limits, n_classes):
    """
    Pull the break values out of the lower class limits table.

    Args:
        sorted_values (np.ndarray): Values sorted ascending, as passed to build_matrices
        lower_class_limits (np.ndarray): Boundary table from build_matrices
        n_classes (int): Number of classes

    Returns:
        np.ndarray: Ascending breaks of length n_classes + 1
    """
    data = np.ascontiguousarray(sorted_values, dtype=np.float64)
    expected_shape = (data.size + 1, n_classes + 1)
    if lower_class_limits.shape != expected_shape:
        raise InvalidArgument(
            f"lower_class_limits has shape {lower_class_limits.shape}, expected {expected_shape}"
        )

    return _walk_breaks(data, lower_class_limits, int(n_classes))
