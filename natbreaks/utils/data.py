"""
Data utilities for natbreaks.
"""

import numbers

import numpy as np
import pandas as pd

from natbreaks.errors import InvalidArgument


def prepare_values(values):
    """
    Convert raw values into a sorted float64 array ready for classification.

    Args:
        values (array-like or pd.Series): One-dimensional numeric values

    Returns:
        np.ndarray: Sorted ascending copy of the values

    Raises:
        InvalidArgument: If the values are empty, not one-dimensional,
            not real numbers (strings and booleans included), or contain
            NaN/inf/missing entries
    """
    if not isinstance(values, (pd.Series, np.ndarray)):
        try:
            values = list(values)
        except TypeError as e:
            raise InvalidArgument(f"Values must be a sequence: {e}") from e

    _check_real_entries(values)

    try:
        if isinstance(values, pd.Series):
            data = values.to_numpy(dtype=np.float64, na_value=np.nan)
        else:
            data = np.asarray(values, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidArgument(f"Values must be numeric: {e}") from e

    if data.ndim != 1:
        raise InvalidArgument(f"Values must be one-dimensional, got {data.ndim} dimensions")

    if data.size == 0:
        raise InvalidArgument("At least one value is required")

    if not np.all(np.isfinite(data)):
        bad = int(np.count_nonzero(~np.isfinite(data)))
        raise InvalidArgument(f"Values must be finite, found {bad} NaN or infinite value(s)")

    # np.sort always returns a copy
    return np.sort(data)


def _check_real_entries(values):
    """Reject strings and booleans, which numpy would otherwise coerce to floats."""
    if isinstance(values, pd.Series):
        dtype = values.dtype
        is_object = dtype == object
        is_real = pd.api.types.is_numeric_dtype(dtype) and not pd.api.types.is_bool_dtype(dtype)
    elif isinstance(values, np.ndarray):
        is_object = values.dtype.kind == "O"
        is_real = values.dtype.kind in "iuf"
        values = values.ravel()
    else:
        is_object = True
        is_real = False

    if not (is_object or is_real):
        raise InvalidArgument(f"Values must be real numbers, got dtype {values.dtype}")

    if is_object:
        for value in values:
            if isinstance(value, (str, bytes, bool, np.bool_)):
                raise InvalidArgument(
                    f"Values must be real numbers, got {type(value).__name__} {value!r}"
                )


def check_class_count(n_classes, n_values):
    """
    Validate the requested number of classes.

    Args:
        n_classes (int): Requested number of classes
        n_values (int): Number of values being classified

    Returns:
        int: The class count as a plain int

    Raises:
        InvalidArgument: If n_classes is not an integer or is outside [1, n_values]
    """
    if isinstance(n_classes, bool) or not isinstance(n_classes, numbers.Integral):
        raise InvalidArgument(f"n_classes must be an integer, got {type(n_classes).__name__}")

    n_classes = int(n_classes)
    if n_values == 0:
        raise InvalidArgument("At least one value is required")
    if n_classes < 1 or n_classes > n_values:
        raise InvalidArgument(
            f"n_classes must be between 1 and {n_values} (number of values), got {n_classes}"
        )

    return n_classes
