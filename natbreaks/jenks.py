"""
Jenks natural breaks classification.

See:

- https://en.wikipedia.org/wiki/Jenks_natural_breaks_optimization
- https://www.macwright.org/2013/02/18/literate-jenks.html
"""

import logging

from natbreaks.core.matrices import build_matrices
from natbreaks.core.breaks import extract_breaks
from natbreaks.utils.data import prepare_values, check_class_count

logger = logging.getLogger(__name__)


def jenks_matrices(values, n_classes):
    """
    Compute the Jenks tables for unsorted values.

    Args:
        values (array-like): Values to classify, in any order
        n_classes (int): Number of classes

    Returns:
        tuple: (lower_class_limits, variance_combinations) over the sorted values
    """
    data = prepare_values(values)
    n_classes = check_class_count(n_classes, data.size)
    return build_matrices(data, n_classes)


def compute_natural_breaks(values, n_classes):
    """
    Find the breakpoints that split values into n_classes natural classes.

    The values are sorted into a private copy, so the caller's sequence is
    left untouched and any permutation of the same values gives the same breaks.

    Args:
        values (array-like or pd.Series): Finite values to classify
        n_classes (int): Number of classes, 1 <= n_classes <= len(values)

    Returns:
        list: n_classes + 1 ascending floats; the first is the minimum and
            the last is the maximum of values

    Raises:
        InvalidArgument: If the values or n_classes are invalid
        NumericOverflow: If the values are too large to accumulate
    """
    data = prepare_values(values)
    n_classes = check_class_count(n_classes, data.size)

    lower_class_limits, _ = build_matrices(data, n_classes)
    breaks = extract_breaks(data, lower_class_limits, n_classes)

    logger.debug(f"Computed {n_classes} natural classes over {data.size} values: {breaks.tolist()}")
    return breaks.tolist()
