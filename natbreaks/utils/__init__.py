"""
Utility modules for natbreaks.
"""

from natbreaks.utils.data import prepare_values, check_class_count
from natbreaks.utils.stats import (
    within_class_variance,
    classify,
    class_variances,
    goodness_of_variance_fit
)

__all__ = [
    "prepare_values",
    "check_class_count",
    "within_class_variance",
    "classify",
    "class_variances",
    "goodness_of_variance_fit"
]
