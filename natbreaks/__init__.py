"""
natbreaks: Jenks natural breaks classification for choropleth scales.
"""

__version__ = "1.0.0"

from natbreaks.errors import NaturalBreaksError, InvalidArgument, NumericOverflow
from natbreaks.jenks import compute_natural_breaks, jenks_matrices
from natbreaks.classifiers.natural_breaks import NaturalBreaksClassifier
from natbreaks.utils.stats import classify, goodness_of_variance_fit
from natbreaks.settings import Settings, load_settings

__all__ = [
    "compute_natural_breaks",
    "jenks_matrices",
    "NaturalBreaksClassifier",
    "classify",
    "goodness_of_variance_fit",
    "Settings",
    "load_settings",
    "NaturalBreaksError",
    "InvalidArgument",
    "NumericOverflow"
]
