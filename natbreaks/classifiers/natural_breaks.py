# natbreaks/classifiers/natural_breaks.py
import numpy as np
import pandas as pd

from natbreaks.base.classifier import AbstractClassifier
from natbreaks.jenks import compute_natural_breaks
from natbreaks.utils.data import prepare_values
from natbreaks.utils.stats import classify, class_variances, goodness_of_variance_fit


class NaturalBreaksClassifier(AbstractClassifier):
    """
    Classifier that groups values into Jenks natural breaks classes.

    Fitting stores the breaks, the goodness of variance fit and the class
    counts so legend and scale builders can read them.
    """

    def __init__(self, n_classes=None, verbose=False, settings=None):
        """
        Initialize NaturalBreaksClassifier.

        Args:
            n_classes (int, optional): Number of classes. Defaults to settings.default_classes.
            verbose (bool, optional): Verbose output. Defaults to False.
            settings (Settings, optional): Runtime settings. Defaults to None.
        """
        super().__init__(n_classes=n_classes, verbose=verbose, settings=settings)

        self.breaks_ = None
        self.gvf_ = None
        self.counts_ = None
        self._variances = None

    def fit(self, values):
        data = prepare_values(values)
        self.logger.debug(f"Fitting {self.n_classes} classes on {data.size} values")

        self.breaks_ = compute_natural_breaks(data, self.n_classes)
        labels = classify(data, self.breaks_)
        self.counts_ = np.bincount(labels, minlength=self.n_classes)
        self._variances = class_variances(data, self.breaks_)
        self.gvf_ = goodness_of_variance_fit(data, self.breaks_)

        self.logger.info(f"Natural breaks: {self.breaks_} (GVF {self.gvf_:.4f})")
        return self

    def transform(self, values):
        self._check_fitted()
        return classify(values, self.breaks_)

    def summary(self):
        """
        Describe each fitted class.

        Returns:
            pd.DataFrame: One row per class with lower, upper, count and variance columns
        """
        self._check_fitted()
        return pd.DataFrame({
            "lower": self.breaks_[:-1],
            "upper": self.breaks_[1:],
            "count": self.counts_,
            "variance": self._variances
        }, index=pd.RangeIndex(self.n_classes, name="class"))

    def _check_fitted(self):
        if self.breaks_ is None:
            raise ValueError("Classifier is not fitted. Please run fit first.")
