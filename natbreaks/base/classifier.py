"""
Abstract base class for classifiers.
"""

import logging
from abc import ABC, abstractmethod

from natbreaks.settings import Settings


class AbstractClassifier(ABC):
    """Abstract base class for all classifiers."""

    def __init__(self, n_classes=None, verbose=False, settings=None):
        """
        Initialize the classifier.

        Args:
            n_classes (int, optional): Number of classes. Defaults to settings.default_classes.
            verbose (bool, optional): Verbose output. Defaults to False.
            settings (Settings, optional): Runtime settings. Defaults to Settings().
        """
        self.settings = settings or Settings()
        self.n_classes = n_classes if n_classes is not None else self.settings.default_classes
        self.verbose = verbose

        # Set up logger
        self.logger = self._setup_logger()

    def _setup_logger(self):
        """Set up logger for this classifier."""
        logger = logging.getLogger(f"{self.__class__.__name__}")
        level = logging.DEBUG if self.verbose else self.settings.log_level_value
        logger.setLevel(level)

        if not logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter('%(asctime)s %(levelname)s:%(message)s')
            handler.setFormatter(formatter)
            logger.addHandler(handler)
            logger.propagate = False

        return logger

    @abstractmethod
    def fit(self, values):
        """
        Compute class boundaries for the provided values.

        Args:
            values: Values to classify

        Returns:
            AbstractClassifier: self
        """
        pass

    @abstractmethod
    def transform(self, values):
        """
        Assign class indices using the fitted boundaries.

        Args:
            values: Values to classify

        Returns:
            any: Class indices
        """
        pass

    def fit_transform(self, values):
        """Fit on values, then classify the same values."""
        return self.fit(values).transform(values)
