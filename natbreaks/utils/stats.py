import numpy as np
import pandas as pd


def within_class_variance(values):
    """Unnormalised variance of a group: sum of squares minus sum squared over count."""
    values = np.asarray(values, dtype=np.float64)
    if values.size == 0:
        return 0.0
    total = values.sum()
    return float(np.square(values).sum() - (total * total) / values.size)


def classify(values, breaks):
    """
    Assign each value the index of the class it falls into.

    Parameters:
    -----------
    values : array-like or pandas.Series
        Values to classify
    breaks : sequence of float
        Ascending breaks as returned by compute_natural_breaks

    Returns:
    --------
    numpy.ndarray or pandas.Series
        0-based class indices. Class 0 is [breaks[0], breaks[1]] and class i
        is (breaks[i], breaks[i + 1]]; out-of-range values clamp to the
        first or last class. A Series input keeps its index.
    """
    breaks = np.asarray(breaks, dtype=np.float64)
    if breaks.size < 2:
        raise ValueError("At least two breaks are required to define a class")

    data = values.to_numpy(dtype=np.float64) if isinstance(values, pd.Series) else np.asarray(values, dtype=np.float64)

    # interior breaks are inclusive upper bounds of their class
    labels = np.searchsorted(breaks[1:-1], data, side="left")

    if isinstance(values, pd.Series):
        return pd.Series(labels, index=values.index, name=values.name)
    return labels


def class_variances(values, breaks):
    """Within-class variance of every class defined by breaks."""
    data = np.asarray(values, dtype=np.float64)
    labels = np.asarray(classify(data, breaks))
    n_classes = len(breaks) - 1
    return np.array([within_class_variance(data[labels == i]) for i in range(n_classes)])


def goodness_of_variance_fit(values, breaks):
    """
    Goodness of Variance Fit (GVF) of a classification.

    The GVF is the difference between the squared deviations from the array
    mean (SDAM) and the squared deviations from the class means (SDCM),
    divided by the SDAM. 1.0 is a perfect fit.
    """
    data = np.asarray(values, dtype=np.float64)
    sdam = float(np.square(data - data.mean()).sum())
    if sdam == 0.0:
        return 1.0

    sdcm = float(class_variances(data, breaks).sum())
    return (sdam - sdcm) / sdam
