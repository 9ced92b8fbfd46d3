"""
Exceptions raised by natbreaks.
"""


class NaturalBreaksError(Exception):
    """Base class for all natbreaks errors."""


class InvalidArgument(NaturalBreaksError, ValueError):
    """
    Raised when the input cannot be classified.

    Covers empty input, non-finite or non-numeric values and a class
    count outside [1, n].
    """


class NumericOverflow(NaturalBreaksError, ArithmeticError):
    """Raised when an accumulated variance is no longer finite."""
