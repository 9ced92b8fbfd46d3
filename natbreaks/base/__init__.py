"""
Base classes for natbreaks.
"""

from natbreaks.base.classifier import AbstractClassifier

__all__ = [
    "AbstractClassifier"
]
