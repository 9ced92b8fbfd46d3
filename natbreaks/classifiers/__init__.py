from natbreaks.classifiers.natural_breaks import NaturalBreaksClassifier

__all__ = ["NaturalBreaksClassifier"]
