"""
Jenks natural breaks core: table construction and backtracking.
"""

from natbreaks.core.matrices import build_matrices
from natbreaks.core.breaks import extract_breaks

__all__ = [
    "build_matrices",
    "extract_breaks",
]
