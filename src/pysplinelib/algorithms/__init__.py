"""
Core computational algorithms for cubic spline interpolation.

This module provides the linear-system builder, the row-echelon solver,
coefficient extraction and evaluation, and conversion of fitted splines into
symbolic piecewise functions.
"""

from .matrix_builder import MatrixBuilder
from .row_echelon import RowEchelonSolver
from .interpolation import (interpolate, extract_segments, find_segment, evaluate,
                            evaluate_derivative, evaluate_array)
from .piecewise_builder import PiecewiseBuilder

__all__ = [
    "MatrixBuilder",
    "RowEchelonSolver",
    "interpolate",
    "extract_segments",
    "find_segment",
    "evaluate",
    "evaluate_derivative",
    "evaluate_array",
    "PiecewiseBuilder"
]
