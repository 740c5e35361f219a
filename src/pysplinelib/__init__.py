"""
PySplineLib - Cubic spline interpolation through an exact linear-system formulation.

This library fits piecewise cubic polynomials through ordered data points by
writing the interpolation, continuity and boundary constraints into a dense
augmented matrix, reducing it to reduced row-echelon form in decimal
arithmetic, and reading the segment coefficients off the solution column.

Key Features:
- Quadratic, not-a-knot, periodic and natural boundary conditions
- High-precision decimal arithmetic for the coefficients
- Detection of singular systems
- Evaluation of values and derivatives, with absence outside the data range
- Export to SymPy piecewise functions
- YAML configuration with inline or file-based points
- Spline visualization

Main Components:
- Core: Points, segments, boundary kinds, the augmented matrix and exceptions
- Algorithms: Matrix construction, row-echelon solver, interpolation and evaluation
- Parsing: YAML configuration parsing and point file loading
- Visualization: Spline plotting
- Data: Processing constants
"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("pysplinelib")
except PackageNotFoundError:
    __version__ = "0.1.0+unknown"  # Not installed

# Core definitions
from .core.models import BoundaryKind, Point, Segment, SegmentRange
from .core.matrix import AugmentedMatrix
from .core.exceptions import (SplineError, UnsupportedBoundaryKindError, MalformedSystemError,
                              SingularSystemError, InsufficientPointsError)

# Algorithms
from .algorithms.matrix_builder import MatrixBuilder
from .algorithms.row_echelon import RowEchelonSolver
from .algorithms.interpolation import interpolate, evaluate, evaluate_derivative, evaluate_array
from .algorithms.piecewise_builder import PiecewiseBuilder

# Main API functions
from .parsing.api import create_spline, evaluate_queries, get_supported_boundaries, validate_yaml_file

# Visualization
from .visualization.plotters import SplineVisualizer

__all__ = [
    # Version
    '__version__',

    # Core classes
    'BoundaryKind',
    'Point',
    'Segment',
    'SegmentRange',
    'AugmentedMatrix',

    # Exceptions
    'SplineError',
    'UnsupportedBoundaryKindError',
    'MalformedSystemError',
    'SingularSystemError',
    'InsufficientPointsError',

    # Algorithms
    'MatrixBuilder',
    'RowEchelonSolver',
    'interpolate',
    'evaluate',
    'evaluate_derivative',
    'evaluate_array',
    'PiecewiseBuilder',

    # Main API
    'create_spline',
    'evaluate_queries',
    'get_supported_boundaries',
    'validate_yaml_file',

    # Visualization
    'SplineVisualizer'
]
