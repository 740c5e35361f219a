"""
Core data structures for spline interpolation.

This module contains the value types (points, segments, boundary kinds), the
augmented matrix that carries the linear system, and the exception hierarchy
used throughout the PySplineLib library.
"""

from .models import BoundaryKind, Point, Segment, SegmentRange, to_decimal, polynomial_terms, spline_context
from .matrix import AugmentedMatrix
from .validation import validate_points, points_from_arrays, is_monotonic
from .exceptions import (SplineError, UnsupportedBoundaryKindError, MalformedSystemError,
                         SingularSystemError, InsufficientPointsError)

__all__ = [
    "BoundaryKind",
    "Point",
    "Segment",
    "SegmentRange",
    "AugmentedMatrix",
    "to_decimal",
    "polynomial_terms",
    "spline_context",
    "validate_points",
    "points_from_arrays",
    "is_monotonic",
    "SplineError",
    "UnsupportedBoundaryKindError",
    "MalformedSystemError",
    "SingularSystemError",
    "InsufficientPointsError"
]
