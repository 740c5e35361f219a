import logging
from decimal import Decimal
from typing import List, Optional, Sequence, Union

import numpy as np

from pysplinelib.algorithms.matrix_builder import MatrixBuilder
from pysplinelib.algorithms.row_echelon import RowEchelonSolver
from pysplinelib.core.models import BoundaryKind, Number, Point, Segment, SegmentRange, to_decimal
from pysplinelib.core.validation import validate_points
from pysplinelib.data.constants import ProcessingConstants

logger = logging.getLogger(__name__)


def interpolate(points: Sequence[Union[Point, Sequence]], boundary: Union[BoundaryKind, str],
                precision: Optional[int] = None,
                pivot_tolerance: Optional[Union[Decimal, float, str]] = None,
                strict: bool = True) -> List[Segment]:
    """
    Fit a cubic spline through the points.
    Args:
        points: Ordered points or (x, y) pairs, at least two
        boundary: Boundary kind closing the system
        precision: Significant digits of the decimal context
        pivot_tolerance: Absolute pivot threshold, None for the scale-relative default
        strict: Raise SingularSystemError when the system is rank deficient
    Returns:
        List[Segment]: One segment per consecutive pair of points, in input order
    Examples:
        >>> segments = interpolate([(1, 10), (2, 15), (3, 12)], BoundaryKind.NATURAL)
        >>> value = evaluate(segments, 2.5)
    """
    points = validate_points(points)
    boundary = BoundaryKind.from_value(boundary)
    logger.info("Interpolating %d points with %s boundary", len(points), boundary.value)
    matrix = MatrixBuilder.build(points, boundary, precision=precision)
    solution = RowEchelonSolver.solve(matrix, strict=strict, pivot_tolerance=pivot_tolerance, precision=precision)
    segments = extract_segments(solution, points, precision=precision)
    logger.info("Created spline with %d segments over [%s, %s]",
                len(segments), points[0].x, points[-1].x)
    return segments


def extract_segments(solution: Sequence[Decimal], points: Sequence[Point],
                     precision: Optional[int] = None) -> List[Segment]:
    """Group the solution vector into (a, b, c, d) per segment with its range and solver precision."""
    per_segment = ProcessingConstants.COEFFICIENTS_PER_SEGMENT
    expected = (len(points) - 1) * per_segment
    if len(solution) != expected:
        raise ValueError(f"Solution has {len(solution)} values, expected {expected} for {len(points)} points")
    segments = []
    for start in range(0, len(solution), per_segment):
        index = start // per_segment
        a, b, c, d = solution[start:start + per_segment]
        segment_range = SegmentRange(points[index].x, points[index + 1].x)
        segments.append(Segment(a, b, c, d, segment_range, precision))
        logger.debug("Segment %d on [%s, %s]: a=%s, b=%s, c=%s, d=%s",
                     index, segment_range.x_min, segment_range.x_max, a, b, c, d)
    return segments


def find_segment(segments: Sequence[Segment], x: Number) -> Optional[Segment]:
    """First segment whose range contains x, or None."""
    x = to_decimal(x, "x")
    for segment in segments:
        if segment.range.contains(x):
            return segment
    return None


def evaluate(segments: Sequence[Segment], x: Number) -> Optional[Decimal]:
    """
    Evaluate the spline at x.

    Returns None when x lies outside every segment range; extrapolation is left
    to the caller.
    """
    return evaluate_derivative(segments, x, order=0)


def evaluate_derivative(segments: Sequence[Segment], x: Number, order: int = 1) -> Optional[Decimal]:
    """Evaluate the derivative of the given order (0 to 3) at x, or None outside all ranges."""
    segment = find_segment(segments, x)
    if segment is None:
        logger.debug("x=%s outside all %d segment ranges", x, len(segments))
        return None
    return segment.derivative(x, order)


def evaluate_array(segments: Sequence[Segment], xs) -> np.ndarray:
    """Evaluate at many abscissas; NaN where no segment contains the value."""
    xs = np.asarray(xs, dtype=np.float64)
    result = np.full(xs.shape, np.nan, dtype=np.float64)
    for index, x in np.ndenumerate(xs):
        value = evaluate(segments, float(x))
        if value is not None:
            result[index] = float(value)
    return result
