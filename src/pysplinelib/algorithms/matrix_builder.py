import logging
from decimal import Decimal
from typing import Callable, Dict, List, Optional, Sequence, Union

from pysplinelib.core.exceptions import InsufficientPointsError, MalformedSystemError, UnsupportedBoundaryKindError
from pysplinelib.core.matrix import AugmentedMatrix
from pysplinelib.core.models import BoundaryKind, Point, polynomial_terms, spline_context
from pysplinelib.data.constants import ErrorMessages, ProcessingConstants

logger = logging.getLogger(__name__)


def _quadratic_rows(matrix: AugmentedMatrix, points: List[Point], row: int) -> int:
    """First and last segment degenerate to quadratics: a_0 = 0 and a_{S-1} = 0."""
    last = matrix.segment_count - 1
    matrix[row, matrix.segment_column(0, 0)] = Decimal(1)
    matrix[row + 1, matrix.segment_column(last, 0)] = Decimal(1)
    logger.debug("Quadratic boundary rows %d-%d", row, row + 1)
    return row + 2


def _not_a_knot_rows(matrix: AugmentedMatrix, points: List[Point], row: int) -> int:
    """Cubic coefficient continuous across the second and second-to-last knots."""
    last = matrix.segment_count - 1
    matrix[row, matrix.segment_column(0, 0)] = Decimal(1)
    matrix[row, matrix.segment_column(1, 0)] = Decimal(-1)
    matrix[row + 1, matrix.segment_column(last - 1, 0)] = Decimal(1)
    matrix[row + 1, matrix.segment_column(last, 0)] = Decimal(-1)
    logger.debug("Not-a-knot boundary rows %d-%d", row, row + 1)
    return row + 2


def _periodic_rows(matrix: AugmentedMatrix, points: List[Point], row: int) -> int:
    """First and second derivatives equal at the first and the last point."""
    last = matrix.segment_count - 1
    for order in (1, 2):
        matrix.set_segment_terms(row, 0, polynomial_terms(points[0].x, order))
        matrix.set_segment_terms(row, last, polynomial_terms(points[-1].x, order), sign=-1)
        row += 1
    logger.debug("Periodic boundary rows %d-%d", row - 2, row - 1)
    return row


def _natural_rows(matrix: AugmentedMatrix, points: List[Point], row: int) -> int:
    """Zero second derivative at the first and the last knot."""
    last = matrix.segment_count - 1
    matrix.set_segment_terms(row, 0, polynomial_terms(points[0].x, 2))
    matrix.set_segment_terms(row + 1, last, polynomial_terms(points[-1].x, 2))
    logger.debug("Natural boundary rows %d-%d", row, row + 1)
    return row + 2


BoundaryEquations = Callable[[AugmentedMatrix, List[Point], int], int]

_BOUNDARY_EQUATIONS: Dict[BoundaryKind, BoundaryEquations] = {
    BoundaryKind.QUADRATIC: _quadratic_rows,
    BoundaryKind.NOT_A_KNOT: _not_a_knot_rows,
    BoundaryKind.PERIODIC: _periodic_rows,
    BoundaryKind.NATURAL: _natural_rows,
}


class MatrixBuilder:
    """Builds the augmented linear system of a cubic spline."""

    @staticmethod
    def build(points: Sequence[Union[Point, Sequence]], boundary: Union[BoundaryKind, str],
              precision: Optional[int] = None) -> AugmentedMatrix:
        """
        Translate interpolation, continuity and boundary constraints into a matrix.
        Args:
            points: Ordered points, at least two (three for not-a-knot)
            boundary: Boundary kind closing the system
            precision: Significant digits of the decimal context (default from ProcessingConstants)
        Returns:
            AugmentedMatrix: 4(N-1) x (4(N-1) + 1) system, segment i in columns [4i, 4i + 3]
        Raises:
            UnsupportedBoundaryKindError: If boundary is not a known kind
            InsufficientPointsError: If there are too few points for the boundary kind
            MalformedSystemError: If the generated rows do not fill a square system
        """
        boundary = BoundaryKind.from_value(boundary)
        if boundary not in _BOUNDARY_EQUATIONS:
            raise UnsupportedBoundaryKindError(boundary, [kind.value for kind in _BOUNDARY_EQUATIONS])
        points = [Point.from_pair(p) for p in points]
        minimum = (ProcessingConstants.MIN_NOT_A_KNOT_POINTS if boundary is BoundaryKind.NOT_A_KNOT
                   else ProcessingConstants.MIN_DATA_POINTS)
        if len(points) < minimum:
            raise InsufficientPointsError(
                ErrorMessages.INSUFFICIENT_DATA_POINTS.format(count=len(points), min_points=minimum))
        logger.info("Building spline system: %d points, boundary=%s", len(points), boundary.value)
        with spline_context(precision):
            matrix = AugmentedMatrix(len(points) - 1)
            row = MatrixBuilder._add_interpolation_rows(matrix, points, 0)
            row = MatrixBuilder._add_continuity_rows(matrix, points, row, order=1)
            row = MatrixBuilder._add_continuity_rows(matrix, points, row, order=2)
            boundary_start = row
            row = _BOUNDARY_EQUATIONS[boundary](matrix, points, row)
        MatrixBuilder._check_system(matrix, row, row - boundary_start)
        logger.debug("Built %r", matrix)
        return matrix

    @staticmethod
    def _add_interpolation_rows(matrix: AugmentedMatrix, points: List[Point], row: int) -> int:
        """Each segment passes through both of its endpoints."""
        for segment in range(matrix.segment_count):
            for point in (points[segment], points[segment + 1]):
                matrix.set_segment_terms(row, segment, polynomial_terms(point.x, 0))
                matrix.set_rhs(row, point.y)
                row += 1
        logger.debug("Added %d interpolation rows", 2 * matrix.segment_count)
        return row

    @staticmethod
    def _add_continuity_rows(matrix: AugmentedMatrix, points: List[Point], row: int, order: int) -> int:
        """Derivative of the given order matches across every interior knot."""
        for segment in range(matrix.segment_count - 1):
            knot = points[segment + 1].x
            terms = polynomial_terms(knot, order)
            matrix.set_segment_terms(row, segment, terms)
            matrix.set_segment_terms(row, segment + 1, terms, sign=-1)
            row += 1
        logger.debug("Added %d continuity rows of order %d", matrix.segment_count - 1, order)
        return row

    @staticmethod
    def _check_system(matrix: AugmentedMatrix, rows_written: int, boundary_rows: int) -> None:
        if boundary_rows != ProcessingConstants.BOUNDARY_EQUATION_COUNT:
            raise MalformedSystemError(ErrorMessages.MALFORMED_SYSTEM.format(
                rows=matrix.row_count, columns=matrix.column_count,
                detail=f"{boundary_rows} boundary equations, expected {ProcessingConstants.BOUNDARY_EQUATION_COUNT}"))
        if rows_written != matrix.row_count:
            raise MalformedSystemError(ErrorMessages.MALFORMED_SYSTEM.format(
                rows=matrix.row_count, columns=matrix.column_count,
                detail=f"{rows_written} equations generated"))
        if matrix.row_count != matrix.column_count - 1:
            raise MalformedSystemError(ErrorMessages.MALFORMED_SYSTEM.format(
                rows=matrix.row_count, columns=matrix.column_count,
                detail="expected one right-hand side column"))
