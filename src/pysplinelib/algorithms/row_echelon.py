import logging
from decimal import Decimal
from typing import List, Optional, Union

from pysplinelib.core.exceptions import SingularSystemError
from pysplinelib.core.matrix import AugmentedMatrix
from pysplinelib.core.models import spline_context, to_decimal
from pysplinelib.data.constants import ErrorMessages, ProcessingConstants

logger = logging.getLogger(__name__)


class RowEchelonSolver:
    """Gauss-Jordan reduction of an augmented matrix to reduced row-echelon form."""

    @staticmethod
    def reduce(matrix: AugmentedMatrix, pivot_tolerance: Optional[Union[Decimal, float, str]] = None,
               precision: Optional[int] = None) -> AugmentedMatrix:
        """
        Reduce the matrix in place and return it.

        Stops early when no usable pivot is left, so a singular system comes back
        only partially reduced. Use solve() to have that detected.
        Args:
            matrix: Augmented matrix, modified in place
            pivot_tolerance: Absolute pivot threshold, None for the scale-relative default
            precision: Significant digits of the decimal context
        Returns:
            AugmentedMatrix: The same matrix object, reduced
        """
        RowEchelonSolver._eliminate(matrix, pivot_tolerance, precision)
        return matrix

    @staticmethod
    def solve(matrix: AugmentedMatrix, strict: bool = True,
              pivot_tolerance: Optional[Union[Decimal, float, str]] = None,
              precision: Optional[int] = None) -> List[Decimal]:
        """
        Reduce the matrix and read the solution vector off its last column.
        Args:
            matrix: Augmented matrix, modified in place
            strict: Raise on rank deficiency instead of returning the column as-is
            pivot_tolerance: Absolute pivot threshold, None for the scale-relative default
            precision: Significant digits of the decimal context
        Returns:
            List[Decimal]: One value per unknown column
        Raises:
            SingularSystemError: If strict and the unknown columns did not reduce to the identity
        """
        unknowns = matrix.column_count - 1
        logger.info("Solving %dx%d system", matrix.row_count, matrix.column_count)
        pivots = RowEchelonSolver._eliminate(matrix, pivot_tolerance, precision)
        if pivots != list(range(unknowns)):
            independent = sum(1 for column in pivots if column < unknowns)
            message = ErrorMessages.SINGULAR_SYSTEM.format(pivots=independent, unknowns=unknowns)
            if matrix.rhs_column in pivots:
                message += " (inconsistent equations)"
            if strict:
                raise SingularSystemError(message, pivots)
            logger.warning("%s; returning the unvalidated solution column", message)
        else:
            logger.debug("System fully reduced with %d pivots", len(pivots))
        return matrix.solution_column()

    @staticmethod
    def rank(matrix: AugmentedMatrix, pivot_tolerance: Optional[Union[Decimal, float, str]] = None,
             precision: Optional[int] = None) -> int:
        """Number of independent pivots among the unknown columns; the matrix is not modified."""
        pivots = RowEchelonSolver._eliminate(matrix.copy(), pivot_tolerance, precision)
        return sum(1 for column in pivots if column < matrix.column_count - 1)

    @staticmethod
    def _eliminate(matrix: AugmentedMatrix, pivot_tolerance, precision) -> List[int]:
        """
        Run the reduction and return the pivot column of each reduced row.

        Every entry carries the largest magnitude that went into computing it.
        Without an explicit pivot_tolerance an entry counts as zero when it is
        below that magnitude shifted past the reliable digits of the context,
        which makes the test independent of the scale of the x-values.
        An explicit pivot_tolerance is an absolute threshold instead.
        """
        precision = precision or ProcessingConstants.DECIMAL_PRECISION
        absolute = None
        relative = None
        if pivot_tolerance is None:
            digits = max(precision - ProcessingConstants.PIVOT_GUARD_DIGITS, precision // 2)
            relative = Decimal(1).scaleb(-digits)
        else:
            absolute = abs(to_decimal(pivot_tolerance, "pivot_tolerance"))
        rows = matrix.rows
        magnitudes: List[List[Decimal]] = []
        row_count = matrix.row_count
        column_count = matrix.column_count

        def negligible(i: int, j: int) -> bool:
            if absolute is not None:
                return abs(rows[i][j]) <= absolute
            return abs(rows[i][j]) <= magnitudes[i][j] * relative

        pivots: List[int] = []
        lead = 0
        with spline_context(precision):
            magnitudes.extend([abs(value) for value in row] for row in rows)
            for r in range(row_count):
                if lead >= column_count:
                    break
                i = r
                while negligible(i, lead):
                    i += 1
                    if i == row_count:
                        i = r
                        lead += 1
                        if lead == column_count:
                            logger.debug("No pivot left after row %d, stopping early", r)
                            return pivots
                rows[i], rows[r] = rows[r], rows[i]
                magnitudes[i], magnitudes[r] = magnitudes[r], magnitudes[i]
                pivot = rows[r][lead]
                rows[r] = [value / pivot for value in rows[r]]
                magnitudes[r] = [m / abs(pivot) for m in magnitudes[r]]
                for k in range(row_count):
                    if k == r:
                        continue
                    factor = rows[k][lead]
                    if factor:
                        rows[k] = [a - factor * b for a, b in zip(rows[k], rows[r])]
                        weight = abs(factor)
                        magnitudes[k] = [max(m, weight * mr) for m, mr in zip(magnitudes[k], magnitudes[r])]
                pivots.append(lead)
                lead += 1
        return pivots
