import logging
from decimal import Decimal
from typing import List, Sequence

import numpy as np

from pysplinelib.data.constants import ProcessingConstants

logger = logging.getLogger(__name__)


class AugmentedMatrix:
    """
    Dense augmented coefficient matrix of the spline system.

    The matrix has R rows and R + 1 columns where R is four times the segment
    count. Segment i owns the unknown columns [4i, 4i + 3] holding (a, b, c, d),
    and the last column holds the right-hand side of each equation.
    """

    def __init__(self, segment_count: int) -> None:
        if segment_count < 1:
            raise ValueError(f"Segment count must be at least 1, got {segment_count}")
        self.segment_count = segment_count
        size = segment_count * ProcessingConstants.COEFFICIENTS_PER_SEGMENT
        self.rows: List[List[Decimal]] = [[Decimal(0)] * (size + 1) for _ in range(size)]
        logger.debug("Allocated %dx%d augmented matrix for %d segments", size, size + 1, segment_count)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence]) -> "AugmentedMatrix":
        """Create a matrix from explicit rows; values are converted to Decimal."""
        if not rows:
            raise ValueError("Matrix needs at least one row")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("All matrix rows must have the same length")
        matrix = cls.__new__(cls)
        matrix.segment_count = len(rows) // ProcessingConstants.COEFFICIENTS_PER_SEGMENT
        matrix.rows = [[v if isinstance(v, Decimal) else Decimal(str(v)) for v in row] for row in rows]
        return matrix

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def column_count(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def rhs_column(self) -> int:
        return self.column_count - 1

    def segment_column(self, segment: int, coefficient_index: int) -> int:
        """Column of coefficient 0..3 (a, b, c, d) of the given segment."""
        per_segment = ProcessingConstants.COEFFICIENTS_PER_SEGMENT
        if not 0 <= coefficient_index < per_segment:
            raise IndexError(f"Coefficient index must be between 0 and {per_segment - 1}, got {coefficient_index}")
        if not 0 <= segment < self.segment_count:
            raise IndexError(f"Segment {segment} out of range for {self.segment_count} segments")
        return segment * per_segment + coefficient_index

    def set_segment_terms(self, row: int, segment: int, terms: Sequence[Decimal], sign: int = 1) -> None:
        """Write the four coefficient multipliers of one segment into a row."""
        for coefficient_index, term in enumerate(terms):
            if term:
                self.rows[row][self.segment_column(segment, coefficient_index)] = sign * term

    def set_rhs(self, row: int, value: Decimal) -> None:
        self.rows[row][self.rhs_column] = value

    def solution_column(self) -> List[Decimal]:
        """Last column, read as the solution vector once the matrix is reduced."""
        return [row[self.rhs_column] for row in self.rows]

    def copy(self) -> "AugmentedMatrix":
        return AugmentedMatrix.from_rows([list(row) for row in self.rows])

    def to_numpy(self) -> np.ndarray:
        """Float view of the matrix, for inspection and plotting only."""
        return np.array([[float(v) for v in row] for row in self.rows], dtype=np.float64)

    def __getitem__(self, index):
        row, column = index
        return self.rows[row][column]

    def __setitem__(self, index, value) -> None:
        row, column = index
        self.rows[row][column] = value

    def __eq__(self, other) -> bool:
        if not isinstance(other, AugmentedMatrix):
            return NotImplemented
        return self.rows == other.rows

    def __repr__(self) -> str:
        return f"AugmentedMatrix({self.row_count}x{self.column_count})"
