import logging
from decimal import Decimal
from typing import Sequence

import sympy as sp

from pysplinelib.core.models import Segment
from pysplinelib.data.constants import ProcessingConstants

logger = logging.getLogger(__name__)


class PiecewiseBuilder:
    """Converts fitted segments into a symbolic piecewise function."""

    @staticmethod
    def build_from_segments(segments: Sequence[Segment], x: sp.Symbol) -> sp.Piecewise:
        """
        Create a SymPy Piecewise equivalent to evaluate().
        Args:
            segments: Fitted segments in input order
            x: Symbol of the abscissa
        Returns:
            sp.Piecewise: One (cubic, x_min <= x <= x_max) pair per segment, NaN outside all ranges
        """
        if not segments:
            logger.error("No segments provided for piecewise conversion")
            raise ValueError("At least one segment is required to build a piecewise function")
        logger.info("Building piecewise function from %d segments", len(segments))
        conditions = []
        for i, segment in enumerate(segments):
            digits = segment.precision or ProcessingConstants.DECIMAL_PRECISION
            a, b, c, d = (PiecewiseBuilder._to_sympy(v, digits) for v in segment.coefficients)
            expr = a * x ** 3 + b * x ** 2 + c * x + d
            x_min = PiecewiseBuilder._to_sympy(segment.range.x_min, digits)
            x_max = PiecewiseBuilder._to_sympy(segment.range.x_max, digits)
            conditions.append((expr, sp.And(x >= x_min, x <= x_max)))
            logger.debug("Segment %d: %s on [%s, %s]", i, expr, x_min, x_max)
        conditions.append((sp.nan, True))
        return sp.Piecewise(*conditions)

    @staticmethod
    def _to_sympy(value: Decimal, digits: int) -> sp.Float:
        return sp.Float(str(value), digits)
