import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation, localcontext
from enum import Enum
from typing import Iterator, Optional, Tuple, Union

import numpy as np

from pysplinelib.core.exceptions import UnsupportedBoundaryKindError
from pysplinelib.data.constants import ProcessingConstants

logger = logging.getLogger(__name__)

Number = Union[Decimal, int, float, str, np.number]


def to_decimal(value: Number, name: str = "value") -> Decimal:
    """Convert a numeric value to a finite Decimal.

    Floats are converted through their shortest repr so that 1.2695 becomes
    Decimal('1.2695') rather than its binary expansion.
    """
    if isinstance(value, bool):
        raise TypeError(f"{name} must be numeric, got bool")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, np.integer)):
        result = Decimal(int(value))
    elif isinstance(value, (float, np.floating)):
        result = Decimal(repr(float(value)))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation as e:
            raise ValueError(f"{name} is not a number: '{value}'") from e
    else:
        raise TypeError(f"{name} must be numeric, got {type(value).__name__}")
    if not result.is_finite():
        raise ValueError(f"{name} must be finite, got {value}")
    return result


@contextmanager
def spline_context(precision: Optional[int] = None) -> Iterator:
    """Local decimal context with the solver precision."""
    with localcontext() as ctx:
        ctx.prec = precision or ProcessingConstants.DECIMAL_PRECISION
        yield ctx


def polynomial_terms(x: Decimal, order: int = 0) -> Tuple[Decimal, Decimal, Decimal, Decimal]:
    """
    Multipliers of (a, b, c, d) in the given derivative of a*x^3 + b*x^2 + c*x + d.
    Args:
        x: Abscissa at which the polynomial (or its derivative) is taken
        order: Derivative order, 0 for the value itself, up to 3
    Returns:
        Tuple of four coefficients matching the segment column block layout
    """
    if order == 0:
        return x ** 3, x ** 2, x, Decimal(1)
    if order == 1:
        return 3 * x ** 2, 2 * x, Decimal(1), Decimal(0)
    if order == 2:
        return 6 * x, Decimal(2), Decimal(0), Decimal(0)
    if order == 3:
        return Decimal(6), Decimal(0), Decimal(0), Decimal(0)
    raise ValueError(f"Derivative order must be between 0 and 3, got {order}")


class BoundaryKind(Enum):
    """Pair of extra equations that closes the spline system."""
    QUADRATIC = "quadratic"
    NOT_A_KNOT = "not_a_knot"
    PERIODIC = "periodic"
    NATURAL = "natural"

    @classmethod
    def from_value(cls, value: Union["BoundaryKind", str]) -> "BoundaryKind":
        """Parse a boundary kind from an enum member or its configuration spelling."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower().replace('-', '_').replace(' ', '_')
            aliases = {'notaknot': cls.NOT_A_KNOT}
            if key in aliases:
                return aliases[key]
            for member in cls:
                if member.value == key:
                    return member
        raise UnsupportedBoundaryKindError(value, [member.value for member in cls])


@dataclass(frozen=True)
class Point:
    """Data point (x, y) stored with decimal coordinates."""
    x: Decimal
    y: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, 'x', to_decimal(self.x, "x"))
        object.__setattr__(self, 'y', to_decimal(self.y, "y"))

    @classmethod
    def from_pair(cls, pair) -> "Point":
        if isinstance(pair, cls):
            return pair
        x, y = pair
        return cls(x, y)


@dataclass(frozen=True)
class SegmentRange:
    """Closed validity range of a segment."""
    x_min: Decimal
    x_max: Decimal

    def contains(self, x: Decimal) -> bool:
        return self.x_min <= x <= self.x_max


@dataclass(frozen=True)
class Segment:
    """
    Cubic piece a*x^3 + b*x^2 + c*x + d valid on a closed range.

    Segments are produced by the solver in input order, one per consecutive
    pair of points. Evaluation runs at the precision the segment was solved with.
    """
    a: Decimal
    b: Decimal
    c: Decimal
    d: Decimal
    range: SegmentRange
    precision: Optional[int] = field(default=None, compare=False)

    @property
    def coefficients(self) -> Tuple[Decimal, Decimal, Decimal, Decimal]:
        return self.a, self.b, self.c, self.d

    def contains(self, x: Number) -> bool:
        return self.range.contains(to_decimal(x, "x"))

    def evaluate(self, x: Number) -> Decimal:
        """Value of the polynomial at x, ignoring the validity range."""
        return self.derivative(x, 0)

    def derivative(self, x: Number, order: int = 1) -> Decimal:
        """Derivative of the given order at x, ignoring the validity range."""
        x = to_decimal(x, "x")
        with spline_context(self.precision):
            terms = polynomial_terms(x, order)
            return sum((coef * term for coef, term in zip(self.coefficients, terms)), Decimal(0))
