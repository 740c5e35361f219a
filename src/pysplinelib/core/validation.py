"""Validation of input point sets."""

import logging
from typing import Iterable, List, Sequence

from pysplinelib.core.exceptions import InsufficientPointsError
from pysplinelib.core.models import Point
from pysplinelib.data.constants import ErrorMessages, ProcessingConstants

logger = logging.getLogger(__name__)


def is_monotonic(arr: Sequence, name: str = "Array",
                 mode: str = "strictly_increasing",
                 threshold: float = ProcessingConstants.MONOTONICITY_THRESHOLD,
                 raise_error: bool = True) -> bool:
    """Universal monotonicity checker supporting multiple modes."""
    for i in range(1, len(arr)):
        diff = float(arr[i] - arr[i - 1])
        violation = False
        if mode == "strictly_increasing" and diff <= threshold:
            violation = True
        elif mode == "non_decreasing" and diff < -threshold:
            violation = True
        elif mode == "strictly_decreasing" and diff >= -threshold:
            violation = True
        elif mode == "non_increasing" and diff > threshold:
            violation = True
        if violation:
            error_msg = (
                f"{name} is not {mode.replace('_', ' ')} at index {i}: "
                f"previous value ({i - 1}): {arr[i - 1]}, current value ({i}): {arr[i]}"
            )
            if raise_error:
                raise ValueError(error_msg)
            logger.warning("%s", error_msg)
            return False
    logger.debug("%s is %s", name, mode.replace('_', ' '))
    return True


def validate_points(points: Iterable, minimum: int = ProcessingConstants.MIN_DATA_POINTS) -> List[Point]:
    """
    Convert the input to Points and check that there are enough of them.

    The input order is kept. Non-increasing x-values are allowed but logged,
    since consecutive points still define consecutive segments.
    Args:
        points: Iterable of Point instances or (x, y) pairs
        minimum: Minimum number of points required
    Returns:
        List[Point]: The converted points in input order
    Raises:
        ValueError: If a point cannot be converted
        InsufficientPointsError: If fewer than minimum points are given
    """
    if points is None:
        raise ValueError("Points cannot be None")
    converted = []
    for index, pair in enumerate(points):
        try:
            converted.append(Point.from_pair(pair))
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid point at index {index}: {pair!r} ({e})") from e
    if len(converted) < minimum:
        raise InsufficientPointsError(
            ErrorMessages.INSUFFICIENT_DATA_POINTS.format(count=len(converted), min_points=minimum))
    is_monotonic([p.x for p in converted], "Point x-values", raise_error=False)
    return converted


def points_from_arrays(x_values: Sequence, y_values: Sequence) -> List[Point]:
    """Pair up separate x and y sequences into Points."""
    if len(x_values) != len(y_values):
        raise ValueError(f"Array length mismatch: x({len(x_values)}) != y({len(y_values)})")
    return validate_points(zip(x_values, y_values))
