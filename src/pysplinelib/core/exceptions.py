"""Custom exceptions for pysplinelib core functionality."""
import logging

from pysplinelib.data.constants import ErrorMessages

logger = logging.getLogger(__name__)


class SplineError(Exception):
    """Base exception for all spline-related errors."""

    def __init__(self, message):
        super().__init__(message)
        logger.error("SplineError raised: %s", message)


class UnsupportedBoundaryKindError(SplineError, ValueError):
    """Exception raised when the boundary argument is not a known boundary kind."""

    def __init__(self, boundary, supported=None):
        self.boundary = boundary
        self.supported = list(supported) if supported else []
        message = ErrorMessages.UNSUPPORTED_BOUNDARY.format(
            boundary=boundary, supported=', '.join(self.supported) or 'none')
        super().__init__(message)
        logger.error("UnsupportedBoundaryKindError raised: %s", message)


class MalformedSystemError(SplineError):
    """Exception raised when the generated equations do not form a square system."""

    def __init__(self, message):
        super().__init__(message)
        logger.error("MalformedSystemError raised: %s", message)


class SingularSystemError(SplineError):
    """Exception raised when elimination finds fewer pivots than unknowns."""

    def __init__(self, message, pivot_columns=None):
        self.pivot_columns = list(pivot_columns) if pivot_columns is not None else []
        super().__init__(message)
        logger.error("SingularSystemError raised: %s", message)


class InsufficientPointsError(SplineError, ValueError):
    """Exception raised when too few points are given for the requested boundary."""

    def __init__(self, message):
        super().__init__(message)
        logger.error("InsufficientPointsError raised: %s", message)
