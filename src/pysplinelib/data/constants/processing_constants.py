from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class ProcessingConstants:
    """Processing constants used throughout the spline solver."""
    # Decimal arithmetic
    DECIMAL_PRECISION: Final[int] = 50
    PIVOT_GUARD_DIGITS: Final[int] = 10
    # Matrix layout
    COEFFICIENTS_PER_SEGMENT: Final[int] = 4
    BOUNDARY_EQUATION_COUNT: Final[int] = 2
    # Data validation
    MIN_DATA_POINTS: Final[int] = 2
    MIN_NOT_A_KNOT_POINTS: Final[int] = 3
    MONOTONICITY_THRESHOLD: Final[float] = 0.0
    # Visualization
    DEFAULT_VISUALIZATION_POINTS: Final[int] = 200
    # File processing
    MAX_MISSING_VALUE_PERCENTAGE: Final[float] = 50.0


@dataclass(frozen=True)
class ErrorMessages:
    """Standardized error message templates."""
    INSUFFICIENT_DATA_POINTS: Final[str] = "Insufficient data points ({count}), minimum required: {min_points}"
    UNSUPPORTED_BOUNDARY: Final[str] = "Unknown boundary '{boundary}'. Supported boundaries: {supported}"
    MALFORMED_SYSTEM: Final[str] = "Malformed system: {rows} rows for {columns} columns ({detail})"
    SINGULAR_SYSTEM: Final[str] = "Singular system: {pivots} independent pivots for {unknowns} unknowns"


@dataclass(frozen=True)
class FileConstants:
    """File processing related constants."""
    SUPPORTED_EXTENSIONS: Final[tuple] = ('.csv', '.xlsx', '.txt')
    MAX_FILE_SIZE_MB: Final[int] = 100
    DEFAULT_ENCODING: Final[str] = 'utf-8'
    # Missing value indicators
    NA_VALUES: Final[tuple] = ('', ' ', '  ', '   ', 'nan', 'NaN', 'NULL', 'null', 'N/A', 'n/a', 'NA')
