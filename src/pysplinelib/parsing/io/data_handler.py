import logging
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

import numpy as np
import pandas as pd

from pysplinelib.data.constants import FileConstants, ProcessingConstants
from pysplinelib.parsing.config.yaml_keys import FILE_PATH_KEY, X_COLUMN_KEY, Y_COLUMN_KEY

logger = logging.getLogger(__name__)

Column = Union[str, int]


def load_point_data(file_config: Dict[str, Column], base_dir: Optional[Path] = None,
                    header: bool = True) -> Tuple[np.ndarray, np.ndarray]:
    """
    Reads x and y columns of a point file.

    Rows keep their order in the file; the spline segments follow that order.
    Args:
        file_config: Dictionary containing file configuration with keys:
            - file_path: Path to data file, relative paths are resolved against base_dir
            - x_column: Column name or zero-based index of the abscissas
            - y_column: Column name or zero-based index of the ordinates
        base_dir: Directory of the configuration file
        header: Indicates if the file contains a header row
    Returns:
        Tuple of (x_array, y_array) as float64 numpy arrays
    Raises:
        FileNotFoundError: If the specified file doesn't exist
        ValueError: If data validation fails or file format is unsupported
        PermissionError: If file cannot be read due to permissions
    """
    _validate_file_config(file_config)
    file_path = Path(file_config[FILE_PATH_KEY])
    if not file_path.is_absolute() and base_dir is not None:
        file_path = Path(base_dir) / file_path
    x_col = file_config[X_COLUMN_KEY]
    y_col = file_config[Y_COLUMN_KEY]
    logger.info("Loading point data from %s (x=%s, y=%s)", file_path, x_col, y_col)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")
    if not file_path.is_file():
        raise ValueError(f"Path is not a file: {file_path}")
    file_extension = file_path.suffix.lower()
    if file_extension not in FileConstants.SUPPORTED_EXTENSIONS:
        raise ValueError(f"Unsupported file type: '{file_extension}'. "
                         f"Supported types are: {FileConstants.SUPPORTED_EXTENSIONS}")
    file_size_mb = file_path.stat().st_size / (1024 * 1024)
    if file_size_mb > FileConstants.MAX_FILE_SIZE_MB:
        raise ValueError(f"File size ({file_size_mb:.2f} MB) exceeds the maximum limit "
                         f"of {FileConstants.MAX_FILE_SIZE_MB} MB.")
    try:
        if file_extension == '.xlsx':
            df = _read_excel_file(file_path, header)
        elif file_extension == '.csv':
            df = _read_csv_file(file_path, header)
        else:  # .txt files
            df = _read_text_file(file_path, header)
    except PermissionError as e:
        raise PermissionError(f"Permission denied reading file {file_path}: {str(e)}") from e
    except Exception as e:
        raise ValueError(f"Error reading file {file_path}: {str(e)}") from e
    x_array, y_array = _extract_data_columns(df, x_col, y_col, str(file_path))
    x_array, y_array = _clean_and_validate_data(x_array, y_array, str(file_path))
    logger.debug("Loaded %d points from %s", len(x_array), file_path)
    return x_array, y_array


def _validate_file_config(file_config: Dict) -> None:
    """Validate the file configuration dictionary."""
    if not isinstance(file_config, dict):
        raise ValueError(f"File configuration must be a mapping, got {type(file_config).__name__}")
    required_keys = {FILE_PATH_KEY, X_COLUMN_KEY, Y_COLUMN_KEY}
    missing_keys = required_keys - set(file_config.keys())
    if missing_keys:
        raise ValueError(f"Missing required configuration keys: {sorted(missing_keys)}")
    if not file_config[FILE_PATH_KEY]:
        raise ValueError("File path cannot be empty")


def _read_excel_file(file_path: Path, header: bool) -> pd.DataFrame:
    """Read Excel file with proper error handling."""
    try:
        return pd.read_excel(file_path, header=0 if header else None, na_values=FileConstants.NA_VALUES)
    except ImportError as e:
        raise ValueError("Excel file support requires openpyxl. Install with: pip install openpyxl") from e


def _read_csv_file(file_path: Path, header: bool) -> pd.DataFrame:
    return pd.read_csv(
        file_path,
        header=0 if header else None,
        na_values=FileConstants.NA_VALUES,
        encoding=FileConstants.DEFAULT_ENCODING,
    )


def _read_text_file(file_path: Path, header: bool) -> pd.DataFrame:
    """Read a whitespace separated text file."""
    try:
        df = pd.read_csv(
            file_path,
            sep=r'\s+',
            header=0 if header else None,
            na_values=FileConstants.NA_VALUES,
            encoding=FileConstants.DEFAULT_ENCODING,
            engine='python'  # regex separator
        )
    except pd.errors.EmptyDataError as e:
        raise ValueError(f"No data found in text file: {str(e)}") from e
    return df


def _extract_data_columns(df: pd.DataFrame, x_col: Column, y_col: Column,
                          file_path: str) -> Tuple[np.ndarray, np.ndarray]:
    """Extract x and y columns from DataFrame as numeric arrays."""
    if df.empty:
        raise ValueError(f"No data found in file: {file_path}")
    x_series = _extract_column(df, x_col, "x", file_path)
    y_series = _extract_column(df, y_col, "y", file_path)
    return _convert_to_numeric_arrays(x_series, y_series, file_path)


def _extract_column(df: pd.DataFrame, col_identifier: Column,
                    col_type: str, file_path: str) -> pd.Series:
    """Extract a single column by name or zero-based index."""
    if isinstance(col_identifier, str):
        if col_identifier not in df.columns:
            available_cols = ', '.join(df.columns.astype(str))
            raise ValueError(f"{col_type} column '{col_identifier}' not found in file {file_path}. "
                             f"Available columns: {available_cols}")
        return df[col_identifier]
    if isinstance(col_identifier, bool) or not isinstance(col_identifier, int):
        raise ValueError(f"{col_type} column must be a name or an integer index, got {col_identifier!r}")
    if not 0 <= col_identifier < len(df.columns):
        raise ValueError(f"{col_type} column index {col_identifier} out of bounds "
                         f"(file has {len(df.columns)} columns)")
    return df.iloc[:, col_identifier]


def _convert_to_numeric_arrays(x_series: pd.Series, y_series: pd.Series,
                               file_path: str) -> Tuple[np.ndarray, np.ndarray]:
    """Convert pandas Series to float64 numpy arrays; unparsable cells become NaN."""
    x_array = np.asarray(pd.to_numeric(x_series, errors='coerce'), dtype=np.float64)
    y_array = np.asarray(pd.to_numeric(y_series, errors='coerce'), dtype=np.float64)
    x_nan_count = int(np.sum(np.isnan(x_array)))
    y_nan_count = int(np.sum(np.isnan(y_array)))
    if x_nan_count > 0:
        logger.warning("x column of %s has %d NaN values after conversion", file_path, x_nan_count)
    if y_nan_count > 0:
        logger.warning("y column of %s has %d NaN values after conversion", file_path, y_nan_count)
    return x_array, y_array


def _clean_and_validate_data(x_array: np.ndarray, y_array: np.ndarray,
                             file_path: str) -> Tuple[np.ndarray, np.ndarray]:
    """Drop rows with missing values and check that enough points remain."""
    if len(x_array) == 0 or len(y_array) == 0:
        raise ValueError(f"No valid data found in file: {file_path}")
    any_nan_mask = np.isnan(x_array) | np.isnan(y_array)
    if np.any(any_nan_mask):
        nan_count = int(np.sum(any_nan_mask))
        nan_percentage = (nan_count / len(x_array)) * 100
        logger.warning("Found %d rows (%.1f%%) with missing values in %s", nan_count, nan_percentage, file_path)
        if nan_percentage > ProcessingConstants.MAX_MISSING_VALUE_PERCENTAGE:
            raise ValueError(f"Too many missing values ({nan_percentage:.1f}%) in file: {file_path}. "
                             "Please clean the data or check file format.")
        valid_mask = ~any_nan_mask
        x_array = x_array[valid_mask]
        y_array = y_array[valid_mask]
        logger.info("Removed %d rows with missing values. Remaining data points: %d", nan_count, len(x_array))
    if len(x_array) < ProcessingConstants.MIN_DATA_POINTS:
        raise ValueError(f"Insufficient valid data points ({len(x_array)}) after cleaning missing values. "
                         f"Minimum required: {ProcessingConstants.MIN_DATA_POINTS}")
    return x_array, y_array
