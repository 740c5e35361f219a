import logging
from decimal import Decimal
from pathlib import Path
from typing import Dict, List, Optional, Union

from pysplinelib.core.models import BoundaryKind, Segment
from pysplinelib.parsing.config.spline_yaml_parser import SplineYAMLParser

logger = logging.getLogger(__name__)


def create_spline(yaml_path: Union[str, Path], enable_plotting: bool = False) -> List[Segment]:
    """
    Create a spline from a YAML configuration file.

    This function serves as the main entry point for fitting splines described
    in configuration files. It reads the points (inline or from a data file),
    the boundary kind and the solver options, and returns the fitted segments.
    Args:
        yaml_path: Path to the YAML configuration file
        enable_plotting: Whether to save a plot into 'pysplinelib_plots' next to the file
    Returns:
        List of segments in input order
    Examples:
        # Fit the spline described in a file
        segments = create_spline('natural_spline.yaml')

        # Fit and save a plot
        segments = create_spline('natural_spline.yaml', enable_plotting=True)
    """
    logger.info("Creating spline from: %s, plotting=%s", yaml_path, enable_plotting)
    try:
        parser = SplineYAMLParser(yaml_path=yaml_path)
        segments = parser.create_spline(enable_plotting=enable_plotting)
        logger.info("Successfully created spline '%s' with %d segments", parser.name, len(segments))
        return segments
    except Exception as e:
        logger.error("Failed to create spline from %s: %s", yaml_path, e, exc_info=True)
        raise


def evaluate_queries(yaml_path: Union[str, Path]) -> Dict[Decimal, Optional[Decimal]]:
    """
    Fit the configured spline and evaluate it at the configured queries.
    Returns:
        Mapping from query abscissa to value, None for queries outside the spline
    """
    logger.info("Evaluating queries from: %s", yaml_path)
    parser = SplineYAMLParser(yaml_path=yaml_path)
    segments = parser.create_spline(enable_plotting=False)
    return parser.evaluate_queries(segments)


def get_supported_boundaries() -> list:
    """
    Returns a list of all supported boundary kinds.
    Returns:
        List of strings valid as the 'boundary' value of a configuration file.
    """
    return [kind.value for kind in BoundaryKind]


def validate_yaml_file(yaml_path: Union[str, Path]) -> bool:
    """
    Validate a YAML file without fitting the spline.
    Args:
        yaml_path: Path to the YAML configuration file to validate
    Returns:
        True if the file is valid
    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the YAML content is invalid
    """
    logger.info("Validating YAML file: %s", yaml_path)
    try:
        _ = SplineYAMLParser(yaml_path)
        logger.info("YAML validation successful for: %s", yaml_path)
        return True
    except FileNotFoundError as e:
        logger.error("YAML file not found: %s", yaml_path)
        raise FileNotFoundError(f"YAML file not found: {yaml_path}") from e
    except ValueError as e:
        logger.error("YAML validation failed for %s: %s", yaml_path, e)
        raise ValueError(f"YAML validation failed: {str(e)}") from e
    except Exception as e:
        logger.error("Unexpected error validating YAML %s: %s", yaml_path, e, exc_info=True)
        raise ValueError(f"Unexpected error validating YAML: {str(e)}") from e


def get_spline_info(yaml_path: Union[str, Path]) -> dict:
    """
    Get basic information about a spline configuration without solving it.
    Example:
        info = get_spline_info('natural_spline.yaml')
        print(f"Spline: {info['name']} with {info['point_count']} points")
    """
    parser = SplineYAMLParser(yaml_path=yaml_path)
    x_values = [point.x for point in parser.points]
    return {
        'name': parser.name,
        'boundary': parser.boundary.value,
        'point_count': len(parser.points),
        'segment_count': len(parser.points) - 1,
        'x_range': (min(x_values), max(x_values)),
        'query_count': len(parser.queries),
        'solver': dict(parser.solver_options),
    }
