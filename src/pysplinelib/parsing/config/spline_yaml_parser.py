import logging
from decimal import Decimal
from difflib import get_close_matches
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ruamel.yaml import YAML, constructor, scanner

from pysplinelib.algorithms.interpolation import evaluate, interpolate
from pysplinelib.core.models import BoundaryKind, Point, Segment, to_decimal
from pysplinelib.core.validation import points_from_arrays, validate_points
from pysplinelib.parsing.config.yaml_keys import (NAME_KEY, BOUNDARY_KEY, POINTS_KEY, X_KEY, Y_KEY, FILE_PATH_KEY,
                                                  QUERIES_KEY, SOLVER_KEY, PRECISION_KEY, PIVOT_TOLERANCE_KEY,
                                                  STRICT_KEY)
from pysplinelib.parsing.io.data_handler import load_point_data
from pysplinelib.visualization.plotters import SplineVisualizer

logger = logging.getLogger(__name__)


class BaseFileParser:
    """Base class for parsing configuration files."""

    def __init__(self, config_path: Union[str, Path]) -> None:
        self.config_path = Path(config_path)
        self.base_dir = self.config_path.parent
        self.config = self._load_config()
        logger.info("Successfully loaded configuration from: %s", self.config_path)

    def _load_config(self) -> Dict[str, Any]:
        raise NotImplementedError("Subclasses must implement _load_config method")


class YAMLFileParser(BaseFileParser):
    """Parser for YAML configuration files."""

    def _load_config(self) -> Dict[str, Any]:
        yaml = YAML(typ='safe')
        yaml.allow_duplicate_keys = False
        try:
            logger.debug("Loading YAML file: %s", self.config_path)
            with open(self.config_path, 'r') as f:
                config = yaml.load(f)
            logger.debug("YAML file loaded successfully, found %d top-level keys", len(config) if config else 0)
            return config
        except FileNotFoundError as e:
            logger.error("YAML file not found: %s", self.config_path)
            raise FileNotFoundError(f"YAML file not found: {self.config_path}") from e
        except constructor.DuplicateKeyError as e:
            logger.error("Duplicate key found in YAML file %s: %s", self.config_path, e)
            raise ValueError(f"Duplicate key in {self.config_path}: {str(e)}") from e
        except scanner.ScannerError as e:
            logger.error("YAML syntax error in file %s: %s", self.config_path, e)
            raise ValueError(f"YAML syntax error in {self.config_path}: {str(e)}") from e
        except Exception as e:
            logger.error("Unexpected error parsing YAML file %s: %s", self.config_path, e, exc_info=True)
            raise ValueError(f"Error parsing {self.config_path}: {str(e)}") from e


class SplineYAMLParser(YAMLFileParser):
    """Parser for spline configuration files in YAML format."""

    VALID_TOP_LEVEL_KEYS = {NAME_KEY, BOUNDARY_KEY, POINTS_KEY, QUERIES_KEY, SOLVER_KEY}
    VALID_SOLVER_KEYS = {PRECISION_KEY, PIVOT_TOLERANCE_KEY, STRICT_KEY}
    PLOT_DIRECTORY_NAME = "pysplinelib_plots"

    # --- Constructor ---
    def __init__(self, yaml_path: Union[str, Path]) -> None:
        super().__init__(yaml_path)
        logger.info("Initializing SplineYAMLParser for: %s", yaml_path)
        self._validate_config()
        self.name: str = str(self.config.get(NAME_KEY, "Unnamed Spline"))
        self.boundary: BoundaryKind = BoundaryKind.from_value(self.config[BOUNDARY_KEY])
        self.points: List[Point] = self._parse_points(self.config[POINTS_KEY])
        self.queries: List[Decimal] = self._parse_queries(self.config.get(QUERIES_KEY))
        self.solver_options: Dict[str, Any] = self._parse_solver_options(self.config.get(SOLVER_KEY))
        logger.info("SplineYAMLParser initialized: '%s', %d points, boundary=%s",
                    self.name, len(self.points), self.boundary.value)

    # --- Public API ---
    def create_spline(self, enable_plotting: bool = False) -> List[Segment]:
        """Fit the configured spline, optionally saving a plot next to the YAML file."""
        logger.info("Creating spline '%s' from configuration: %s", self.name, self.config_path)
        segments = interpolate(self.points, self.boundary, **self.solver_options)
        if enable_plotting:
            visualizer = SplineVisualizer(self.base_dir / self.PLOT_DIRECTORY_NAME)
            visualizer.plot_spline(segments, self.points, self.name, queries=self.queries)
        return segments

    def evaluate_queries(self, segments: List[Segment]) -> Dict[Decimal, Optional[Decimal]]:
        """Evaluate the configured query abscissas; None marks queries outside the spline."""
        results = {query: evaluate(segments, query) for query in self.queries}
        missing = [str(q) for q, value in results.items() if value is None]
        if missing:
            logger.warning("Queries outside the spline range of '%s': %s", self.name, ', '.join(missing))
        return results

    # --- Validation ---
    def _validate_config(self) -> None:
        if not isinstance(self.config, dict):
            raise ValueError("The YAML file must start with a mapping of configuration keys")
        unknown_keys = set(self.config) - self.VALID_TOP_LEVEL_KEYS
        if unknown_keys:
            messages = []
            for key in sorted(map(str, unknown_keys)):
                suggestion = get_close_matches(key, self.VALID_TOP_LEVEL_KEYS, n=1)
                hint = f" (did you mean '{suggestion[0]}'?)" if suggestion else ""
                messages.append(f"'{key}'{hint}")
            raise ValueError(f"Unknown configuration keys: {', '.join(messages)}. "
                             f"Valid keys are: {', '.join(sorted(self.VALID_TOP_LEVEL_KEYS))}")
        missing = [key for key in (BOUNDARY_KEY, POINTS_KEY) if key not in self.config]
        if missing:
            raise ValueError(f"Missing required configuration keys: {', '.join(missing)}")

    # --- Section parsers ---
    def _parse_points(self, points_config: Any) -> List[Point]:
        if isinstance(points_config, dict):
            if FILE_PATH_KEY in points_config:
                x_array, y_array = load_point_data(points_config, base_dir=self.base_dir)
                return points_from_arrays(x_array, y_array)
            if X_KEY in points_config and Y_KEY in points_config:
                x_values, y_values = points_config[X_KEY], points_config[Y_KEY]
                if not isinstance(x_values, list) or not isinstance(y_values, list):
                    raise ValueError(f"'{X_KEY}' and '{Y_KEY}' of '{POINTS_KEY}' must be lists")
                return points_from_arrays(x_values, y_values)
            raise ValueError(f"'{POINTS_KEY}' must define either '{X_KEY}' and '{Y_KEY}' or '{FILE_PATH_KEY}'")
        if isinstance(points_config, list):
            return validate_points(points_config)
        raise ValueError(f"'{POINTS_KEY}' must be a mapping or a list of [x, y] pairs, "
                         f"got {type(points_config).__name__}")

    @staticmethod
    def _parse_queries(queries_config: Any) -> List[Decimal]:
        if queries_config is None:
            return []
        if not isinstance(queries_config, list):
            queries_config = [queries_config]
        return [to_decimal(query, f"{QUERIES_KEY}[{i}]") for i, query in enumerate(queries_config)]

    def _parse_solver_options(self, solver_config: Any) -> Dict[str, Any]:
        if solver_config is None:
            return {}
        if not isinstance(solver_config, dict):
            raise ValueError(f"'{SOLVER_KEY}' must be a mapping, got {type(solver_config).__name__}")
        unknown_keys = set(solver_config) - self.VALID_SOLVER_KEYS
        if unknown_keys:
            raise ValueError(f"Unknown solver keys: {sorted(map(str, unknown_keys))}. "
                             f"Valid keys are: {sorted(self.VALID_SOLVER_KEYS)}")
        options: Dict[str, Any] = {}
        if PRECISION_KEY in solver_config:
            precision = solver_config[PRECISION_KEY]
            if isinstance(precision, bool) or not isinstance(precision, int) or precision < 1:
                raise ValueError(f"'{PRECISION_KEY}' must be a positive integer, got {precision!r}")
            options['precision'] = precision
        if PIVOT_TOLERANCE_KEY in solver_config:
            tolerance = to_decimal(solver_config[PIVOT_TOLERANCE_KEY], PIVOT_TOLERANCE_KEY)
            if tolerance < 0:
                raise ValueError(f"'{PIVOT_TOLERANCE_KEY}' cannot be negative, got {tolerance}")
            options['pivot_tolerance'] = tolerance
        if STRICT_KEY in solver_config:
            strict = solver_config[STRICT_KEY]
            if not isinstance(strict, bool):
                raise ValueError(f"'{STRICT_KEY}' must be true or false, got {strict!r}")
            options['strict'] = strict
        logger.debug("Solver options: %s", options)
        return options
