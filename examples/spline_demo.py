"""Demonstration script for cubic spline interpolation."""
import logging
from pathlib import Path

from pysplinelib import BoundaryKind, interpolate, evaluate
from pysplinelib.parsing.api import evaluate_queries, get_spline_info, get_supported_boundaries


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s -> %(message)s"
    )
    # Silence noisy libraries
    logging.getLogger('matplotlib').setLevel(logging.WARNING)
    logging.getLogger('PIL').setLevel(logging.WARNING)
    logging.getLogger('fontTools').setLevel(logging.WARNING)


def demonstrate_spline():
    """Fit the demo data with every boundary kind and evaluate the configured queries."""
    setup_logging()
    yaml_path = Path(__file__).parent / "natural_spline.yaml"
    if not yaml_path.exists():
        raise FileNotFoundError(f"Demo YAML file not found: {yaml_path}")
    info = get_spline_info(yaml_path)
    print(f"\n{'=' * 80}")
    print(f"SPLINE: {info['name']}")
    print(f"{'=' * 80}")
    print(f"Boundary: {info['boundary']}")
    print(f"Points: {info['point_count']} ({info['segment_count']} segments)")
    print(f"x range: [{info['x_range'][0]}, {info['x_range'][1]}]")
    for query, value in evaluate_queries(yaml_path).items():
        shown = f"{float(value):.6f}" if value is not None else "outside data range"
        print(f"  y({query}) = {shown}")
    points = [(1, 10), (2, 15), (3, 12), (4, 20), (5, 18)]
    print(f"\n{'=' * 80}")
    print(f"Boundary comparison at x=2.5 for {points}")
    print(f"{'=' * 80}")
    for boundary in get_supported_boundaries():
        segments = interpolate(points, BoundaryKind.from_value(boundary))
        print(f"  {boundary:<12} {float(evaluate(segments, 2.5)):.6f}")


if __name__ == "__main__":
    demonstrate_spline()
