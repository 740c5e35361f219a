"""Shared pytest fixtures for PySplineLib tests."""
import matplotlib
matplotlib.use("Agg")

import pytest
import sympy as sp
from pathlib import Path

from pysplinelib.core.models import Point


@pytest.fixture
def examples_dir():
    """Path to the example configurations."""
    return Path(__file__).parent.parent / "examples"


@pytest.fixture
def three_points():
    """Three points with a known natural spline."""
    return [Point(1, 10), Point(2, 15), Point(3, 12)]


@pytest.fixture
def demo_points():
    """Nine unevenly spaced points from the example configuration."""
    xs = [1.2695, 1.4060, 1.7100, 2.1563, 2.7522, 3.5070, 3.9393, 4.2349, 4.5669]
    ys = [10, 15, 30, 60, 120, 250, 370, 480, 640]
    return [Point(x, y) for x, y in zip(xs, ys)]


@pytest.fixture
def cubic_points():
    """Four samples of x^3 + 1."""
    return [(0, 1), (1, 2), (2, 9), (3, 28)]


@pytest.fixture
def x_symbol():
    """Abscissa symbol for testing."""
    return sp.Symbol('x')


@pytest.fixture
def write_yaml(tmp_path):
    """Write YAML content into a temporary file and return its path."""
    def _write(content: str, name: str = "spline.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content)
        return path
    return _write
