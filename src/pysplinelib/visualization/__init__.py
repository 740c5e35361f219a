"""Plotting of fitted splines."""

from .plotters import SplineVisualizer

__all__ = ["SplineVisualizer"]
