"""Reading of point data files."""

from .data_handler import load_point_data

__all__ = ["load_point_data"]
