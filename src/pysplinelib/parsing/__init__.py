"""
Parsing and configuration modules for PySplineLib.

This package handles YAML configuration files, loading of point data files,
and creation of splines from configuration.
"""

from .api import create_spline, evaluate_queries, get_supported_boundaries, validate_yaml_file, get_spline_info
from .config.spline_yaml_parser import SplineYAMLParser
from .io.data_handler import load_point_data

__all__ = [
    'create_spline',
    'evaluate_queries',
    'get_supported_boundaries',
    'validate_yaml_file',
    'get_spline_info',
    'SplineYAMLParser',
    'load_point_data'
]
