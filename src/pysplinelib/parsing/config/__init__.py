"""Configuration parsing and YAML key definitions."""

from .spline_yaml_parser import SplineYAMLParser, YAMLFileParser, BaseFileParser
from . import yaml_keys as _yk

# Re-export everything defined in yaml_keys.__all__
globals().update({k: getattr(_yk, k) for k in _yk.__all__})

__all__ = [
    "SplineYAMLParser",
    "YAMLFileParser",
    "BaseFileParser",
    *_yk.__all__,
]
