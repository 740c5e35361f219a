"""
Constants shared by the solver, the parsers and the plotters.

This package provides the numeric defaults (decimal precision, pivot tolerance,
minimum point counts) and file processing limits used throughout PySplineLib.
"""

from .constants.processing_constants import ProcessingConstants, ErrorMessages, FileConstants

__all__ = [
    "ProcessingConstants",
    "ErrorMessages",
    "FileConstants"
]
