"""
Core infrastructure for PyMatrix.

This module provides the shared abstractions used by the linalg package.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    kinds: Closed set of supported element kinds
"""

from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    InvalidDimensionError,
    IndexOutOfRangeError,
    DimensionMismatchError,
    UnsupportedElementTypeError,
)
from pymatrix.core.kinds import ElementKind, resolve_kind, kind_of

__all__ = [
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "InvalidDimensionError",
    "IndexOutOfRangeError",
    "DimensionMismatchError",
    "UnsupportedElementTypeError",
    # Kinds
    "ElementKind",
    "resolve_kind",
    "kind_of",
]
