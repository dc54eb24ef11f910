"""
PyMatrix: dense numeric matrices with 1-based indexing.

A small matrix abstraction over numpy storage supporting construction,
element access, addition, subtraction, multiplication, transposition and
a symmetry check, for 32/64-bit integer and floating point elements.

Submodules:
    core: Exceptions, validation, element kinds
    linalg: Matrix and its arithmetic kernels
"""

__version__ = "0.1.0"

from pymatrix.core import (
    ElementKind,
    PyMatrixError,
    ValidationError,
    DimensionError,
    InvalidDimensionError,
    IndexOutOfRangeError,
    DimensionMismatchError,
    UnsupportedElementTypeError,
)
from pymatrix.linalg import Matrix, ArithmeticMode, LegacyArithmeticWarning

__all__ = [
    "__version__",
    "Matrix",
    "ElementKind",
    "ArithmeticMode",
    "LegacyArithmeticWarning",
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "InvalidDimensionError",
    "IndexOutOfRangeError",
    "DimensionMismatchError",
    "UnsupportedElementTypeError",
]
