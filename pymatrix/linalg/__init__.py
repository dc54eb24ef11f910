"""
Dense matrix arithmetic.

Public API:
    Matrix                   - Dense 2D matrix with 1-based indexing
    ArithmeticMode           - 'legacy' | 'exact'
    LegacyArithmeticWarning  - Warned when legacy kernels ignore an operand
"""

from pymatrix.linalg._kernels import (
    ARITHMETIC_MODES,
    DEFAULT_ARITHMETIC_MODE,
    ArithmeticMode,
    LegacyArithmeticWarning,
)
from pymatrix.linalg.matrix import Matrix

__all__ = [
    "Matrix",
    "ArithmeticMode",
    "ARITHMETIC_MODES",
    "DEFAULT_ARITHMETIC_MODE",
    "LegacyArithmeticWarning",
]
