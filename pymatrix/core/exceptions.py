"""
Exception hierarchy for PyMatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Shape problems share the DimensionError base so
callers can handle "wrong shape" without caring which check fired.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks
    (non-numeric grids, unknown element kind names, bad options).
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Base class for every shape-related failure.
    """
    pass


class InvalidDimensionError(DimensionError):
    """
    A matrix cannot be built with the requested shape.

    Raised at construction when rows or columns is less than 1, or when
    a grid is empty or jagged.

    Attributes:
        rows: Requested/observed row count, if known
        columns: Requested/observed column count, if known
    """

    def __init__(
        self,
        message: str,
        rows: int | None = None,
        columns: int | None = None,
    ):
        super().__init__(message)
        self.rows = rows
        self.columns = columns


class IndexOutOfRangeError(DimensionError, IndexError):
    """
    A 1-based index falls outside the matrix bounds.

    Also an IndexError, so generic index handling keeps working.

    Attributes:
        axis: 'row' or 'column'
        index: The offending 1-based index
        bound: Largest valid index on that axis
    """

    def __init__(
        self,
        message: str,
        axis: str | None = None,
        index: int | None = None,
        bound: int | None = None,
    ):
        super().__init__(message)
        self.axis = axis
        self.index = index
        self.bound = bound


class DimensionMismatchError(DimensionError):
    """
    Operand shapes are incompatible for an arithmetic operation.

    Attributes:
        operation: Name of the operation ('add', 'subtract', 'multiply')
        left_shape: (rows, columns) of the left operand
        right_shape: (rows, columns) of the right operand
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape


class UnsupportedElementTypeError(PyMatrixError, TypeError):
    """
    Arithmetic was attempted on an element type outside the supported set.

    Supported kinds are 32/64-bit integers and 32/64-bit floats.

    Attributes:
        element_type: The offending element type (usually a numpy dtype)
        operation: Operation being attempted, if any
    """

    def __init__(
        self,
        message: str,
        element_type: object = None,
        operation: str | None = None,
    ):
        super().__init__(message)
        self.element_type = element_type
        self.operation = operation
