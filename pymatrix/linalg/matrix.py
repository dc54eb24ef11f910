"""
Matrix: dense 2D numeric container with 1-based indexing.

Storage is a C-contiguous numpy array owned exclusively by the Matrix.
The element kind is resolved once at construction and selects the
arithmetic kernel; arithmetic never mutates its operands and always
returns a new Matrix with the left operand's element type and mode.

Usage:
    from pymatrix import Matrix

    a = Matrix.from_grid([[1, 0, 1], [2, 1, 1]])
    b = Matrix('int', 3, 2, lambda: 1)
    c = a.multiply(b)            # or a @ b
    c.get(1, 1)                  # 1-based
"""

from __future__ import annotations

import warnings
from typing import Any, Callable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import ValidationError
from pymatrix.core.kinds import ElementKind, infer_element_type, kind_of, resolve_kind
from pymatrix.core.validation import (
    check_choice,
    check_dimensions,
    check_grid,
    check_index,
    check_inner_dimensions,
    check_same_shape,
)
from pymatrix.linalg._kernels import (
    ARITHMETIC_MODES,
    DEFAULT_ARITHMETIC_MODE,
    ArithmeticMode,
    Kernel,
    kernel_for,
)


class Matrix:
    """
    Dense rows x columns matrix of a single numeric element type.

    Construction:
        Matrix(kind, rows, columns, initializer=None)
        Matrix.from_grid(grid)
        Matrix.zeros(kind, rows, columns)
        Matrix.identity(kind, n)

    Indices passed to get() and set() are 1-based. Shape is fixed for the
    lifetime of the instance; cell values may change through set() and
    initialize().
    """

    def __init__(
        self,
        kind: Any,
        rows: int,
        columns: int,
        initializer: Callable[[], Any] | None = None,
        *,
        mode: ArithmeticMode = DEFAULT_ARITHMETIC_MODE,
    ):
        """
        Create a rows x columns matrix.

        Args:
            kind: Element kind; anything resolve_kind() accepts
                ('int', 'long', 'float', 'double', np.float64, ...)
            rows: Number of rows, at least 1
            columns: Number of columns, at least 1
            initializer: Called once per cell in row-major order to produce
                its value. Defaults to the zero of the kind.
            mode: Arithmetic mode, 'legacy' or 'exact'

        Raises:
            InvalidDimensionError: If rows or columns is less than 1
            UnsupportedElementTypeError: If kind is numeric but unsupported
            ValidationError: If kind or mode is not recognised
        """
        element_kind = resolve_kind(kind)
        check_dimensions(rows, columns)
        check_choice(mode, ARITHMETIC_MODES, 'mode')

        self._data = np.zeros((int(rows), int(columns)), dtype=element_kind.dtype)
        self._kind: ElementKind | None = element_kind
        self._mode = mode

        if initializer is not None:
            self.initialize(initializer)

    # === Factory Methods ===

    @classmethod
    def from_grid(
        cls,
        grid: ArrayLike,
        *,
        kind: Any = None,
        mode: ArithmeticMode = DEFAULT_ARITHMETIC_MODE,
    ) -> Matrix:
        """
        Wrap a fully populated 2D grid of values.

        Rows, columns and element type are inferred from the grid. The grid
        is copied, so later changes to it do not affect the Matrix.

        Parameters
        ----------
        grid : array-like
            Nested sequence or 2D numpy array. Nested sequences of Python
            ints become 32-bit integers when every value fits in 32 bits;
            numpy arrays keep their dtype. Numeric dtypes outside the
            supported kinds are accepted, but arithmetic on them raises
            UnsupportedElementTypeError.
        kind : optional
            Force the element kind; the grid is cast to it.
        mode : {'legacy', 'exact'}
            Arithmetic mode.

        Raises
        ------
        InvalidDimensionError
            If the grid has zero rows, zero columns, or jagged rows.
        """
        array = check_grid(grid, 'grid')
        check_choice(mode, ARITHMETIC_MODES, 'mode')

        if kind is not None:
            dtype = resolve_kind(kind).dtype
        else:
            dtype = infer_element_type(array, from_sequence=not isinstance(grid, np.ndarray))

        return cls._from_array(array.astype(dtype, order='C', copy=True), mode)

    @classmethod
    def zeros(
        cls,
        kind: Any,
        rows: int,
        columns: int,
        *,
        mode: ArithmeticMode = DEFAULT_ARITHMETIC_MODE,
    ) -> Matrix:
        """rows x columns matrix of zeros."""
        return cls(kind, rows, columns, mode=mode)

    @classmethod
    def identity(
        cls,
        kind: Any,
        n: int,
        *,
        mode: ArithmeticMode = DEFAULT_ARITHMETIC_MODE,
    ) -> Matrix:
        """n x n identity matrix."""
        result = cls(kind, n, n, mode=mode)
        np.fill_diagonal(result._data, 1)
        return result

    @classmethod
    def _from_array(cls, data: NDArray[Any], mode: str) -> Matrix:
        """Internal builder. Takes ownership of data without validation."""
        result = cls.__new__(cls)
        result._data = data
        result._kind = kind_of(data.dtype)
        result._mode = mode
        return result

    # === Properties ===

    def row_count(self) -> int:
        """Number of rows."""
        return self._data.shape[0]

    def column_count(self) -> int:
        """Number of columns."""
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, columns)."""
        return (self.row_count(), self.column_count())

    @property
    def element_type(self) -> np.dtype:
        """numpy dtype of the stored elements."""
        return self._data.dtype

    @property
    def kind(self) -> ElementKind | None:
        """Element kind, or None if the element type has no arithmetic."""
        return self._kind

    @property
    def mode(self) -> str:
        """Arithmetic mode, 'legacy' or 'exact'."""
        return self._mode

    # === Element Access ===

    def get(self, i: int, j: int) -> Any:
        """
        Value at row i, column j (1-based).

        Raises:
            IndexOutOfRangeError: If i or j is outside the matrix
        """
        self._check_position(i, j)
        return self._data[i - 1, j - 1]

    def set(self, i: int, j: int, value: Any) -> None:
        """
        Overwrite the value at row i, column j (1-based).

        The value is cast to the element type.

        Raises:
            IndexOutOfRangeError: If i or j is outside the matrix
        """
        self._check_position(i, j)
        self._data[i - 1, j - 1] = value

    def initialize(self, supplier: Callable[[], Any]) -> None:
        """Overwrite every cell in row-major order, calling supplier() once per cell."""
        for index in np.ndindex(*self._data.shape):
            self._data[index] = supplier()

    def to_numpy(self) -> NDArray[Any]:
        """Copy of the underlying storage (0-based)."""
        return self._data.copy()

    def to_list(self) -> list[list[Any]]:
        """Values as nested Python lists, one list per row."""
        return self._data.tolist()

    # === Arithmetic ===

    def multiply(self, b: Matrix) -> Matrix:
        """
        Matrix product of this m x n matrix with an n x p matrix.

        Each result cell accumulates a[i, k] * b[k, j] for k = 1..n using
        the kernel's add and multiply primitives.

        Args:
            b: Right operand of size n x p

        Returns:
            New m x p matrix

        Raises:
            DimensionMismatchError: If this column count differs from
                b's row count
            UnsupportedElementTypeError: If the element type has no kernel
        """
        return self._product(b)

    def add(self, other: Matrix) -> Matrix:
        """
        Elementwise sum with a matrix of the same dimensions.

        Raises:
            DimensionMismatchError: If the shapes differ
            UnsupportedElementTypeError: If the element type has no kernel
        """
        return self._elementwise(other, 'add')

    def subtract(self, other: Matrix) -> Matrix:
        """
        Elementwise difference with a matrix of the same dimensions.

        Raises:
            DimensionMismatchError: If the shapes differ
            UnsupportedElementTypeError: If the element type has no kernel
        """
        return self._elementwise(other, 'subtract')

    def transpose(self) -> Matrix:
        """New columns x rows matrix with result[j, i] = self[i, j]."""
        return self._from_array(np.ascontiguousarray(self._data.T), self._mode)

    @property
    def T(self) -> Matrix:
        return self.transpose()

    def is_symmetric(self) -> bool:
        """True if equal to its own transpose. Non-square matrices are never symmetric."""
        return self == self.transpose()

    # === Operators ===

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._elementwise(other, 'add')

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._elementwise(other, 'subtract')

    def __matmul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._product(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape or self.element_type != other.element_type:
            return False
        # NaN cells compare equal to NaN cells, so equality stays reflexive
        equal_nan = bool(np.issubdtype(self.element_type, np.inexact))
        return bool(np.array_equal(self._data, other._data, equal_nan=equal_nan))

    def __hash__(self) -> int:
        # Shape only: consistent with __eq__ while cells stay mutable
        return hash(self.shape)

    def __repr__(self) -> str:
        return (
            f"Matrix(rows={self.row_count()}, columns={self.column_count()}, "
            f"element_type={self.element_type}, mode={self._mode!r})"
        )

    def __str__(self) -> str:
        return "\n".join(
            "\t".join(str(value) for value in row) for row in self._data.tolist()
        )

    # === Internals ===

    def _check_position(self, i: int, j: int) -> None:
        check_index(i, self.row_count(), 'row')
        check_index(j, self.column_count(), 'column')

    # Every public arithmetic entry point (method or operator) calls
    # _product/_elementwise directly, so warnings from _kernel and
    # _operand_values sit at a fixed depth below the caller.
    _CALLER_DEPTH = 4

    def _product(self, b: Matrix) -> Matrix:
        self._require_matrix(b, 'multiply')
        check_inner_dimensions(self.shape, b.shape, 'multiply')
        kernel = self._kernel('multiply')

        lhs = self._data
        rhs = self._operand_values(b, 'multiply')
        m, n = lhs.shape
        p = rhs.shape[1]

        result = np.zeros((m, p), dtype=self.element_type)
        for k in range(n):
            term = kernel.multiply(
                np.broadcast_to(lhs[:, k:k + 1], (m, p)),
                np.broadcast_to(rhs[k:k + 1, :], (m, p)),
            )
            result = kernel.add(result, term)

        return self._from_array(np.ascontiguousarray(result), self._mode)

    def _elementwise(self, other: Matrix, operation: str) -> Matrix:
        self._require_matrix(other, operation)
        check_same_shape(self.shape, other.shape, operation)
        kernel = self._kernel(operation)
        primitive = kernel.add if operation == 'add' else kernel.subtract
        values = primitive(self._data, self._operand_values(other, operation))
        return self._from_array(np.ascontiguousarray(values), self._mode)

    def _kernel(self, operation: str) -> Kernel:
        return kernel_for(
            self._kind,
            self._mode,
            element_type=self.element_type,
            operation=operation,
            stacklevel=self._CALLER_DEPTH,
        )

    def _operand_values(self, other: Matrix, operation: str) -> NDArray[Any]:
        """Right operand storage, cast to this element type if needed."""
        if other.element_type == self.element_type:
            return other._data
        warnings.warn(
            f"{operation}: right operand element type {other.element_type} "
            f"cast to {self.element_type}",
            RuntimeWarning,
            stacklevel=self._CALLER_DEPTH,
        )
        return other._data.astype(self.element_type)

    @staticmethod
    def _require_matrix(other: object, operation: str) -> None:
        if not isinstance(other, Matrix):
            raise ValidationError(
                f"{operation}: expected a Matrix operand, got {type(other).__name__}"
            )
