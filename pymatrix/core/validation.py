"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from typing import Any, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import (
    DimensionError,
    DimensionMismatchError,
    IndexOutOfRangeError,
    InvalidDimensionError,
    ValidationError,
)


def _is_integer(value: Any) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


def _row_lengths(grid: Any) -> list[int] | None:
    """Row lengths of a nested sequence, or None if it is not one."""
    if isinstance(grid, np.ndarray):
        return None
    try:
        return [len(row) for row in grid]
    except TypeError:
        return None


def check_grid(grid: ArrayLike, name: str = 'grid') -> NDArray[Any]:
    """
    Validate a 2D value grid and convert it to a numpy array.

    Args:
        grid: Nested sequence or 2D array of numbers
        name: Parameter name for error messages

    Returns:
        numpy.ndarray of shape (rows, columns) with numeric dtype

    Raises:
        InvalidDimensionError: If the grid has zero rows, zero columns,
            or rows of unequal length
        DimensionError: If the grid is not 2-dimensional
        ValidationError: If the grid is not numeric
    """
    lengths = _row_lengths(grid)
    if lengths is not None:
        if len(lengths) == 0:
            raise InvalidDimensionError(
                f"{name}: rows in matrix cannot be less than 1, got 0", rows=0
            )
        if lengths[0] == 0:
            raise InvalidDimensionError(
                f"{name}: columns in matrix cannot be less than 1, got 0",
                rows=len(lengths), columns=0,
            )
        if len(set(lengths)) > 1:
            raise InvalidDimensionError(
                f"{name}: rows must all have {lengths[0]} columns, "
                f"got row lengths {lengths}",
                rows=len(lengths), columns=lengths[0],
            )

    try:
        array = np.asarray(grid)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if array.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(array.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {array.dtype}, expected numeric data"
        )

    if array.ndim < 2 and array.size == 0:
        raise InvalidDimensionError(
            f"{name}: rows in matrix cannot be less than 1, got 0", rows=0
        )

    if array.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}"
        )

    rows, columns = array.shape
    if rows < 1:
        raise InvalidDimensionError(
            f"{name}: rows in matrix cannot be less than 1, got {rows}",
            rows=rows, columns=columns,
        )
    if columns < 1:
        raise InvalidDimensionError(
            f"{name}: columns in matrix cannot be less than 1, got {columns}",
            rows=rows, columns=columns,
        )

    return array


def check_dimensions(rows: int, columns: int) -> None:
    """
    Verify requested matrix dimensions are positive integers.

    Raises:
        ValidationError: If either value is not an integer
        InvalidDimensionError: If either value is less than 1
    """
    for name, value in (('rows', rows), ('columns', columns)):
        if not _is_integer(value):
            raise ValidationError(
                f"{name}: expected an integer, got {type(value).__name__}"
            )
        if value < 1:
            raise InvalidDimensionError(
                f"{name} in matrix cannot be less than 1, got {value}",
                rows=rows, columns=columns,
            )


def check_index(index: int, bound: int, axis: str) -> None:
    """
    Verify a 1-based index lies in [1, bound].

    Args:
        index: 1-based index supplied by the caller
        bound: Size of the axis
        axis: 'row' or 'column', used in the message

    Raises:
        ValidationError: If index is not an integer
        IndexOutOfRangeError: If index is outside [1, bound]
    """
    if not _is_integer(index):
        raise ValidationError(
            f"{axis}: index must be an integer, got {type(index).__name__}"
        )
    if index < 1 or index > bound:
        raise IndexOutOfRangeError(
            f"{axis}={index} is out of the boundaries of the matrix {axis} size={bound}",
            axis=axis, index=int(index), bound=bound,
        )


def check_same_shape(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two operands have identical shapes.

    Raises:
        DimensionMismatchError: If rows or columns differ
    """
    if tuple(left) != tuple(right):
        raise DimensionMismatchError(
            f"Unable to {operation} matrices of different dimensions: "
            f"{left[0]}x{left[1]} and {right[0]}x{right[1]}",
            operation=operation, left_shape=tuple(left), right_shape=tuple(right),
        )


def check_inner_dimensions(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str = 'multiply',
) -> None:
    """
    Verify left columns equal right rows.

    Raises:
        DimensionMismatchError: If the inner dimensions differ
    """
    if left[1] != right[0]:
        raise DimensionMismatchError(
            f"Unable to {operation} a {left[0]}x{left[1]} matrix with a "
            f"{right[0]}x{right[1]} matrix: inner dimensions {left[1]} != {right[0]}",
            operation=operation, left_shape=tuple(left), right_shape=tuple(right),
        )


def check_choice(value: Any, choices: Sequence[str], name: str) -> None:
    """
    Verify value is one of the allowed option strings.

    Raises:
        ValidationError: If value is not in choices
    """
    if value not in choices:
        raise ValidationError(
            f"{name}: expected one of {list(choices)}, got {value!r}"
        )
