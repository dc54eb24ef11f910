"""
Element kinds for PyMatrix.

This module is the SINGLE SOURCE OF TRUTH for which numeric element types
support matrix arithmetic. The set is closed: 32-bit and 64-bit integers,
32-bit and 64-bit floats. A kind is resolved once when a Matrix is built
and never re-inspected per element.

Usage:
    from pymatrix.core.kinds import ElementKind, resolve_kind

    resolve_kind('double')      # ElementKind.FLOAT64
    resolve_kind(int)           # ElementKind.INT32
    resolve_kind(np.int64)      # ElementKind.INT64
"""

from __future__ import annotations

from enum import Enum
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.exceptions import UnsupportedElementTypeError, ValidationError


class ElementKind(Enum):
    """Numeric representation of matrix elements."""

    INT32 = 'int32'
    INT64 = 'int64'
    FLOAT32 = 'float32'
    FLOAT64 = 'float64'

    @property
    def dtype(self) -> np.dtype:
        """Storage dtype for this kind."""
        return np.dtype(self.value)

    @property
    def zero(self) -> np.generic:
        """Zero value of this kind."""
        return self.dtype.type(0)

    @property
    def is_integer(self) -> bool:
        return self in (ElementKind.INT32, ElementKind.INT64)

    @property
    def label(self) -> str:
        """Conventional name ('integer', 'long', 'float', 'double')."""
        return _LABELS[self]


_LABELS = {
    ElementKind.INT32: 'integer',
    ElementKind.INT64: 'long',
    ElementKind.FLOAT32: 'float',
    ElementKind.FLOAT64: 'double',
}

# Accepted spellings for resolve_kind(str)
KIND_ALIASES: dict[str, ElementKind] = {
    'int': ElementKind.INT32,
    'integer': ElementKind.INT32,
    'int32': ElementKind.INT32,
    'long': ElementKind.INT64,
    'int64': ElementKind.INT64,
    'float': ElementKind.FLOAT32,
    'float32': ElementKind.FLOAT32,
    'double': ElementKind.FLOAT64,
    'float64': ElementKind.FLOAT64,
}

_INT32_INFO = np.iinfo(np.int32)


def kind_of(dtype: Any) -> ElementKind | None:
    """
    Look up the kind for a dtype without raising.

    Args:
        dtype: Anything np.dtype() accepts

    Returns:
        The matching ElementKind, or None if the dtype is outside the
        supported set
    """
    dtype = np.dtype(dtype)
    for kind in ElementKind:
        if dtype == kind.dtype:
            return kind
    return None


def resolve_kind(spec: Any) -> ElementKind:
    """
    Resolve a user-supplied element type to an ElementKind.

    Args:
        spec: An ElementKind, a kind name (see KIND_ALIASES), the Python
            types int or float, or a numpy dtype / scalar type

    Returns:
        The resolved ElementKind

    Raises:
        ValidationError: If spec is not recognisable as a numeric type
        UnsupportedElementTypeError: If spec is numeric but outside the
            supported set (e.g. int16, float16, complex128)
    """
    if isinstance(spec, ElementKind):
        return spec

    if isinstance(spec, str):
        key = spec.strip().lower()
        if key not in KIND_ALIASES:
            raise ValidationError(
                f"kind: unknown element kind {spec!r}, "
                f"expected one of {sorted(KIND_ALIASES)}"
            )
        return KIND_ALIASES[key]

    if spec is None or spec is bool:
        raise ValidationError(f"kind: {spec!r} is not a numeric element type")

    # Python's own scalar types map to the conventional widths
    if spec is int:
        return ElementKind.INT32
    if spec is float:
        return ElementKind.FLOAT64

    try:
        dtype = np.dtype(spec)
    except TypeError as e:
        raise ValidationError(
            f"kind: cannot interpret {spec!r} as an element type"
        ) from e

    kind = kind_of(dtype)
    if kind is not None:
        return kind

    if np.issubdtype(dtype, np.number):
        raise UnsupportedElementTypeError(
            f"Unsupported element type {dtype}; "
            f"supported kinds are {', '.join(k.value for k in ElementKind)}",
            element_type=dtype,
        )
    raise ValidationError(f"kind: non-numeric dtype {dtype}, expected numeric data")


def infer_element_type(array: NDArray[Any], from_sequence: bool) -> np.dtype:
    """
    Infer the element type of a validated grid.

    numpy arrays keep their dtype. Nested Python sequences of integers are
    treated as 32-bit integers when every value fits, otherwise 64-bit;
    any other sequence keeps the dtype numpy chose (float64 for floats).

    Args:
        array: 2D numeric array produced from the grid
        from_sequence: True if the grid was a nested sequence, not an ndarray

    Returns:
        The element dtype to store the grid with
    """
    if not from_sequence or not np.issubdtype(array.dtype, np.signedinteger):
        return array.dtype

    if array.min() >= _INT32_INFO.min and array.max() <= _INT32_INFO.max:
        return ElementKind.INT32.dtype
    return ElementKind.INT64.dtype
