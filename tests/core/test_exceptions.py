"""
Tests for PyMatrix exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyMatrixError)
    - Shape errors share DimensionError
    - Diagnostic attributes on InvalidDimensionError, IndexOutOfRangeError,
      DimensionMismatchError, UnsupportedElementTypeError
    - Default attribute values (None for optional attributes)
"""

import numpy as np
import pytest

from pymatrix.core.exceptions import (
    DimensionError,
    DimensionMismatchError,
    IndexOutOfRangeError,
    InvalidDimensionError,
    PyMatrixError,
    UnsupportedElementTypeError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyMatrixError."""

    def test_validation_error_is_pymatrix_error(self):
        with pytest.raises(PyMatrixError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    @pytest.mark.parametrize("exc_type", [
        InvalidDimensionError,
        IndexOutOfRangeError,
        DimensionMismatchError,
    ])
    def test_shape_errors_are_dimension_errors(self, exc_type):
        with pytest.raises(DimensionError):
            raise exc_type("shape problem")

    def test_index_out_of_range_is_index_error(self):
        with pytest.raises(IndexError):
            raise IndexOutOfRangeError("row=5 out of range")

    def test_unsupported_element_type_is_type_error(self):
        with pytest.raises(TypeError):
            raise UnsupportedElementTypeError("int16")

    def test_unsupported_element_type_is_not_validation_error(self):
        """UnsupportedElementTypeError inherits from PyMatrixError, not ValidationError."""
        err = UnsupportedElementTypeError("int16")
        assert isinstance(err, PyMatrixError)
        assert not isinstance(err, ValidationError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestInvalidDimensionError:

    def test_attributes(self):
        err = InvalidDimensionError("rows in matrix cannot be less than 1", rows=0, columns=3)
        assert str(err) == "rows in matrix cannot be less than 1"
        assert err.rows == 0
        assert err.columns == 3

    def test_defaults_are_none(self):
        err = InvalidDimensionError("empty")
        assert err.rows is None
        assert err.columns is None


class TestIndexOutOfRangeError:

    def test_attributes(self):
        err = IndexOutOfRangeError("row=7 out of range", axis='row', index=7, bound=4)
        assert err.axis == 'row'
        assert err.index == 7
        assert err.bound == 4

    def test_defaults_are_none(self):
        err = IndexOutOfRangeError("out of range")
        assert err.axis is None
        assert err.index is None
        assert err.bound is None

    def test_catchable_with_attributes(self):
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            raise IndexOutOfRangeError("column=0", axis='column', index=0, bound=3)
        assert exc_info.value.axis == 'column'
        assert exc_info.value.index == 0


class TestDimensionMismatchError:

    def test_attributes(self):
        err = DimensionMismatchError(
            "cannot add", operation='add', left_shape=(2, 3), right_shape=(3, 2)
        )
        assert err.operation == 'add'
        assert err.left_shape == (2, 3)
        assert err.right_shape == (3, 2)

    def test_defaults_are_none(self):
        err = DimensionMismatchError("")
        assert str(err) == ""
        assert err.operation is None
        assert err.left_shape is None
        assert err.right_shape is None


class TestUnsupportedElementTypeError:

    def test_attributes(self):
        err = UnsupportedElementTypeError(
            "Unable to add values of type: int16",
            element_type=np.dtype(np.int16),
            operation='add',
        )
        assert err.element_type == np.dtype(np.int16)
        assert err.operation == 'add'
        assert "int16" in str(err)

    def test_defaults_are_none(self):
        err = UnsupportedElementTypeError("unsupported")
        assert err.element_type is None
        assert err.operation is None
