"""
Tests for per-kind arithmetic kernels.
"""

import numpy as np
import pytest

from pymatrix.core.exceptions import UnsupportedElementTypeError, ValidationError
from pymatrix.core.kinds import ElementKind
from pymatrix.linalg._kernels import (
    SELF_COMBINING_KINDS,
    LegacyArithmeticWarning,
    kernel_for,
)


class TestKernelSelection:

    def test_integer_kernel_uses_both_operands(self):
        kernel = kernel_for(ElementKind.INT32, 'legacy')
        assert not kernel.self_combining
        a = np.array([[2, 3]], dtype=np.int32)
        b = np.array([[5, 7]], dtype=np.int32)
        np.testing.assert_array_equal(kernel.add(a, b), [[7, 10]])
        np.testing.assert_array_equal(kernel.subtract(a, b), [[-3, -4]])
        np.testing.assert_array_equal(kernel.multiply(a, b), [[10, 21]])

    @pytest.mark.parametrize("kind", sorted(SELF_COMBINING_KINDS, key=lambda k: k.value))
    def test_legacy_kernels_self_combine(self, kind):
        with pytest.warns(LegacyArithmeticWarning):
            kernel = kernel_for(kind, 'legacy', operation='multiply')
        assert kernel.self_combining
        a = np.array([[2, 3]], dtype=kind.dtype)
        b = np.array([[5, 7]], dtype=kind.dtype)
        np.testing.assert_array_equal(kernel.multiply(a, b), [[4, 9]])

    @pytest.mark.parametrize("kind", list(ElementKind))
    def test_exact_kernels(self, kind):
        kernel = kernel_for(kind, 'exact')
        assert not kernel.self_combining
        a = np.array([[2, 3]], dtype=kind.dtype)
        b = np.array([[5, 7]], dtype=kind.dtype)
        np.testing.assert_array_equal(kernel.multiply(a, b), [[10, 21]])

    @pytest.mark.parametrize("kind", list(ElementKind))
    def test_results_keep_dtype(self, kind):
        kernel = kernel_for(kind, 'exact')
        a = np.ones((2, 2), dtype=kind.dtype)
        assert kernel.add(a, a).dtype == kind.dtype

    def test_int64_wraps(self):
        kernel = kernel_for(ElementKind.INT64, 'exact')
        a = np.array([[np.iinfo(np.int64).max]], dtype=np.int64)
        b = np.array([[1]], dtype=np.int64)
        assert kernel.add(a, b)[0, 0] == np.iinfo(np.int64).min

    def test_missing_kind(self):
        with pytest.raises(UnsupportedElementTypeError, match="Unable to add values of type: int16"):
            kernel_for(None, 'legacy', element_type=np.dtype(np.int16), operation='add')

    def test_unknown_mode(self):
        with pytest.raises(ValidationError, match="mode"):
            kernel_for(ElementKind.INT32, 'approximate')
