"""
Per-kind arithmetic primitives.

Each supported ElementKind gets a Kernel carrying its add, subtract and
multiply primitives. Primitives work on whole numpy arrays of the kind's
dtype and cast their result back to that dtype, so integer kinds wrap on
overflow exactly like fixed-width machine integers.

Arithmetic modes:
    'legacy': long, float and double kernels ignore their second operand
              and combine the first with itself (a + a, a - a, a * a).
              Only the integer kernel uses both operands. This is the
              default, kept for compatibility with earlier results.
    'exact':  every kernel computes a op b.
"""

import warnings
from dataclasses import dataclass
from typing import Any, Callable, Literal

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.exceptions import UnsupportedElementTypeError
from pymatrix.core.kinds import ElementKind
from pymatrix.core.validation import check_choice


ArithmeticMode = Literal['legacy', 'exact']

ARITHMETIC_MODES: tuple[str, ...] = ('legacy', 'exact')

DEFAULT_ARITHMETIC_MODE: ArithmeticMode = 'legacy'

# Kinds whose legacy primitives discard the second operand
SELF_COMBINING_KINDS = frozenset({
    ElementKind.INT64,
    ElementKind.FLOAT32,
    ElementKind.FLOAT64,
})


class LegacyArithmeticWarning(UserWarning):
    """
    A legacy kernel combined an operand with itself.

    Emitted when 'legacy' mode arithmetic runs on a long, float or double
    matrix. Pass mode='exact' to get a op b instead.
    """
    pass


@dataclass(frozen=True)
class Kernel:
    """Binary primitives for one element kind under one arithmetic mode."""
    kind: ElementKind
    mode: str
    self_combining: bool

    def add(self, a: NDArray[Any], b: NDArray[Any]) -> NDArray[Any]:
        return self._apply(np.add, a, b)

    def subtract(self, a: NDArray[Any], b: NDArray[Any]) -> NDArray[Any]:
        return self._apply(np.subtract, a, b)

    def multiply(self, a: NDArray[Any], b: NDArray[Any]) -> NDArray[Any]:
        return self._apply(np.multiply, a, b)

    def _apply(
        self,
        ufunc: Callable[..., NDArray[Any]],
        a: NDArray[Any],
        b: NDArray[Any],
    ) -> NDArray[Any]:
        rhs = a if self.self_combining else b
        with np.errstate(over='ignore'):
            result = ufunc(a, rhs)
        return result.astype(self.kind.dtype, copy=False)


_KERNELS: dict[tuple[ElementKind, str], Kernel] = {
    (kind, mode): Kernel(
        kind=kind,
        mode=mode,
        self_combining=(mode == 'legacy' and kind in SELF_COMBINING_KINDS),
    )
    for kind in ElementKind
    for mode in ARITHMETIC_MODES
}


def kernel_for(
    kind: ElementKind | None,
    mode: ArithmeticMode,
    *,
    element_type: Any = None,
    operation: str | None = None,
    stacklevel: int = 1,
) -> Kernel:
    """
    Select the kernel for a kind and arithmetic mode.

    Args:
        kind: Element kind of the left operand, or None if its element
            type is outside the supported set
        mode: 'legacy' or 'exact'
        element_type: Element dtype, reported in errors
        operation: Operation name, reported in errors and warnings
        stacklevel: Frames above the caller of kernel_for that the
            warning is attributed to; 1 means the direct caller

    Returns:
        The matching Kernel

    Raises:
        UnsupportedElementTypeError: If kind is None
        ValidationError: If mode is unknown

    Warns:
        LegacyArithmeticWarning: If the kernel discards its second operand
    """
    if kind is None:
        raise UnsupportedElementTypeError(
            f"Unable to {operation or 'operate on'} values of type: {element_type}",
            element_type=element_type,
            operation=operation,
        )

    check_choice(mode, ARITHMETIC_MODES, 'mode')
    kernel = _KERNELS[(kind, mode)]

    if kernel.self_combining:
        warnings.warn(
            f"Legacy {operation or 'arithmetic'} on {kind.label} elements combines "
            f"the left operand with itself and ignores the right operand. "
            f"Use mode='exact' for a op b.",
            LegacyArithmeticWarning,
            stacklevel=stacklevel + 1,
        )

    return kernel
