"""
Core protocols for PyDense.

The Matrix protocol is the minimal capability shared by real and complex
dense matrices. Free functions (reshape, set_values, index-set builders)
are written against it rather than against a concrete class.

We use Protocol (structural typing) rather than ABC (nominal typing) so that
any object exposing these methods, including user-defined wrappers, works
with the generic helpers.
"""

from __future__ import annotations

from typing import Protocol, Any, runtime_checkable

import numpy as np
from numpy.typing import NDArray


@runtime_checkable
class Matrix(Protocol):
    """
    Minimal interface of a column-major dense matrix.

    Mirrors what linear algebra routines need: shape, raw buffer access for
    the matching scalar kind, and shape/type comparisons.
    """

    def rows(self) -> int:
        """Number of rows."""
        ...

    def cols(self) -> int:
        """Number of columns."""
        ...

    def num_elements(self) -> int:
        """rows * cols."""
        ...

    def size(self) -> tuple[int, int]:
        """(rows, cols) pair."""
        ...

    def leading_index(self) -> int:
        """Distance between the starts of consecutive columns."""
        ...

    def set_size(self, rows: int, cols: int) -> None:
        """Reinterpret dimensions without touching the buffer."""
        ...

    def float_array(self) -> NDArray[np.float64] | None:
        """
        Underlying float64 buffer, or None for a complex matrix.
        """
        ...

    def complex_array(self) -> NDArray[np.complex128] | None:
        """
        Underlying complex128 buffer, or None for a real matrix.
        """
        ...

    def is_complex(self) -> bool:
        """True for complex-valued matrices."""
        ...

    def size_match(self, rows: int, cols: int) -> bool:
        """True if the matrix is rows x cols."""
        ...

    def equal_types(self, *others: Any) -> bool:
        """True if every other matrix has the same scalar kind."""
        ...

    def make_copy(self) -> 'Matrix':
        """Packed, owning copy."""
        ...
