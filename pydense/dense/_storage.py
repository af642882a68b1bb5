"""
Column-major storage model shared by real and complex matrices.

A matrix is a 1-D numpy buffer plus the triple (rows, cols, step). Element
(i, j) lives at physical offset j*step + i. For a packed matrix step equals
rows; a view created with view() keeps the owner's step and shares the
owner's buffer.

Index sets throughout PyDense are *logical* column-major element numbers
k in [0, rows*cols). A logical number resolves to the physical offset
(k // rows) * step + k % rows, which is the identity for packed matrices.

Views alias their owner on purpose (in-place row/column updates go through
them). A view keeps a reference to its owner, so the owner's buffer lives at
least as long as any view of it.
"""

from __future__ import annotations

from typing import Any, ClassVar

import numpy as np
from numpy.typing import NDArray

from pydense.core.config import report
from pydense.core.exceptions import (
    DimensionError,
    IndexOutOfRangeError,
    TypeMismatchError,
)
from pydense.core.tolerances import ToleranceTier, FP64


class DenseStorage:
    """
    Dimensions, buffer and element access for a column-major matrix.

    Subclasses fix the scalar kind through the _dtype class attribute.
    Construct matrices with the functions in pydense.dense.constructors.
    """

    __slots__ = ("_elements", "_rows", "_cols", "_step", "_owner")

    _dtype: ClassVar[type] = np.float64

    def __init__(
        self,
        rows: int,
        cols: int,
        elements: NDArray[Any] | None = None,
        step: int | None = None,
        owner: DenseStorage | None = None,
    ):
        """
        Internal constructor.

        Args:
            rows: Row count
            cols: Column count
            elements: 1-D buffer of the subclass dtype. Allocated (zeroed)
                      when None.
            step: Leading stride. Defaults to rows.
            owner: Owning matrix for views, None for an owner.
        """
        if elements is None:
            elements = np.zeros(rows * cols, dtype=self._dtype)
        self._elements = elements
        self._rows = rows
        self._cols = cols
        self._step = rows if step is None else step
        self._owner = owner

    # =========================================================================
    # Shape
    # =========================================================================

    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    def cols(self) -> int:
        """Number of columns."""
        return self._cols

    def size(self) -> tuple[int, int]:
        """Matrix size as (rows, cols)."""
        return self._rows, self._cols

    def num_elements(self) -> int:
        """Total number of elements, rows * cols."""
        return self._rows * self._cols

    def leading_index(self) -> int:
        """Distance between the starts of consecutive columns."""
        return self._step

    def set_size(self, rows: int, cols: int) -> None:
        """
        Set dimensions. Does not touch the buffer.

        The leading stride becomes rows. No element-count check is made;
        use pydense.dense.ops.reshape() for a checked reshape.
        """
        self._rows = rows
        self._cols = cols
        self._step = rows

    def size_match(self, rows: int, cols: int) -> bool:
        """True if this matrix is rows x cols."""
        return self._rows == rows and self._cols == cols

    def is_complex(self) -> bool:
        """True for complex-valued matrices."""
        return np.issubdtype(self._dtype, np.complexfloating)

    def equal_types(self, *others: Any) -> bool:
        """True if every matrix in others has the same scalar kind."""
        for other in others:
            is_complex = getattr(other, 'is_complex', None)
            if is_complex is None or is_complex() != self.is_complex():
                return False
        return True

    # =========================================================================
    # Buffer access
    # =========================================================================

    def float_array(self) -> NDArray[np.float64] | None:
        """Underlying float64 buffer, or None if complex valued."""
        return None if self.is_complex() else self._elements

    def complex_array(self) -> NDArray[np.complex128] | None:
        """Underlying complex128 buffer, or None if float valued."""
        return self._elements if self.is_complex() else None

    def float(self) -> float:
        """Value of A[0,0] for a real matrix; NaN otherwise."""
        if self.is_complex() or self.num_elements() == 0:
            return float('nan')
        return float(self._elements[0])

    def complex(self) -> complex:
        """Value of A[0,0] for a complex matrix; NaN otherwise."""
        if not self.is_complex() or self.num_elements() == 0:
            return complex(float('nan'), float('nan'))
        return complex(self._elements[0])

    # =========================================================================
    # Offsets
    # =========================================================================

    def _physical(self, k: int) -> int:
        """Physical buffer offset of logical element k."""
        if self._step == self._rows:
            return k
        return (k // self._rows) * self._step + k % self._rows

    def _offsets(self) -> NDArray[np.intp]:
        """Physical offsets of all elements, column-major order."""
        k = np.arange(self.num_elements(), dtype=np.intp)
        if self._step == self._rows or k.size == 0:
            return k
        return (k // self._rows) * self._step + k % self._rows

    def _values(self) -> NDArray[Any]:
        """
        All elements in column-major order.

        A view of the buffer for packed matrices, a copy otherwise.
        """
        if self._step == self._rows:
            return self._elements[:self.num_elements()]
        return self._elements[self._offsets()]

    def _normalize(self, k: int) -> int:
        """
        Map a caller index to a logical offset, k < 0 meaning N + k.

        Raises:
            IndexOutOfRangeError: If k < -N or k >= N
        """
        n = self.num_elements()
        if k < 0:
            k = n + k
        return self._check_offset(k)

    def _check_offset(self, k: int) -> int:
        n = self.num_elements()
        if k < 0 or k >= n:
            raise IndexOutOfRangeError(
                f"index {k} out of range for matrix with {n} elements",
                index=k,
                size=n,
            )
        return int(k)

    def _same_layout(self, other: Any) -> bool:
        return self.equal_types(other) and self.size_match(*other.size())

    def _compatible(self, other: Any, operation: str) -> bool:
        """
        Check other has the same scalar kind and shape as self.

        Mismatches are reported through the 'shape' error policy and
        return False.
        """
        if not self.equal_types(other):
            msg = f"{operation}: cannot mix real and complex matrices"
            report('shape', msg, TypeMismatchError(msg))
            return False
        if not self.size_match(*other.size()):
            msg = (
                f"{operation}: shape mismatch, expected {self.size()}, "
                f"got {other.size()}"
            )
            report('shape', msg, DimensionError(msg, expected=self.size(), actual=other.size()))
            return False
        return True

    # =========================================================================
    # Element access
    # =========================================================================

    def _coordinate(self, i: int, j: int) -> int:
        """Physical offset of (i, j); negative i, j count from the end."""
        if i < 0:
            i += self._rows
        if j < 0:
            j += self._cols
        if not (0 <= i < self._rows and 0 <= j < self._cols):
            raise IndexOutOfRangeError(
                f"element ({i}, {j}) out of range for {self._rows}x{self._cols} matrix"
            )
        return j * self._step + i

    def get_at(self, i: int, j: int) -> Any:
        """Element A[i, j]."""
        return self._elements[self._coordinate(i, j)].item()

    def set_at(self, i: int, j: int, value: Any) -> None:
        """Set A[i, j] = value."""
        self._elements[self._coordinate(i, j)] = value

    def get_index(self, k: int) -> Any:
        """Element at column-major index k; k < 0 counts from the end."""
        return self._elements[self._physical(self._normalize(k))].item()

    def set_index(self, k: int, value: Any) -> None:
        """Set element at column-major index k."""
        self._elements[self._physical(self._normalize(k))] = value

    def get_row_array(self, i: int, out: NDArray[Any] | None = None) -> NDArray[Any]:
        """
        Copy row i into out and return it.

        Args:
            i: Row index
            out: Scratch buffer of at least cols elements. Allocated when None.
        """
        if out is None:
            out = np.empty(self._cols, dtype=self._dtype)
        if self._cols > 0:
            start = self._coordinate(i, 0)
            out[:self._cols] = self._elements[start::self._step][:self._cols]
        return out

    def get_column_array(self, j: int, out: NDArray[Any] | None = None) -> NDArray[Any]:
        """
        Copy column j into out and return it.

        Args:
            j: Column index
            out: Scratch buffer of at least rows elements. Allocated when None.
        """
        if out is None:
            out = np.empty(self._rows, dtype=self._dtype)
        if self._rows > 0:
            start = self._coordinate(0, j)
            out[:self._rows] = self._elements[start:start + self._rows]
        return out

    # =========================================================================
    # Views and copies
    # =========================================================================

    def view(self, row: int, col: int, nrows: int, ncols: int) -> DenseStorage:
        """
        Submatrix view A[row:row+nrows, col:col+ncols] sharing this buffer.

        Writes through the view are visible through this matrix and vice
        versa. The view keeps the leading stride of this matrix.

        Raises:
            DimensionError: If the block does not fit inside this matrix
        """
        if (row < 0 or col < 0 or nrows < 0 or ncols < 0
                or row + nrows > self._rows or col + ncols > self._cols):
            raise DimensionError(
                f"view [{row}:{row + nrows}, {col}:{col + ncols}] does not fit "
                f"in {self._rows}x{self._cols} matrix",
                expected=self.size(),
                actual=(row + nrows, col + ncols),
            )
        offset = col * self._step + row
        return type(self)(
            nrows,
            ncols,
            elements=self._elements[offset:],
            step=self._step,
            owner=self.owner,
        )

    @property
    def owner(self) -> DenseStorage:
        """Matrix owning the buffer; self for an owning matrix."""
        return self if self._owner is None else self._owner

    def is_view(self) -> bool:
        """True if this matrix shares another matrix's buffer."""
        return self._owner is not None

    def make_copy(self) -> DenseStorage:
        """Packed, owning copy."""
        return type(self)(self._rows, self._cols, elements=np.array(self._values(), dtype=self._dtype))

    def to_numpy(self) -> NDArray[Any]:
        """Elements as a new 2-D (rows, cols) ndarray."""
        return np.array(self._values()).reshape((self._rows, self._cols), order='F')

    # =========================================================================
    # Comparison
    # =========================================================================

    def equal(self, other: Any) -> bool:
        """True if other has the same kind and shape and all A[i,j] == B[i,j]."""
        if not isinstance(other, DenseStorage) or not self._same_layout(other):
            return False
        return bool(np.array_equal(self._values(), other._values()))

    def all_close(self, other: Any, tolerance: ToleranceTier = FP64) -> bool:
        """Elementwise approximate equality within a tolerance tier."""
        if not isinstance(other, DenseStorage) or not self._same_layout(other):
            return False
        return bool(np.allclose(
            self._values(), other._values(),
            rtol=tolerance.rtol, atol=tolerance.atol,
        ))

    def __repr__(self) -> str:
        view = ", view" if self.is_view() else ""
        return (
            f"{type(self).__name__}(rows={self._rows}, cols={self._cols}, "
            f"step={self._step}{view})"
        )
