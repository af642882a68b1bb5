"""
Arithmetic and reductions shared by real and complex matrices.

Binary elementwise operations (plus, minus, mul, div) and the matrix
product (times) return a fresh matrix, or None when the operands do not
fit. Scalar updates (scale, add and their indexed variants) work in place
on top of the apply primitives and return self.

Indexes passed to scale/add/sum are logical column-major offsets; a
negative index k means N + k.
"""

from __future__ import annotations

import operator
from functools import partial
from typing import Any, Sequence

import numpy as np

from pydense.core.config import report
from pydense.core.exceptions import DimensionError, SequenceLengthError, TypeMismatchError
from pydense.dense._apply import ApplyMixin
from pydense.dense._storage import DenseStorage

# IEEE results (inf, nan) instead of floating point warnings
_IEEE = dict(divide='ignore', invalid='ignore', over='ignore')


class DenseMatrix(ApplyMixin, DenseStorage):
    """
    Column-major dense matrix.

    Base class of FloatMatrix and ComplexMatrix; not instantiated directly.
    """

    __slots__ = ()

    def _zeros(self, rows: int, cols: int) -> DenseMatrix:
        return type(self)(rows, cols)

    def _normalized(self, indexes: Sequence[int]) -> list[int]:
        return [self._normalize(k) for k in indexes]

    def _paired_length(self, indexes: Sequence[int], values: Sequence[Any], operation: str) -> int:
        """Number of (index, value) pairs to process; reports short values."""
        if len(values) < len(indexes):
            msg = (
                f"{operation}: {len(indexes)} indexes but only {len(values)} values, "
                f"stopping after {len(values)}"
            )
            report('truncate', msg, SequenceLengthError(msg, len(indexes), len(values)))
        return min(len(indexes), len(values))

    # =========================================================================
    # Elementwise binary operations
    # =========================================================================

    def _elementwise(self, other: DenseMatrix, ufunc: np.ufunc, operation: str) -> DenseMatrix | None:
        if not self._compatible(other, operation):
            return None
        C = self._zeros(*self.size())
        with np.errstate(**_IEEE):
            C._store(ufunc(self._values(), other._values()))
        return C

    def plus(self, B: DenseMatrix) -> DenseMatrix | None:
        """Elementwise sum C = A + B. Returns a new matrix, None on mismatch."""
        return self._elementwise(B, np.add, 'plus')

    def minus(self, B: DenseMatrix) -> DenseMatrix | None:
        """Elementwise difference C = A - B. Returns a new matrix, None on mismatch."""
        return self._elementwise(B, np.subtract, 'minus')

    def mul(self, B: DenseMatrix) -> DenseMatrix | None:
        """Elementwise (Hadamard) product C = A .* B. None on mismatch."""
        return self._elementwise(B, np.multiply, 'mul')

    def div(self, B: DenseMatrix) -> DenseMatrix | None:
        """
        Elementwise quotient C = A ./ B. None on mismatch.

        Division by zero follows IEEE rules (inf or nan), no warning.
        """
        return self._elementwise(B, np.true_divide, 'div')

    def times(self, B: DenseMatrix) -> DenseMatrix | None:
        """
        Matrix product C = A * B where A is m x p and B is p x n.

        Each C[i, j] is the dot product of row i of A and column j of B;
        one row and one column scratch buffer are reused for all of them.

        Returns:
            New m x n matrix, or None if A.cols != B.rows
        """
        if not self.equal_types(B):
            msg = "times: cannot mix real and complex matrices"
            report('shape', msg, TypeMismatchError(msg))
            return None
        if self.cols() != B.rows():
            msg = f"times: A has {self.cols()} columns but B has {B.rows()} rows"
            report('shape', msg, DimensionError(msg, expected=(self.cols(), B.cols()), actual=B.size()))
            return None
        rows = self.rows()
        cols = B.cols()
        C = self._zeros(rows, cols)
        arow = np.empty(self.cols(), dtype=self._dtype)
        bcol = np.empty(B.rows(), dtype=self._dtype)
        for i in range(rows):
            arow = self.get_row_array(i, arow)
            for j in range(cols):
                bcol = B.get_column_array(j, bcol)
                C._elements[j * rows + i] += np.dot(arow, bcol)
        return C

    # =========================================================================
    # In-place scalar updates
    # =========================================================================

    def scale(self, alpha: Any, *indexes: int) -> DenseMatrix:
        """
        In place A *= alpha for all elements, or A[k] *= alpha for k in indexes.
        """
        if not indexes:
            with np.errstate(**_IEEE):
                self.apply_const(None, np.multiply, alpha)
            return self
        self.apply_to_indexes(None, self._normalized(indexes), partial(operator.mul, alpha))
        return self

    def add(self, alpha: Any, *indexes: int) -> DenseMatrix:
        """
        In place A += alpha for all elements, or A[k] += alpha for k in indexes.
        """
        if not indexes:
            with np.errstate(**_IEEE):
                self.apply_const(None, np.add, alpha)
            return self
        self.apply_to_indexes(None, self._normalized(indexes), partial(operator.add, alpha))
        return self

    def scale_indexes(self, indexes: Sequence[int], values: Sequence[Any]) -> DenseMatrix:
        """
        In place A[indexes[i]] *= values[i].

        Only the first min(len(indexes), len(values)) pairs are processed.
        """
        n = self._paired_length(indexes, values, 'scale_indexes')
        targets = self._normalized(list(indexes)[:n])
        for k, value in zip(targets, values):
            self.apply_to_indexes(None, (k,), partial(operator.mul, value))
        return self

    def add_indexes(self, indexes: Sequence[int], values: Sequence[Any]) -> DenseMatrix:
        """
        In place A[indexes[i]] += values[i].

        Only the first min(len(indexes), len(values)) pairs are processed.
        """
        n = self._paired_length(indexes, values, 'add_indexes')
        targets = self._normalized(list(indexes)[:n])
        for k, value in zip(targets, values):
            self.apply_to_indexes(None, (k,), partial(operator.add, value))
        return self

    # =========================================================================
    # Reductions
    # =========================================================================

    def _selection(self, indexes: Sequence[int]) -> np.ndarray:
        """Values at the given indexes, or all values when none are given."""
        if not indexes:
            return self._values()
        return self._elements[[self._physical(k) for k in self._normalized(indexes)]]

    def sum(self, *indexes: int) -> Any:
        """Sum of all elements, or of the elements at indexes."""
        return np.sum(self._selection(indexes)).item()

    # =========================================================================
    # Elementwise functions
    # =========================================================================

    def exp(self) -> DenseMatrix:
        """Elementwise exponential. Returns a new matrix."""
        C = self._zeros(*self.size())
        with np.errstate(**_IEEE):
            return C.apply(self, np.exp)

    def log(self) -> DenseMatrix:
        """Elementwise natural logarithm. Returns a new matrix."""
        C = self._zeros(*self.size())
        with np.errstate(**_IEEE):
            return C.apply(self, np.log)

    def pow(self, exponent: Any) -> DenseMatrix:
        """Elementwise power A[i,j] ** exponent. Returns a new matrix."""
        C = self._zeros(*self.size())
        with np.errstate(**_IEEE):
            return C.apply_const(self, np.power, exponent)
