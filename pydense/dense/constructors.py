"""
Matrix constructors.

Every constructor returns a packed, owning matrix (leading stride equal to
the row count) with a freshly allocated buffer.

    float_zeros(3, 2)
    float_with_value(3, 3, 2.0)
    float_diagonal(4, 1.0)
    float_new(2, 2, [1, 2, 3, 4], order=DataOrder.ROW)
    float_from_array(np.eye(3))

The complex_* functions mirror the float_* ones.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

import numpy as np
from numpy.typing import ArrayLike

from pydense.core.validation import (
    check_2d,
    check_array,
    check_length,
    check_nonnegative_int,
)
from pydense.dense._arithmetic import DenseMatrix
from pydense.dense.complex import ComplexMatrix
from pydense.dense.real import FloatMatrix


class DataOrder(Enum):
    """Order of a flat value sequence passed to float_new/complex_new."""
    ROW = 'row'
    COLUMN = 'column'


def _filled(cls: type[DenseMatrix], rows: int, cols: int, value: Any) -> DenseMatrix:
    rows = check_nonnegative_int(rows, 'rows')
    cols = check_nonnegative_int(cols, 'cols')
    elements = np.full(rows * cols, value, dtype=cls._dtype)
    return cls(rows, cols, elements=elements)


def _diagonal(cls: type[DenseMatrix], n: int, value: Any) -> DenseMatrix:
    n = check_nonnegative_int(n, 'n')
    diag = check_array(value, 'value', dtype=cls._dtype)
    if diag.ndim > 0:
        check_length(diag.ravel(), n, 'value')
    elements = np.zeros(n * n, dtype=cls._dtype)
    elements[::n + 1] = diag.ravel() if diag.ndim > 0 else diag
    return cls(n, n, elements=elements)


def _new(cls: type[DenseMatrix], rows: int, cols: int, values: ArrayLike, order: DataOrder) -> DenseMatrix:
    rows = check_nonnegative_int(rows, 'rows')
    cols = check_nonnegative_int(cols, 'cols')
    flat = check_array(values, 'values', dtype=cls._dtype).ravel()
    check_length(flat, rows * cols, 'values')
    if order is DataOrder.ROW:
        flat = flat.reshape((rows, cols)).ravel(order='F')
    return cls(rows, cols, elements=np.array(flat, dtype=cls._dtype))


def _from_array(cls: type[DenseMatrix], array: ArrayLike) -> DenseMatrix:
    data = check_array(array, 'array', dtype=cls._dtype)
    if data.ndim == 1:
        data = data.reshape(-1, 1)
    check_2d(data, 'array')
    rows, cols = data.shape
    return cls(rows, cols, elements=np.array(data.ravel(order='F'), dtype=cls._dtype))


# =============================================================================
# Real matrices
# =============================================================================

def float_zeros(rows: int, cols: int) -> FloatMatrix:
    """rows x cols matrix of zeros."""
    return _filled(FloatMatrix, rows, cols, 0.0)


def float_ones(rows: int, cols: int) -> FloatMatrix:
    """rows x cols matrix of ones."""
    return _filled(FloatMatrix, rows, cols, 1.0)


def float_with_value(rows: int, cols: int, value: float) -> FloatMatrix:
    """rows x cols matrix with every element set to value."""
    return _filled(FloatMatrix, rows, cols, value)


def float_diagonal(n: int, value: float | ArrayLike = 1.0) -> FloatMatrix:
    """
    n x n diagonal matrix.

    Args:
        n: Matrix order
        value: Scalar placed on every diagonal entry, or a sequence of n
               diagonal entries
    """
    return _diagonal(FloatMatrix, n, value)


def float_new(
    rows: int,
    cols: int,
    values: ArrayLike,
    order: DataOrder = DataOrder.COLUMN,
) -> FloatMatrix:
    """
    rows x cols matrix from a flat sequence of rows*cols values.

    Args:
        rows: Row count
        cols: Column count
        values: Element values, flattened
        order: DataOrder.COLUMN if values run down the columns,
               DataOrder.ROW if they run along the rows

    Raises:
        DimensionError: If len(values) != rows*cols
    """
    return _new(FloatMatrix, rows, cols, values, order)


def float_from_array(array: ArrayLike) -> FloatMatrix:
    """
    Matrix with the contents of a 2-D array-like (1-D becomes one column).

    The data is copied into column-major order.
    """
    return _from_array(FloatMatrix, array)


# =============================================================================
# Complex matrices
# =============================================================================

def complex_zeros(rows: int, cols: int) -> ComplexMatrix:
    """rows x cols complex matrix of zeros."""
    return _filled(ComplexMatrix, rows, cols, 0j)


def complex_ones(rows: int, cols: int) -> ComplexMatrix:
    return _filled(ComplexMatrix, rows, cols, 1 + 0j)


def complex_with_value(rows: int, cols: int, value: complex) -> ComplexMatrix:
    return _filled(ComplexMatrix, rows, cols, value)


def complex_diagonal(n: int, value: complex | ArrayLike = 1 + 0j) -> ComplexMatrix:
    """n x n complex diagonal matrix; see float_diagonal()."""
    return _diagonal(ComplexMatrix, n, value)


def complex_new(
    rows: int,
    cols: int,
    values: ArrayLike,
    order: DataOrder = DataOrder.COLUMN,
) -> ComplexMatrix:
    """rows x cols complex matrix from flat values; see float_new()."""
    return _new(ComplexMatrix, rows, cols, values, order)


def complex_from_array(array: ArrayLike) -> ComplexMatrix:
    return _from_array(ComplexMatrix, array)
