"""
Generic free functions over the Matrix protocol.

Shape queries accept None (an absent matrix, e.g. the result of a
shape-mismatched plus()) and report it as an empty 0 x 0 matrix, so
results can be inspected without a None check.
"""

from __future__ import annotations

import numpy as np

from pydense.core.config import report
from pydense.core.exceptions import DimensionError, TypeMismatchError
from pydense.core.protocols import Matrix


def rows(m: Matrix | None) -> int:
    """Row count, 0 for None."""
    return 0 if m is None else m.rows()


def cols(m: Matrix | None) -> int:
    """Column count, 0 for None."""
    return 0 if m is None else m.cols()


def num_elements(m: Matrix | None) -> int:
    """Element count, 0 for None."""
    return 0 if m is None else m.num_elements()


def size(m: Matrix | None) -> tuple[int, int]:
    """(rows, cols), (0, 0) for None."""
    return (0, 0) if m is None else m.size()


def size_match(m: Matrix | None, rows: int, cols: int) -> bool:
    """True if m is present and rows x cols."""
    return m is not None and m.size_match(rows, cols)


def _logical_offsets(m: Matrix) -> np.ndarray:
    """Buffer offsets of the elements of m in column-major order."""
    nrows, step = m.rows(), m.leading_index()
    k = np.arange(m.num_elements(), dtype=np.intp)
    if step == nrows or k.size == 0:
        return k
    return (k // nrows) * step + k % nrows


def reshape(m: Matrix, rows: int, cols: int) -> Matrix:
    """
    Change the shape of m if rows*cols equals its element count.

    The buffer is reinterpreted, never moved; the leading stride becomes
    rows. A mismatched element count leaves m unchanged (reported through
    the 'reshape' error policy).

    A strided view (leading stride larger than its row count) has gaps in
    its buffer that belong to the owner; reinterpreting it would expose
    them. Such a view is left unchanged and reported the same way. Reshape
    a make_copy() of it instead.

    Returns:
        m
    """
    if rows * cols != m.num_elements():
        msg = (
            f"reshape: cannot view {m.num_elements()} elements as "
            f"{rows}x{cols} ({rows * cols} elements)"
        )
        report('reshape', msg, DimensionError(msg, expected=m.size(), actual=(rows, cols)))
        return m
    if m.leading_index() != m.rows() and m.num_elements() > 0:
        msg = (
            f"reshape: {m.rows()}x{m.cols()} view with leading stride "
            f"{m.leading_index()} is not contiguous"
        )
        report('reshape', msg, DimensionError(msg, expected=m.size(), actual=(rows, cols)))
        return m
    m.set_size(rows, cols)
    return m


def set_values(x: Matrix, y: Matrix) -> Matrix:
    """
    Copy the elements of y into x (x = y).

    Shapes may differ as long as the element counts agree; elements are
    copied in column-major order, so views on either side only touch
    their own elements. Count or kind mismatch leaves x unchanged
    (reported through the 'shape' error policy).

    Returns:
        x
    """
    if x.num_elements() != y.num_elements():
        msg = (
            f"set_values: element count mismatch, {x.num_elements()} "
            f"vs {y.num_elements()}"
        )
        report('shape', msg, DimensionError(msg, expected=x.size(), actual=y.size()))
        return x
    if not x.equal_types(y):
        msg = "set_values: cannot mix real and complex matrices"
        report('shape', msg, TypeMismatchError(msg))
        return x
    dst = x.complex_array() if x.is_complex() else x.float_array()
    src = y.complex_array() if y.is_complex() else y.float_array()
    # source gathered into a copy first; x and y may share a buffer
    dst[_logical_offsets(x)] = src[_logical_offsets(y)]
    return x
