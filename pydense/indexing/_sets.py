"""
Index sets: ordered lists of logical column-major element offsets.

Index sets are derived from a matrix shape and never hold a reference to
the matrix. Invalid selectors yield an empty list, so passing the result
to apply_to_indexes() or to the paired updates (scale_indexes,
add_indexes) is a no-op. The 'index' error policy can turn that into a
warning or an IndexOutOfRangeError.

Note that scale(alpha, *indexes) and friends treat an empty argument list
as "all elements"; check for an empty set before unpacking one there.
"""

from __future__ import annotations

from pydense.core.config import report
from pydense.core.exceptions import IndexOutOfRangeError
from pydense.core.protocols import Matrix


def make_index_set(start: int, end: int, step: int = 1) -> list[int]:
    """
    Indexes start, start+step, ... strictly below end.

    Negative start or end is clamped to 0 and a non-positive step is
    replaced by 1, so the result is never infinite.
    """
    start = max(start, 0)
    end = max(end, 0)
    if step <= 0:
        step = 1
    return list(range(start, end, step))


def make_diagonal_set(rows: int, cols: int) -> list[int]:
    """
    Offsets of the diagonal of a rows x cols matrix.

        indexes = make_diagonal_set(*A.size())

    Empty unless the matrix is square.
    """
    if rows != cols:
        return []
    return [i * rows + i for i in range(rows)]


def _out_of_range(what: str, index: int, limit: int) -> list[int]:
    msg = f"{what} index {index} out of range (limit {limit})"
    report('index', msg, IndexOutOfRangeError(msg, index=index, size=limit))
    return []


def row_indexes(m: Matrix, row: int) -> list[int]:
    """
    Offset list for a row of m: (row + i) * cols for i in range(cols).

    Empty when row exceeds the row count.
    """
    nrows, ncols = m.size()
    if row > nrows:
        return _out_of_range('row', row, nrows)
    return [(row + i) * ncols for i in range(ncols)]


def column_indexes(m: Matrix, col: int) -> list[int]:
    """
    Offset list for column col of m: col*rows + i for i in range(rows).

    Empty when col exceeds the column count.
    """
    nrows, ncols = m.size()
    if col > ncols:
        return _out_of_range('column', col, ncols)
    return [col * nrows + i for i in range(nrows)]


def diagonal_indexes(m: Matrix) -> list[int]:
    """Offset list for the diagonal of m; empty if m is not square."""
    return make_diagonal_set(*m.size())
