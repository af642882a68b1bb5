"""
Index-set algebra.

Pure functions building lists of logical column-major offsets for use with
scale(), add(), sum(), max(), min() and apply_to_indexes().
"""

from pydense.indexing._sets import (
    make_index_set,
    make_diagonal_set,
    row_indexes,
    column_indexes,
    diagonal_indexes,
)

__all__ = [
    "make_index_set",
    "make_diagonal_set",
    "row_indexes",
    "column_indexes",
    "diagonal_indexes",
]
