"""
Dense column-major matrices.

Public API:
    FloatMatrix, ComplexMatrix         - matrix types
    float_zeros, float_with_value, ... - constructors
    reshape, set_values                - generic free functions
    rows, cols, num_elements, size     - None-safe shape queries
"""

from pydense.dense._arithmetic import DenseMatrix
from pydense.dense.real import FloatMatrix
from pydense.dense.complex import ComplexMatrix
from pydense.dense.constructors import (
    DataOrder,
    float_zeros,
    float_ones,
    float_with_value,
    float_diagonal,
    float_new,
    float_from_array,
    complex_zeros,
    complex_ones,
    complex_with_value,
    complex_diagonal,
    complex_new,
    complex_from_array,
)
from pydense.dense.ops import (
    rows,
    cols,
    num_elements,
    size,
    size_match,
    reshape,
    set_values,
)

__all__ = [
    # Types
    "DenseMatrix",
    "FloatMatrix",
    "ComplexMatrix",
    "DataOrder",
    # Constructors
    "float_zeros",
    "float_ones",
    "float_with_value",
    "float_diagonal",
    "float_new",
    "float_from_array",
    "complex_zeros",
    "complex_ones",
    "complex_with_value",
    "complex_diagonal",
    "complex_new",
    "complex_from_array",
    # Free functions
    "rows",
    "cols",
    "num_elements",
    "size",
    "size_match",
    "reshape",
    "set_values",
]
