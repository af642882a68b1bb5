"""
PyDense: column-major dense matrices for Python.

Real and complex two-dimensional arrays in linear memory with element-wise
arithmetic, reductions, index-set selection and a sparsity-aware matrix
multiply kernel.

Submodules:
    core: Exceptions, error policy, protocols, validation, tolerances
    dense: FloatMatrix, ComplexMatrix and their constructors
    indexing: Index-set algebra (rows, columns, diagonals, ranges)
    kernels: Multiply kernels over raw buffers
"""

__version__ = "0.1.0"

from pydense import core
from pydense import dense
from pydense import indexing
from pydense import kernels

from pydense.dense import (
    FloatMatrix,
    ComplexMatrix,
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
    reshape,
    set_values,
)
from pydense.core.config import error_policy, get_error_policy, set_error_policy

__all__ = [
    "__version__",
    "core",
    "dense",
    "indexing",
    "kernels",
    "FloatMatrix",
    "ComplexMatrix",
    "DataOrder",
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
    "reshape",
    "set_values",
    "error_policy",
    "get_error_policy",
    "set_error_policy",
]
