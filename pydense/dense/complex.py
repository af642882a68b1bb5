"""
ComplexMatrix: complex-valued (complex128) column-major matrix.
"""

from __future__ import annotations

import numpy as np

from pydense.dense._arithmetic import DenseMatrix


class ComplexMatrix(DenseMatrix):
    """
    Complex-valued dense matrix.

    Same layout and operations as FloatMatrix, minus those that need an
    ordering (max, min) or a remainder (mod). Scalars and results are
    Python complex numbers.
    """

    __slots__ = ()

    _dtype = np.complex128
