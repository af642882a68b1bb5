"""
Accumulate primitives for the multiply kernels.

Each backend exposes a `name` and one operation,
axpy(alpha, x, xoff, y, yoff, n): y[yoff:yoff+n] += alpha * x[xoff:xoff+n].

    reference: plain Python loop
    blas:      scipy.linalg.blas ?axpy
"""

from pydense.kernels.backends.reference import ReferenceBackend
from pydense.kernels.backends.blas import BLASBackend

__all__ = [
    "ReferenceBackend",
    "BLASBackend",
]
