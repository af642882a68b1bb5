"""
BLAS accumulate primitive (scipy.linalg.blas ?axpy).

daxpy/zaxpy are selected from the buffer dtype. scipy updates y in place
when it is a contiguous array of the routine's type, which raw matrix
buffers always are; otherwise the returned array is copied back.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Callable

import numpy as np
from numpy.typing import NDArray
from scipy.linalg.blas import get_blas_funcs


@lru_cache(maxsize=None)
def _axpy_for(dtype: np.dtype) -> Callable[..., NDArray[Any]]:
    return get_blas_funcs('axpy', dtype=dtype)


class BLASBackend:
    """Accumulate primitive backed by the BLAS level-1 axpy routine."""

    @property
    def name(self) -> str:
        return 'blas'

    def axpy(
        self,
        alpha: Any,
        x: NDArray[Any],
        xoff: int,
        y: NDArray[Any],
        yoff: int,
        n: int,
    ) -> None:
        """y[yoff:yoff+n] += alpha * x[xoff:xoff+n]."""
        if n <= 0:
            return
        axpy = _axpy_for(y.dtype)
        z = axpy(x, y, n=n, a=alpha, offx=xoff, offy=yoff)
        if z is not y:
            y[yoff:yoff + n] = z[yoff:yoff + n]
