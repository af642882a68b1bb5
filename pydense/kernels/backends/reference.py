"""
Reference accumulate primitive in plain Python.

Slow, but free of any library behavior; used to cross-check the BLAS
backend and as the ground truth in tests.
"""

from __future__ import annotations

from typing import Any

from numpy.typing import NDArray


class ReferenceBackend:
    """Scalar-loop accumulate primitive."""

    @property
    def name(self) -> str:
        return 'reference'

    def axpy(
        self,
        alpha: Any,
        x: NDArray[Any],
        xoff: int,
        y: NDArray[Any],
        yoff: int,
        n: int,
    ) -> None:
        """y[yoff:yoff+n] += x[xoff:xoff+n] * alpha, one element at a time."""
        for i in range(n):
            y[yoff + i] += x[xoff + i] * alpha
