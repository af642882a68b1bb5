"""
FloatMatrix: real-valued (float64) column-major matrix.
"""

from __future__ import annotations

from functools import partial

import numpy as np

from pydense.dense._arithmetic import DenseMatrix, _IEEE


def _fmod(divisor: float, value: float) -> float:
    # C fmod semantics: result has the sign of value, fmod(x, 0) is nan
    with np.errstate(**_IEEE):
        return float(np.fmod(value, divisor))


class FloatMatrix(DenseMatrix):
    """
    Real-valued dense matrix.

    Adds the operations that need an ordering or a remainder, which complex
    matrices do not have: mod, max, min.
    """

    __slots__ = ()

    _dtype = np.float64

    def mod(self, alpha: float, *indexes: int) -> FloatMatrix:
        """
        In place remainder A %= alpha, for all elements or only at indexes.

        Uses C fmod semantics: the result takes the sign of the dividend.
        """
        if not indexes:
            with np.errstate(**_IEEE):
                self.apply_const(None, np.fmod, alpha)
            return self
        self.apply_to_indexes(None, self._normalized(indexes), partial(_fmod, alpha))
        return self

    def max(self, *indexes: int) -> float:
        """
        Largest element, or largest element at indexes.

        Returns -inf for an empty selection; NaN propagates.
        """
        return float(np.max(self._selection(indexes), initial=-np.inf))

    def min(self, *indexes: int) -> float:
        """
        Smallest element, or smallest element at indexes.

        Returns +inf for an empty selection; NaN propagates.
        """
        return float(np.min(self._selection(indexes), initial=np.inf))
