"""
Elementwise apply framework.

Three primitives, shared by real and complex matrices:

    apply(C, fn)                  A[k] = fn(C[k]) for every k
    apply_to_indexes(C, ks, fn)   A[k] = fn(C[k]) for k in ks
    apply_const(C, fn, x)         A[k] = fn(C[k], x) for every k

C=None means A itself. A companion matrix must match A in shape and scalar
kind; otherwise the primitive returns None and A is left untouched.

fn is either a pure scalar callable, called once per element in
column-major order, or a numpy ufunc, called once on the whole selection.
A companion is read completely before anything is written, so an
overlapping view as source sees the original values.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable

import numpy as np
from numpy.typing import NDArray


def _map(fn: Callable[[Any], Any], values: NDArray[Any]) -> NDArray[Any] | list[Any]:
    if isinstance(fn, np.ufunc):
        return fn(values)
    return [fn(v) for v in values.tolist()]


def _map_const(fn: Callable[[Any, Any], Any], values: NDArray[Any], x: Any) -> NDArray[Any] | list[Any]:
    if isinstance(fn, np.ufunc):
        return fn(values, x)
    return [fn(v, x) for v in values.tolist()]


class ApplyMixin:
    """Apply primitives over a DenseStorage."""

    __slots__ = ()

    def _store(self, values: NDArray[Any] | list[Any]) -> None:
        """Write values (column-major order) into every element."""
        n = self.num_elements()
        if self._step == self._rows:
            self._elements[:n] = values
        else:
            self._elements[self._offsets()] = values

    def apply(self, source, fn: Callable[[Any], Any]):
        """
        Compute A = fn(C) elementwise; C=None computes A = fn(A) in place.

        Returns:
            self, or None if C does not match A's shape
        """
        if source is not None and not self._compatible(source, 'apply'):
            return None
        src = self if source is None else source
        self._store(_map(fn, src._values()))
        return self

    def apply_to_indexes(self, source, indexes: Iterable[int], fn: Callable[[Any], Any]):
        """
        Compute A[k] = fn(C[k]) for k in indexes, in the given order.

        Indexes are logical column-major offsets used as given. All of them
        are range-checked before any element is written. Elements not listed
        are untouched.

        With C=None the update is in place: a repeated offset is applied
        repeatedly, each time to the value the previous pass left. With a
        companion C every source value is read before the first write.

        Returns:
            self, or None if C does not match A's shape

        Raises:
            IndexOutOfRangeError: For an offset outside [0, N); A is unchanged
        """
        if source is not None and not self._compatible(source, 'apply_to_indexes'):
            return None
        offsets = [self._check_offset(k) for k in indexes]
        targets = [self._physical(k) for k in offsets]
        if source is None:
            for p in targets:
                self._elements[p] = fn(self._elements[p].item())
            return self
        values = [source._elements[source._physical(k)].item() for k in offsets]
        for p, value in zip(targets, values):
            self._elements[p] = fn(value)
        return self

    def apply_const(self, source, fn: Callable[[Any, Any], Any], x: Any):
        """
        Compute A = fn(C, x) elementwise; C=None computes A = fn(A, x).

        Returns:
            self, or None if C does not match A's shape
        """
        if source is not None and not self._compatible(source, 'apply_const'):
            return None
        src = self if source is None else source
        self._store(_map_const(fn, src._values(), x))
        return self
