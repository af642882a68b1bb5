"""
Dense matrix-matrix multiply kernels on raw column-major buffers.

All kernels ACCUMULATE into C (C += A*B); callers wanting C = A*B zero C
first. Buffers are 1-D arrays allocated by the caller; the kernels never
allocate and, unless check_bounds=True, never validate lengths.

Sparsity short-circuit: when B[k, j] is exactly zero the whole update
C[:, j] += A[:, k] * B[k, j] is skipped. The walk through A still advances
by one column, so the next non-zero B[k, j] meets the right column of A.
Multiplying by diagonal or otherwise zero-heavy B costs proportionally less.

Kernels:
    mult:          C[:, S:N] += A * B[:, S:N]
    mult_block:    C[R:E, S:L] += alpha * A[R:E, :] * B[:, S:L]
    mult_viewport: as mult_block, accumulated in chunks of vlen inner
                   indexes to keep the touched part of A small
"""

from __future__ import annotations

from typing import Any, Literal

from numpy.typing import NDArray

from pydense.core.exceptions import DimensionError, ValidationError
from pydense.core.validation import check_buffer_length
from pydense.kernels.backends.blas import BLASBackend
from pydense.kernels.backends.reference import ReferenceBackend

BackendChoice = Literal['auto', 'blas', 'reference']

# Inner-dimension chunk length used by mult_viewport when vlen <= 0
VLEN_DEFAULT = 30


def _get_backend(backend: BackendChoice):
    """Select accumulate backend based on preference."""
    if backend in ('auto', 'blas'):
        return BLASBackend()
    if backend == 'reference':
        return ReferenceBackend()
    raise ValidationError(f"Unknown backend: {backend!r}")


def _check_range(lo: int, hi: int, limit: int, name: str) -> None:
    if not (0 <= lo <= hi <= limit):
        raise DimensionError(
            f"{name}: range [{lo}, {hi}) not within [0, {limit}]"
        )


def _check_buffers(
    C: NDArray[Any], A: NDArray[Any], B: NDArray[Any], M: int, N: int, P: int,
) -> None:
    check_buffer_length(C, M * N, 'C')
    check_buffer_length(A, M * P, 'A')
    check_buffer_length(B, P * N, 'B')


def mult(
    S: int,
    N: int,
    M: int,
    P: int,
    C: NDArray[Any],
    A: NDArray[Any],
    B: NDArray[Any],
    *,
    backend: BackendChoice = 'auto',
    check_bounds: bool = False,
) -> None:
    """
    Accumulate the matrix product C[:, S:N] += A * B[:, S:N].

    Call with S=0, N=C.cols for the full product.

    Args:
        S: First column of C (and B) to compute
        N: End column (exclusive)
        M: Rows in A and C
        P: Columns in A, rows in B
        C: Output buffer, M x (at least N), column-major
        A: M x P buffer, column-major
        B: P x (at least N) buffer, column-major
        backend: 'auto', 'blas' or 'reference'
        check_bounds: Validate column range and buffer lengths first

    Raises:
        DimensionError: Only with check_bounds=True, on a bad range or a
                        buffer too short for the stated dimensions
        ValidationError: On an unknown backend name
    """
    be = _get_backend(backend)
    if check_bounds:
        _check_range(S, N, N, 'columns')
        _check_buffers(C, A, B, M, N, P)

    cc = S * M          # C[0, j]
    br = S * P          # B[k, j]
    for j in range(S, N):
        ar = 0          # A[0, k]
        for k in range(P):
            beta = B[br]
            if beta != 0.0:
                be.axpy(beta, A, ar, C, cc, M)
            ar += M
            br += 1
        cc += M


def mult_block(
    C: NDArray[Any],
    A: NDArray[Any],
    B: NDArray[Any],
    alpha: Any,
    M: int,
    N: int,
    P: int,
    S: int,
    L: int,
    R: int,
    E: int,
    *,
    backend: BackendChoice = 'auto',
    check_bounds: bool = False,
) -> None:
    """
    Accumulate a scaled block product C[R:E, S:L] += alpha * A[R:E, :] * B[:, S:L].

    Args:
        C: M x N output buffer, column-major
        A: M x P buffer, column-major
        B: P x N buffer, column-major
        alpha: Scalar multiplier
        M: Rows in C and A
        N: Columns in C and B
        P: Columns in A, rows in B
        S, L: Column range of the block (L exclusive)
        R, E: Row range of the block (E exclusive)
        backend: 'auto', 'blas' or 'reference'
        check_bounds: Validate ranges and buffer lengths first
    """
    be = _get_backend(backend)
    if check_bounds:
        _check_range(S, L, N, 'columns')
        _check_range(R, E, M, 'rows')
        _check_buffers(C, A, B, M, N, P)

    n = E - R
    cc = S * M + R      # C[R, j]
    bc = S * P          # B[0, j]
    for j in range(S, L):
        ac = R          # A[R, k]
        br = bc
        for k in range(P):
            if B[br] != 0.0:
                be.axpy(B[br] * alpha, A, ac, C, cc, n)
            br += 1
            ac += M
        cc += M
        bc += P


def mult_viewport(
    C: NDArray[Any],
    A: NDArray[Any],
    B: NDArray[Any],
    alpha: Any,
    M: int,
    N: int,
    P: int,
    S: int,
    L: int,
    R: int,
    E: int,
    vlen: int = 0,
    *,
    backend: BackendChoice = 'auto',
    check_bounds: bool = False,
) -> None:
    """
    Same result as mult_block(), accumulated in viewports of vlen columns of A.

    Each pass runs over all target columns but only vlen inner indexes, so
    the rows R:E of those vlen columns of A are reused across the whole
    column range while still hot in cache.

    Args:
        vlen: Viewport length; VLEN_DEFAULT when <= 0
        (other arguments as in mult_block)
    """
    be = _get_backend(backend)
    if check_bounds:
        _check_range(S, L, N, 'columns')
        _check_range(R, E, M, 'rows')
        _check_buffers(C, A, B, M, N, P)
    if vlen <= 0:
        vlen = VLEN_DEFAULT

    n = E - R
    vp_start = 0
    vp_end = min(vlen, P)
    while vp_start < P:
        cc = S * M + R              # C[R, S]
        bc = S * P + vp_start       # B[vp_start, S]
        a_start = vp_start * M + R  # A[R, vp_start]
        for j in range(S, L):
            ac = a_start
            br = bc
            for k in range(vp_start, vp_end):
                if B[br] != 0.0:
                    be.axpy(B[br] * alpha, A, ac, C, cc, n)
                br += 1
                ac += M
            cc += M
            bc += P
        vp_start = vp_end
        vp_end = min(vp_end + vlen, P)
