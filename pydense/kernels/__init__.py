"""
Matrix multiply kernels on raw column-major buffers.

Public API:
    mult(S, N, M, P, C, A, B)     - C[:, S:N] += A * B
    mult_block(...)               - scaled row/column block of C += alpha*A*B
    mult_viewport(...)            - mult_block in inner-dimension viewports
"""

from pydense.kernels.mult import (
    VLEN_DEFAULT,
    mult,
    mult_block,
    mult_viewport,
)

__all__ = [
    "VLEN_DEFAULT",
    "mult",
    "mult_block",
    "mult_viewport",
]
