"""
Tests for the multiply kernels on raw column-major buffers.

Every kernel is checked on both accumulate backends against a naive
triple loop or numpy.
"""

import numpy as np
import pytest

from pydense.core.exceptions import DimensionError, ValidationError
from pydense.core.tolerances import FP64_ACCUMULATED
from pydense.dense import float_diagonal, float_from_array, float_with_value, float_zeros
from pydense.kernels import VLEN_DEFAULT, mult, mult_block, mult_viewport

BACKENDS = ['reference', 'blas']


def naive_product(M, N, P, A, B):
    """C = A * B by the textbook triple loop on column-major buffers."""
    C = np.zeros(M * N, dtype=np.result_type(A, B))
    for j in range(N):
        for k in range(P):
            for i in range(M):
                C[j * M + i] += A[k * M + i] * B[j * P + k]
    return C


def assert_close(actual, expected):
    np.testing.assert_allclose(
        actual, expected,
        rtol=FP64_ACCUMULATED.rtol, atol=FP64_ACCUMULATED.atol,
    )


@pytest.fixture
def sparse_operands(rng):
    """8x8 A and a non-diagonal, partially zero 8x8 B."""
    n = 8
    A = rng.standard_normal(n * n)
    B = rng.standard_normal(n * n)
    B[rng.random(n * n) < 0.4] = 0.0
    return n, A, B


# ═══════════════════════════════════════════════════════════════════════
# mult
# ═══════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize("backend", BACKENDS)
class TestMult:

    def test_matches_naive_product(self, backend, sparse_operands):
        n, A, B = sparse_operands
        assert (B == 0.0).any() and (B != 0.0).any()
        C = np.zeros(n * n)
        mult(0, n, n, n, C, A, B, backend=backend)
        assert_close(C, naive_product(n, n, n, A, B))

    def test_non_square(self, backend, rng):
        M, P, N = 3, 5, 4
        A = rng.standard_normal(M * P)
        B = rng.standard_normal(P * N)
        C = np.zeros(M * N)
        mult(0, N, M, P, C, A, B, backend=backend)
        assert_close(C, naive_product(M, N, P, A, B))

    def test_accumulates(self, backend, sparse_operands):
        n, A, B = sparse_operands
        C = np.zeros(n * n)
        mult(0, n, n, n, C, A, B, backend=backend)
        once = C.copy()
        mult(0, n, n, n, C, A, B, backend=backend)
        assert_close(C, 2.0 * once)

    def test_adds_to_existing_contents(self, backend, rng):
        A = rng.standard_normal(4)
        B = rng.standard_normal(4)
        C = np.ones(4)
        mult(0, 2, 2, 2, C, A, B, backend=backend)
        assert_close(C, 1.0 + naive_product(2, 2, 2, A, B))

    @pytest.mark.parametrize("v", [1.0, -0.5, 3.0])
    def test_constant_times_diagonal(self, backend, v):
        n = 6
        A = float_with_value(n, n, 2.0)
        B = float_diagonal(n, v)
        C = float_zeros(n, n)
        mult(0, n, n, n, C.float_array(), A.float_array(), B.float_array(), backend=backend)
        np.testing.assert_array_equal(C.float_array(), np.full(n * n, 2.0 * v))

    def test_zero_run_lands_on_right_column(self, backend, rng):
        M, P, N = 3, 5, 2
        A = rng.standard_normal(M * P)
        B = np.zeros(P * N)
        B[0 * P + (P - 1)] = 1.0    # B[P-1, 0]
        B[1 * P + 2] = -2.0         # B[2, 1]
        C = np.zeros(M * N)
        mult(0, N, M, P, C, A, B, backend=backend)
        assert_close(C[:M], A[(P - 1) * M:P * M])
        assert_close(C[M:], -2.0 * A[2 * M:3 * M])

    def test_all_zero_b_leaves_c(self, backend, rng):
        A = rng.standard_normal(9)
        C = np.full(9, 7.0)
        mult(0, 3, 3, 3, C, A, np.zeros(9), backend=backend)
        np.testing.assert_array_equal(C, np.full(9, 7.0))

    def test_column_range(self, backend, rng):
        M, P, N = 4, 3, 6
        A = rng.standard_normal(M * P)
        B = rng.standard_normal(P * N)
        C = np.zeros(M * N)
        mult(2, 5, M, P, C, A, B, backend=backend)
        full = naive_product(M, N, P, A, B)
        np.testing.assert_array_equal(C[:2 * M], 0.0)
        assert_close(C[2 * M:5 * M], full[2 * M:5 * M])
        np.testing.assert_array_equal(C[5 * M:], 0.0)

    def test_complex_buffers(self, backend, rng):
        M, P, N = 3, 4, 2
        A = rng.standard_normal(M * P) + 1j * rng.standard_normal(M * P)
        B = rng.standard_normal(P * N) + 1j * rng.standard_normal(P * N)
        B[1] = 0.0
        C = np.zeros(M * N, dtype=np.complex128)
        mult(0, N, M, P, C, A, B, backend=backend)
        assert_close(C, naive_product(M, N, P, A, B))

    def test_agrees_with_times(self, backend, rng):
        a = rng.standard_normal((4, 3))
        b = rng.standard_normal((3, 5))
        expected = float_from_array(a).times(float_from_array(b))
        C = np.zeros(20)
        mult(0, 5, 4, 3, C, a.ravel(order='F'), b.ravel(order='F'), backend=backend)
        assert_close(C, expected.float_array())


class TestMultChecks:

    def test_unknown_backend(self):
        with pytest.raises(ValidationError, match="Unknown backend"):
            mult(0, 1, 1, 1, np.zeros(1), np.zeros(1), np.zeros(1), backend='cuda')

    def test_short_output_buffer(self):
        with pytest.raises(DimensionError, match="C: buffer holds 3"):
            mult(0, 2, 2, 2, np.zeros(3), np.zeros(4), np.zeros(4), check_bounds=True)

    def test_short_input_buffer(self):
        with pytest.raises(DimensionError, match="B: buffer holds"):
            mult(0, 2, 2, 2, np.zeros(4), np.zeros(4), np.zeros(2), check_bounds=True)

    def test_reversed_column_range(self):
        with pytest.raises(DimensionError, match="columns"):
            mult(3, 2, 2, 2, np.zeros(8), np.zeros(4), np.zeros(8), check_bounds=True)

    def test_empty_column_range_is_noop(self):
        C = np.zeros(4)
        mult(2, 2, 2, 2, C, np.ones(4), np.ones(4), check_bounds=True)
        np.testing.assert_array_equal(C, 0.0)


# ═══════════════════════════════════════════════════════════════════════
# mult_block / mult_viewport
# ═══════════════════════════════════════════════════════════════════════


def block_expected(c, a, b, alpha, S, L, R, E):
    expected = c.copy()
    expected[R:E, S:L] += alpha * a[R:E, :] @ b[:, S:L]
    return expected


@pytest.fixture
def block_operands(rng):
    M, N, P = 7, 6, 10
    a = rng.standard_normal((M, P))
    b = rng.standard_normal((P, N))
    b[rng.random((P, N)) < 0.3] = 0.0
    c = rng.standard_normal((M, N))
    return M, N, P, a, b, c


@pytest.mark.parametrize("backend", BACKENDS)
class TestBlockKernels:

    @pytest.mark.parametrize("S, L, R, E", [
        (0, 6, 0, 7),
        (1, 4, 2, 5),
        (5, 6, 6, 7),
        (2, 2, 0, 7),
    ])
    def test_block_matches_numpy(self, backend, block_operands, S, L, R, E):
        M, N, P, a, b, c = block_operands
        C = c.ravel(order='F')
        mult_block(
            C, a.ravel(order='F'), b.ravel(order='F'), 1.5,
            M, N, P, S, L, R, E, backend=backend,
        )
        expected = block_expected(c, a, b, 1.5, S, L, R, E)
        assert_close(C.reshape((M, N), order='F'), expected)

    @pytest.mark.parametrize("vlen", [0, 1, 3, 7, 10, 100])
    def test_viewport_matches_block(self, backend, block_operands, vlen):
        M, N, P, a, b, c = block_operands
        A, B = a.ravel(order='F'), b.ravel(order='F')
        C_block = c.ravel(order='F')
        C_view = c.ravel(order='F')
        mult_block(C_block, A, B, -0.5, M, N, P, 1, 5, 1, 6, backend=backend)
        mult_viewport(C_view, A, B, -0.5, M, N, P, 1, 5, 1, 6, vlen, backend=backend)
        assert_close(C_view, C_block)

    def test_viewport_matches_numpy(self, backend, block_operands):
        M, N, P, a, b, c = block_operands
        C = c.ravel(order='F')
        mult_viewport(
            C, a.ravel(order='F'), b.ravel(order='F'), 2.0,
            M, N, P, 0, N, 0, M, backend=backend,
        )
        assert_close(C.reshape((M, N), order='F'), block_expected(c, a, b, 2.0, 0, N, 0, M))


class TestBlockChecks:

    def test_default_viewport_length(self):
        assert VLEN_DEFAULT == 30

    def test_rows_out_of_range(self):
        with pytest.raises(DimensionError, match="rows"):
            mult_block(
                np.zeros(4), np.zeros(4), np.zeros(4), 1.0,
                2, 2, 2, 0, 2, 0, 3, check_bounds=True,
            )

    def test_columns_out_of_range(self):
        with pytest.raises(DimensionError, match="columns"):
            mult_viewport(
                np.zeros(4), np.zeros(4), np.zeros(4), 1.0,
                2, 2, 2, 0, 3, 0, 2, check_bounds=True,
            )
