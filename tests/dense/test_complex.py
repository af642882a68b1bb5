"""
Tests for ComplexMatrix: shared operations with complex scalars and the
real/complex flavor boundary.
"""

import cmath

import numpy as np
import pytest

from pydense.core.config import error_policy
from pydense.core.exceptions import TypeMismatchError
from pydense.dense import (
    ComplexMatrix,
    complex_from_array,
    complex_new,
    complex_zeros,
    float_zeros,
)


@pytest.fixture
def crand(rng):
    def make(rows, cols):
        return rng.standard_normal((rows, cols)) + 1j * rng.standard_normal((rows, cols))
    return make


class TestComplexStorage:

    def test_layout(self, c22):
        assert isinstance(c22, ComplexMatrix)
        np.testing.assert_array_equal(c22.to_numpy(), [[1 + 1j, 2], [3, 4 - 2j]])

    def test_elements_are_python_complex(self, c22):
        assert type(c22.get_at(1, 1)) is complex
        assert c22.get_index(-1) == 4 - 2j

    def test_view(self, c22):
        V = c22.view(0, 1, 2, 1)
        V.scale(1j)
        np.testing.assert_array_equal(c22.to_numpy(), [[1 + 1j, 2j], [3, 2 + 4j]])


class TestComplexArithmetic:

    def test_elementwise_matches_numpy(self, crand):
        a, b = crand(3, 2), crand(3, 2)
        A, B = complex_from_array(a), complex_from_array(b)
        np.testing.assert_allclose(A.plus(B).to_numpy(), a + b)
        np.testing.assert_allclose(A.minus(B).to_numpy(), a - b)
        np.testing.assert_allclose(A.mul(B).to_numpy(), a * b)
        np.testing.assert_allclose(A.div(B).to_numpy(), a / b)

    def test_times_matches_numpy(self, crand):
        a, b = crand(4, 3), crand(3, 5)
        C = complex_from_array(a).times(complex_from_array(b))
        np.testing.assert_allclose(C.to_numpy(), a @ b, rtol=1e-12)

    def test_scale_and_add(self, c22):
        c22.scale(2j).add(1.0, 0)
        np.testing.assert_allclose(
            c22.to_numpy(), [[(1 + 1j) * 2j + 1, 4j], [6j, (4 - 2j) * 2j]]
        )

    def test_add_indexes(self, c22):
        c22.add_indexes([0, 3], [1j, -4 + 2j])
        np.testing.assert_array_equal(c22.complex_array(), [1 + 2j, 3, 2, 0])

    def test_sum(self, c22):
        assert c22.sum() == 10 - 1j
        assert c22.sum(1, 2) == 5

    def test_exp_log_pow(self, c22):
        z = c22.to_numpy()
        np.testing.assert_allclose(c22.exp().to_numpy(), np.exp(z))
        np.testing.assert_allclose(c22.log().to_numpy(), np.log(z))
        np.testing.assert_allclose(c22.pow(2).to_numpy(), z ** 2)

    def test_apply_scalar_callable(self, c22):
        c22.apply(None, lambda z: z.conjugate())
        np.testing.assert_array_equal(c22.complex_array(), [1 - 1j, 3, 2, 4 + 2j])

    def test_log_of_zero(self):
        L = complex_zeros(1, 1).log()
        assert cmath.isinf(L.complex())

    def test_no_ordering_operations(self, c22):
        assert not hasattr(c22, 'max')
        assert not hasattr(c22, 'min')
        assert not hasattr(c22, 'mod')


class TestFlavorBoundary:

    @pytest.mark.parametrize("name", ["plus", "minus", "mul", "div", "times"])
    def test_mixed_flavors_return_none(self, name):
        R = float_zeros(2, 2)
        C = complex_zeros(2, 2)
        assert getattr(R, name)(C) is None
        assert getattr(C, name)(R) is None

    def test_mixed_flavors_raise_under_policy(self):
        with error_policy(shape='raise'):
            with pytest.raises(TypeMismatchError):
                float_zeros(2, 2).plus(complex_zeros(2, 2))
            with pytest.raises(TypeMismatchError):
                complex_new(1, 1, [1j]).times(float_zeros(1, 1))
