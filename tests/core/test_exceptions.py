"""
Tests for PyDense exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyDenseError)
    - Diagnostic attributes on DimensionError, IndexOutOfRangeError,
      SequenceLengthError
    - Default attribute values (None for optional attributes)
"""

import pytest

from pydense.core.exceptions import (
    DimensionError,
    IndexOutOfRangeError,
    LenientOperationWarning,
    PyDenseError,
    SequenceLengthError,
    TypeMismatchError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyDenseError."""

    def test_validation_error_is_pydense_error(self):
        with pytest.raises(PyDenseError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_index_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise IndexOutOfRangeError("too far")

    def test_index_error_is_builtin_index_error(self):
        with pytest.raises(IndexError):
            raise IndexOutOfRangeError("too far")

    def test_sequence_length_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise SequenceLengthError("short", n_indexes=3, n_values=1)

    def test_type_mismatch_is_pydense_error(self):
        with pytest.raises(PyDenseError):
            raise TypeMismatchError("real vs complex")

    def test_warning_is_user_warning(self):
        assert issubclass(LenientOperationWarning, UserWarning)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestAttributes:

    def test_dimension_error_shapes(self):
        err = DimensionError("plus: shape mismatch", expected=(2, 3), actual=(3, 2))
        assert err.expected == (2, 3)
        assert err.actual == (3, 2)
        assert "shape mismatch" in str(err)

    def test_dimension_error_defaults(self):
        err = DimensionError("bad")
        assert err.expected is None
        assert err.actual is None

    def test_index_error_attributes(self):
        err = IndexOutOfRangeError("index -7 out of range", index=-7, size=6)
        assert err.index == -7
        assert err.size == 6

    def test_sequence_length_attributes(self):
        err = SequenceLengthError("short", n_indexes=3, n_values=1)
        assert err.n_indexes == 3
        assert err.n_values == 1
