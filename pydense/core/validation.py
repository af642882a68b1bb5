"""
Input validation utilities for PyDense.

Used at the construction boundary and by the kernels' optional bounds
checks. The numeric core itself does not validate; it follows the quiet
failure policy described in pydense.core.config.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydense.core.exceptions import DimensionError, ValidationError


def check_array(
    array: ArrayLike,
    name: str,
    dtype: type = np.float64,
) -> NDArray[Any]:
    """
    Validate and convert input to a numpy array of the requested dtype.

    Rejects inputs that result in object dtype (mixed or non-numeric data)
    and complex data when a real dtype is requested.

    Args:
        array: Input to validate
        name: Parameter name for error messages
        dtype: np.float64 or np.complex128

    Returns:
        numpy.ndarray with the requested dtype

    Raises:
        ValidationError: If input cannot be converted
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number) and result.dtype != np.bool_:
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.iscomplexobj(result) and not np.issubdtype(dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex data cannot be stored in a real-valued matrix"
        )

    return result.astype(dtype, copy=False)


def check_2d(array: NDArray[Any], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Raises:
        DimensionError: If array is not 2D
    """
    if array.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}"
        )


def check_nonnegative_int(value: Any, name: str) -> int:
    """
    Verify value is a non-negative integer and return it as int.

    Raises:
        ValidationError: If value is not an integer or is negative
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValidationError(f"{name}: expected integer, got {type(value).__name__}")
    if value < 0:
        raise ValidationError(f"{name}: must be non-negative, got {value}")
    return int(value)


def check_length(values: NDArray[Any], expected: int, name: str) -> None:
    """
    Verify a flat value sequence has exactly the expected length.

    Raises:
        DimensionError: On length mismatch
    """
    if values.size != expected:
        raise DimensionError(
            f"{name}: expected {expected} values, got {values.size}"
        )


def check_buffer_length(buffer: NDArray[Any], required: int, name: str) -> None:
    """
    Verify a raw 1-D buffer holds at least `required` elements.

    Raises:
        DimensionError: If buffer is not 1D or is too short
    """
    if buffer.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D buffer, got {buffer.ndim}D with shape {buffer.shape}"
        )
    if buffer.shape[0] < required:
        raise DimensionError(
            f"{name}: buffer holds {buffer.shape[0]} elements, need at least {required}"
        )
