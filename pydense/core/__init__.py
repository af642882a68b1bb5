"""
Core infrastructure for PyDense.

Shared abstractions used by the dense matrix, indexing and kernel modules.

Key components:
    protocols: Matrix protocol
    exceptions: Exception hierarchy
    config: Error policy for quiet failure modes
    validation: Input validators
    tolerances: Tolerance tiers for approximate comparison
"""

from pydense.core.protocols import Matrix
from pydense.core.exceptions import (
    PyDenseError,
    ValidationError,
    DimensionError,
    IndexOutOfRangeError,
    SequenceLengthError,
    TypeMismatchError,
    LenientOperationWarning,
)
from pydense.core.config import (
    ErrorPolicy,
    LENIENT,
    STRICT,
    get_error_policy,
    set_error_policy,
    error_policy,
)
from pydense.core.tolerances import ToleranceTier, EXACT, FP64, FP64_ACCUMULATED

__all__ = [
    # Protocols
    "Matrix",
    # Exceptions
    "PyDenseError",
    "ValidationError",
    "DimensionError",
    "IndexOutOfRangeError",
    "SequenceLengthError",
    "TypeMismatchError",
    "LenientOperationWarning",
    # Error policy
    "ErrorPolicy",
    "LENIENT",
    "STRICT",
    "get_error_policy",
    "set_error_policy",
    "error_policy",
    # Tolerances
    "ToleranceTier",
    "EXACT",
    "FP64",
    "FP64_ACCUMULATED",
]
