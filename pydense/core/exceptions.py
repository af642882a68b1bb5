"""
Exception hierarchy for PyDense.

All exceptions inherit from PyDenseError to allow catching any
library-specific error.

Most failure modes in PyDense are quiet by default: shape mismatches return
None, invalid selectors return empty index sets, short value sequences are
truncated. The exceptions below are raised for genuine precondition
violations, and for the quiet failure modes when the active error policy
asks for it (see pydense.core.config).

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
"""


class PyDenseError(Exception):
    """Base exception for all PyDense errors."""
    pass


class ValidationError(PyDenseError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Attributes:
        expected: Expected shape (rows, cols), if known
        actual: Actual shape (rows, cols), if known
    """

    def __init__(
        self,
        message: str,
        expected: tuple[int, int] | None = None,
        actual: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class IndexOutOfRangeError(ValidationError, IndexError):
    """
    Element offset or row/column selector outside the matrix.

    Also an IndexError so generic sequence handling catches it.

    Attributes:
        index: The offending index as passed by the caller
        size: Number of valid positions
    """

    def __init__(self, message: str, index: int | None = None, size: int | None = None):
        super().__init__(message)
        self.index = index
        self.size = size


class SequenceLengthError(ValidationError):
    """
    Parallel index and value sequences differ in length.

    Attributes:
        n_indexes: Number of indexes supplied
        n_values: Number of values supplied
    """

    def __init__(self, message: str, n_indexes: int, n_values: int):
        super().__init__(message)
        self.n_indexes = n_indexes
        self.n_values = n_values


class TypeMismatchError(ValidationError):
    """Real-valued and complex-valued matrices mixed in one operation."""
    pass


class LenientOperationWarning(UserWarning):
    """
    Emitted when an operation silently degrades under the 'warn' policy.

    Examples: a shape-mismatched sum returning None, a reshape that does
    nothing, a value sequence truncated to the index sequence.
    """
    pass
