"""
Error policy configuration.

PyDense reports recoverable failures quietly by default: an absent result,
an empty index set, a truncated loop, a no-op. The error policy decides,
per failure kind, whether such a site stays quiet, emits a
LenientOperationWarning, or raises.

Failure kinds:
    shape:    operand shapes (or flavors) do not match
    index:    row/column selector outside the matrix
    truncate: fewer values than indexes in a paired update
    reshape:  reshape target does not preserve the element count

Usage:
    from pydense.core.config import error_policy

    with error_policy(shape='raise'):
        C = A.plus(B)          # DimensionError instead of None

The active policy lives in a ContextVar, so each thread and asyncio task
sees its own setting.
"""

from __future__ import annotations

import inspect
import os
import warnings
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields, replace
from typing import Iterator, Literal

from pydense.core.exceptions import LenientOperationWarning, ValidationError

PolicyMode = Literal['ignore', 'warn', 'raise']
FailureKind = Literal['shape', 'index', 'truncate', 'reshape']

VALID_MODES = ('ignore', 'warn', 'raise')

_PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__))) + os.sep


@dataclass(frozen=True)
class ErrorPolicy:
    """Reporting mode for each quiet failure kind."""
    shape: PolicyMode = 'ignore'
    index: PolicyMode = 'ignore'
    truncate: PolicyMode = 'ignore'
    reshape: PolicyMode = 'ignore'

    def __post_init__(self):
        for f in fields(self):
            mode = getattr(self, f.name)
            if mode not in VALID_MODES:
                raise ValidationError(
                    f"{f.name}: policy mode must be one of {VALID_MODES}, got {mode!r}"
                )


# Library default: fail quiet, return sentinel
LENIENT = ErrorPolicy()

# Every quiet failure raises
STRICT = ErrorPolicy(shape='raise', index='raise', truncate='raise', reshape='raise')

_policy: ContextVar[ErrorPolicy] = ContextVar('pydense_error_policy', default=LENIENT)


def get_error_policy() -> ErrorPolicy:
    """Return the policy active in the current context."""
    return _policy.get()


def set_error_policy(policy: ErrorPolicy | None = None, **modes: PolicyMode) -> ErrorPolicy:
    """
    Replace the active policy.

    Args:
        policy: Complete policy to install. If None, the current policy is
                updated with the given per-kind modes.
        **modes: Per-kind overrides, e.g. shape='raise'

    Returns:
        The previously active policy, so callers can restore it.

    Raises:
        ValidationError: On an unknown failure kind or mode
    """
    previous = _policy.get()
    base = previous if policy is None else policy
    unknown = set(modes) - {f.name for f in fields(ErrorPolicy)}
    if unknown:
        raise ValidationError(f"Unknown failure kind(s): {sorted(unknown)}")
    _policy.set(replace(base, **modes))
    return previous


@contextmanager
def error_policy(policy: ErrorPolicy | None = None, **modes: PolicyMode) -> Iterator[ErrorPolicy]:
    """
    Temporarily install a policy for the enclosed block.

    Yields:
        The policy in force inside the block
    """
    previous = set_error_policy(policy, **modes)
    try:
        yield _policy.get()
    finally:
        _policy.set(previous)


def _external_stacklevel() -> int:
    """
    stacklevel that makes a warning issued in report() point at user code.

    report()'s own frame is level 1; each pydense frame above it adds one.
    """
    level = 1
    frame = inspect.currentframe()
    frame = frame.f_back if frame is not None else None     # report()
    while frame is not None and frame.f_code.co_filename.startswith(_PACKAGE_DIR):
        frame = frame.f_back
        level += 1
    return level


def report(kind: FailureKind, message: str, error: Exception) -> None:
    """
    Report a quiet failure according to the active policy.

    Args:
        kind: Failure kind
        message: Warning text used in 'warn' mode
        error: Exception raised in 'raise' mode

    Returns normally in 'ignore' and 'warn' mode; the caller then produces
    its sentinel (None, empty list, self). Warnings are attributed to the
    first caller outside the pydense package.
    """
    mode = getattr(_policy.get(), kind)
    if mode == 'raise':
        raise error
    if mode == 'warn':
        warnings.warn(message, LenientOperationWarning, stacklevel=_external_stacklevel())
