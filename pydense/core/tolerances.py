"""
Tolerance tiers for approximate matrix comparison.

Used by DenseMatrix.all_close() and by the test suite:
- EXACT: bitwise-equal values
- FP64: results of a handful of float64 operations
- FP64_ACCUMULATED: long sums (matrix products, reductions over many terms)
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Bitwise equal values',
)

FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='Double precision, few operations per element',
)

FP64_ACCUMULATED = ToleranceTier(
    rtol=1e-8,
    atol=1e-10,
    name='fp64_accumulated',
    description='Double precision, long accumulations (products, sums)',
)
