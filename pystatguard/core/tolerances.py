"""
Tolerance tiers for structural validation.

Defines how far a matrix or vector may drift from an exact constraint
before it is rejected:
- CONSTRAINT: symmetry, eigenvalue floor and simplex sum, absolute 1e-8
- RELAXED: for single-precision inputs, where 1e-8 is below epsilon
- HALF: for half-precision inputs, about ten float16 epsilons

Used by the covariance-matrix and simplex validators.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for structural constraints."""
    atol: float
    name: str
    description: str


# Double precision: absolute tolerance on every structural constraint
CONSTRAINT = ToleranceTier(
    atol=1e-8,
    name='constraint',
    description='Double precision constraint tolerance',
)

# Single precision inputs
RELAXED = ToleranceTier(
    atol=1e-4,
    name='relaxed',
    description='Single precision constraint tolerance',
)

# Half precision inputs (float16 eps is ~9.8e-4)
HALF = ToleranceTier(
    atol=1e-2,
    name='half',
    description='Half precision constraint tolerance',
)

CONSTRAINT_TOLERANCE = CONSTRAINT.atol


def select_tolerance(dtype) -> ToleranceTier:
    """Select appropriate tolerance tier for an array dtype."""
    dtype = np.dtype(dtype)
    if np.issubdtype(dtype, np.floating):
        if dtype.itemsize <= 2:
            return HALF
        if dtype.itemsize < 8:
            return RELAXED
    return CONSTRAINT
