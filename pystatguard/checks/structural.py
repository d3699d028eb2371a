"""
Structural checks.

Checks over whole objects rather than single values:
    check_bounds      - finite lower < finite upper
    check_size_match  - two sizes agree
    check_cov_matrix  - symmetric positive semi-definite matrix
    check_simplex     - nonnegative vector summing to one

The covariance and simplex checks own only the error reporting. The
structural judgment comes from the `validator` argument and its verdict is
returned unchanged.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike

from pystatguard.checks._common import report
from pystatguard.checks.scalar import check_lower_bound, check_upper_bound
from pystatguard.checks.validators import is_valid_cov_matrix, is_valid_simplex
from pystatguard.core.exceptions import DimensionError
from pystatguard.core.formatting import format_matrix, format_value
from pystatguard.core.policies import DEFAULT_POLICY
from pystatguard.core.protocols import CovMatrixValidator, ErrorPolicy, SimplexValidator
from pystatguard.core.result import Slot
from pystatguard.core.violations import (
    VIOLATION_INVALID_COV_MATRIX,
    VIOLATION_INVALID_SIMPLEX,
    VIOLATION_ORDERING,
    VIOLATION_SIZE_MISMATCH,
)


def check_bounds(
    function: str,
    lower: Any,
    upper: Any,
    result: Slot | None,
    policy: ErrorPolicy = DEFAULT_POLICY,
) -> bool:
    """
    Check an interval: both ends finite and lower < upper.

    Sub-checks run in order (lower bound, upper bound, ordering) and the
    first failure ends the check.
    """
    if not check_lower_bound(function, lower, result, policy):
        return False
    if not check_upper_bound(function, upper, result, policy):
        return False
    if lower >= upper:
        return report(function, "lower parameter is %1%, but must be less than upper!",
                      lower, result, policy, VIOLATION_ORDERING)
    return True


def check_size_match(
    function: str,
    i: int,
    j: int,
    result: Slot | None,
    policy: ErrorPolicy = DEFAULT_POLICY,
) -> bool:
    """Check that two sizes are equal. The policy receives i."""
    if i != j:
        return report(function, f"i and j must be same.  Found i=%1%, j={format_value(j)}",
                      i, result, policy, VIOLATION_SIZE_MISMATCH)
    return True


def check_cov_matrix(
    function: str,
    Sigma: ArrayLike,
    result: Slot | None,
    policy: ErrorPolicy = DEFAULT_POLICY,
    validator: CovMatrixValidator = is_valid_cov_matrix,
) -> bool:
    """
    Check that Sigma is a valid covariance matrix.

    On failure the diagnostic dumps the whole matrix and the policy receives
    Sigma[0, 0].

    Raises:
        DimensionError: If Sigma is not 2D or is empty (there is no
            element to report)
    """
    if validator(Sigma):
        return True
    Sigma = np.asarray(Sigma)
    if Sigma.ndim != 2 or Sigma.size == 0:
        raise DimensionError(
            f"Sigma: expected non-empty 2D array, got {Sigma.ndim}D with shape {Sigma.shape}"
        )
    message = (
        "Sigma is not a valid covariance matrix."
        " Sigma must be symmetric and positive semi-definite."
        f" Sigma:\n{format_matrix(Sigma)}\n"
        "Sigma(0,0): %1%"
    )
    return report(function, message, Sigma[0, 0], result, policy,
                  VIOLATION_INVALID_COV_MATRIX)


def check_simplex(
    function: str,
    theta: ArrayLike,
    name: str,
    result: Slot | None,
    policy: ErrorPolicy = DEFAULT_POLICY,
    validator: SimplexValidator = is_valid_simplex,
) -> bool:
    """
    Check that theta is a valid simplex.

    On failure the policy receives theta[0].

    Raises:
        DimensionError: If theta is not 1D or is empty
    """
    if validator(theta):
        return True
    theta = np.asarray(theta)
    if theta.ndim != 1 or theta.size == 0:
        raise DimensionError(
            f"{name}: expected non-empty 1D array, got {theta.ndim}D with shape {theta.shape}"
        )
    message = (
        f"{name} is not a valid simplex."
        " The first element of the simplex is: %1%."
    )
    return report(function, message, theta[0], result, policy,
                  VIOLATION_INVALID_SIMPLEX)
