"""
Parameter checks.

Every check returns True when its input is valid. On a violation it routes
one call through the error policy, stores the policy's fallback in the
caller's Slot and returns False. Chain checks with `and` to stop at the
first failure.

Public API:
    Scalar:      check_not_nan, check_finite, check_positive (also accept
                 sequences and 1D arrays), check_greater, check_bounded,
                 check_scale, check_inv_scale, check_nonnegative,
                 check_location, check_lower_bound, check_upper_bound
    Aggregate:   check_not_nan_all, check_finite_all, check_positive_all
    Structural:  check_bounds, check_size_match, check_cov_matrix,
                 check_simplex
    Validators:  is_valid_cov_matrix, is_valid_simplex
"""

from pystatguard.checks.scalar import (
    check_not_nan,
    check_finite,
    check_positive,
    check_greater,
    check_bounded,
    check_scale,
    check_inv_scale,
    check_nonnegative,
    check_location,
    check_lower_bound,
    check_upper_bound,
)
from pystatguard.checks.aggregate import (
    check_not_nan_all,
    check_finite_all,
    check_positive_all,
)
from pystatguard.checks.structural import (
    check_bounds,
    check_size_match,
    check_cov_matrix,
    check_simplex,
)
from pystatguard.checks.validators import is_valid_cov_matrix, is_valid_simplex

__all__ = [
    "check_not_nan",
    "check_finite",
    "check_positive",
    "check_greater",
    "check_bounded",
    "check_scale",
    "check_inv_scale",
    "check_nonnegative",
    "check_location",
    "check_lower_bound",
    "check_upper_bound",
    "check_not_nan_all",
    "check_finite_all",
    "check_positive_all",
    "check_bounds",
    "check_size_match",
    "check_cov_matrix",
    "check_simplex",
    "is_valid_cov_matrix",
    "is_valid_simplex",
]
