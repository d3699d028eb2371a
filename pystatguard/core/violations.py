"""
Violation kind constants for PyStatGuard.

This module is the SINGLE SOURCE OF TRUTH for violation strings.
Import from here, never use raw strings.

Usage:
    from pystatguard.core.violations import VIOLATION_NOT_FINITE

    try:
        check_finite('f', x, 'x', None)
    except DomainError as e:
        if e.violation == VIOLATION_NOT_FINITE:
            ...
"""

# Value is NaN or +/- infinity
VIOLATION_NOT_FINITE = 'not_finite'

# Value is NaN
VIOLATION_IS_NAN = 'is_nan'

# Value violates a greater-than or between constraint
VIOLATION_OUT_OF_RANGE = 'out_of_range'

# Value is not strictly positive
VIOLATION_NOT_POSITIVE = 'not_positive'

# Value is negative
VIOLATION_NOT_NONNEGATIVE = 'not_nonnegative'

# Scale or inverse scale parameter is not finite and > 0
VIOLATION_INVALID_SCALE = 'invalid_scale'

# Location parameter or interval bound is not finite
VIOLATION_INVALID_LOCATION_OR_BOUND = 'invalid_location_or_bound'

# Lower bound is not strictly less than upper bound
VIOLATION_ORDERING = 'ordering'

# Two sizes that must agree differ
VIOLATION_SIZE_MISMATCH = 'size_mismatch'

# Matrix is not symmetric positive semi-definite
VIOLATION_INVALID_COV_MATRIX = 'invalid_cov_matrix'

# Vector is not a probability simplex
VIOLATION_INVALID_SIMPLEX = 'invalid_simplex'

# Unclassified domain error (used by callers outside this package)
VIOLATION_DOMAIN = 'domain'

# All violations as a frozenset for validation
ALL_VIOLATIONS = frozenset({
    VIOLATION_NOT_FINITE,
    VIOLATION_IS_NAN,
    VIOLATION_OUT_OF_RANGE,
    VIOLATION_NOT_POSITIVE,
    VIOLATION_NOT_NONNEGATIVE,
    VIOLATION_INVALID_SCALE,
    VIOLATION_INVALID_LOCATION_OR_BOUND,
    VIOLATION_ORDERING,
    VIOLATION_SIZE_MISMATCH,
    VIOLATION_INVALID_COV_MATRIX,
    VIOLATION_INVALID_SIMPLEX,
    VIOLATION_DOMAIN,
})

__all__ = [
    'VIOLATION_NOT_FINITE',
    'VIOLATION_IS_NAN',
    'VIOLATION_OUT_OF_RANGE',
    'VIOLATION_NOT_POSITIVE',
    'VIOLATION_NOT_NONNEGATIVE',
    'VIOLATION_INVALID_SCALE',
    'VIOLATION_INVALID_LOCATION_OR_BOUND',
    'VIOLATION_ORDERING',
    'VIOLATION_SIZE_MISMATCH',
    'VIOLATION_INVALID_COV_MATRIX',
    'VIOLATION_INVALID_SIMPLEX',
    'VIOLATION_DOMAIN',
    'ALL_VIOLATIONS',
]
