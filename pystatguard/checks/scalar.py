"""
Scalar checks.

Each check guards a single numeric value and shares one calling shape:

    check_x(function, value, [bounds], name, result, policy) -> bool

On success the check returns True and never touches `result`. On failure it
calls `policy.on_domain_error` exactly once, writes the returned fallback
into `result` (unless the policy raised) and returns False.

check_not_nan, check_finite and check_positive also accept any sequence or
1-D array-like and then validate every element (see pystatguard.checks.aggregate).
"""

from __future__ import annotations

from typing import Any

from pystatguard.checks import aggregate
from pystatguard.checks._common import (
    as_scalar,
    is_finite,
    is_nan,
    is_unsigned,
    report,
    shape_of,
)
from pystatguard.core.exceptions import DimensionError
from pystatguard.core.formatting import format_value
from pystatguard.core.policies import DEFAULT_POLICY
from pystatguard.core.protocols import ErrorPolicy
from pystatguard.core.result import Slot
from pystatguard.core.violations import (
    VIOLATION_INVALID_LOCATION_OR_BOUND,
    VIOLATION_INVALID_SCALE,
    VIOLATION_IS_NAN,
    VIOLATION_NOT_FINITE,
    VIOLATION_NOT_NONNEGATIVE,
    VIOLATION_NOT_POSITIVE,
    VIOLATION_OUT_OF_RANGE,
)


def _scalar(y: Any, name: str) -> Any:
    if shape_of(y) != 'scalar':
        raise DimensionError(f"{name}: expected a scalar, got {type(y).__name__}")
    return as_scalar(y)


# =====================================================================
# Checks that also accept sequences and vectors
# =====================================================================

def check_not_nan(
    function: str,
    y: Any,
    name: str,
    result: Slot | None,
    policy: ErrorPolicy = DEFAULT_POLICY,
) -> bool:
    """Check that y (or every element of y) is not NaN."""
    if shape_of(y) != 'scalar':
        return aggregate.check_not_nan_all(function, y, name, result, policy)
    y = as_scalar(y)
    if is_nan(y):
        return report(function, f"{name} is %1%, but must not be nan!",
                      y, result, policy, VIOLATION_IS_NAN)
    return True


def check_finite(
    function: str,
    y: Any,
    name: str,
    result: Slot | None,
    policy: ErrorPolicy = DEFAULT_POLICY,
) -> bool:
    """Check that y (or every element of y) is neither NaN nor infinite."""
    if shape_of(y) != 'scalar':
        return aggregate.check_finite_all(function, y, name, result, policy)
    y = as_scalar(y)
    if not is_finite(y):
        return report(function, f"{name} is %1%, but must be finite!",
                      y, result, policy, VIOLATION_NOT_FINITE)
    return True


def check_positive(
    function: str,
    y: Any,
    name: str,
    result: Slot | None,
    policy: ErrorPolicy = DEFAULT_POLICY,
) -> bool:
    """Check that y (or every element of y) is finite and strictly positive."""
    if shape_of(y) != 'scalar':
        return aggregate.check_positive_all(function, y, name, result, policy)
    y = as_scalar(y)
    if not is_finite(y) or not (y > 0):
        return report(function, f"{name} is %1%, but must be finite and > 0!",
                      y, result, policy, VIOLATION_NOT_POSITIVE)
    return True


# =====================================================================
# Scalar-only checks
# =====================================================================

def check_greater(
    function: str,
    x: Any,
    low: Any,
    name: str,
    result: Slot | None,
    policy: ErrorPolicy = DEFAULT_POLICY,
) -> bool:
    """Check that x is finite and strictly greater than low."""
    x = _scalar(x, name)
    if not is_finite(x) or not (x > low):
        return report(
            function,
            f"{name} is %1%, but must be finite and greater than {format_value(low)}",
            x, result, policy, VIOLATION_OUT_OF_RANGE,
        )
    return True


def check_bounded(
    function: str,
    x: Any,
    low: Any,
    high: Any,
    name: str,
    result: Slot | None,
    policy: ErrorPolicy = DEFAULT_POLICY,
) -> bool:
    """
    Check that x is finite and low <= x <= high.

    Both ends are inclusive. Integer inputs skip the finiteness test.
    """
    x = _scalar(x, name)
    if not is_finite(x) or not (low <= x and x <= high):
        return report(
            function,
            f"{name} is %1%, but must be finite and between "
            f"{format_value(low)} and {format_value(high)}",
            x, result, policy, VIOLATION_OUT_OF_RANGE,
        )
    return True


def check_scale(
    function: str,
    scale: Any,
    result: Slot | None,
    policy: ErrorPolicy = DEFAULT_POLICY,
) -> bool:
    """Check a scale parameter: finite and > 0. Zero is never a valid scale."""
    scale = _scalar(scale, 'scale')
    if not (scale > 0) or not is_finite(scale):
        return report(function, "Scale parameter is %1%, but must be > 0!",
                      scale, result, policy, VIOLATION_INVALID_SCALE)
    return True


def check_inv_scale(
    function: str,
    inv_scale: Any,
    result: Slot | None,
    policy: ErrorPolicy = DEFAULT_POLICY,
) -> bool:
    """Check an inverse scale (rate) parameter: finite and > 0."""
    inv_scale = _scalar(inv_scale, 'inv_scale')
    if not (inv_scale > 0) or not is_finite(inv_scale):
        return report(function, "Inverse scale parameter is %1%, but must be > 0!",
                      inv_scale, result, policy, VIOLATION_INVALID_SCALE)
    return True


def check_nonnegative(
    function: str,
    x: Any,
    name: str,
    result: Slot | None,
    policy: ErrorPolicy = DEFAULT_POLICY,
) -> bool:
    """
    Check that x is finite and >= 0.

    Unsigned numpy integers cannot be negative and always pass. Python ints
    are signed and get the full check.
    """
    x = _scalar(x, name)
    if is_unsigned(x):
        return True
    if not is_finite(x) or not (x >= 0):
        return report(function, f"{name} is %1%, but must be finite and >= 0!",
                      x, result, policy, VIOLATION_NOT_NONNEGATIVE)
    return True


def check_location(
    function: str,
    location: Any,
    result: Slot | None,
    policy: ErrorPolicy = DEFAULT_POLICY,
) -> bool:
    """Check a location parameter: finite, any sign."""
    location = _scalar(location, 'location')
    if not is_finite(location):
        return report(function, "Location parameter is %1%, but must be finite!",
                      location, result, policy, VIOLATION_INVALID_LOCATION_OR_BOUND)
    return True


def check_lower_bound(
    function: str,
    lb: Any,
    result: Slot | None,
    policy: ErrorPolicy = DEFAULT_POLICY,
) -> bool:
    lb = _scalar(lb, 'lower bound')
    if not is_finite(lb):
        return report(function, "Lower bound is %1%, but must be finite!",
                      lb, result, policy, VIOLATION_INVALID_LOCATION_OR_BOUND)
    return True


def check_upper_bound(
    function: str,
    ub: Any,
    result: Slot | None,
    policy: ErrorPolicy = DEFAULT_POLICY,
) -> bool:
    ub = _scalar(ub, 'upper bound')
    if not is_finite(ub):
        return report(function, "Upper bound is %1%, but must be finite!",
                      ub, result, policy, VIOLATION_INVALID_LOCATION_OR_BOUND)
    return True
