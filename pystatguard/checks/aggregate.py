"""
Aggregate checks over sequences and vectors.

Elements are scanned in index order starting at 0. At the first violating
index k the diagnostic names `name[k]`, the policy receives element k, and
the check returns False without looking at any element after k.

The public check_not_nan / check_finite / check_positive in
pystatguard.checks.scalar dispatch here automatically; call these directly
only when y is known to be a sequence or vector.
"""

from __future__ import annotations

from typing import Any, Callable, Sequence

from pystatguard.checks._common import (
    as_elements,
    first_violation,
    is_finite,
    is_nan,
    report,
    shape_of,
)
from pystatguard.core.exceptions import DimensionError
from pystatguard.core.formatting import qualify
from pystatguard.core.policies import DEFAULT_POLICY
from pystatguard.core.protocols import ErrorPolicy
from pystatguard.core.result import Slot
from pystatguard.core.violations import (
    VIOLATION_IS_NAN,
    VIOLATION_NOT_FINITE,
    VIOLATION_NOT_POSITIVE,
)


def _check_all(
    function: str,
    y: Sequence[Any],
    name: str,
    result: Slot | None,
    policy: ErrorPolicy,
    ok: Callable[[Any], bool],
    condition: str,
    violation: str,
) -> bool:
    if shape_of(y) == 'scalar':
        raise DimensionError(f"{name}: expected a sequence or 1D array, got a scalar")
    y = as_elements(y)
    k = first_violation(y, ok)
    if k is None:
        return True
    return report(function, f"{qualify(name, k)} is %1%, but must {condition}!",
                  y[k], result, policy, violation)


def _positive(x: Any) -> bool:
    return is_finite(x) and x > 0


def check_not_nan_all(
    function: str,
    y: Sequence[Any],
    name: str,
    result: Slot | None,
    policy: ErrorPolicy = DEFAULT_POLICY,
) -> bool:
    """Check that no element of y is NaN."""
    return _check_all(function, y, name, result, policy,
                      lambda x: not is_nan(x), "not be nan", VIOLATION_IS_NAN)


def check_finite_all(
    function: str,
    y: Sequence[Any],
    name: str,
    result: Slot | None,
    policy: ErrorPolicy = DEFAULT_POLICY,
) -> bool:
    """Check that every element of y is finite."""
    return _check_all(function, y, name, result, policy,
                      is_finite, "be finite", VIOLATION_NOT_FINITE)


def check_positive_all(
    function: str,
    y: Sequence[Any],
    name: str,
    result: Slot | None,
    policy: ErrorPolicy = DEFAULT_POLICY,
) -> bool:
    """Check that every element of y is finite and strictly positive."""
    return _check_all(function, y, name, result, policy,
                      _positive, "be finite and > 0", VIOLATION_NOT_POSITIVE)
