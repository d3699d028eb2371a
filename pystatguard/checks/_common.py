"""
Shared helpers for checks: value predicates, shape dispatch, failure reporting.

Shapes form a closed set:
    'scalar'    Python or numpy number (including 0-d arrays)
    'sequence'  list, tuple, range, deque or any other Sequence of numbers
    'vector'    1-D numpy array, or a 1-D array-like such as array.array
                or a pandas Series

Predicates treat integers as inherently finite and never NaN, so they are
safe for arbitrarily large Python ints (which would overflow float()).
"""

from __future__ import annotations

from collections import abc
import numbers
from typing import Any, Literal, Sequence

import numpy as np

from pystatguard.core.exceptions import DimensionError, ValidationError
from pystatguard.core.formatting import is_integer_value
from pystatguard.core.protocols import ErrorPolicy
from pystatguard.core.result import Slot

Shape = Literal['scalar', 'sequence', 'vector']


def shape_of(y: Any) -> Shape:
    """
    Classify y into one of the supported shapes.

    Raises:
        ValidationError: If y is a string
        DimensionError: If y has more than one dimension
    """
    if isinstance(y, (numbers.Number, np.generic)):
        return 'scalar'
    if isinstance(y, np.ndarray):
        if y.ndim == 0:
            return 'scalar'
        if y.ndim == 1:
            return 'vector'
        raise DimensionError(
            f"expected scalar or 1D array, got {y.ndim}D with shape {y.shape}"
        )
    if isinstance(y, (str, bytes)):
        raise ValidationError(f"expected numeric data, got {type(y).__name__}")
    if isinstance(y, abc.Sequence):
        return 'sequence'
    ndim = np.ndim(y)
    if ndim == 0:
        return 'scalar'
    if ndim == 1:
        return 'vector'
    raise DimensionError(f"expected scalar or 1D data, got {ndim}D {type(y).__name__}")


def as_elements(y: Any) -> Sequence[Any]:
    """
    Positionally indexable view of a sequence or vector.

    Sequences and ndarrays are returned as-is so they are read lazily,
    element by element. Other 1-D array-likes (pandas Series indexes by
    label) are converted with np.asarray.
    """
    if isinstance(y, (np.ndarray, abc.Sequence)):
        return y
    return np.asarray(y)


def as_scalar(y: Any) -> Any:
    """Unwrap 0-d arrays; leave everything else untouched."""
    if isinstance(y, np.ndarray):
        return y[()]
    return y


def is_nan(x: Any) -> bool:
    if is_integer_value(x):
        return False
    return bool(np.isnan(x))


def is_finite(x: Any) -> bool:
    if is_integer_value(x):
        return True
    return bool(np.isfinite(x))


def is_unsigned(x: Any) -> bool:
    """True if x's type cannot represent negative values."""
    if isinstance(x, (np.unsignedinteger, np.bool_)):
        return True
    dtype = getattr(x, 'dtype', None)
    return dtype is not None and (
        np.issubdtype(dtype, np.unsignedinteger) or dtype == np.bool_
    )


def first_violation(values: Sequence[Any], ok) -> int | None:
    """
    Index of the first element failing ok, or None.

    Scans in index order and stops at the first failure; later elements
    are never passed to ok.
    """
    for i in range(len(values)):
        if not ok(values[i]):
            return i
    return None


def report(
    function: str,
    message: str,
    value: Any,
    result: Slot | None,
    policy: ErrorPolicy,
    violation: str,
) -> bool:
    """
    Route one violation through the policy and store its fallback.

    Always returns False so checks can `return report(...)`. If the policy
    raises, the slot is left untouched.
    """
    fallback = policy.on_domain_error(function, message, value, violation=violation)
    if result is not None:
        result.write(fallback)
    return False
