"""
Error policies.

A policy converts a detected domain error into an outcome. Every check
routes its failures through exactly one policy call; the policy decides
whether that failure escalates or is recorded as a sentinel.

Available policies:
    RaisePolicy     - raise DomainError (default)
    IgnorePolicy    - return NaN of the value's promoted type
    WarnPolicy      - emit DomainWarning, then return NaN
    CallbackPolicy  - delegate to a user-supplied function

All policies are frozen dataclasses and can be shared freely between
threads and call sites.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Literal
import sys
import warnings

import numpy as np

from pystatguard.core.exceptions import DomainError, DomainWarning, PolicyError
from pystatguard.core.formatting import full_message
from pystatguard.core.violations import VIOLATION_DOMAIN

PolicyChoice = Literal['raise', 'ignore', 'warn']

_PACKAGE = __name__.split('.')[0]


def _in_package(frame) -> bool:
    module = frame.f_globals.get('__name__', '')
    return module == _PACKAGE or module.startswith(_PACKAGE + '.')


def _external_stacklevel() -> int:
    """
    warnings.warn stacklevel of the first frame outside this package.

    Level 1 is the frame that calls warnings.warn (a policy method), so the
    count starts at the caller of this helper.
    """
    frame = sys._getframe(1)
    level = 1
    while frame is not None and _in_package(frame):
        frame = frame.f_back
        level += 1
    return level


def promote_dtype(value: Any) -> np.dtype:
    """
    Floating dtype a fallback for value should have.

    Floating inputs keep their precision; integers, bools and anything
    else promote to float64.
    """
    dtype = getattr(value, 'dtype', None)
    if dtype is not None and np.issubdtype(dtype, np.floating):
        return np.dtype(dtype)
    return np.dtype(np.float64)


def quiet_nan(value: Any) -> np.floating:
    """NaN of the promoted floating type of value."""
    return promote_dtype(value).type(np.nan)


@dataclass(frozen=True)
class RaisePolicy:
    """Escalate every domain error as a DomainError."""

    def on_domain_error(
        self,
        function: str,
        message: str,
        value: Any,
        violation: str = VIOLATION_DOMAIN,
    ) -> Any:
        raise DomainError(
            full_message(function, message, value),
            function=function,
            value=value,
            violation=violation,
        )


@dataclass(frozen=True)
class IgnorePolicy:
    """Record-and-continue: return NaN and let the caller propagate it."""

    def on_domain_error(
        self,
        function: str,
        message: str,
        value: Any,
        violation: str = VIOLATION_DOMAIN,
    ) -> np.floating:
        return quiet_nan(value)


@dataclass(frozen=True)
class WarnPolicy:
    """
    Record-and-continue with a diagnostic.

    Emits a DomainWarning carrying the full message, then returns NaN.
    Use warnings filters to escalate ("error") or silence ("ignore") it.

    Attributes:
        stacklevel: Passed to warnings.warn. None (the default) points at
            the first frame outside pystatguard, i.e. the code that called
            the check, however deeply the check is nested.
    """
    stacklevel: int | None = None

    def on_domain_error(
        self,
        function: str,
        message: str,
        value: Any,
        violation: str = VIOLATION_DOMAIN,
    ) -> np.floating:
        warnings.warn(
            full_message(function, message, value),
            DomainWarning,
            stacklevel=self.stacklevel or _external_stacklevel(),
        )
        return quiet_nan(value)


@dataclass(frozen=True)
class CallbackPolicy:
    """
    Delegate to a user function.

    The callback receives the function name, the *rendered* message and
    the offending value, and returns the fallback (or raises).

    Attributes:
        callback: (function, message, value) -> fallback
    """
    callback: Callable[[str, str, Any], Any]

    def on_domain_error(
        self,
        function: str,
        message: str,
        value: Any,
        violation: str = VIOLATION_DOMAIN,
    ) -> Any:
        return self.callback(function, full_message(function, message, value), value)


DEFAULT_POLICY = RaisePolicy()

_POLICIES = {
    'raise': RaisePolicy(),
    'ignore': IgnorePolicy(),
    'warn': WarnPolicy(),
}


def select_policy(name: PolicyChoice) -> RaisePolicy | IgnorePolicy | WarnPolicy:
    """
    Select a built-in policy by name.

    Args:
        name: 'raise', 'ignore', or 'warn'

    Returns:
        The shared policy instance for that name

    Raises:
        PolicyError: If name is not a built-in policy
    """
    try:
        return _POLICIES[name]
    except KeyError:
        raise PolicyError(
            f"Unknown error policy {name!r}, expected one of {sorted(_POLICIES)}",
            name=name,
        ) from None
