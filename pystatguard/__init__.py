"""
PyStatGuard: parameter validation and error dispatch for statistical code.

Guards numerical routines against NaN, infinities, out-of-range scalars and
malformed covariance matrices or simplices before computation proceeds.
How a violation is handled (raise, or return NaN and continue) is chosen
per call site through an error policy.

Submodules:
    checks: Scalar, aggregate and structural checks
    core: Policies, fallback slot, exceptions, formatting
"""

__version__ = "0.1.0"

from pystatguard.core import (
    RaisePolicy,
    IgnorePolicy,
    WarnPolicy,
    CallbackPolicy,
    DEFAULT_POLICY,
    select_policy,
    Slot,
    PyStatGuardError,
    ValidationError,
    DimensionError,
    DomainError,
    PolicyError,
    DomainWarning,
)
from pystatguard.checks import *  # noqa: F401,F403
from pystatguard.checks import __all__ as _checks_all

__all__ = [
    "__version__",
    "RaisePolicy",
    "IgnorePolicy",
    "WarnPolicy",
    "CallbackPolicy",
    "DEFAULT_POLICY",
    "select_policy",
    "Slot",
    "PyStatGuardError",
    "ValidationError",
    "DimensionError",
    "DomainError",
    "PolicyError",
    "DomainWarning",
    *_checks_all,
]
