"""
Core infrastructure for PyStatGuard.

This module provides the error-dispatch contract shared by every check.

Key components:
    protocols: ErrorPolicy, validator protocols
    policies: RaisePolicy, IgnorePolicy, WarnPolicy, CallbackPolicy
    result: Slot fallback holder
    exceptions: Exception hierarchy
    violations: Violation kind constants
    formatting: Diagnostic message rendering
    tolerances: Structural tolerance tiers
"""

from pystatguard.core.protocols import ErrorPolicy, CovMatrixValidator, SimplexValidator
from pystatguard.core.policies import (
    RaisePolicy,
    IgnorePolicy,
    WarnPolicy,
    CallbackPolicy,
    DEFAULT_POLICY,
    select_policy,
)
from pystatguard.core.result import Slot
from pystatguard.core.exceptions import (
    PyStatGuardError,
    ValidationError,
    DimensionError,
    DomainError,
    PolicyError,
    DomainWarning,
)

__all__ = [
    # Protocols
    "ErrorPolicy",
    "CovMatrixValidator",
    "SimplexValidator",
    # Policies
    "RaisePolicy",
    "IgnorePolicy",
    "WarnPolicy",
    "CallbackPolicy",
    "DEFAULT_POLICY",
    "select_policy",
    # Result
    "Slot",
    # Exceptions
    "PyStatGuardError",
    "ValidationError",
    "DimensionError",
    "DomainError",
    "PolicyError",
    "DomainWarning",
]
