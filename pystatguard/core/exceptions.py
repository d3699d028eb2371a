"""
Exception hierarchy for PyStatGuard.

All exceptions inherit from PyStatGuardError to allow catching any
library-specific error. Domain errors additionally inherit from ValueError
so that callers written against the standard numeric conventions still
catch them.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages name the function, the parameter, the offending value
      and the required condition
    - Never catch and re-raise with less information
"""

from typing import Any


class PyStatGuardError(Exception):
    """Base exception for all PyStatGuard errors."""
    pass


class ValidationError(PyStatGuardError):
    """
    Input validation failed.

    Raised when arguments handed to a check are themselves malformed
    (e.g. a matrix passed where a vector is required).
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect.

    Raised when a structural check receives a container of the wrong
    dimensionality.
    """
    pass


class DomainError(ValidationError, ValueError):
    """
    A value lies outside the input domain of a function.

    Raised by RaisePolicy when a check detects a violation.

    Attributes:
        function: Name of the function whose precondition failed
        value: The offending value
        violation: Violation kind (see pystatguard.core.violations)
    """

    def __init__(
        self,
        message: str,
        function: str | None = None,
        value: Any = None,
        violation: str | None = None,
    ):
        super().__init__(message)
        self.function = function
        self.value = value
        self.violation = violation


class PolicyError(PyStatGuardError):
    """
    Error policy could not be resolved.

    Raised by select_policy() for unknown policy names.

    Attributes:
        name: The requested policy name
    """

    def __init__(self, message: str, name: str | None = None):
        super().__init__(message)
        self.name = name


class DomainWarning(RuntimeWarning):
    """Warning category emitted by WarnPolicy for recorded domain errors."""
    pass
