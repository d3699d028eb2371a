"""
Core protocols for PyStatGuard.

These define structural interfaces that policies and validators must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so that
any object with the right method can serve as a policy, including ones
defined in downstream packages that never import ours.

Design Principles:
    - Minimal contracts: one method per capability
    - Stateless: implementations carry configuration only, never per-call state
    - The success path of a check never calls into these objects
"""

from typing import Protocol, TypeVar, Any, runtime_checkable

from numpy.typing import ArrayLike

F = TypeVar('F', covariant=True)  # Fallback value type


@runtime_checkable
class ErrorPolicy(Protocol[F]):
    """
    Strategy deciding how a detected violation becomes an outcome.

    A policy either escalates (raises, halting the caller's control flow)
    or degrades gracefully (returns a sentinel that the check writes into
    the caller's fallback slot).

    Policies are resolved at the call site and must be pure functions of
    their inputs: no shared mutable state, fully reentrant.
    """

    def on_domain_error(
        self,
        function: str,
        message: str,
        value: Any,
        violation: str = ...,
    ) -> F:
        """
        Handle one domain error.

        Args:
            function: Name of the function whose precondition failed. May
                contain a `%1%` placeholder for the value's type name.
            message: Diagnostic template with one `%1%` placeholder for
                the offending value
            value: The offending value
            violation: Violation kind (see pystatguard.core.violations)

        Returns:
            The fallback value to store in the caller's slot

        Raises:
            DomainError: If the policy escalates
        """
        ...


@runtime_checkable
class CovMatrixValidator(Protocol):
    """Structural judgment: is this matrix symmetric positive semi-definite?"""

    def __call__(self, matrix: ArrayLike) -> bool:
        ...


@runtime_checkable
class SimplexValidator(Protocol):
    """Structural judgment: is this vector nonnegative and summing to one?"""

    def __call__(self, vector: ArrayLike) -> bool:
        ...
