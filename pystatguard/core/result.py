"""
Fallback slot for check outcomes.

A check reports success or failure through its boolean return value. On
failure it also writes the policy's fallback into a caller-owned Slot, so
the caller can return that value instead of computing with bad inputs.

Design decisions:
    - Generic over the fallback value type T
    - Mutable (checks write into it), but written at most once per failed check
    - `written` makes "untouched on success" observable without sentinels
    - Passing None instead of a Slot discards the fallback (useful with
      RaisePolicy, where no fallback is ever produced)
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic

T = TypeVar('T')  # Fallback value type


@dataclass(eq=False)
class Slot(Generic[T]):
    """
    Caller-owned output location for a check's fallback value.

    Type Parameters:
        T: The fallback value type (typically float)

    Attributes:
        value: Current value. Starts at the initial value given at
            construction (None by default) and is replaced when a check fails.

    Examples:
        >>> result = Slot(0.0)
        >>> if not check_positive('lognormal_log', sigma, 'sigma', result,
        ...                       policy=IgnorePolicy()):
        ...     return result.value    # nan
    """
    value: T | None = None
    _writes: int = field(default=0, init=False, repr=False)

    def write(self, value: T) -> None:
        """Store a fallback value. Called by checks on failure only."""
        self.value = value
        self._writes += 1

    @property
    def written(self) -> bool:
        """True if any check has written a fallback into this slot."""
        return self._writes > 0

    @property
    def writes(self) -> int:
        """Number of fallback values written so far."""
        return self._writes
