"""Centralized failure taxonomy for contract checks.

Contracts fail fast, loud, and once. Every contract failure derives from
ContractViolation so callers can treat contract bugs uniformly, while the
concrete subclass tells them which side of the contract was broken.
"""

from enum import Enum


class ContractViolation(RuntimeError):
    """Base class for every contract failure.

    This indicates a bug, not a recoverable condition. Subclasses say
    where the bug lives.

    Key distinction:
    - RequireViolation: caller passed bad input
    - EnsureViolation: operation did not uphold its own postcondition
    - InvariantCheckFailure: value changed across an operation
    - TimeBudgetExceeded: operation ran past its declared budget
    """
    pass


class RequireViolation(ContractViolation):
    """Raised when a precondition fails. The defect is in the caller."""
    pass


class EnsureViolation(ContractViolation):
    """Raised when a postcondition fails. The defect is in the callee."""
    pass


class InvariantCheckFailure(ContractViolation):
    """Raised when a captured invariant changed, or the check was malformed."""
    pass


class TimeBudgetExceeded(ContractViolation):
    """Raised when an operation reaches or exceeds its time budget.

    Attributes
    ----------
    elapsed_ns : int
        Measured duration in nanoseconds.
    max_ns : int
        Declared budget in nanoseconds.
    """

    def __init__(self, message: str, elapsed_ns: int, max_ns: int):
        super().__init__(message)
        self.elapsed_ns = elapsed_ns
        self.max_ns = max_ns


class UnsupportedInvariantType(TypeError):
    """Raised when a value of an unsupported category is used as an invariant.

    This is a usage error, not a contract failure. It is deliberately NOT a
    ContractViolation, so handlers written for contract failures never
    swallow it.
    """
    pass


class CheckKind(str, Enum):
    """Which side of a contract a check belongs to.

    REQUIRE: precondition, raises RequireViolation
    ENSURE: postcondition, raises EnsureViolation
    """
    REQUIRE = "Require"
    ENSURE = "Ensure"

    @property
    def violation_class(self) -> type:
        """Exception class raised for a failed check of this kind."""
        if self is CheckKind.REQUIRE:
            return RequireViolation
        return EnsureViolation
