"""Contract checks: fail-fast enforcement of preconditions, postconditions,
invariants, and time budgets.

Contracts fail immediately and loudly. This package never logs, retries, or
recovers; the caller decides whether a failure is fatal or a test assertion.

Key principle:
- require_* checks what the caller handed in
- ensure_* checks what the operation produced
- invariants check what the operation must not have touched
"""

from contractkit.contracts.failure import (
    CheckKind,
    ContractViolation,
    RequireViolation,
    EnsureViolation,
    InvariantCheckFailure,
    TimeBudgetExceeded,
    UnsupportedInvariantType,
)
from contractkit.contracts.base import (
    check,
    require,
    require_not_null,
    require_not_null_all,
    require_not_empty,
    require_not_empty_collection,
    ensure,
    ensure_not_null,
    ensure_not_null_all,
    ensure_not_empty,
    ensure_not_empty_collection,
)
from contractkit.contracts.invariants import (
    Snapshot,
    is_scalar_type,
    create_invariants,
    check_invariants,
)
from contractkit.contracts.timing import get_start_time, enforce_time_budget

__all__ = [
    "CheckKind",
    "ContractViolation",
    "RequireViolation",
    "EnsureViolation",
    "InvariantCheckFailure",
    "TimeBudgetExceeded",
    "UnsupportedInvariantType",
    "check",
    "require",
    "require_not_null",
    "require_not_null_all",
    "require_not_empty",
    "require_not_empty_collection",
    "ensure",
    "ensure_not_null",
    "ensure_not_null_all",
    "ensure_not_empty",
    "ensure_not_empty_collection",
    "Snapshot",
    "is_scalar_type",
    "create_invariants",
    "check_invariants",
    "get_start_time",
    "enforce_time_budget",
]
