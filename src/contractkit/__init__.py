"""`contractkit` - design-by-contract checks for Python code.

Subpackages:
- contracts: Require/Ensure evaluator, invariants, time budgets
- schemas: Pydantic configuration

Typical use:

    >>> def rename(path, new_name):
    ...     require_not_empty(new_name, "new_name")
    ...     snap = create_invariants(len(path))
    ...     start = get_start_time()
    ...     result = path.replace("old", new_name)
    ...     check_invariants(snap, len(path))
    ...     check_time_budget(start, 50_000_000)
    ...     return ensure_not_empty(result, "result")
"""

import logging

from contractkit.contracts import (
    CheckKind,
    ContractViolation,
    RequireViolation,
    EnsureViolation,
    InvariantCheckFailure,
    TimeBudgetExceeded,
    UnsupportedInvariantType,
    Snapshot,
    is_scalar_type,
)
from contractkit.checker import (
    ContractChecker,
    get_default_checker,
    set_default_checker,
    bypass_timeout_check,
    set_bypass_timeout_check,
    timeout_check_bypassed,
    create_invariants,
    check_invariants,
    get_start_time,
    check_time_budget,
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
from contractkit.text import is_empty, is_non_empty, quoted

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CheckKind",
    "ContractViolation",
    "RequireViolation",
    "EnsureViolation",
    "InvariantCheckFailure",
    "TimeBudgetExceeded",
    "UnsupportedInvariantType",
    "Snapshot",
    "is_scalar_type",
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
    "ContractChecker",
    "get_default_checker",
    "set_default_checker",
    "bypass_timeout_check",
    "set_bypass_timeout_check",
    "timeout_check_bypassed",
    "create_invariants",
    "check_invariants",
    "get_start_time",
    "check_time_budget",
    "is_empty",
    "is_non_empty",
    "quoted",
]
