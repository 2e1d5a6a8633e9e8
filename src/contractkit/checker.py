"""ContractChecker: configuration-owning entry point for contract checks.

A ContractChecker carries the state the checks need: the time budget bypass
switch and the default names used in failure messages. The module keeps one
process-wide default checker; the top-level ``contractkit`` functions
delegate to it. Tests that need isolation build their own checker instead
of flipping the process-wide switch.

The bypass switch is a plain attribute. Reads and writes are not
synchronized; a flip is visible to later checks on any thread, with no
ordering guarantee relative to checks already in flight.
"""

import logging
from contextlib import contextmanager
from typing import Any, Callable, Iterator, Optional, Sequence, TypeVar

from contractkit.contracts.base import (
    check,
    check_not_null,
    check_not_null_all,
    check_not_empty,
    check_not_empty_collection,
)
from contractkit.contracts.failure import CheckKind
from contractkit.contracts import invariants as _invariants
from contractkit.contracts import timing as _timing
from contractkit.contracts.invariants import Snapshot
from contractkit.schemas import InternalConfig, resolve_config

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ContractChecker:
    """Require/Ensure, invariant, and time budget checks bound to one config.

    Parameters
    ----------
    config : InternalConfig, optional
        Resolved configuration. Defaults to ``resolve_config()``.

    Examples
    --------
    >>> checker = ContractChecker()
    >>> checker.require_not_null(42)
    42
    >>> checker.bypass_timeout_check = True
    """

    def __init__(self, config: Optional[InternalConfig] = None):
        self.config = config if config is not None else resolve_config()
        self._bypass_timeout_check = self.config.timing.bypass_timeout_check
        logger.debug(
            "ContractChecker created (bypass_timeout_check=%s)", self._bypass_timeout_check
        )

    @property
    def bypass_timeout_check(self) -> bool:
        """When True, check_time_budget() returns without measuring."""
        return self._bypass_timeout_check

    @bypass_timeout_check.setter
    def bypass_timeout_check(self, flag: bool) -> None:
        flag = bool(flag)
        if flag != self._bypass_timeout_check:
            logger.info("Time budget checks %s", "bypassed" if flag else "enforced")
        self._bypass_timeout_check = flag

    @contextmanager
    def timeout_check_bypassed(self, flag: bool = True) -> Iterator["ContractChecker"]:
        """Set the bypass switch for the duration of a ``with`` block."""
        previous = self.bypass_timeout_check
        self.bypass_timeout_check = flag
        try:
            yield self
        finally:
            self.bypass_timeout_check = previous

    def _value_name(self, name: Optional[str]) -> str:
        return name if name is not None else self.config.naming.default_value_name

    def _collection_name(self, name: Optional[str]) -> str:
        return name if name is not None else self.config.naming.default_collection_name

    # -------------------------------------------------------------------------
    # Require family
    # -------------------------------------------------------------------------

    def require_not_null(self, value: T, name: Optional[str] = None) -> T:
        return check_not_null(CheckKind.REQUIRE, value, self._value_name(name))

    def require_not_null_all(self, *values: Any) -> None:
        check_not_null_all(CheckKind.REQUIRE, values, self.config.naming.default_value_name)

    def require_not_empty(self, text: Optional[str], name: Optional[str] = None) -> Optional[str]:
        return check_not_empty(CheckKind.REQUIRE, text, self._value_name(name))

    def require_not_empty_collection(self, collection, name: Optional[str] = None):
        return check_not_empty_collection(
            CheckKind.REQUIRE, collection, self._collection_name(name)
        )

    def require(self, value: T, predicate: Callable[[T], Any], message: str) -> T:
        return check(CheckKind.REQUIRE, value, predicate, message)

    # -------------------------------------------------------------------------
    # Ensure family
    # -------------------------------------------------------------------------

    def ensure_not_null(self, value: T, name: Optional[str] = None) -> T:
        return check_not_null(CheckKind.ENSURE, value, self._value_name(name))

    def ensure_not_null_all(self, *values: Any) -> None:
        check_not_null_all(CheckKind.ENSURE, values, self.config.naming.default_value_name)

    def ensure_not_empty(self, text: Optional[str], name: Optional[str] = None) -> Optional[str]:
        return check_not_empty(CheckKind.ENSURE, text, self._value_name(name))

    def ensure_not_empty_collection(self, collection, name: Optional[str] = None):
        return check_not_empty_collection(
            CheckKind.ENSURE, collection, self._collection_name(name)
        )

    def ensure(self, value: T, predicate: Callable[[T], Any], message: str) -> T:
        return check(CheckKind.ENSURE, value, predicate, message)

    # -------------------------------------------------------------------------
    # Invariants
    # -------------------------------------------------------------------------

    def create_invariants(self, *values: Any) -> Snapshot:
        return _invariants.create_invariants(*values)

    def check_invariants(
        self, snapshot: Snapshot, *ending_values: Any, names: Optional[Sequence[str]] = None
    ) -> None:
        _invariants.check_invariants(
            snapshot,
            *ending_values,
            names=names,
            name_prefix=self.config.naming.invariant_name_prefix,
        )

    # -------------------------------------------------------------------------
    # Time budget
    # -------------------------------------------------------------------------

    def get_start_time(self) -> int:
        return _timing.get_start_time()

    def check_time_budget(self, start: int, max_nanos: int) -> None:
        """Raise TimeBudgetExceeded if ``max_nanos`` elapsed since ``start``.

        No-op while bypass_timeout_check is set.
        """
        if self._bypass_timeout_check:
            return
        _timing.enforce_time_budget(start, max_nanos)


# =============================================================================
# Process-wide default checker
# =============================================================================

_default_checker = ContractChecker()


def get_default_checker() -> ContractChecker:
    """The checker behind the module-level functions."""
    return _default_checker


def set_default_checker(checker: ContractChecker) -> ContractChecker:
    """Replace the process-wide checker. Returns the previous one."""
    global _default_checker
    if not isinstance(checker, ContractChecker):
        raise TypeError(f"expected ContractChecker, got {type(checker).__name__}")
    previous = _default_checker
    _default_checker = checker
    return previous


def bypass_timeout_check() -> bool:
    """Current value of the process-wide bypass switch."""
    return _default_checker.bypass_timeout_check


def set_bypass_timeout_check(flag: bool) -> None:
    """Set the process-wide bypass switch for every later time budget check."""
    _default_checker.bypass_timeout_check = flag


def timeout_check_bypassed(flag: bool = True):
    """Scoped flip of the process-wide bypass switch.

    >>> with timeout_check_bypassed():
    ...     check_time_budget(get_start_time(), 0)
    """
    return _default_checker.timeout_check_bypassed(flag)


def create_invariants(*values: Any) -> Snapshot:
    """Capture invariants with the process-wide checker."""
    return _default_checker.create_invariants(*values)


def check_invariants(
    snapshot: Snapshot, *ending_values: Any, names: Optional[Sequence[str]] = None
) -> None:
    """Verify invariants with the process-wide checker."""
    _default_checker.check_invariants(snapshot, *ending_values, names=names)


def get_start_time() -> int:
    return _default_checker.get_start_time()


def check_time_budget(start: int, max_nanos: int) -> None:
    """Time budget check against the process-wide bypass switch."""
    _default_checker.check_time_budget(start, max_nanos)


# -----------------------------------------------------------------------------
# Require/Ensure through the process-wide checker
# -----------------------------------------------------------------------------

def require_not_null(value: T, name: Optional[str] = None) -> T:
    """Require ``value`` is not None."""
    return _default_checker.require_not_null(value, name)


def require_not_null_all(*values: Any) -> None:
    """Require every argument is not None."""
    _default_checker.require_not_null_all(*values)


def require_not_empty(text: Optional[str], name: Optional[str] = None) -> Optional[str]:
    """Require ``text`` is not None and not blank. Returns the untrimmed text."""
    return _default_checker.require_not_empty(text, name)


def require_not_empty_collection(collection, name: Optional[str] = None):
    """Require ``collection`` is not None and has at least one element."""
    return _default_checker.require_not_empty_collection(collection, name)


def require(value: T, predicate: Callable[[T], Any], message: str) -> T:
    """Require ``predicate(value)`` holds."""
    return _default_checker.require(value, predicate, message)


def ensure_not_null(value: T, name: Optional[str] = None) -> T:
    """Ensure ``value`` is not None."""
    return _default_checker.ensure_not_null(value, name)


def ensure_not_null_all(*values: Any) -> None:
    """Ensure every argument is not None."""
    _default_checker.ensure_not_null_all(*values)


def ensure_not_empty(text: Optional[str], name: Optional[str] = None) -> Optional[str]:
    """Ensure ``text`` is not None and not blank. Returns the untrimmed text."""
    return _default_checker.ensure_not_empty(text, name)


def ensure_not_empty_collection(collection, name: Optional[str] = None):
    """Ensure ``collection`` is not None and has at least one element."""
    return _default_checker.ensure_not_empty_collection(collection, name)


def ensure(value: T, predicate: Callable[[T], Any], message: str) -> T:
    """Ensure ``predicate(value)`` holds."""
    return _default_checker.ensure(value, predicate, message)
