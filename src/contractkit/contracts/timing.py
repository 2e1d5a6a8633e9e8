"""Soft real-time budget checks.

Durations are measured with the monotonic clock in integer nanoseconds, so
wall-clock adjustments never trigger or hide a violation. This is a
cooperative check placed by the caller after the operation; nothing is
interrupted.

The bypass switch is not read here. It belongs to ContractChecker, whose
check_time_budget() skips enforce_time_budget() when bypassed.
"""

import time

from contractkit.contracts.failure import TimeBudgetExceeded

NANOS_PER_MILLI = 1_000_000
NANOS_PER_SECOND = 1_000_000_000


def get_start_time() -> int:
    """Opaque monotonic timestamp in nanoseconds."""
    return time.monotonic_ns()


def elapsed_since(start: int) -> int:
    """Nanoseconds elapsed since ``start``."""
    return time.monotonic_ns() - start


def enforce_time_budget(start: int, max_nanos: int) -> None:
    """Raise if the time since ``start`` reached ``max_nanos``.

    Parameters
    ----------
    start : int
        Value returned by get_start_time().
    max_nanos : int
        Budget in nanoseconds. Reaching it exactly counts as exceeding it.

    Raises
    ------
    TimeBudgetExceeded
        If ``elapsed >= max_nanos``.
    """
    elapsed = elapsed_since(start)
    if elapsed >= max_nanos:
        raise TimeBudgetExceeded(
            f"Time budget exceeded: ({elapsed} >= {max_nanos}) ns",
            elapsed_ns=elapsed,
            max_ns=max_nanos,
        )
