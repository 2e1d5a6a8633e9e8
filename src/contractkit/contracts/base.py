"""Base contract enforcement utilities.

check() is the single enforcement mechanism for the Require and Ensure
families. Every public check returns the value it was given, so it can be
used inline:

    >>> path = require_not_empty(path, "path")
"""

from typing import Any, Callable, Iterable, Optional, Sized, TypeVar

from contractkit.contracts.failure import CheckKind
from contractkit.text import is_non_empty

T = TypeVar("T")

DEFAULT_VALUE_NAME = "value"
DEFAULT_COLLECTION_NAME = "collection"


def check(kind: CheckKind, value: T, predicate: Callable[[T], Any], message: str) -> T:
    """Evaluate a contract and return ``value`` untouched when it holds.

    Parameters
    ----------
    kind : CheckKind
        Selects the exception raised on failure.
    value : any
        Value handed to ``predicate``.
    predicate : callable
        Contract to evaluate. A falsy result is a violation.
    message : str
        Failure detail, appended after the kind tag.

    Returns
    -------
    any
        ``value``, unchanged.

    Raises
    ------
    RequireViolation or EnsureViolation
        If ``predicate(value)`` is falsy.
    """
    kind = CheckKind(kind)
    if not predicate(value):
        raise kind.violation_class(f"{kind.value} Violation: {message}")
    return value


def check_not_null(kind: CheckKind, value: T, name: str = DEFAULT_VALUE_NAME) -> T:
    return check(kind, value, lambda v: v is not None, f"{name} must not be None")


def check_not_null_all(kind: CheckKind, values: Iterable[Any], name: str = DEFAULT_VALUE_NAME) -> None:
    # First None wins; argument order is scan order.
    for value in values:
        check_not_null(kind, value, name)


def check_not_empty(kind: CheckKind, text: Optional[str], name: str = DEFAULT_VALUE_NAME) -> Optional[str]:
    return check(kind, text, is_non_empty, f"{name} must not be None nor empty")


def check_not_empty_collection(
    kind: CheckKind, collection: Optional[Sized], name: str = DEFAULT_COLLECTION_NAME
) -> Optional[Sized]:
    check_not_null(kind, collection, name)
    return check(
        kind,
        collection,
        lambda c: len(c) > 0,
        f"{name} must not be None nor an empty collection",
    )


# =============================================================================
# Require family (preconditions)
# =============================================================================

def require_not_null(value: T, name: str = DEFAULT_VALUE_NAME) -> T:
    """Require ``value`` is not None."""
    return check_not_null(CheckKind.REQUIRE, value, name)


def require_not_null_all(*values: Any) -> None:
    """Require every argument is not None."""
    check_not_null_all(CheckKind.REQUIRE, values)


def require_not_empty(text: Optional[str], name: str = DEFAULT_VALUE_NAME) -> Optional[str]:
    """Require ``text`` is not None and not blank. Returns the untrimmed text."""
    return check_not_empty(CheckKind.REQUIRE, text, name)


def require_not_empty_collection(collection, name: str = DEFAULT_COLLECTION_NAME):
    """Require ``collection`` is not None and has at least one element."""
    return check_not_empty_collection(CheckKind.REQUIRE, collection, name)


def require(value: T, predicate: Callable[[T], Any], message: str) -> T:
    """Require ``predicate(value)`` holds.

    Examples
    --------
    >>> require(3, lambda n: n > 0, "count must be positive")
    3
    """
    return check(CheckKind.REQUIRE, value, predicate, message)


# =============================================================================
# Ensure family (postconditions)
# =============================================================================

def ensure_not_null(value: T, name: str = DEFAULT_VALUE_NAME) -> T:
    """Ensure ``value`` is not None."""
    return check_not_null(CheckKind.ENSURE, value, name)


def ensure_not_null_all(*values: Any) -> None:
    """Ensure every argument is not None."""
    check_not_null_all(CheckKind.ENSURE, values)


def ensure_not_empty(text: Optional[str], name: str = DEFAULT_VALUE_NAME) -> Optional[str]:
    """Ensure ``text`` is not None and not blank. Returns the untrimmed text."""
    return check_not_empty(CheckKind.ENSURE, text, name)


def ensure_not_empty_collection(collection, name: str = DEFAULT_COLLECTION_NAME):
    """Ensure ``collection`` is not None and has at least one element."""
    return check_not_empty_collection(CheckKind.ENSURE, collection, name)


def ensure(value: T, predicate: Callable[[T], Any], message: str) -> T:
    """Ensure ``predicate(value)`` holds.

    Examples
    --------
    >>> ensure("Hello world!", lambda s: s == "Hello world!", "greeting changed")
    'Hello world!'
    """
    return check(CheckKind.ENSURE, value, predicate, message)
