"""Invariant capture and verification.

An invariant is a value that must come out of an operation unchanged.
create_invariants() reduces each value to a cheap comparison token before the
operation; check_invariants() reduces the ending values the same way and
compares token for token.

Supported categories:
- scalars (bool, int, float, complex, numpy bool/number scalars) are reduced
  to their hash, which is O(1) and stable for equal values
- text (str and its subclasses, such as numpy.str_) is kept as a plain str
  and compared by content

Anything else raises UnsupportedInvariantType immediately. That is a usage
error and is never converted into an InvariantCheckFailure.
"""

import cmath
import math
import sys
from typing import Any, Iterator, Optional, Sequence, Union

import numpy as np

from contractkit.contracts.failure import InvariantCheckFailure, UnsupportedInvariantType
from contractkit.text import quoted

DEFAULT_NAME_PREFIX = "Invariant-"

SCALAR_TYPES = (bool, int, float, complex, np.bool_, np.number)

Token = Union[int, str]


class Snapshot:
    """Ordered, immutable comparison tokens captured from a list of values."""

    __slots__ = ("_tokens",)

    def __init__(self, tokens: Sequence[Token]):
        self._tokens = tuple(tokens)

    @property
    def tokens(self) -> tuple:
        return self._tokens

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Snapshot):
            return NotImplemented
        return self._tokens == other._tokens

    def __hash__(self) -> int:
        return hash(self._tokens)

    def __repr__(self) -> str:
        return f"Snapshot({list(self._tokens)!r})"


def is_scalar_type(value: Any) -> bool:
    """True if ``value`` is a scalar that invariants reduce to a hash."""
    return isinstance(value, SCALAR_TYPES)


def _float_hash(x: float) -> int:
    # hash(nan) is identity based, so every NaN shares one fixed token
    if math.isnan(x):
        return sys.hash_info.nan
    return hash(x)


def _scalar_hash(value: Any) -> int:
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, float):
        return _float_hash(value)
    if isinstance(value, complex) and cmath.isnan(value):
        return hash((_float_hash(value.real), _float_hash(value.imag)))
    return hash(value)


def to_token(value: Any) -> Token:
    """Reduce ``value`` to its comparison token.

    Raises
    ------
    UnsupportedInvariantType
        If ``value`` is neither a scalar nor text.
    """
    if is_scalar_type(value):
        return _scalar_hash(value)
    if isinstance(value, str):
        # str subclasses (numpy.str_) compare by content like plain text
        return str(value)
    raise UnsupportedInvariantType(
        f"Invariants do not support type, {type(value).__module__}.{type(value).__qualname__}"
    )


def _format_token(token: Token) -> str:
    if isinstance(token, str):
        return quoted(token)
    return str(token)


def create_invariants(*values: Any) -> Snapshot:
    """Capture ``values`` before an operation.

    Parameters
    ----------
    *values : scalar or str
        Starting values, in the order they will be supplied to
        check_invariants().

    Returns
    -------
    Snapshot
        One token per value, input order preserved.

    Raises
    ------
    UnsupportedInvariantType
        If any value is not a supported category.
    """
    return Snapshot(to_token(value) for value in values)


def check_invariants(
    snapshot: Snapshot,
    *ending_values: Any,
    names: Optional[Sequence[str]] = None,
    name_prefix: str = DEFAULT_NAME_PREFIX,
) -> None:
    """Verify ``ending_values`` match the values captured in ``snapshot``.

    Parameters
    ----------
    snapshot : Snapshot
        Result of create_invariants().
    *ending_values : scalar or str
        Values after the operation, same order as at capture.
    names : sequence of str, optional
        Display names for failure messages. Must match the snapshot length.
        When omitted, ``<name_prefix><index>`` is used.
    name_prefix : str, optional
        Prefix for generated names.

    Raises
    ------
    InvariantCheckFailure
        On a count mismatch or a changed value.
    TypeError
        If ``names`` is a string or not a list or tuple.
    UnsupportedInvariantType
        If an ending value is not a supported category.

    Examples
    --------
    >>> snap = create_invariants(1, "a")
    >>> check_invariants(snap, 1, "a", names=["count", "label"])
    """
    if len(snapshot) != len(ending_values):
        raise InvariantCheckFailure(
            "Number of invariant starting and ending values do not match "
            f"({len(snapshot)} != {len(ending_values)})"
        )

    if names is not None and not isinstance(names, (list, tuple)):
        raise TypeError(
            f"names must be a list or tuple of str, got {type(names).__name__}"
        )

    if names is None:
        names = [f"{name_prefix}{index}" for index in range(len(snapshot))]
    elif len(snapshot) != len(names):
        raise InvariantCheckFailure(
            "Number of invariant values does not match number of value names "
            f"({len(snapshot)} != {len(names)})"
        )

    for name, starting, ending_value in zip(names, snapshot, ending_values):
        ending = to_token(ending_value)
        # bool/int hashes are ints and text is str, so a category change
        # also compares unequal here.
        if type(starting) is not type(ending) or starting != ending:
            raise InvariantCheckFailure(
                f"Invariants, {name}, do not match: "
                f"({_format_token(starting)} != {_format_token(ending)})"
            )
