"""Tests for the Require/Ensure evaluator.

Each family is exercised against the same cases; only the exception class
and the kind tag in the message differ.
"""

import numpy as np
import pandas as pd
import pytest

pytestmark = pytest.mark.unit

from contractkit.contracts import (
    CheckKind,
    ContractViolation,
    RequireViolation,
    EnsureViolation,
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


class TestCheck:
    """Test the shared evaluator."""

    def test_check_returns_value_when_predicate_holds(self):
        value = object()
        assert check(CheckKind.REQUIRE, value, lambda v: True, "unused") is value

    def test_check_raises_require_violation(self):
        with pytest.raises(RequireViolation, match="^Require Violation: bad input$"):
            check(CheckKind.REQUIRE, 1, lambda v: False, "bad input")

    def test_check_raises_ensure_violation(self):
        with pytest.raises(EnsureViolation, match="^Ensure Violation: bad output$"):
            check(CheckKind.ENSURE, 1, lambda v: False, "bad output")

    def test_check_accepts_kind_value_string(self):
        with pytest.raises(EnsureViolation):
            check("Ensure", 1, lambda v: False, "bad output")

    def test_check_treats_falsy_result_as_violation(self):
        with pytest.raises(RequireViolation):
            check(CheckKind.REQUIRE, [], len, "empty")

    def test_predicate_errors_propagate(self):
        """A predicate that raises is not converted into a violation."""
        def boom(v):
            raise KeyError("missing")

        with pytest.raises(KeyError):
            check(CheckKind.REQUIRE, 1, boom, "unused")


class TestNotNull:
    """Test require_not_null / ensure_not_null."""

    @pytest.mark.parametrize("value", [0, "", False, [], object(), 3.5])
    def test_not_null_returns_same_object(self, value):
        assert require_not_null(value) is value
        assert ensure_not_null(value) is value

    def test_require_not_null_fails_on_none(self):
        with pytest.raises(RequireViolation, match="value must not be None"):
            require_not_null(None)

    def test_ensure_not_null_fails_on_none(self):
        with pytest.raises(EnsureViolation, match="value must not be None"):
            ensure_not_null(None)

    def test_not_null_uses_supplied_name(self):
        with pytest.raises(RequireViolation, match="^Require Violation: name must not be None$"):
            require_not_null(None, "name")

    def test_violation_kinds_are_distinct(self):
        with pytest.raises(RequireViolation) as exc_info:
            require_not_null(None)
        assert not isinstance(exc_info.value, EnsureViolation)

        with pytest.raises(EnsureViolation) as exc_info:
            ensure_not_null(None)
        assert not isinstance(exc_info.value, RequireViolation)


class TestNotNullAll:
    """Test require_not_null_all / ensure_not_null_all."""

    def test_all_present_passes(self):
        require_not_null_all(1, 2, "Hello", 3)
        ensure_not_null_all(1, 2, "Hello", 3)

    def test_no_values_passes(self):
        require_not_null_all()

    def test_require_fails_on_any_none(self):
        with pytest.raises(RequireViolation):
            require_not_null_all(1, 2, None, 3)

    def test_ensure_fails_on_any_none(self):
        with pytest.raises(EnsureViolation):
            ensure_not_null_all(1, 2, None, 3)


class TestNotEmpty:
    """Test require_not_empty / ensure_not_empty."""

    def test_returns_untrimmed_text(self):
        text = "  Hello  "
        assert require_not_empty(text) is text
        assert ensure_not_empty(text) is text

    @pytest.mark.parametrize("text", [None, "", " ", "\t\n  "])
    def test_require_fails_on_none_or_blank(self, text):
        with pytest.raises(RequireViolation, match="must not be None nor empty"):
            require_not_empty(text)

    @pytest.mark.parametrize("text", [None, "", "   "])
    def test_ensure_fails_on_none_or_blank(self, text):
        with pytest.raises(EnsureViolation, match="must not be None nor empty"):
            ensure_not_empty(text)

    def test_uses_supplied_name(self):
        with pytest.raises(EnsureViolation, match="title must not be None nor empty"):
            ensure_not_empty("", "title")


class TestNotEmptyCollection:
    """Test require_not_empty_collection / ensure_not_empty_collection."""

    @pytest.mark.parametrize(
        "collection",
        [[1], (1, 2), {"a": 1}, {3}, "x", np.arange(3), pd.DataFrame({"a": [1]})],
    )
    def test_non_empty_returns_same_object(self, collection):
        assert require_not_empty_collection(collection) is collection
        assert ensure_not_empty_collection(collection) is collection

    def test_none_fails_with_not_null_message(self):
        with pytest.raises(RequireViolation, match="^Require Violation: collection must not be None$"):
            require_not_empty_collection(None)

    @pytest.mark.parametrize(
        "collection", [[], (), {}, set(), np.array([]), pd.DataFrame({"a": []})]
    )
    def test_empty_fails(self, collection):
        with pytest.raises(RequireViolation, match="empty collection"):
            require_not_empty_collection(collection)
        with pytest.raises(EnsureViolation, match="empty collection"):
            ensure_not_empty_collection(collection)

    def test_uses_supplied_name(self):
        with pytest.raises(EnsureViolation, match="rows must not be None nor an empty collection"):
            ensure_not_empty_collection([], "rows")


class TestGenericChecks:
    """Test require() / ensure() with caller predicates."""

    def test_ensure_returns_value_when_matching(self):
        result = ensure("Hello world!", lambda v: v == "Hello world!", "Strings do not match")
        assert result == "Hello world!"

    def test_ensure_fails_when_not_matching(self):
        with pytest.raises(EnsureViolation, match="^Ensure Violation: Strings do not match$"):
            ensure("Hello world!", lambda v: v == "NOT MATCHING", "Strings do not match")

    def test_require_returns_value_when_matching(self):
        assert require(5, lambda n: n > 0, "must be positive") == 5

    def test_require_fails_with_verbatim_message(self):
        with pytest.raises(RequireViolation, match=r"^Require Violation: count must be > 0 \(got -1\)$"):
            require(-1, lambda n: n > 0, "count must be > 0 (got -1)")

    def test_violations_are_contract_violations(self):
        assert issubclass(RequireViolation, ContractViolation)
        assert issubclass(EnsureViolation, ContractViolation)
        assert issubclass(ContractViolation, RuntimeError)
