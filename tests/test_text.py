"""Tests for string helpers."""

import pytest

from contractkit import is_empty, is_non_empty, quoted


@pytest.mark.parametrize("text,expected", [
    (None, False),
    ("", False),
    ("   ", False),
    ("\n\t", False),
    ("a", True),
    ("  a  ", True),
])
def test_is_non_empty(text, expected):
    assert is_non_empty(text) is expected
    assert is_empty(text) is (not expected)


def test_quoted():
    assert quoted("abc") == '"abc"'
    assert quoted("") == '""'
    assert quoted(None) == '"None"'
