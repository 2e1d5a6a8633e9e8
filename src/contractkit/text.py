"""Small string helpers shared by the contract checks."""

from typing import Optional


def is_non_empty(text: Optional[str]) -> bool:
    """True if ``text`` is not None and has at least one non-whitespace character."""
    return text is not None and len(text.strip()) > 0


def is_empty(text: Optional[str]) -> bool:
    """True if ``text`` is None or whitespace only."""
    return not is_non_empty(text)


def quoted(text) -> str:
    """Wrap ``text`` in double quotes for messages."""
    return f'"{text}"'
