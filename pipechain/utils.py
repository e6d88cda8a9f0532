"""Small helpers shared by the pipeline runner."""

from __future__ import annotations

from collections.abc import Sequence


def last_string(items: Sequence[str]) -> str:
    """Return the last string of a non-empty sequence."""
    if not items:
        raise ValueError("sequence is empty")
    return items[-1]


def is_empty(text: str) -> bool:
    """True when *text* holds no characters at all."""
    return not text