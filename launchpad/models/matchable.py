"""Matchable capability: what the ranking engine matches against."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Matchable(Protocol):
    """Anything that exposes a text pattern for fuzzy matching.

    `pattern()` must be deterministic for a given value: cached rankings
    are only valid while every candidate keeps returning the same text.
    """

    def pattern(self) -> str: ...


def pattern_of(item: Matchable | str) -> str:
    """Get the text to match for a candidate.

    Plain strings are matchable as themselves.
    """
    if isinstance(item, str):
        return item
    return item.pattern()
