"""Score and ranking value types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, NamedTuple


@dataclass(frozen=True)
class Score:
    """Result of matching one candidate against one query.

    `matched` separates a real zero-confidence match from no match at all,
    both of which carry a value of 0.
    """

    value: int = 0
    indices: tuple[int, ...] = ()  # Ascending positions in the pattern
    matched: bool = False

    @classmethod
    def unmatched(cls) -> "Score":
        return cls()

    @classmethod
    def of(cls, value: int, indices: Iterable[int]) -> "Score":
        """Build a matched score from a matcher result."""
        return cls(value=value, indices=tuple(indices), matched=True)


class RankedChoice(NamedTuple):
    """A score paired with the candidate's position in the collection."""

    score: Score
    index: int


# Best first; one entry per candidate. Tuples so snapshots are never mutated.
Ranking = tuple[RankedChoice, ...]
