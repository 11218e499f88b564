"""Resolved match records handed to consumers.

Two flavours exist:
- Match: a view sharing the ranker's candidate object and the cached
  ranking's index tuple. Cheap to produce on every frame.
- MatchOwned: an independent snapshot that survives later query edits
  and any mutation of the original candidate.

Convert with Match.owned() and MatchOwned.borrowed().
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Match(Generic[T]):
    """A borrowed match view."""

    item: T
    score: int
    indices: Sequence[int]
    matched: bool = True

    def owned(self) -> "MatchOwned[T]":
        """Copy the candidate and indices into an independent record."""
        return MatchOwned(
            item=copy.deepcopy(self.item),
            score=self.score,
            indices=list(self.indices),
            matched=self.matched,
        )


@dataclass
class MatchOwned(Generic[T]):
    """An owned match snapshot."""

    item: T
    score: int
    indices: list[int] = field(default_factory=list)
    matched: bool = True

    def borrowed(self) -> Match[T]:
        """View this snapshot as a Match without copying."""
        return Match(
            item=self.item,
            score=self.score,
            indices=self.indices,
            matched=self.matched,
        )
