"""Ranker: scores every candidate against a query and sorts them."""

from __future__ import annotations

import logging
from typing import Generic, Iterable, Sequence, TypeVar

from ..models.matchable import pattern_of
from ..models.score import RankedChoice, Ranking, Score
from .matchers import FuzzyMatcher, SubsequenceMatcher

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Ranker(Generic[T]):
    """Owns a fixed candidate collection and a matching primitive.

    The collection is frozen at construction. Candidates are stored as-is,
    never copied or mutated.
    """

    def __init__(
        self,
        choices: Iterable[T],
        matcher: FuzzyMatcher | None = None,
    ) -> None:
        self._choices: tuple[T, ...] = tuple(choices)
        self._matcher = matcher if matcher is not None else SubsequenceMatcher()

    @property
    def matcher(self) -> FuzzyMatcher:
        return self._matcher

    def choices(self) -> Sequence[T]:
        """Candidates in original order."""
        return self._choices

    def rankings_of(self, query: str) -> Ranking:
        """Rank every candidate against query, best first.

        Unmatched candidates are kept with an unmatched score, so the
        result always holds one entry per candidate. The sort is stable:
        equal scores stay in collection order.
        """
        scores: list[RankedChoice] = []
        for index, choice in enumerate(self._choices):
            result = self._matcher.match(pattern_of(choice), query)
            score = Score.of(*result) if result is not None else Score.unmatched()
            scores.append(RankedChoice(score, index))

        scores.sort(key=lambda ranked: -ranked.score.value)

        logger.debug("Ranked %d choices for query %r", len(scores), query)
        return tuple(scores)
