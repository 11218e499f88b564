"""Fuzzer: query buffer plus a ranking cache over a Ranker.

Usage:
    fuzzer = Fuzzer(["docs", "obsidian", "two"])
    fuzzer.query.push("o")

    # Re-ranks only when the query changed since the previous call
    for match in fuzzer.matches():
        print(match.item, match.score, match.indices)

The cached ranking is an immutable tuple that gets replaced, never
mutated, so a Matches iterator keeps the snapshot it started with even
if the query changes and another matches() call re-ranks meanwhile.
"""

from __future__ import annotations

import logging
from typing import Generic, Iterable, Iterator, Sequence, TypeVar

from ..models.match import Match, MatchOwned
from ..models.score import Ranking
from .matchers import FuzzyMatcher
from .ranker import Ranker

logger = logging.getLogger(__name__)

T = TypeVar("T")


class QueryBuffer:
    """Caller-editable query text.

    Accepts any content. Positions follow slicing rules, so out-of-range
    positions clamp instead of raising.
    """

    def __init__(self, text: str = "") -> None:
        self._text = text

    @property
    def text(self) -> str:
        return self._text

    def push(self, text: str) -> None:
        """Append text at the end."""
        self._text += text

    def pop(self) -> str | None:
        """Remove and return the last character, None when empty."""
        if not self._text:
            return None
        last = self._text[-1]
        self._text = self._text[:-1]
        return last

    def insert(self, position: int, text: str) -> None:
        self._text = self._text[:position] + text + self._text[position:]

    def delete(self, start: int, end: int | None = None) -> None:
        """Delete text[start:end]; a single character when end is omitted."""
        if end is None:
            end = start + 1
        self._text = self._text[:start] + self._text[end:]

    def replace(self, text: str) -> None:
        self._text = text

    def clear(self) -> None:
        self._text = ""

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"QueryBuffer({self._text!r})"

    def __len__(self) -> int:
        return len(self._text)

    def __bool__(self) -> bool:
        return bool(self._text)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, QueryBuffer):
            return self._text == other._text
        if isinstance(other, str):
            return self._text == other
        return NotImplemented

    __hash__ = None  # Mutable


class Matches(Generic[T]):
    """Lazy iterator resolving a ranking snapshot into Match views."""

    def __init__(self, choices: Sequence[T], rankings: Ranking) -> None:
        self._choices = choices
        self._rankings = rankings
        self._idx = 0

    @property
    def rankings(self) -> Ranking:
        """The snapshot this iterator walks."""
        return self._rankings

    def __iter__(self) -> Iterator[Match[T]]:
        return self

    def __next__(self) -> Match[T]:
        while self._idx < len(self._rankings):
            score, index = self._rankings[self._idx]
            self._idx += 1
            if not 0 <= index < len(self._choices):
                # Rankings are permutations of the choices; never expected
                logger.debug("Skipping out-of-range ranking index %d", index)
                continue
            return Match(
                item=self._choices[index],
                score=score.value,
                indices=score.indices,
                matched=score.matched,
            )
        raise StopIteration

    def __len__(self) -> int:
        """Ranking entries not yet consumed."""
        return len(self._rankings) - self._idx


class Fuzzer(Generic[T]):
    """Fuzzy-search session over a fixed candidate list."""

    def __init__(
        self,
        items: Iterable[T],
        matcher: FuzzyMatcher | None = None,
        max_results: int | None = None,
    ) -> None:
        self._ranker: Ranker[T] = Ranker(items, matcher)
        self.max_results = max_results  # Default limit for top()
        self._query = QueryBuffer()
        self._last_query = ""
        self._rankings: Ranking | None = None

    @property
    def ranker(self) -> Ranker[T]:
        return self._ranker

    @property
    def query(self) -> QueryBuffer:
        """The editable query buffer."""
        return self._query

    @property
    def text(self) -> str:
        """Current query text."""
        return self._query.text

    @text.setter
    def text(self, value: str) -> None:
        self._query.replace(value)

    def rankings(self) -> Ranking:
        """Cached ranking, computed for the current query if absent.

        Does not re-check the query: after an edit this is the previous
        ranking until matches() is called.
        """
        if self._rankings is None:
            self._last_query = self._query.text
            self._rankings = self._ranker.rankings_of(self._last_query)
        return self._rankings

    def matches(self) -> Matches[T]:
        """Matches for the current query, best first.

        Re-ranks only when the query differs from the one that produced
        the cached ranking.
        """
        query = self._query.text
        if self._rankings is None or query != self._last_query:
            # Query and ranking are replaced together
            self._last_query = query
            self._rankings = self._ranker.rankings_of(query)
        else:
            logger.debug("Reusing ranking for query %r", query)

        return Matches(self._ranker.choices(), self._rankings)

    def top(self, limit: int | None = None) -> list[MatchOwned[T]]:
        """Owned copies of the leading matches, at most limit (or max_results).

        With a non-empty query only matched candidates are kept; with an
        empty query every candidate qualifies. Only kept matches are copied.
        """
        if limit is None:
            limit = self.max_results
        keep_all = not self._query
        results: list[MatchOwned[T]] = []
        for match in self.matches():
            if limit is not None and len(results) >= limit:
                break
            if match.matched or keep_all:
                results.append(match.owned())
        return results
