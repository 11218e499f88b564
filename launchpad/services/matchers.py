"""Fuzzy matching primitives consumed by the ranker.

A matcher answers one question: does `query` match `pattern`, and if so,
how well and at which positions. Two implementations ship:

- SubsequenceMatcher: tiered scoring
  - Exact match: highest score
  - Prefix match: high score
  - Word boundary match: medium-high score
  - Contains match: medium score
  - Fuzzy (subsequence) match: scored by gaps
- TextualMatcher: Textual's command palette fuzzy search
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Protocol

from textual.fuzzy import FuzzySearch

from ..models.exceptions import ConfigValidationError

MatchResult = tuple[int, list[int]]

_WORD = re.compile(r"\S+")


class FuzzyMatcher(Protocol):
    """Matching primitive contract."""

    def match(self, pattern: str, query: str) -> MatchResult | None:
        """Return (score, ascending indices into pattern), or None for no match."""
        ...


def _fold(text: str) -> str:
    # Per-character so positions line up with the original text
    return "".join(ch.lower()[0] for ch in text)


class SubsequenceMatcher:
    """Tiered fuzzy matcher. Higher score = better match."""

    EXACT = 10000
    PREFIX = 5000
    WORD = 3000
    CONTAINS = 2000
    SUBSEQUENCE = 500
    # Tiers never overlap: each score stays below the floor of the tier above
    SUBSEQUENCE_CAP = 999

    def __init__(self, case_sensitive: bool = False) -> None:
        self.case_sensitive = case_sensitive

    def match(self, pattern: str, query: str) -> MatchResult | None:
        if not query:
            return 0, []

        if self.case_sensitive:
            text, needle = pattern, query
        else:
            text, needle = _fold(pattern), _fold(query)
        span = len(needle)

        # Exact match - highest priority
        if needle == text:
            return self.EXACT, list(range(span))

        # Prefix match - high priority
        if text.startswith(needle):
            return min(self.PREFIX + span, self.EXACT - 1), list(range(span))

        # Word boundary match - medium-high priority
        for word in _WORD.finditer(text):
            if word.group().startswith(needle):
                start = word.start()
                return min(self.WORD + span, self.PREFIX - 1), list(range(start, start + span))

        # Contains match - earlier position = higher score
        pos = text.find(needle)
        if pos != -1:
            return max(self.CONTAINS - pos, self.SUBSEQUENCE_CAP + 1), list(range(pos, pos + span))

        return self._subsequence(needle, text)

    def _subsequence(self, query: str, text: str) -> MatchResult | None:
        """Score a fuzzy subsequence match.

        Characters must appear in order but not consecutively.
        Consecutive matches score higher.
        """
        query_idx = 0
        consecutive = 0
        score = 0
        last_match_idx = -2  # -2 so first match isn't "consecutive"
        indices: list[int] = []

        for i, char in enumerate(text):
            if query_idx < len(query) and char == query[query_idx]:
                if i == last_match_idx + 1:
                    consecutive += 1
                    score += 10 * consecutive
                else:
                    consecutive = 0
                    score += 1

                last_match_idx = i
                indices.append(i)
                query_idx += 1

        if query_idx == len(query):
            return min(self.SUBSEQUENCE + score, self.SUBSEQUENCE_CAP), indices
        return None


class TextualMatcher:
    """Adapter over Textual's FuzzySearch.

    FuzzySearch scores are small floats; they are scaled to integers so
    both matchers rank on the same kind of value.
    """

    SCORE_SCALE = 1000

    def __init__(self, case_sensitive: bool = False) -> None:
        self.case_sensitive = case_sensitive
        self._search = FuzzySearch(case_sensitive=case_sensitive)

    def match(self, pattern: str, query: str) -> MatchResult | None:
        # FuzzySearch has no notion of an empty query
        if not query:
            return 0, []

        score, offsets = self._search.match(query, pattern)
        if score <= 0:
            return None
        return round(score * self.SCORE_SCALE), list(offsets)


class MatcherKind(Enum):
    """Available matcher implementations."""

    SUBSEQUENCE = "subsequence"
    TEXTUAL = "textual"


def create_matcher(
    kind: MatcherKind | str = MatcherKind.SUBSEQUENCE,
    case_sensitive: bool = False,
) -> FuzzyMatcher:
    """Build a matcher by kind.

    Raises:
        ConfigValidationError: If kind names no known matcher.
    """
    if not isinstance(kind, MatcherKind):
        try:
            kind = MatcherKind(kind)
        except ValueError:
            known = ", ".join(k.value for k in MatcherKind)
            raise ConfigValidationError(
                f"Unknown matcher: {kind!r}",
                suggestion=f"use one of: {known}",
            ) from None

    if kind is MatcherKind.TEXTUAL:
        return TextualMatcher(case_sensitive=case_sensitive)
    return SubsequenceMatcher(case_sensitive=case_sensitive)
