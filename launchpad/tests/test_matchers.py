"""Tests for the fuzzy matching primitives."""

import pytest

from launchpad.models.exceptions import ConfigValidationError
from launchpad.services.matchers import (
    MatcherKind,
    SubsequenceMatcher,
    TextualMatcher,
    create_matcher,
)


class TestSubsequenceMatcher:
    """Tests for the tiered matcher."""

    def setup_method(self):
        self.matcher = SubsequenceMatcher()

    def test_empty_query_matches_with_zero(self):
        """Empty query matches anything with a neutral score."""
        assert self.matcher.match("docs", "") == (0, [])
        assert self.matcher.match("", "") == (0, [])

    def test_exact_match(self):
        """Exact match (ignoring case) scores highest."""
        assert self.matcher.match("Docs", "docs") == (10000, [0, 1, 2, 3])

    def test_prefix_match(self):
        """Prefix match scores by query length."""
        assert self.matcher.match("obsidian", "obs") == (5003, [0, 1, 2])

    def test_word_boundary_match(self):
        """Word start later in the text is found with its offset."""
        assert self.matcher.match("open docs", "do") == (3002, [5, 6])

    def test_contains_match_prefers_earlier_position(self):
        """Contains match scores lower the later it starts."""
        assert self.matcher.match("docs", "o") == (1999, [1])
        assert self.matcher.match("two", "o") == (1998, [2])

    def test_subsequence_match(self):
        """Characters in order but apart still match."""
        assert self.matcher.match("obsidian", "on") == (502, [0, 7])

    def test_subsequence_rewards_consecutive(self):
        """Consecutive characters outscore scattered ones."""
        tight = self.matcher.match("xabxc", "abc")
        loose = self.matcher.match("xaxbxc", "abc")
        assert tight == (512, [1, 2, 4])
        assert loose == (503, [1, 3, 5])

    def test_late_contains_match_stays_positive(self):
        """A match far into the text still scores above the subsequence tier."""
        score, indices = self.matcher.match("x" * 2500 + "docs", "docs")
        assert score == SubsequenceMatcher.SUBSEQUENCE_CAP + 1
        assert indices == [2500, 2501, 2502, 2503]

    def test_long_subsequence_is_capped(self):
        """Consecutive bonuses never lift a subsequence into a higher tier."""
        prefix = "ab" * 23
        score, _ = self.matcher.match(prefix + "_z", prefix + "z")
        assert score == SubsequenceMatcher.SUBSEQUENCE_CAP
        assert score < self.matcher.match(prefix + "z", prefix + "z")[0]

    def test_tiers_do_not_overlap(self):
        """Long queries stay inside their own tier."""
        query = "q" * 6000
        prefix_score, _ = self.matcher.match(query + "x", query)
        word_score, _ = self.matcher.match("x " + query + "x", query)
        assert prefix_score < SubsequenceMatcher.EXACT
        assert word_score < SubsequenceMatcher.PREFIX

    def test_no_match(self):
        """Missing characters give no match."""
        assert self.matcher.match("three", "o") is None
        assert self.matcher.match("", "o") is None

    def test_out_of_order_is_no_match(self):
        """Subsequence must respect order."""
        assert self.matcher.match("docs", "sd") is None

    def test_case_sensitive(self):
        """Case sensitive matching rejects differing case."""
        matcher = SubsequenceMatcher(case_sensitive=True)
        assert matcher.match("Docs", "doc") is None
        assert matcher.match("Docs", "Doc") == (5003, [0, 1, 2])

    def test_indices_track_original_text(self):
        """Indices refer to positions in the original pattern."""
        score, indices = self.matcher.match("Open Docs", "DOCS")
        assert indices == [5, 6, 7, 8]
        assert "Open Docs"[5:9] == "Docs"


class TestTextualMatcher:
    """Tests for the Textual FuzzySearch adapter."""

    def test_empty_query(self):
        """Empty query matches with a neutral score."""
        assert TextualMatcher().match("docs", "") == (0, [])

    def test_match_reports_offsets(self):
        """Matched positions come back in ascending order."""
        result = TextualMatcher().match("docs", "dc")
        assert result is not None
        score, indices = result
        assert score > 0
        assert indices == [0, 2]

    def test_no_match(self):
        """Missing characters give no match."""
        assert TextualMatcher().match("three", "o") is None

    def test_score_is_integer(self):
        """Scores are scaled to integers."""
        score, _ = TextualMatcher().match("obsidian", "o")
        assert isinstance(score, int)


class TestCreateMatcher:
    """Tests for matcher construction."""

    def test_default_is_subsequence(self):
        assert isinstance(create_matcher(), SubsequenceMatcher)

    def test_by_name(self):
        """Matchers can be selected by their config name."""
        assert isinstance(create_matcher("textual"), TextualMatcher)
        assert isinstance(create_matcher(MatcherKind.SUBSEQUENCE), SubsequenceMatcher)

    def test_case_sensitivity_passed_through(self):
        matcher = create_matcher("subsequence", case_sensitive=True)
        assert matcher.case_sensitive is True

    def test_unknown_name_raises(self):
        """Unknown matcher names are a config error with a suggestion."""
        with pytest.raises(ConfigValidationError) as exc_info:
            create_matcher("skim")
        assert "skim" in str(exc_info.value)
        assert "subsequence" in str(exc_info.value)
