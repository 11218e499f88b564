"""Launchpad - incremental fuzzy ranking for command palettes and finders."""

from launchpad.models import (
    Command,
    ConfigError,
    ConfigValidationError,
    LaunchpadError,
    Match,
    Matchable,
    MatchOwned,
    RankedChoice,
    Ranking,
    Score,
    pattern_of,
)
from launchpad.services import (
    CommandRegistry,
    ConfigManager,
    Fuzzer,
    FuzzyMatcher,
    LaunchpadConfig,
    Matches,
    MatcherKind,
    QueryBuffer,
    Ranker,
    SubsequenceMatcher,
    TextualMatcher,
    create_default_registry,
    create_matcher,
)

__version__ = "0.1.0"

__all__ = [
    "Command",
    "CommandRegistry",
    "ConfigError",
    "ConfigManager",
    "ConfigValidationError",
    "Fuzzer",
    "FuzzyMatcher",
    "LaunchpadConfig",
    "LaunchpadError",
    "Match",
    "MatchOwned",
    "Matchable",
    "Matches",
    "MatcherKind",
    "QueryBuffer",
    "RankedChoice",
    "Ranker",
    "Ranking",
    "Score",
    "SubsequenceMatcher",
    "TextualMatcher",
    "create_default_registry",
    "create_matcher",
    "pattern_of",
]
