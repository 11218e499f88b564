"""Data models for Launchpad."""

from .matchable import Matchable, pattern_of
from .score import Score, RankedChoice, Ranking
from .match import Match, MatchOwned
from .command import Command
from .exceptions import (
    LaunchpadError,
    ConfigError,
    ConfigValidationError,
)

__all__ = [
    # Capability
    "Matchable",
    "pattern_of",
    # Ranking values
    "Score",
    "RankedChoice",
    "Ranking",
    # Results
    "Match",
    "MatchOwned",
    # Candidates
    "Command",
    # Exceptions
    "LaunchpadError",
    "ConfigError",
    "ConfigValidationError",
]
