"""Services for Launchpad."""

from launchpad.services.matchers import (
    FuzzyMatcher,
    MatcherKind,
    SubsequenceMatcher,
    TextualMatcher,
    create_matcher,
)
from launchpad.services.ranker import Ranker
from launchpad.services.fuzzer import Fuzzer, Matches, QueryBuffer
from launchpad.services.command_registry import CommandRegistry, create_default_registry
from launchpad.services.config import ConfigManager, LaunchpadConfig

__all__ = [
    "FuzzyMatcher",
    "MatcherKind",
    "SubsequenceMatcher",
    "TextualMatcher",
    "create_matcher",
    "Ranker",
    "Fuzzer",
    "Matches",
    "QueryBuffer",
    "CommandRegistry",
    "create_default_registry",
    "ConfigManager",
    "LaunchpadConfig",
]
