"""Shared test fixtures for Launchpad."""

import pytest
from pathlib import Path

from launchpad.services.config import ConfigManager
from launchpad.services.matchers import SubsequenceMatcher


class CountingMatcher:
    """SubsequenceMatcher that records how often it is called."""

    def __init__(self) -> None:
        self._inner = SubsequenceMatcher()
        self.calls = 0

    def match(self, pattern: str, query: str):
        self.calls += 1
        return self._inner.match(pattern, query)


@pytest.fixture
def choices() -> list[str]:
    """The sample candidates used throughout."""
    return ["docs", "obsidian", "two", "three", "four"]


@pytest.fixture
def counting_matcher() -> CountingMatcher:
    return CountingMatcher()


@pytest.fixture
def config_manager(tmp_path: Path) -> ConfigManager:
    """Create a ConfigManager with temp directory."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return ConfigManager(config_dir=config_dir)
