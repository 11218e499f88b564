"""Configuration management for Launchpad.

Single JSON file at ~/.config/launchpad/config.json:
- matcher: which matching primitive ranks candidates
- case_sensitive: whether matching respects case
- max_results: cap for Fuzzer.top() consumers (null = no cap)
- commands: the candidate catalogue (empty = built-in sample commands)
"""

from __future__ import annotations

import json
import logging
import os
import stat
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ..models.command import Command
from ..models.exceptions import ConfigValidationError
from .command_registry import CommandRegistry, create_default_registry
from .fuzzer import Fuzzer
from .matchers import FuzzyMatcher, MatcherKind, create_matcher

logger = logging.getLogger(__name__)


def _write_json(path: Path, data: dict) -> None:
    """Write JSON atomically with owner-only permissions (0600)."""
    content = json.dumps(data, indent=2)
    temp_path = path.with_suffix(".tmp")
    try:
        fd = os.open(str(temp_path), os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        try:
            os.write(fd, content.encode())
        finally:
            os.close(fd)
        temp_path.replace(path)
    except OSError:
        # Fallback: write normally then chmod
        path.write_text(content)
        try:
            path.chmod(stat.S_IRUSR | stat.S_IWUSR)
        except OSError:
            pass  # Best effort on systems that don't support chmod


@dataclass
class LaunchpadConfig:
    """Launchpad configuration."""

    matcher: MatcherKind = MatcherKind.SUBSEQUENCE
    case_sensitive: bool = False
    max_results: int | None = None
    commands: list[Command] = field(default_factory=list)

    def validate(self) -> None:
        """Raise ConfigValidationError for values the engine cannot use."""
        if not isinstance(self.case_sensitive, bool):
            raise ConfigValidationError(
                f"case_sensitive must be true or false, got {self.case_sensitive!r}",
            )
        if self.max_results is not None and (
            isinstance(self.max_results, bool) or not isinstance(self.max_results, int)
        ):
            raise ConfigValidationError(
                f"max_results must be an integer, got {self.max_results!r}",
                suggestion="use null for no limit",
            )
        if self.max_results is not None and self.max_results < 1:
            raise ConfigValidationError(
                f"max_results must be positive, got {self.max_results}",
                suggestion="use null for no limit",
            )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"matcher": self.matcher.value}
        if self.case_sensitive:
            result["case_sensitive"] = True
        if self.max_results is not None:
            result["max_results"] = self.max_results
        if self.commands:
            result["commands"] = [c.to_dict() for c in self.commands]
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LaunchpadConfig":
        matcher = MatcherKind.SUBSEQUENCE
        if data.get("matcher"):
            try:
                matcher = MatcherKind(data["matcher"])
            except ValueError:
                logger.warning("Unknown matcher %r, using %s", data["matcher"], matcher.value)

        return cls(
            matcher=matcher,
            case_sensitive=data.get("case_sensitive", False),
            max_results=data.get("max_results"),
            commands=[Command.from_dict(c) for c in data.get("commands", [])],
        )


class ConfigManager:
    """Loads configuration and builds engine components from it."""

    def __init__(self, config_dir: Path | None = None):
        if config_dir is None:
            config_dir = Path.home() / ".config" / "launchpad"
        self._config_dir = config_dir
        self._config_file = config_dir / "config.json"
        self._config: LaunchpadConfig | None = None

    @property
    def config_file(self) -> Path:
        return self._config_file

    @property
    def config(self) -> LaunchpadConfig:
        if self._config is None:
            self._config = self._load_config()
        return self._config

    def _load_config(self) -> LaunchpadConfig:
        """Load config from disk, falling back to defaults."""
        if self._config_file.exists():
            try:
                data = json.loads(self._config_file.read_text())
                config = LaunchpadConfig.from_dict(data)
                config.validate()
                return config
            except (json.JSONDecodeError, KeyError, TypeError, AttributeError, ConfigValidationError) as e:
                logger.warning("Ignoring unreadable config %s: %s", self._config_file, e)
        return LaunchpadConfig()

    def save_config(self, config: LaunchpadConfig) -> None:
        """Validate and save config to disk."""
        config.validate()
        self._config_dir.mkdir(parents=True, exist_ok=True)
        _write_json(self._config_file, config.to_dict())
        self._config = config

    def create_matcher(self) -> FuzzyMatcher:
        config = self.config
        return create_matcher(config.matcher, case_sensitive=config.case_sensitive)

    def create_registry(self) -> CommandRegistry:
        """Registry of configured commands, or the built-in sample set."""
        if not self.config.commands:
            return create_default_registry()
        registry = CommandRegistry()
        registry.register_all(self.config.commands)
        return registry

    def create_fuzzer(self) -> Fuzzer[Command]:
        return self.create_registry().fuzzer(
            self.create_matcher(),
            max_results=self.config.max_results,
        )
