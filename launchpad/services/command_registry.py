"""Command registry for launcher palettes.

Commands are registered once, then handed to a Fuzzer as its fixed
candidate list.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..models.command import Command
from .fuzzer import Fuzzer
from .matchers import FuzzyMatcher


@dataclass
class CommandRegistry:
    """Registry of all available commands."""

    _commands: dict[str, Command] = field(default_factory=dict)

    def register(self, command: Command) -> None:
        """Register a command, replacing any with the same id."""
        self._commands[command.id] = command

    def register_all(self, commands: list[Command]) -> None:
        for command in commands:
            self.register(command)

    def get(self, command_id: str) -> Command | None:
        return self._commands.get(command_id)

    def get_all(self) -> list[Command]:
        """Get all non-hidden commands in registration order."""
        return [c for c in self._commands.values() if not c.hidden]

    def fuzzer(
        self,
        matcher: FuzzyMatcher | None = None,
        max_results: int | None = None,
    ) -> Fuzzer[Command]:
        """Create a fuzzy-search session over the visible commands.

        Later registrations do not affect an existing session.
        """
        return Fuzzer(self.get_all(), matcher, max_results)


def create_default_registry() -> CommandRegistry:
    """Create registry with the built-in sample commands."""
    registry = CommandRegistry()
    registry.register_all([
        Command(id="docs", label="docs", description="Browse documentation"),
        Command(id="obsidian", label="obsidian", description="Open the notes vault"),
        Command(id="two", label="two"),
        Command(id="three", label="three"),
        Command(id="four", label="four"),
    ])
    return registry
