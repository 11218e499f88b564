"""Tests for Command and CommandRegistry."""

from launchpad.models.command import Command
from launchpad.models.matchable import Matchable
from launchpad.services.command_registry import CommandRegistry, create_default_registry
from launchpad.services.matchers import TextualMatcher


class TestCommand:
    """Tests for the Command candidate."""

    def test_pattern_is_label(self):
        command = Command(id="open_docs", label="Open docs")
        assert isinstance(command, Matchable)
        assert command.pattern() == "Open docs"

    def test_to_dict_omits_unset(self):
        assert Command(id="a", label="Alpha").to_dict() == {"id": "a", "label": "Alpha"}

    def test_to_dict_with_values(self):
        command = Command(id="a", label="Alpha", description="First", keybinding="1", hidden=True)
        result = command.to_dict()
        assert result["description"] == "First"
        assert result["keybinding"] == "1"
        assert result["hidden"] is True

    def test_from_dict_label_defaults_to_id(self):
        command = Command.from_dict({"id": "notes"})
        assert command.label == "notes"
        assert command.hidden is False


class TestCommandRegistry:
    """Tests for CommandRegistry."""

    def test_register_and_get(self):
        registry = CommandRegistry()
        registry.register(Command(id="a", label="Alpha"))
        assert registry.get("a").label == "Alpha"
        assert registry.get("missing") is None

    def test_register_replaces_same_id(self):
        registry = CommandRegistry()
        registry.register(Command(id="a", label="Alpha"))
        registry.register(Command(id="a", label="Again"))
        assert [c.label for c in registry.get_all()] == ["Again"]

    def test_hidden_commands_excluded(self):
        registry = CommandRegistry()
        registry.register_all([
            Command(id="a", label="Alpha"),
            Command(id="b", label="Beta", hidden=True),
        ])
        assert [c.id for c in registry.get_all()] == ["a"]
        assert [c.id for c in registry.fuzzer().ranker.choices()] == ["a"]

    def test_fuzzer_ranks_commands(self):
        registry = create_default_registry()
        fuzzer = registry.fuzzer()
        fuzzer.text = "o"
        assert [m.item.id for m in fuzzer.top()] == ["obsidian", "docs", "four", "two"]

    def test_fuzzer_passes_max_results(self):
        fuzzer = create_default_registry().fuzzer(max_results=2)
        assert len(fuzzer.top()) == 2

    def test_fuzzer_uses_given_matcher(self):
        matcher = TextualMatcher()
        fuzzer = create_default_registry().fuzzer(matcher)
        assert fuzzer.ranker.matcher is matcher

    def test_default_registry_contents(self):
        ids = [c.id for c in create_default_registry().get_all()]
        assert ids == ["docs", "obsidian", "two", "three", "four"]
