"""
Tests for dewdrop/cli/registry.py.

Tests key functionality including:
- Registration and name validation
- Alias conflict detection
- Lookup by name and alias
"""

from unittest.mock import Mock, patch

import pytest

from dewdrop.cli import (
    CommandRegistrationError,
    CommandRegistry,
    DuplicateCommandError,
)
from tests.helpers.commands import NameCommand, PathCommand, WidgetCommand


def _fake_command(name: str, aliases=()) -> Mock:
    """Mock with just the attributes the registry reads."""
    command = Mock()
    command.command = name
    command.aliases = list(aliases)
    command.is_selected = lambda value: value.lower() in [name, *aliases]
    return command


# =============================================================================
# Test register()
# =============================================================================


@pytest.mark.unit
class TestRegister:
    """Test command registration."""

    def test_register_returns_command(self, recording_renderer):
        registry = CommandRegistry()
        command = NameCommand(None, recording_renderer)

        assert registry.register(command) is command
        assert len(registry) == 1
        assert registry.get("name") is command

    def test_keeps_registration_order(self, recording_renderer):
        registry = CommandRegistry()
        registry.register(PathCommand(None, recording_renderer))
        registry.register(NameCommand(None, recording_renderer))

        assert registry.list_names() == ["path", "name"]
        assert [c.command for c in registry] == ["path", "name"]

    def test_duplicate_name(self, recording_renderer):
        registry = CommandRegistry()
        registry.register(NameCommand(None, recording_renderer))

        with pytest.raises(DuplicateCommandError) as exc_info:
            registry.register(NameCommand(None, recording_renderer))

        assert "already registered" in str(exc_info.value)
        assert exc_info.value.command_name == "name"

    @pytest.mark.parametrize("name", ["", "1abc", "has space", "bad!"])
    def test_invalid_name(self, name):
        registry = CommandRegistry()

        with pytest.raises(CommandRegistrationError):
            registry.register(_fake_command(name))

    def test_name_too_long(self):
        registry = CommandRegistry()

        with pytest.raises(CommandRegistrationError) as exc_info:
            registry.register(_fake_command("a" * 256))

        assert "maximum length" in str(exc_info.value)

    def test_invalid_alias(self):
        registry = CommandRegistry()

        with pytest.raises(CommandRegistrationError) as exc_info:
            registry.register(_fake_command("deploy", ["-d"]))

        assert "Alias '-d'" in str(exc_info.value)

    def test_alias_taken_by_other_command(self):
        registry = CommandRegistry()
        registry.register(_fake_command("deploy", ["d"]))

        with pytest.raises(CommandRegistrationError) as exc_info:
            registry.register(_fake_command("delete", ["d"]))

        assert "already used by command 'deploy'" in str(exc_info.value)

    def test_name_taken_as_alias(self):
        registry = CommandRegistry()
        registry.register(_fake_command("deploy", ["ship"]))

        with pytest.raises(CommandRegistrationError) as exc_info:
            registry.register(_fake_command("ship"))

        assert "alias of command 'deploy'" in str(exc_info.value)

    def test_too_many_aliases(self):
        registry = CommandRegistry()
        aliases = [f"a{i}" for i in range(101)]

        with pytest.raises(CommandRegistrationError) as exc_info:
            registry.register(_fake_command("deploy", aliases))

        assert "exceeding maximum" in str(exc_info.value)

    def test_command_count_limit(self):
        registry = CommandRegistry()

        with patch("dewdrop.cli.registry.MAX_COMMAND_COUNT", 2):
            registry.register(_fake_command("one"))
            registry.register(_fake_command("two"))
            with pytest.raises(CommandRegistrationError) as exc_info:
                registry.register(_fake_command("three"))

        assert "maximum command count" in str(exc_info.value)


# =============================================================================
# Test lookup
# =============================================================================


@pytest.mark.unit
class TestLookup:
    """Test selecting and querying registered commands."""

    @pytest.fixture
    def registry(self, recording_renderer) -> CommandRegistry:
        registry = CommandRegistry()
        registry.register(NameCommand(None, recording_renderer))
        registry.register(WidgetCommand(None, recording_renderer))
        return registry

    @pytest.mark.parametrize("token", ["gen-widget", "GW", "widget"])
    def test_select_by_name_or_alias(self, registry, token):
        assert registry.select(token).command == "gen-widget"

    def test_select_unknown(self, registry):
        assert registry.select("missing") is None

    def test_get_requires_exact_name(self, registry):
        assert registry.get("gw") is None
        assert registry.get("gen-widget") is not None

    def test_is_registered(self, registry):
        assert registry.is_registered("NAME")
        assert registry.is_registered("gw")
        assert not registry.is_registered("missing")

    def test_clear(self, registry):
        registry.clear()

        assert len(registry) == 0
        assert registry.list_commands() == []
        assert not registry.is_registered("gw")
