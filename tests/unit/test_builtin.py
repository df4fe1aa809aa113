"""Tests for PlugBot.plugin.builtin — BuiltinPlugin."""
from __future__ import annotations

from PlugBot import __version__
from PlugBot.plugin.builtin import BuiltinPlugin


class TestBuiltinPlugin:
    def test_name(self) -> None:
        assert BuiltinPlugin().name == "Builtin"

    def test_commands_and_roles(self) -> None:
        p = BuiltinPlugin()
        assert set(p.commands) == {"help", "status", "version"}
        assert set(p.roles) == {"admin"}
        assert p.commands["status"].roles == ["admin"]

    def test_help_lists_enabled_commands(self) -> None:
        p = BuiltinPlugin()
        p.deactivate_command("status")
        text = p.commands["help"].handler()
        assert "/help" in text
        assert "/version" in text
        assert "/status" not in text

    def test_version(self) -> None:
        assert __version__ in BuiltinPlugin().commands["version"].handler()

    def test_status_reflects_state(self) -> None:
        p = BuiltinPlugin()
        p.deactivate()
        assert "停用" in p.commands["status"].handler()

    def test_instances_do_not_share_roles(self) -> None:
        a, b = BuiltinPlugin(), BuiltinPlugin()
        assert a.roles["admin"] is not b.roles["admin"]
        a.roles["admin"].permissions.add("plugin:delete")
        assert "plugin:delete" not in b.roles["admin"].permissions
