"""
内置插件 - 提供基础命令
Built-in plugin - provides basic commands.
"""

from __future__ import annotations

from PlugBot.plugin.base import Plugin
from PlugBot.plugin.command import command
from PlugBot.plugin.role import Role


class BuiltinPlugin(Plugin):
    """内置命令插件 / Built-in commands plugin."""

    def __init__(self, name: str | None = "Builtin") -> None:
        super().__init__(name)

    def default_roles(self) -> list[Role]:
        return [
            Role(
                name="admin",
                description="管理插件 / Manage plugins",
                permissions={"plugin:manage", "plugin:view"},
            ),
        ]

    @command("help", description="显示帮助信息 / Show help info")
    def cmd_help(self) -> str:
        lines = [f"{self.name} - 可用命令列表:", ""]
        for cmd in sorted(self.commands.values(), key=lambda c: c.name):
            if cmd.enabled and not cmd.hidden:
                lines.append(f"  /{cmd.name} - {cmd.description or '无描述'}")
        return "\n".join(lines)

    @command("status", description="显示插件状态 / Show plugin status", roles=["admin"])
    def cmd_status(self) -> str:
        state = "启用" if self.enabled else "停用"
        return f"{self.name}: {state}, {len(self.commands)} 个命令"

    @command("version", description="显示版本信息 / Show version info")
    def cmd_version(self) -> str:
        from PlugBot import __app_name__, __version__

        return f"{__app_name__} v{__version__}"
