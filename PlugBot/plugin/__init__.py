"""
插件系统 - 插件是命令与角色的可启停集合
Plugin system - a plugin is an enable/disable-able bundle of commands and
roles.
"""

from PlugBot.plugin.base import Plugin
from PlugBot.plugin.command import Command, ModuleCommand, command
from PlugBot.plugin.errors import (
    PluginDisabled,
    PluginErrorKind,
    PluginException,
    PluginNotFoundException,
)
from PlugBot.plugin.factory import add_command_to_plugin, new_plugin
from PlugBot.plugin.manager import PluginManager
from PlugBot.plugin.role import Role

__all__ = [
    "Plugin",
    "PluginManager",
    "Command",
    "ModuleCommand",
    "Role",
    "command",
    "new_plugin",
    "add_command_to_plugin",
    "PluginException",
    "PluginNotFoundException",
    "PluginDisabled",
    "PluginErrorKind",
]
