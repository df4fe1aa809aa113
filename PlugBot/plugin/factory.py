"""
插件构造辅助函数
Plugin construction helpers.
"""

from __future__ import annotations

from collections.abc import Iterable

from PlugBot.plugin.base import Plugin
from PlugBot.plugin.command import Command
from PlugBot.plugin.role import Role


def new_plugin(
    name: str,
    commands: Iterable[Command] = (),
    roles: Iterable[Role] = (),
) -> Plugin:
    """
    创建插件并按顺序注册命令和角色（同名先到先得）
    Create a plugin and register the given commands and roles in order,
    first-wins on duplicate names.
    """
    plugin = Plugin(name)
    for cmd in commands:
        plugin.add_command(cmd)
    for role in roles:
        plugin.add_role(role)
    return plugin


def add_command_to_plugin(plugin: Plugin, command: Command) -> Plugin:
    """
    向插件添加命令，返回插件以便链式调用
    Add a command to a plugin and return the plugin for chaining.
    """
    plugin.add_command(command)
    return plugin
