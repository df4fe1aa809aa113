"""
插件基类 - 命令与角色的注册表
Plugin base - registry of a plugin's commands and roles.

插件是可整体启用/停用的命令与角色集合。
A plugin is a named bundle of commands and roles that can be enabled or
disabled as a unit.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from PlugBot.plugin.command import Command
from PlugBot.plugin.role import Role

logger = logging.getLogger(__name__)


def _key(item: Any) -> str:
    """Registry key of a command/role or a bare name."""
    if isinstance(item, str):
        return item
    return item.name


class Plugin:
    """
    插件 - 所有内置/用户插件的父类
    Plugin - parent of all builtin and user plugins.

    生命周期：
    1. __init__(name) - 构造，默认启用
    2. add_*/remove_*/activate/deactivate - 原地修改
    3. 由所有者丢弃，无销毁钩子

    注册时同名条目先到先得，重复添加被静默忽略。
    Registration is first-wins: adding under a name already in use is
    silently ignored. Commands and roles are stored by reference.

    子类用 ``@command`` 装饰的方法在构造时自动注册，
    ``default_roles()`` 返回的角色同样如此（每个实例各自一份）。
    Methods decorated with ``@command`` and the roles returned by
    ``default_roles()`` (fresh per instance) are registered at construction.
    """

    def __init__(self, name: str | None = None) -> None:
        self._name = name if name is not None else type(self).__name__
        self._enabled = True
        self.commands: dict[str, Command] = {}
        self.roles: dict[str, Role] = {}
        self._collect_commands()
        self.add_roles(self.default_roles())

    def default_roles(self) -> list[Role]:
        """构造时注册的角色，子类覆盖 / Roles registered at construction."""
        return []

    @property
    def name(self) -> str:
        """插件名 / Plugin name."""
        return self._name

    @property
    def enabled(self) -> bool:
        """是否启用 / Whether enabled."""
        return self._enabled

    def _collect_commands(self) -> None:
        """Register methods decorated with ``@command``."""
        cls = type(self)
        for attr_name in dir(cls):
            definition = getattr(
                getattr(cls, attr_name, None), "_command_definition", None
            )
            if definition is None:
                continue
            self.add_command(
                Command(
                    name=definition.name,
                    module=self._name,
                    handler=getattr(self, attr_name),
                    description=definition.description,
                    roles=list(definition.roles),
                    hidden=definition.hidden,
                )
            )

    # ---- commands ----

    def find_command(self, command: Command | str) -> Command | None:
        """
        按名称查找命令，未找到返回 None
        Find the stored command with the same name, or None.
        """
        return self.commands.get(_key(command))

    def add_command(self, command: Command) -> None:
        """
        添加命令（同名已存在时忽略）
        Add a command unless one with the same name is already registered.
        """
        if command.name in self.commands:
            logger.debug(
                "插件 %s 已有命令 %s，忽略重复注册", self._name, command.name
            )
            return
        self.commands[command.name] = command
        logger.debug("插件 %s 注册命令 %s", self._name, command)

    def remove_command(self, command: Command | str) -> None:
        """移除命令（不存在时忽略） / Remove a command if present."""
        if self.commands.pop(_key(command), None) is not None:
            logger.debug("插件 %s 移除命令 %s", self._name, _key(command))

    def activate_command(self, command: Command | str) -> None:
        """
        启用命令（不存在时忽略）
        Enable the stored command; no-op if absent.
        """
        existing = self.find_command(command)
        if existing is not None:
            existing.activate()

    def deactivate_command(self, command: Command | str) -> None:
        """
        停用命令（不存在时忽略）
        Disable the stored command; no-op if absent.
        """
        existing = self.find_command(command)
        if existing is not None:
            existing.deactivate()

    # ---- roles ----

    def find_role(self, role: Role | str) -> Role | None:
        """Find the stored role with the same name, or None."""
        return self.roles.get(_key(role))

    def add_role(self, role: Role) -> None:
        """添加角色（同名已存在时忽略） / Add a role unless the name is taken."""
        if role.name in self.roles:
            return
        self.roles[role.name] = role
        logger.debug("插件 %s 注册角色 %s", self._name, role.name)

    def add_roles(self, roles: Iterable[Role]) -> None:
        for role in roles:
            self.add_role(role)

    def remove_role(self, role: Role | str) -> None:
        """移除角色（不存在时忽略） / Remove a role if present."""
        self.roles.pop(_key(role), None)

    def remove_roles(self, roles: Iterable[Role | str]) -> None:
        for role in roles:
            self.remove_role(role)

    # ---- state ----

    def activate(self) -> None:
        """启用插件 / Enable the plugin."""
        self._enabled = True

    def deactivate(self) -> None:
        """停用插件 / Disable the plugin."""
        self._enabled = False

    def to_dict(self) -> dict[str, Any]:
        """转为字典（用于展示） / Summary dictionary for display."""
        return {
            "name": self._name,
            "enabled": self._enabled,
            "commands": sorted(
                str(c) for c in self.commands.values() if not c.hidden
            ),
            "roles": sorted(self.roles),
        }

    def __contains__(self, command: object) -> bool:
        if not isinstance(command, (str, Command)):
            return False
        return _key(command) in self.commands

    def __repr__(self) -> str:
        state = "enabled" if self._enabled else "disabled"
        return (
            f"{type(self).__name__}(name={self._name!r}, {state}, "
            f"commands={len(self.commands)}, roles={len(self.roles)})"
        )
