"""
插件管理器 - 按名称管理插件集合
Plugin manager - the named collection of plugins.

查找不存在的插件抛出 PluginNotFoundException，
访问已停用插件的命令抛出 PluginDisabled。
Looking up an unknown plugin raises PluginNotFoundException; reaching a
command through a disabled plugin raises PluginDisabled.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from PlugBot.plugin.base import Plugin
from PlugBot.plugin.command import Command
from PlugBot.plugin.errors import PluginDisabled, PluginNotFoundException

if TYPE_CHECKING:
    from PlugBot.config.manager import ConfigManager

logger = logging.getLogger(__name__)


class PluginManager:
    """
    插件管理器
    Plugin manager.

    不负责从磁盘加载模块，也不负责调用命令。
    Loading modules from disk and invoking commands are left to callers.
    """

    def __init__(self) -> None:
        # 插件实例: plugin_name -> Plugin
        self._plugins: dict[str, Plugin] = {}

    def add_plugin(self, plugin: Plugin) -> bool:
        """
        添加插件（同名已存在时忽略），返回是否已添加
        Add a plugin unless the name is taken; return whether it was added.
        """
        if plugin.name in self._plugins:
            logger.warning("插件 %s 已存在，忽略", plugin.name)
            return False
        self._plugins[plugin.name] = plugin
        logger.info(
            "已添加插件: %s (%d 个命令, %d 个角色)",
            plugin.name,
            len(plugin.commands),
            len(plugin.roles),
        )
        return True

    def remove_plugin(self, name: str) -> None:
        """移除插件（不存在时忽略） / Remove a plugin if present."""
        if self._plugins.pop(name, None) is not None:
            logger.info("已移除插件: %s", name)

    def get_plugin(self, name: str) -> Plugin:
        """
        按名称获取插件
        Get a plugin by name.

        Raises
        ------
        PluginNotFoundException
            If no plugin is registered under *name*.
        """
        try:
            return self._plugins[name]
        except KeyError:
            raise PluginNotFoundException(f"Plugin [{name}] not found") from None

    def enable_plugin(self, name: str) -> None:
        """
        启用插件
        Enable a plugin by name.

        Raises
        ------
        PluginNotFoundException
            If no plugin is registered under *name*.
        """
        self.get_plugin(name).activate()
        logger.info("已启用插件: %s", name)

    def disable_plugin(self, name: str) -> None:
        """
        停用插件
        Disable a plugin by name.

        Raises
        ------
        PluginNotFoundException
            If no plugin is registered under *name*.
        """
        self.get_plugin(name).deactivate()
        logger.info("已停用插件: %s", name)

    def get_command(self, plugin_name: str, command_name: str) -> Command | None:
        """
        获取已启用插件中的命令，命令不存在时返回 None
        Get a command of an enabled plugin, or None if it has no such command.

        Raises
        ------
        PluginNotFoundException
            If no plugin is registered under *plugin_name*.
        PluginDisabled
            If the plugin is disabled.
        """
        plugin = self.get_plugin(plugin_name)
        if not plugin.enabled:
            raise PluginDisabled(f"Plugin [{plugin_name}] is disabled")
        return plugin.find_command(command_name)

    def list_plugins(self) -> list[dict[str, Any]]:
        """
        获取所有插件的信息列表（按名称排序）
        Get the info list of all plugins, sorted by name.
        """
        return [self._plugins[name].to_dict() for name in sorted(self._plugins)]

    def apply_config(self, config: ConfigManager) -> None:
        """
        停用配置中 plugins.disabled 列出的插件
        Disable the plugins listed under ``plugins.disabled``.

        Raises
        ------
        ConfigError
            If ``plugins.disabled`` is not a list of strings.
        """
        for name in config.disabled_plugins():
            plugin = self._plugins.get(name)
            if plugin is None:
                logger.warning("配置中停用的插件 %s 不存在", name)
                continue
            plugin.deactivate()
            logger.info("按配置停用插件: %s", name)

    def __contains__(self, name: object) -> bool:
        return name in self._plugins

    def __len__(self) -> int:
        return len(self._plugins)
