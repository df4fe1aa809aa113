"""
插件异常 - 插件系统的错误类型
Plugin errors - error taxonomy of the plugin system.

注册表自身不会抛出这些异常，由调用方（如 PluginManager）抛出。
The registry never raises these itself; consumers such as PluginManager do.
"""

from __future__ import annotations

from enum import Enum


class PluginErrorKind(str, Enum):
    """插件错误种类 / Plugin error kind."""

    GENERIC = "generic"
    NOT_FOUND = "not_found"
    DISABLED = "disabled"


class PluginException(Exception):
    """
    插件异常基类
    Base plugin error, carrying an optional human-readable message.
    """

    kind = PluginErrorKind.GENERIC

    def __init__(self, message: str | None = None) -> None:
        super().__init__(*(() if message is None else (message,)))
        self.message = message

    def __str__(self) -> str:
        return self.message or ""


class PluginNotFoundException(PluginException):
    """按名称查找的插件不存在 / No plugin is registered under the name."""

    kind = PluginErrorKind.NOT_FOUND


class PluginDisabled(PluginException):
    """插件已停用 / The plugin owning the command is disabled."""

    kind = PluginErrorKind.DISABLED
