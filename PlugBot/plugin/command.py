"""
命令 - 可被远程调用的最小单元
Command - the smallest remotely invocable unit.

命令自己持有启用状态；插件注册表只按名称索引命令。
A command owns its own activation state; the plugin registry only indexes
commands by name.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ModuleCommand:
    """
    模块限定的命令标识，仅用于显示
    Module-qualified command identity, for display only.
    """

    module: str
    command: str

    def __str__(self) -> str:
        return f"{self.module}\\{self.command}"


@dataclass(eq=False)
class Command:
    """
    命令描述符
    Command descriptor.
    """

    name: str
    # 所属模块名
    module: str = ""
    # 处理函数（本项目不负责调用）
    handler: Callable[..., Any] | None = None
    description: str = ""
    # 允许调用的角色名
    roles: list[str] = field(default_factory=list)
    hidden: bool = False
    enabled: bool = True

    @property
    def module_command(self) -> ModuleCommand:
        return ModuleCommand(self.module, self.name)

    def activate(self) -> None:
        """启用命令 / Enable the command."""
        self.enabled = True

    def deactivate(self) -> None:
        """停用命令 / Disable the command."""
        self.enabled = False

    def __str__(self) -> str:
        return str(self.module_command)


@dataclass
class CommandDefinition:
    """
    装饰器记录的命令定义，插件实例化时转为 Command
    Definition recorded by the ``command`` decorator, turned into a Command
    when the plugin is instantiated.
    """

    name: str
    description: str = ""
    roles: list[str] = field(default_factory=list)
    hidden: bool = False


def command(
    name: str = "",
    description: str = "",
    roles: list[str] | None = None,
    hidden: bool = False,
) -> Callable:
    """
    命令装饰器 - 将插件方法声明为命令
    Command decorator - declares a plugin method as a command.
    """

    def decorator(func: Callable) -> Callable:
        func._command_definition = CommandDefinition(
            name=name or func.__name__,
            description=description or func.__doc__ or "",
            roles=list(roles or []),
            hidden=hidden,
        )
        return func

    return decorator
