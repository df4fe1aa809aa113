"""
CLI 主入口 - 使用 Click 框架
CLI main entry - using Click framework.

只有 init 会写配置文件；其余命令只读。
Only ``init`` writes the config file; every other command reads it.
"""

from __future__ import annotations

import asyncio
import json
import os

import click

from PlugBot.config.defaults import build_default_config
from PlugBot.config.manager import CONFIG_FILE, ConfigError, ConfigManager
from PlugBot.plugin.builtin import BuiltinPlugin
from PlugBot.plugin.errors import PluginException
from PlugBot.plugin.manager import PluginManager

DEFAULT_LOG_LEVEL = "WARNING"


def build_manager(config: ConfigManager | None) -> PluginManager:
    """
    创建插件管理器并注册内置插件
    Create the plugin manager and register the builtin plugin.
    """
    manager = PluginManager()
    manager.add_plugin(BuiltinPlugin())
    if config is not None:
        try:
            manager.apply_config(config)
        except ConfigError as e:
            raise click.ClickException(str(e)) from e
    return manager


@click.group()
@click.option("--config", "config_path", default=CONFIG_FILE, help="配置文件路径")
@click.option("--log-level", default=None, help="日志级别（覆盖配置）")
@click.pass_context
def cli(ctx: click.Context, config_path: str, log_level: str | None) -> None:
    """PlugBot - 聊天机器人插件注册表"""
    from PlugBot.utils.logging import setup_logging

    config: ConfigManager | None = None
    if os.path.exists(config_path):
        config = ConfigManager(build_default_config(), config_path)
        try:
            config.read()
        except ConfigError as e:
            # init 可以覆盖损坏的文件
            if ctx.invoked_subcommand != "init":
                raise click.ClickException(str(e)) from e
            config = None

    if config is not None:
        setup_logging(
            log_level or config.get("logging.level", DEFAULT_LOG_LEVEL),
            config.get("logging.file") or None,
        )
    else:
        setup_logging(log_level or DEFAULT_LOG_LEVEL)

    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["config"] = config


@cli.command()
def version() -> None:
    """显示版本信息 / Show version info."""
    from PlugBot import __app_name__, __version__

    click.echo(f"{__app_name__} v{__version__}")


@cli.command()
@click.pass_context
def init(ctx: click.Context) -> None:
    """初始化配置 / Initialize configuration."""
    config_path = ctx.obj["config_path"]

    if os.path.exists(config_path):
        click.echo(f"配置文件已存在: {config_path}")
        if not click.confirm("是否覆盖?"):
            return

    config = ConfigManager(build_default_config(), config_path)
    config.reset()
    asyncio.run(config.save())

    click.echo(f"配置文件已创建: {config_path}")


@cli.group()
def conf() -> None:
    """配置管理 / Configuration management."""


@conf.command("show")
@click.argument("key", required=False)
@click.pass_context
def conf_show(ctx: click.Context, key: str | None) -> None:
    """显示配置 / Show configuration."""
    config: ConfigManager | None = ctx.obj["config"]
    if config is None:
        raise click.ClickException("配置文件不存在，请先运行 init")

    if key:
        value = config.get(key)
        if value is None:
            raise click.ClickException(f"键 '{key}' 不存在")
        click.echo(json.dumps(value, ensure_ascii=False, indent=2))
    else:
        click.echo(json.dumps(config.as_dict(), ensure_ascii=False, indent=2))


@cli.group()
def plugin() -> None:
    """插件管理 / Plugin management."""


@plugin.command("list")
@click.pass_context
def plugin_list(ctx: click.Context) -> None:
    """列出已注册的插件 / List registered plugins."""
    manager = build_manager(ctx.obj["config"])
    for info in manager.list_plugins():
        state = "enabled" if info["enabled"] else "disabled"
        click.echo(f"  - {info['name']} [{state}] ({len(info['commands'])} commands)")


@plugin.command("show")
@click.argument("name")
@click.pass_context
def plugin_show(ctx: click.Context, name: str) -> None:
    """显示插件详情 / Show plugin details."""
    manager = build_manager(ctx.obj["config"])
    try:
        found = manager.get_plugin(name)
    except PluginException as e:
        raise click.ClickException(str(e)) from e
    click.echo(json.dumps(found.to_dict(), ensure_ascii=False, indent=2))


if __name__ == "__main__":
    cli()
