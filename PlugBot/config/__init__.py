"""
配置模块 - 管理框架配置
Config module - manages framework configuration.
"""

from PlugBot.config.defaults import build_default_config
from PlugBot.config.manager import ConfigError, ConfigManager

__all__ = ["ConfigError", "ConfigManager", "build_default_config"]
