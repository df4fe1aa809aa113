"""
配置管理器 - 读取和合并配置
Config manager - reads and merges configuration.

读取是只读的：文件缺失时使用默认值，文件损坏时报错而不是覆盖。
Reading never writes: a missing file yields the defaults, a malformed one
raises ConfigError and is left untouched.
"""

from __future__ import annotations

import copy
import json
import logging
import os
from typing import Any

logger = logging.getLogger(__name__)

CONFIG_FILE = os.path.join("data", "config", "plugbot.json")


class ConfigError(Exception):
    """配置文件无法读取或取值类型错误 / Unreadable config or mistyped value."""


class ConfigManager:
    """
    配置管理器
    Config manager.

    支持：
    - 嵌套键访问（如 "logging.level"）
    - 默认值合并（不覆盖文件中的值）
    - 显式保存到 JSON 文件
    """

    def __init__(
        self,
        defaults: dict[str, Any] | None = None,
        config_path: str = CONFIG_FILE,
    ) -> None:
        self._defaults = defaults or {}
        self._config: dict[str, Any] = copy.deepcopy(self._defaults)
        self._config_path = config_path

    def read(self) -> None:
        """
        只读加载配置文件并合并默认值
        Load the config file without writing it, merging in defaults.

        Raises
        ------
        ConfigError
            If the file exists but is not a JSON object.
        """
        config: Any = {}
        if os.path.exists(self._config_path):
            try:
                with open(self._config_path, encoding="utf-8") as f:
                    config = json.load(f)
            except (json.JSONDecodeError, OSError) as e:
                raise ConfigError(f"无法读取配置文件 {self._config_path}: {e}") from e
            if not isinstance(config, dict):
                raise ConfigError(f"配置文件 {self._config_path} 顶层必须是对象")
            logger.debug("配置已从 %s 加载", self._config_path)

        self._merge_defaults(config, copy.deepcopy(self._defaults))
        self._config = config

    def reset(self) -> None:
        """恢复为默认值（不写文件） / Reset to the defaults, in memory only."""
        self._config = copy.deepcopy(self._defaults)

    async def save(self) -> None:
        """
        保存配置到文件
        Save configuration to file.
        """
        os.makedirs(os.path.dirname(self._config_path) or ".", exist_ok=True)
        with open(self._config_path, "w", encoding="utf-8") as f:
            json.dump(self._config, f, ensure_ascii=False, indent=2)
        logger.info("配置已保存到 %s", self._config_path)

    def get(self, key: str, default: Any = None) -> Any:
        """
        获取配置值（支持嵌套键，如 "logging.level"）
        Get config value (supports nested keys like "logging.level").
        """
        current: Any = self._config
        for k in key.split("."):
            if not isinstance(current, dict):
                return default
            current = current.get(k)
            if current is None:
                return default
        return current

    def set(self, key: str, value: Any) -> None:
        """设置配置值（支持嵌套键） / Set config value (supports nested keys)."""
        keys = key.split(".")
        current = self._config
        for k in keys[:-1]:
            if not isinstance(current.get(k), dict):
                current[k] = {}
            current = current[k]
        current[keys[-1]] = value

    def disabled_plugins(self) -> list[str]:
        """
        启动时停用的插件名
        Names of plugins to disable at startup.

        Raises
        ------
        ConfigError
            If ``plugins.disabled`` is not a list of strings.
        """
        value = self.get("plugins.disabled", [])
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise ConfigError("plugins.disabled 必须是字符串列表")
        return list(value)

    def as_dict(self) -> dict[str, Any]:
        """获取完整配置字典 / Get the full config dictionary."""
        return copy.deepcopy(self._config)

    def _merge_defaults(self, config: dict[str, Any], defaults: dict[str, Any]) -> None:
        for key, default_value in defaults.items():
            if key not in config:
                config[key] = default_value
            elif isinstance(default_value, dict) and isinstance(config[key], dict):
                self._merge_defaults(config[key], default_value)
