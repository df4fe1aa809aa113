"""
默认配置
Default configuration.
"""

from __future__ import annotations

from typing import Any


def build_default_config() -> dict[str, Any]:
    """
    构建默认配置
    Build the default configuration.
    """
    return {
        # 插件配置
        "plugins": {
            # 启动时停用的插件名
            "disabled": [],
        },
        # 日志配置
        "logging": {
            "level": "WARNING",
            "file": "data/logs/plugbot.log",
        },
    }
