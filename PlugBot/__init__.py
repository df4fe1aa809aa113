"""
PlugBot - 聊天机器人插件注册表
PlugBot - plugin registry for command-driven chat bots.
"""

__app_name__ = "PlugBot"
__version__ = "1.0.0"
