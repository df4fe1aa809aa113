from PlugBot.plugin.builtin.commands import BuiltinPlugin

__all__ = ["BuiltinPlugin"]
