"""`python -m PlugBot.cli` 的命令行启动入口。"""

from PlugBot.cli.main import cli

if __name__ == "__main__":
    cli()
