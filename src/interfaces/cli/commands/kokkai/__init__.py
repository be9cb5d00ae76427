"""国会会議録検索 MCP CLI コマンドグループ."""

import click

from src.interfaces.cli.commands.kokkai.search import search
from src.interfaces.cli.commands.kokkai.serve import serve


@click.group()
def kokkai():
    """国会会議録検索 MCP サーバー関連コマンド."""
    pass


kokkai.add_command(serve)
kokkai.add_command(search)
