"""検索ツールを1回実行して結果を表示するコマンド."""

from __future__ import annotations

import asyncio

from typing import Any

import click

from src.infrastructure.config.settings import get_settings
from src.interfaces.cli.base import with_error_handling


def parse_arg_value(raw: str) -> Any:
    """--arg の値を bool / int / str に変換する."""
    lowered = raw.lower()
    if lowered in ("true", "false"):
        return lowered == "true"
    try:
        return int(raw)
    except ValueError:
        return raw


def parse_args(pairs: tuple[str, ...]) -> dict[str, Any]:
    arguments: dict[str, Any] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(
                f"KEY=VALUE 形式で指定してください: {pair}", param_hint="--arg"
            )
        arguments[key] = parse_arg_value(value)
    return arguments


@click.command()
@click.argument("tool_name")
@click.option(
    "--arg",
    "arg_pairs",
    multiple=True,
    help="ツール引数（例: --arg nameOfHouse=衆議院 --arg maximumRecords=10）",
)
@with_error_handling
def search(tool_name: str, arg_pairs: tuple[str, ...]):
    """検索ツールを実行し、MCPで返すのと同じテキストを表示する."""
    from src.interfaces.mcp.server import create_usecase

    arguments = parse_args(arg_pairs)
    usecase = create_usecase(get_settings())
    text = asyncio.run(usecase.execute(tool_name, arguments))
    click.echo(text)
