"""MCP サーバー起動コマンド."""

from __future__ import annotations

import asyncio

import click

from src.infrastructure.config.settings import get_settings
from src.infrastructure.logging import setup_logging
from src.interfaces.cli.base import with_error_handling


@click.command()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="ログレベル（デフォルト: 環境変数 LOG_LEVEL）",
)
@click.option("--json-logs", is_flag=True, help="ログをJSON形式で出力する")
@with_error_handling
def serve(log_level: str | None, json_logs: bool):
    """stdio で MCP サーバーを起動する."""
    from src.interfaces.mcp.server import create_server, run_stdio_server

    settings = get_settings()
    settings.validate()
    setup_logging(log_level or settings.log_level, json_format=json_logs)

    server = create_server(settings=settings)
    asyncio.run(run_stdio_server(server))
