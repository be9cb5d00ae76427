"""国会会議録検索 MCP サーバー.

stdio 上で MCP を話す。stdout はプロトコル専用のため、ログは stderr に出す。
"""

from __future__ import annotations

import logging

from typing import Any

import mcp.types as types

from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from src.application.usecases.dispatch_search_tool_usecase import (
    SEARCH_TOOLS,
    DispatchSearchToolUseCase,
)
from src.infrastructure.config.settings import Settings, get_settings
from src.infrastructure.external.kokkai_api.client import KokkaiApiClient
from src.interfaces.mcp.tool_schemas import build_input_schema


logger = logging.getLogger(__name__)


def list_search_tools() -> list[types.Tool]:
    """公開する検索ツールの一覧."""
    return [
        types.Tool(
            name=tool.name,
            description=tool.description,
            inputSchema=build_input_schema(tool),
        )
        for tool in SEARCH_TOOLS.values()
    ]


async def call_search_tool(
    usecase: DispatchSearchToolUseCase,
    name: str,
    arguments: dict[str, Any] | None,
) -> list[types.TextContent]:
    """ツールを実行し、結果を1つのテキストブロックで返す.

    未登録のツール名は UnknownToolError がそのまま送出される。
    """
    text = await usecase.execute(name, arguments or {})
    return [types.TextContent(type="text", text=text)]


def create_usecase(settings: Settings | None = None) -> DispatchSearchToolUseCase:
    settings = settings or get_settings()
    client = KokkaiApiClient(
        base_url=settings.kokkai_api_base_url,
        timeout=settings.kokkai_api_timeout,
    )
    return DispatchSearchToolUseCase(kokkai_client=client)


def create_server(
    usecase: DispatchSearchToolUseCase | None = None,
    settings: Settings | None = None,
) -> Server:
    """ツールハンドラを登録したMCPサーバーを生成する.

    maximumRecords などの範囲はスキーマで宣言するだけで、入力検証はAPIに任せる。
    """
    settings = settings or get_settings()
    usecase = usecase or create_usecase(settings)
    server: Server = Server(settings.server_name, version=settings.server_version)

    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        return list_search_tools()

    @server.call_tool(validate_input=False)
    async def handle_call_tool(
        name: str, arguments: dict[str, Any] | None
    ) -> list[types.TextContent]:
        return await call_search_tool(usecase, name, arguments)

    return server


async def run_stdio_server(server: Server) -> None:
    """stdio トランスポートでサーバーを起動する."""
    logger.info("Kokkai Giji MCP server running on stdio")
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )
