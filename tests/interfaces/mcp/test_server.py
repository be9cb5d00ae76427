"""MCP サーバーのツール一覧・呼び出しのテスト."""

from unittest.mock import AsyncMock, MagicMock

import mcp.types as types
import pytest

from mcp.server.lowlevel import Server

from src.application.exceptions import UnknownToolError
from src.application.usecases.dispatch_search_tool_usecase import (
    DispatchSearchToolUseCase,
)
from src.infrastructure.external.kokkai_api.types import SearchEnvelope
from src.interfaces.mcp.server import (
    call_search_tool,
    create_server,
    create_usecase,
    list_search_tools,
)


@pytest.fixture()
def usecase() -> DispatchSearchToolUseCase:
    client = MagicMock()
    client.fetch = AsyncMock(return_value=SearchEnvelope())
    return DispatchSearchToolUseCase(kokkai_client=client)


class TestListSearchTools:
    def test_tool_names(self) -> None:
        names = [tool.name for tool in list_search_tools()]

        assert names == [
            "search_meetings_simple",
            "search_meetings_full",
            "search_speeches",
        ]

    def test_maximum_records_limits(self) -> None:
        limits = {
            tool.name: tool.inputSchema["properties"]["maximumRecords"]["maximum"]
            for tool in list_search_tools()
        }

        assert limits == {
            "search_meetings_simple": 100,
            "search_meetings_full": 10,
            "search_speeches": 100,
        }

    def test_schema_has_no_required_parameters(self) -> None:
        for tool in list_search_tools():
            schema = tool.inputSchema
            assert schema["type"] == "object"
            assert "required" not in schema
            assert schema["properties"]["startRecord"]["minimum"] == 1
            assert "speaker" in schema["properties"]
            assert "from" in schema["properties"]

    def test_default_records_in_description(self) -> None:
        tools = {tool.name: tool for tool in list_search_tools()}

        description = tools["search_meetings_full"].inputSchema["properties"][
            "maximumRecords"
        ]["description"]

        assert "1-10" in description
        assert "デフォルト3" in description


class TestCallSearchTool:
    @pytest.mark.asyncio
    async def test_returns_single_text_block(
        self, usecase: DispatchSearchToolUseCase
    ) -> None:
        result = await call_search_tool(usecase, "search_speeches", {"any": "予算"})

        assert len(result) == 1
        assert isinstance(result[0], types.TextContent)
        assert result[0].type == "text"
        assert result[0].text == "検索結果が見つかりませんでした。"

    @pytest.mark.asyncio
    async def test_none_arguments_are_accepted(
        self, usecase: DispatchSearchToolUseCase
    ) -> None:
        result = await call_search_tool(usecase, "search_meetings_simple", None)

        assert len(result) == 1

    @pytest.mark.asyncio
    async def test_unknown_tool_propagates(
        self, usecase: DispatchSearchToolUseCase
    ) -> None:
        with pytest.raises(UnknownToolError):
            await call_search_tool(usecase, "search_bills", {})


class TestCreateServer:
    def test_server_uses_settings_identity(
        self, usecase: DispatchSearchToolUseCase
    ) -> None:
        settings = MagicMock()
        settings.server_name = "kokkai-test"
        settings.server_version = "9.9.9"

        server = create_server(usecase=usecase, settings=settings)

        assert isinstance(server, Server)
        assert server.name == "kokkai-test"
        assert server.version == "9.9.9"
        assert types.ListToolsRequest in server.request_handlers
        assert types.CallToolRequest in server.request_handlers

    def test_create_usecase_uses_settings(self) -> None:
        settings = MagicMock()
        settings.kokkai_api_base_url = "http://localhost:8080/api"
        settings.kokkai_api_timeout = 5.0

        usecase = create_usecase(settings)

        assert isinstance(usecase, DispatchSearchToolUseCase)
