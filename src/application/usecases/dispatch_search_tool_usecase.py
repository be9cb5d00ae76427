"""検索ツール呼び出しユースケース.

ツール名から {エンドポイント, 出力モード, 最大取得件数} を決め、
クエリ組み立て → API呼び出し → 描画 を1回ずつ実行してテキストを返す。
"""

from __future__ import annotations

import logging

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from src.application.dtos.search_parameters_dto import SearchParameters
from src.application.exceptions import UnknownToolError
from src.application.services.search_result_renderer import SearchResultRenderer
from src.domain.services.interfaces.kokkai_search_client import IKokkaiSearchClient
from src.domain.value_objects.search_mode import KokkaiEndpoint, SearchMode
from src.infrastructure.external.kokkai_api.query_encoder import KokkaiQueryEncoder


logger = logging.getLogger(__name__)

ERROR_PREFIX = "エラーが発生しました: "
UNKNOWN_ERROR = "不明なエラー"


@dataclass(frozen=True)
class SearchToolDefinition:
    """検索ツールの定義.

    max_records はツールのパラメータ定義に載せる上限で、ここでは検査しない。
    範囲外の値はAPIが message 付きレスポンスで拒否する。
    """

    name: str
    description: str
    endpoint: KokkaiEndpoint
    mode: SearchMode
    max_records: int
    default_records: int


SEARCH_TOOLS: dict[str, SearchToolDefinition] = {
    tool.name: tool
    for tool in (
        SearchToolDefinition(
            name="search_meetings_simple",
            description=(
                "国会の会議を検索します（会議単位簡易出力）。"
                "会議の基本情報と該当する発言のリストを取得します。最大100件まで取得可能。"
            ),
            endpoint=KokkaiEndpoint.MEETING_LIST,
            mode=SearchMode.MEETING_SUMMARY,
            max_records=100,
            default_records=30,
        ),
        SearchToolDefinition(
            name="search_meetings_full",
            description=(
                "国会の会議を検索します（会議単位出力）。"
                "会議の全発言本文を含む詳細データを取得します。最大10件まで取得可能。"
            ),
            endpoint=KokkaiEndpoint.MEETING,
            mode=SearchMode.MEETING_FULL,
            max_records=10,
            default_records=3,
        ),
        SearchToolDefinition(
            name="search_speeches",
            description=(
                "国会の発言を検索します（発言単位出力）。"
                "個別の発言本文を取得します。最大100件まで取得可能。"
            ),
            endpoint=KokkaiEndpoint.SPEECH,
            mode=SearchMode.SPEECH_FLAT,
            max_records=100,
            default_records=30,
        ),
    )
}


class DispatchSearchToolUseCase:
    """検索ツールの呼び出しを処理するユースケース."""

    def __init__(
        self,
        kokkai_client: IKokkaiSearchClient,
        encoder: KokkaiQueryEncoder | None = None,
        renderer: SearchResultRenderer | None = None,
    ) -> None:
        self._client = kokkai_client
        self._encoder = encoder or KokkaiQueryEncoder()
        self._renderer = renderer or SearchResultRenderer()

    @staticmethod
    def get_tool(tool_name: str) -> SearchToolDefinition:
        """ツール定義を取得する.

        Raises:
            UnknownToolError: 未登録のツール名
        """
        tool = SEARCH_TOOLS.get(tool_name)
        if tool is None:
            raise UnknownToolError(tool_name, list(SEARCH_TOOLS))
        return tool

    async def execute(
        self, tool_name: str, arguments: Mapping[str, Any] | None = None
    ) -> str:
        """ツールを実行し、描画済みテキストを返す.

        未登録のツール名だけは例外として送出する。それ以外の失敗
        （通信エラー、HTTPエラー、不正な本文、描画中の例外）はすべて
        エラーテキストに変換して返す。

        Raises:
            UnknownToolError: 未登録のツール名
        """
        tool = self.get_tool(tool_name)
        logger.info("ツール呼び出し: %s", tool_name)

        try:
            params = SearchParameters.from_arguments(arguments)
            query_string = self._encoder.encode(params)
            envelope = await self._client.fetch(tool.endpoint, query_string)
            text = self._renderer.render(envelope, tool.mode)
        except Exception as e:
            logger.exception("ツール %s の実行中にエラー", tool_name)
            return f"{ERROR_PREFIX}{str(e) or UNKNOWN_ERROR}"

        logger.info(
            "ツール %s 完了: 該当%d件中%d件",
            tool_name,
            envelope.number_of_records,
            envelope.number_of_return,
        )
        return text
