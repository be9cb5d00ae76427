"""国会会議録検索APIクライアントのインターフェース."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from src.domain.value_objects.search_mode import KokkaiEndpoint


if TYPE_CHECKING:
    from src.infrastructure.external.kokkai_api.types import SearchEnvelope


class IKokkaiSearchClient(Protocol):
    """検索エンドポイントを1回呼び出すクライアントのインターフェース."""

    async def fetch(
        self, endpoint: KokkaiEndpoint | str, query_string: str
    ) -> SearchEnvelope:
        """エンドポイントにGETを発行し、レスポンスエンベロープを返す.

        通信エラー、2xx以外のステータス、JSONとして解釈できない本文は例外で通知する。
        本文中の message はエラーとして扱わず、エンベロープに載せて返す。
        """
        ...
