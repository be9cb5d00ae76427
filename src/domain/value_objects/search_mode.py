"""検索モードとエンドポイントの値オブジェクト."""

from __future__ import annotations

from enum import Enum

from src.domain.exceptions import UnknownSearchModeException


class KokkaiEndpoint(str, Enum):
    """国会会議録検索システムAPIのエンドポイント."""

    MEETING_LIST = "meeting_list"
    MEETING = "meeting"
    SPEECH = "speech"


class SearchMode(str, Enum):
    """検索結果の出力形式.

    ツールごとに固定され、エンドポイントのレスポンス形状と描画方法を決める。
    """

    MEETING_SUMMARY = "meeting-summary"
    MEETING_FULL = "meeting-full"
    SPEECH_FLAT = "speech-flat"

    @classmethod
    def from_value(cls, value: str) -> SearchMode:
        try:
            return cls(value)
        except ValueError as e:
            raise UnknownSearchModeException(value) from e
