"""国会会議録検索システムAPIクライアント.

httpx asyncベースのHTTPクライアントで、/api/meeting_list, /api/meeting,
/api/speech の各エンドポイントに1回だけGETを発行する。リトライはしない。
"""

from __future__ import annotations

import logging

from typing import Any

import httpx

from src.domain.value_objects.search_mode import KokkaiEndpoint

from .types import MeetingRecord, MeetingSpeechRecord, SearchEnvelope, SpeechRecord


logger = logging.getLogger(__name__)


class KokkaiApiError(Exception):
    """国会APIクライアントのエラー."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class KokkaiTransportError(KokkaiApiError):
    """HTTPレスポンスを受け取る前の通信エラー（DNS, 接続断, タイムアウト）."""

    def __init__(self, message: str) -> None:
        super().__init__(f"通信エラー: {message}")


class KokkaiHttpStatusError(KokkaiApiError):
    """2xx以外のHTTPステータス."""

    def __init__(self, status_code: int, reason_phrase: str) -> None:
        super().__init__(
            f"APIリクエストエラー: {status_code} {reason_phrase}".rstrip(),
            status_code=status_code,
        )
        self.reason_phrase = reason_phrase


class KokkaiMalformedBodyError(KokkaiApiError):
    """2xxレスポンスの本文がJSONオブジェクトとして解釈できない."""

    def __init__(self, reason: str, status_code: int | None = None) -> None:
        super().__init__(
            f"不明なエラー（レスポンスを解析できませんでした: {reason}）",
            status_code=status_code,
        )


class KokkaiApiClient:
    """国会会議録検索システムAPIクライアント (httpx async)."""

    BASE_URL = "https://kokkai.ndl.go.jp/api"
    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self._external_client = client
        self._owns_client = client is None
        self._base_url = (base_url or self.BASE_URL).rstrip("/")
        self._timeout = timeout or self.DEFAULT_TIMEOUT

    async def _get_client(self) -> httpx.AsyncClient:
        """HTTPクライアントを取得（外部注入 or 自動生成）."""
        if self._external_client is not None:
            return self._external_client
        return httpx.AsyncClient(timeout=self._timeout)

    def build_url(self, endpoint: KokkaiEndpoint | str, query_string: str) -> str:
        name = endpoint.value if isinstance(endpoint, KokkaiEndpoint) else endpoint
        return f"{self._base_url}/{name}?{query_string}"

    async def fetch(
        self, endpoint: KokkaiEndpoint | str, query_string: str
    ) -> SearchEnvelope:
        """検索APIを呼び出し、レスポンスをSearchEnvelopeに変換する.

        HTTP 200 で message を含む本文はエラーとせず、そのまま返す。

        Raises:
            KokkaiTransportError: 通信エラー
            KokkaiHttpStatusError: 2xx以外のステータス
            KokkaiMalformedBodyError: 本文がJSONオブジェクトでない
        """
        data = await self._request(self.build_url(endpoint, query_string))
        return self.parse_envelope(data)

    async def _request(self, url: str) -> dict[str, Any]:
        """APIリクエスト実行."""
        client = await self._get_client()
        logger.debug("APIリクエスト: %s", url)

        try:
            response = await client.get(url)
        except httpx.TimeoutException as e:
            raise KokkaiTransportError(f"タイムアウト ({e})") from e
        except httpx.TransportError as e:
            raise KokkaiTransportError(str(e) or type(e).__name__) from e
        finally:
            if self._owns_client:
                await client.aclose()

        if not response.is_success:
            logger.warning(
                "APIリクエストエラー: %d %s (%s)",
                response.status_code,
                response.reason_phrase,
                url,
            )
            raise KokkaiHttpStatusError(response.status_code, response.reason_phrase)

        try:
            data = response.json()
        except ValueError as e:
            raise KokkaiMalformedBodyError(str(e), response.status_code) from e

        if not isinstance(data, dict):
            raise KokkaiMalformedBodyError(
                f"JSONオブジェクトではありません ({type(data).__name__})",
                response.status_code,
            )
        return data

    @classmethod
    def parse_envelope(cls, data: dict[str, Any]) -> SearchEnvelope:
        """APIレスポンスJSONをSearchEnvelopeに変換."""
        message = data.get("message")
        return SearchEnvelope(
            number_of_records=_parse_int(data.get("numberOfRecords")),
            number_of_return=_parse_int(data.get("numberOfReturn")),
            start_record=_parse_int(data.get("startRecord"), default=1),
            next_record_position=_parse_optional_int(data.get("nextRecordPosition")),
            message=str(message) if message is not None else None,
            details=[str(d) for d in data.get("details") or []],
            meeting_record=[
                cls._parse_meeting_record(r) for r in data.get("meetingRecord") or []
            ],
            speech_record=[
                cls._parse_speech_record(r) for r in data.get("speechRecord") or []
            ],
        )

    @staticmethod
    def _parse_meeting_record(r: dict[str, Any]) -> MeetingRecord:
        return MeetingRecord(
            issue_id=r.get("issueID", ""),
            session=_parse_int(r.get("session")),
            name_of_house=r.get("nameOfHouse", ""),
            name_of_meeting=r.get("nameOfMeeting", ""),
            issue=str(r.get("issue", "")),
            date=r.get("date", ""),
            meeting_url=r.get("meetingURL", ""),
            closing=bool(r.get("closing")),
            pdf_url=r.get("pdfURL") or None,
            speech_record=[
                MeetingSpeechRecord(
                    speech_id=s.get("speechID", ""),
                    speech_order=_parse_int(s.get("speechOrder")),
                    speaker=s.get("speaker", ""),
                    speech_url=s.get("speechURL", ""),
                    speaker_yomi=s.get("speakerYomi") or None,
                    speaker_group=s.get("speakerGroup") or None,
                    speaker_position=s.get("speakerPosition") or None,
                    speaker_role=s.get("speakerRole") or None,
                    speech=s.get("speech"),
                    start_page=_parse_optional_int(s.get("startPage")),
                )
                for s in r.get("speechRecord") or []
            ],
        )

    @staticmethod
    def _parse_speech_record(r: dict[str, Any]) -> SpeechRecord:
        return SpeechRecord(
            speech_id=r.get("speechID", ""),
            issue_id=r.get("issueID", ""),
            session=_parse_int(r.get("session")),
            name_of_house=r.get("nameOfHouse", ""),
            name_of_meeting=r.get("nameOfMeeting", ""),
            issue=str(r.get("issue", "")),
            date=r.get("date", ""),
            speech_order=_parse_int(r.get("speechOrder")),
            speaker=r.get("speaker", ""),
            speech=r.get("speech") or "",
            speech_url=r.get("speechURL", ""),
            meeting_url=r.get("meetingURL", ""),
            closing=bool(r.get("closing")),
            speaker_yomi=r.get("speakerYomi") or None,
            speaker_group=r.get("speakerGroup") or None,
            speaker_position=r.get("speakerPosition") or None,
            speaker_role=r.get("speakerRole") or None,
            start_page=_parse_optional_int(r.get("startPage")),
            pdf_url=r.get("pdfURL") or None,
        )


def _parse_int(value: Any, default: int = 0) -> int:
    """値をintに変換（変換できなければdefault）."""
    try:
        return int(value)
    except (ValueError, TypeError):
        return default


def _parse_optional_int(value: Any) -> int | None:
    """値をint | Noneに変換."""
    if value is None or value == "":
        return None
    try:
        result = int(value)
        return result if result > 0 else None
    except (ValueError, TypeError):
        return None
