"""国会会議録検索システムAPIクライアントパッケージ."""

from .client import (
    KokkaiApiClient,
    KokkaiApiError,
    KokkaiHttpStatusError,
    KokkaiMalformedBodyError,
    KokkaiTransportError,
)
from .query_encoder import KokkaiQueryEncoder
from .types import (
    MeetingRecord,
    MeetingSpeechRecord,
    SearchEnvelope,
    SpeechRecord,
)


__all__ = [
    "KokkaiApiClient",
    "KokkaiApiError",
    "KokkaiHttpStatusError",
    "KokkaiMalformedBodyError",
    "KokkaiQueryEncoder",
    "KokkaiTransportError",
    "MeetingRecord",
    "MeetingSpeechRecord",
    "SearchEnvelope",
    "SpeechRecord",
]
