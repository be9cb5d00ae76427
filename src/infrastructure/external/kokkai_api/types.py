"""国会会議録検索システムAPIのレスポンス型定義."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class MeetingSpeechRecord:
    """会議レコードに含まれる発言.

    会議単位簡易出力（meeting_list）では speech_id / speech_order / speaker /
    speech_url のみが入り、会議単位出力（meeting）では本文まで入る。
    """

    speech_id: str
    speech_order: int
    speaker: str
    speech_url: str
    speaker_yomi: str | None = None
    speaker_group: str | None = None
    speaker_position: str | None = None
    speaker_role: str | None = None
    speech: str | None = None
    start_page: int | None = None


@dataclass(frozen=True)
class MeetingRecord:
    """会議単位レスポンスの個別レコード."""

    issue_id: str
    session: int
    name_of_house: str
    name_of_meeting: str
    issue: str
    date: str
    meeting_url: str
    closing: bool = False
    pdf_url: str | None = None
    speech_record: list[MeetingSpeechRecord] = field(default_factory=list)


@dataclass(frozen=True)
class SpeechRecord:
    """発言単位レスポンスの個別レコード."""

    speech_id: str
    issue_id: str
    session: int
    name_of_house: str
    name_of_meeting: str
    issue: str
    date: str
    speech_order: int
    speaker: str
    speech: str
    speech_url: str
    meeting_url: str
    closing: bool = False
    speaker_yomi: str | None = None
    speaker_group: str | None = None
    speaker_position: str | None = None
    speaker_role: str | None = None
    start_page: int | None = None
    pdf_url: str | None = None


@dataclass(frozen=True)
class SearchEnvelope:
    """検索APIのレスポンス全体.

    HTTP 200 でも ``message`` / ``details`` を伴う検証エラーが返ることがある。
    その場合レコード列は空になる。
    """

    number_of_records: int = 0
    number_of_return: int = 0
    start_record: int = 1
    next_record_position: int | None = None
    message: str | None = None
    details: list[str] = field(default_factory=list)
    meeting_record: list[MeetingRecord] = field(default_factory=list)
    speech_record: list[SpeechRecord] = field(default_factory=list)

    @property
    def is_error(self) -> bool:
        """空でない message を持つ（検索条件の誤りなど）."""
        return bool(self.message)
