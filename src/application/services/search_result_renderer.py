"""検索APIのレスポンスをLLM向けのテキストに整形するサービス.

会議単位簡易出力・会議単位出力・発言単位出力の3モードを、モードごとの
表示設定テーブルで切り替える。本文の省略ルールとURL行の扱いはここに一元化する。
"""

from __future__ import annotations

import logging

from dataclasses import dataclass

from src.domain.value_objects.search_mode import SearchMode
from src.infrastructure.external.kokkai_api.types import (
    MeetingRecord,
    MeetingSpeechRecord,
    SearchEnvelope,
    SpeechRecord,
)


logger = logging.getLogger(__name__)

NO_RESULTS_MESSAGE = "検索結果が見つかりませんでした。"
SPEECH_TRUNCATION_LIMIT = 500
TRUNCATION_MARKER = "...[省略]"
CLOSING_ANNOTATION = "（閉会中）"
SPEECH_DELIMITER = "－－－"


@dataclass(frozen=True)
class RenderProfile:
    """モードごとの表示設定."""

    # エンベロープ上のレコード列の属性名
    records_attr: str
    # 会議レコード内の発言を一覧行で出すか
    show_speech_list: bool
    # 会議レコード内の発言を本文付きで出すか
    show_speech_bodies: bool
    # レコード間の区切り行
    record_delimiter: tuple[str, ...]


RENDER_PROFILES: dict[SearchMode, RenderProfile] = {
    SearchMode.MEETING_SUMMARY: RenderProfile(
        records_attr="meeting_record",
        show_speech_list=True,
        show_speech_bodies=False,
        record_delimiter=("---",),
    ),
    SearchMode.MEETING_FULL: RenderProfile(
        records_attr="meeting_record",
        show_speech_list=False,
        show_speech_bodies=True,
        record_delimiter=("===", ""),
    ),
    SearchMode.SPEECH_FLAT: RenderProfile(
        records_attr="speech_record",
        show_speech_list=False,
        show_speech_bodies=False,
        record_delimiter=("---",),
    ),
}


def truncate_speech(text: str, limit: int = SPEECH_TRUNCATION_LIMIT) -> str:
    """発言本文を先頭 limit 文字に切り詰める.

    limit 文字以下ならそのまま返し、超える場合のみ省略記号を付ける。
    """
    if len(text) <= limit:
        return text
    return text[:limit] + TRUNCATION_MARKER


def format_issue(issue: str) -> str:
    """号数を「第N号」の形にする（APIが既に「第N号」で返す場合はそのまま）."""
    if issue.isdigit():
        return f"第{issue}号"
    return issue


def format_speaker(
    speaker: str,
    position: str | None,
    group: str | None,
    role: str | None,
) -> str:
    text = speaker
    if position:
        text += f"（{position}）"
    if group:
        text += f"［{group}］"
    if role:
        text += f"《{role}》"
    return text


class SearchResultRenderer:
    """SearchEnvelope → テキスト."""

    def render(self, envelope: SearchEnvelope, mode: SearchMode | str) -> str:
        """レスポンスを描画する.

        1. message があればエラーとして描画（レコードの有無に関わらず優先）
        2. モードに対応するレコード列が空なら固定の「検索結果なし」メッセージ
        3. 件数ヘッダ（次ページがあれば startRecord の案内）と各レコード

        Raises:
            UnknownSearchModeException: 未定義の出力モード
        """
        if envelope.is_error:
            logger.info("APIが検証エラーを返しました: %s", envelope.message)
            return self.render_error(envelope.message or "", envelope.details)

        mode = SearchMode.from_value(mode)
        profile = RENDER_PROFILES[mode]
        records: list[MeetingRecord] | list[SpeechRecord] = getattr(
            envelope, profile.records_attr
        )
        if not records:
            return NO_RESULTS_MESSAGE

        lines = self._header_lines(envelope)
        for index, record in enumerate(records, start=1):
            if isinstance(record, SpeechRecord):
                lines.extend(self._speech_lines(index, record))
            else:
                lines.extend(self._meeting_lines(index, record, profile))
            lines.extend(profile.record_delimiter)

        logger.debug("%s: %d件を描画しました", mode.value, len(records))
        return "\n".join(lines) + "\n"

    @staticmethod
    def render_error(message: str, details: list[str]) -> str:
        return f"エラー: {message}\n" + "\n".join(details)

    @staticmethod
    def _header_lines(envelope: SearchEnvelope) -> list[str]:
        lines = [
            f"検索結果: {envelope.number_of_records}件中 "
            f"{envelope.number_of_return}件を表示"
        ]
        if envelope.next_record_position:
            lines.append(
                f"次の結果を取得するには startRecord={envelope.next_record_position} "
                "を指定してください"
            )
        lines.append("")
        return lines

    def _meeting_lines(
        self, index: int, meeting: MeetingRecord, profile: RenderProfile
    ) -> list[str]:
        lines = [
            f"【{index}】{meeting.name_of_house} {meeting.name_of_meeting} "
            f"{format_issue(meeting.issue)}",
            f"日付: {meeting.date}{CLOSING_ANNOTATION if meeting.closing else ''}",
            f"回次: 第{meeting.session}回国会",
            f"会議録ID: {meeting.issue_id}",
            f"会議URL: {meeting.meeting_url}",
        ]
        if meeting.pdf_url:
            lines.append(f"PDF: {meeting.pdf_url}")

        if profile.show_speech_list and meeting.speech_record:
            lines.append("該当発言:")
            lines.extend(
                f"  - [{speech.speech_order}] {speech.speaker}"
                for speech in meeting.speech_record
            )

        if profile.show_speech_bodies:
            lines.append("")
            if meeting.speech_record:
                lines.append("【発言記録】")
                for speech in meeting.speech_record:
                    lines.extend(self._meeting_speech_lines(speech))
        return lines

    @staticmethod
    def _meeting_speech_lines(speech: MeetingSpeechRecord) -> list[str]:
        lines = [
            "",
            f"[{speech.speech_order}] "
            + format_speaker(
                speech.speaker,
                speech.speaker_position,
                speech.speaker_group,
                speech.speaker_role,
            ),
        ]
        if speech.speech:
            lines.append(truncate_speech(speech.speech))
        lines.append(f"発言URL: {speech.speech_url}")
        lines.append(SPEECH_DELIMITER)
        return lines

    @staticmethod
    def _speech_lines(index: int, speech: SpeechRecord) -> list[str]:
        lines = [
            f"【{index}】"
            + format_speaker(
                speech.speaker,
                speech.speaker_position,
                speech.speaker_group,
                speech.speaker_role,
            ),
            f"{speech.name_of_house} {speech.name_of_meeting} "
            f"{format_issue(speech.issue)}",
            f"日付: {speech.date}{CLOSING_ANNOTATION if speech.closing else ''} "
            f"発言番号: {speech.speech_order}",
            f"回次: 第{speech.session}回国会",
            "",
            "発言内容:",
            truncate_speech(speech.speech),
            "",
            f"発言ID: {speech.speech_id}",
            f"会議録ID: {speech.issue_id}",
            f"発言URL: {speech.speech_url}",
            f"会議URL: {speech.meeting_url}",
        ]
        if speech.pdf_url:
            lines.append(f"PDF: {speech.pdf_url}")
        return lines
