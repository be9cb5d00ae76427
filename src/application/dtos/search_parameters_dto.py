"""国会会議録検索パラメータのDTO."""

from __future__ import annotations

import logging

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


logger = logging.getLogger(__name__)

# Python側のスネークケースとAPIのキャメルケースのマッピング.
# 並び順がそのままクエリ文字列の並び順になる。
SEARCH_PARAM_MAP: dict[str, str] = {
    "start_record": "startRecord",
    "maximum_records": "maximumRecords",
    "name_of_house": "nameOfHouse",
    "name_of_meeting": "nameOfMeeting",
    "any_keyword": "any",
    "speaker": "speaker",
    "from_date": "from",
    "until_date": "until",
    "supplement_and_appendix": "supplementAndAppendix",
    "contents_and_index": "contentsAndIndex",
    "search_range": "searchRange",
    "closing": "closing",
    "speech_number": "speechNumber",
    "speaker_position": "speakerPosition",
    "speaker_group": "speakerGroup",
    "speaker_role": "speakerRole",
    "speech_id": "speechID",
    "issue_id": "issueID",
    "session_from": "sessionFrom",
    "session_to": "sessionTo",
    "issue_from": "issueFrom",
    "issue_to": "issueTo",
}

# 空文字列・0 を「条件なし」とみなす項目（文字列条件とページング）.
# 真偽値・発言番号・回次/号数の範囲は False や 0 も条件として送る。
_EMPTY_AS_ABSENT_FIELDS = frozenset(
    {
        "start_record",
        "maximum_records",
        "name_of_house",
        "name_of_meeting",
        "any_keyword",
        "speaker",
        "from_date",
        "until_date",
        "search_range",
        "speaker_position",
        "speaker_group",
        "speaker_role",
        "speech_id",
        "issue_id",
    }
)

RECORD_PACKING_PARAM = "recordPacking"
DEFAULT_RECORD_PACKING = "json"

HOUSE_NAMES = ("衆議院", "参議院", "両院", "両院協議会")
SPEAKER_ROLES = ("証人", "参考人", "公述人")
SEARCH_RANGES = ("冒頭", "本文", "冒頭・本文")
RECORD_PACKINGS = ("json", "xml")


@dataclass(frozen=True)
class SearchParameters:
    """検索条件.

    すべて任意項目。None は「条件なし」を意味し、このDTOは既定値を補わない
    （API側の既定値が適用される）。値の範囲や日付の前後関係は検証しない。
    """

    start_record: int | None = None
    maximum_records: int | None = None
    name_of_house: str | None = None
    name_of_meeting: str | None = None
    any_keyword: str | None = None
    speaker: str | None = None
    from_date: str | None = None
    until_date: str | None = None
    supplement_and_appendix: bool | None = None
    contents_and_index: bool | None = None
    search_range: str | None = None
    closing: bool | None = None
    speech_number: int | None = None
    speaker_position: str | None = None
    speaker_group: str | None = None
    speaker_role: str | None = None
    speech_id: str | None = None
    issue_id: str | None = None
    session_from: int | None = None
    session_to: int | None = None
    issue_from: int | None = None
    issue_to: int | None = None
    record_packing: str | None = None

    @classmethod
    def from_arguments(cls, arguments: Mapping[str, Any] | None) -> SearchParameters:
        """ツール引数（APIのキャメルケース名）から検索条件を構築する."""
        if not arguments:
            return cls()

        api_to_py = {api: py for py, api in SEARCH_PARAM_MAP.items()}
        api_to_py[RECORD_PACKING_PARAM] = "record_packing"

        values: dict[str, Any] = {}
        for key, value in arguments.items():
            py_name = api_to_py.get(key)
            if py_name is None:
                logger.debug("未知の検索パラメータを無視します: %s", key)
                continue
            values[py_name] = value
        return cls(**values)

    def present_items(self) -> list[tuple[str, Any]]:
        """指定済みの項目を (APIパラメータ名, 値) の組でマッピング順に返す.

        None は常に省略する。文字列条件とページングは空文字列・0 も省略する。
        """
        return [
            (api_name, getattr(self, py_name))
            for py_name, api_name in SEARCH_PARAM_MAP.items()
            if self._is_present(py_name)
        ]

    def _is_present(self, py_name: str) -> bool:
        value = getattr(self, py_name)
        if value is None:
            return False
        if py_name in _EMPTY_AS_ABSENT_FIELDS:
            return bool(value)
        return True
