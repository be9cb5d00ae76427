"""検索ツールの入力スキーマ定義."""

from __future__ import annotations

from typing import Any

from src.application.dtos.search_parameters_dto import (
    HOUSE_NAMES,
    RECORD_PACKINGS,
    SEARCH_RANGES,
    SPEAKER_ROLES,
)
from src.application.usecases.dispatch_search_tool_usecase import (
    SearchToolDefinition,
)


# maximumRecords 以外は全ツール共通
_COMMON_PROPERTIES: dict[str, dict[str, Any]] = {
    "nameOfHouse": {
        "type": "string",
        "description": "院名（衆議院、参議院、両院、両院協議会）",
        "enum": list(HOUSE_NAMES),
    },
    "nameOfMeeting": {
        "type": "string",
        "description": "会議名（例：本会議、予算委員会）。半角スペース区切りでOR検索",
    },
    "any": {
        "type": "string",
        "description": "発言内容の検索キーワード。半角スペース区切りでAND検索",
    },
    "speaker": {
        "type": "string",
        "description": "発言者名。半角スペース区切りでOR検索",
    },
    "from": {"type": "string", "description": "開会日付／始点（YYYY-MM-DD形式）"},
    "until": {"type": "string", "description": "開会日付／終点（YYYY-MM-DD形式）"},
    "sessionFrom": {"type": "number", "description": "国会回次From（開始回）"},
    "sessionTo": {"type": "number", "description": "国会回次To（終了回）"},
    "issueFrom": {"type": "number", "description": "号数From（開始号）"},
    "issueTo": {"type": "number", "description": "号数To（終了号）"},
    "speechNumber": {"type": "number", "description": "発言番号（0以上の整数）"},
    "speakerPosition": {"type": "string", "description": "発言者肩書き（部分一致）"},
    "speakerGroup": {"type": "string", "description": "発言者所属会派（部分一致）"},
    "speakerRole": {
        "type": "string",
        "description": "発言者役割（証人、参考人、公述人）",
        "enum": list(SPEAKER_ROLES),
    },
    "supplementAndAppendix": {
        "type": "boolean",
        "description": "追録・附録に限定（デフォルト：false）",
    },
    "contentsAndIndex": {
        "type": "boolean",
        "description": "目次・索引に限定（デフォルト：false）",
    },
    "searchRange": {
        "type": "string",
        "description": "検索対象箇所（冒頭、本文、冒頭・本文）",
        "enum": list(SEARCH_RANGES),
    },
    "closing": {
        "type": "boolean",
        "description": "閉会中の会議録に限定（デフォルト：false）",
    },
    "speechID": {
        "type": "string",
        "description": "発言ID（例：100105254X00119470520_000）",
    },
    "issueID": {"type": "string", "description": "会議録ID（21桁の英数字）"},
    "recordPacking": {
        "type": "string",
        "description": "応答形式（デフォルト：json）",
        "enum": list(RECORD_PACKINGS),
    },
}


def build_input_schema(tool: SearchToolDefinition) -> dict[str, Any]:
    """ツールの入力スキーマ（JSON Schema）を組み立てる."""
    properties = dict(_COMMON_PROPERTIES)
    properties["maximumRecords"] = {
        "type": "number",
        "description": (
            f"最大取得件数（1-{tool.max_records}、デフォルト{tool.default_records}）"
        ),
        "minimum": 1,
        "maximum": tool.max_records,
    }
    properties["startRecord"] = {
        "type": "number",
        "description": "取得開始位置（デフォルト1）",
        "minimum": 1,
    }
    return {"type": "object", "properties": properties}
