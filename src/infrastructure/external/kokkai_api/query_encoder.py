"""検索条件を国会会議録検索システムAPIのクエリ文字列に変換する."""

from __future__ import annotations

from typing import Any
from urllib.parse import urlencode

from src.application.dtos.search_parameters_dto import (
    DEFAULT_RECORD_PACKING,
    RECORD_PACKING_PARAM,
    SearchParameters,
)


class KokkaiQueryEncoder:
    """SearchParameters → クエリ文字列.

    値の検証は行わない。範囲外の値や from > until のような矛盾は
    API側が message 付きレスポンスで返す。
    """

    @staticmethod
    def encode(
        params: SearchParameters,
        record_packing: str | None = None,
    ) -> str:
        """クエリ文字列を組み立てる.

        指定済みの項目だけをAPIパラメータ名で並べ、最後に必ず recordPacking を付ける。
        recordPacking は引数 > params.record_packing > "json" の順で決まる。
        空白は ``+``、非ASCII文字はUTF-8でパーセントエンコードされる。
        """
        pairs = [(key, _stringify(value)) for key, value in params.present_items()]
        packing = record_packing or params.record_packing or DEFAULT_RECORD_PACKING
        pairs.append((RECORD_PACKING_PARAM, packing))
        return urlencode(pairs, encoding="utf-8")


def _stringify(value: Any) -> str:
    """値をクエリ用の文字列にする.

    bool は "true" / "false"、整数値の float は小数部なしで出す。
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
