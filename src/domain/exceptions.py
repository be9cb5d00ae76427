"""ドメイン層の例外クラス定義

アプリケーション全体で使用される基底例外クラスと、
ドメイン層で発生する例外を定義
"""

from typing import Any


class KokkaiMcpException(Exception):  # noqa: N818
    """kokkai-giji-mcp の基底例外クラス

    すべての独自例外クラスはこのクラスを継承する。
    エラーコードとメッセージを管理し、トレーサビリティを提供。
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        """
        Args:
            message: エラーメッセージ
            error_code: エラーコード（例: DOM-001）
            details: 追加の詳細情報
        """
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        """エラーの文字列表現を返す"""
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message


class DomainException(KokkaiMcpException):
    """ドメイン層の基底例外クラス"""

    pass


class UnknownSearchModeException(DomainException):
    """未定義の検索モードが指定された場合の例外"""

    def __init__(self, mode: str):
        super().__init__(
            message=f"未定義の検索モードです: {mode}",
            error_code="DOM-001",
            details={"mode": mode},
        )
