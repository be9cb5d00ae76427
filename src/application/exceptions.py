"""アプリケーション層の例外クラス定義"""

from typing import Any

from src.domain.exceptions import KokkaiMcpException


class ApplicationException(KokkaiMcpException):
    """アプリケーション層の基底例外クラス"""

    pass


class ConfigurationError(ApplicationException):
    """設定の読み込みに失敗した場合の例外"""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message=message, error_code="APP-001", details=details)


class MissingConfigException(ConfigurationError):
    """必須設定が未設定の場合の例外"""

    def __init__(self, config_key: str, message: str | None = None):
        super().__init__(
            message or f"必須設定 '{config_key}' が設定されていません",
            details={"config_key": config_key},
        )


class InvalidConfigException(ConfigurationError):
    """設定値が不正な場合の例外"""

    def __init__(self, config_key: str, value: str, reason: str):
        super().__init__(
            f"設定 '{config_key}' の値が不正です: {reason}",
            details={"config_key": config_key, "value": value, "reason": reason},
        )


class UnknownToolError(ApplicationException):
    """登録されていないツール名で呼び出された場合の例外

    ホストとツール定義の不整合を示すため、テキストに変換せずに送出する。
    """

    def __init__(self, tool_name: str, available_tools: list[str]):
        super().__init__(
            message=f"Unknown tool: {tool_name}",
            error_code="APP-002",
            details={"tool_name": tool_name, "available_tools": available_tools},
        )
