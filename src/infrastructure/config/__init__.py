"""
Configuration module for kokkai-giji-mcp.

設定管理の一元化モジュール。settings.pyが唯一のエントリーポイント。
"""

from src.infrastructure.config.settings import (
    DEFAULT_KOKKAI_API_BASE_URL,
    Settings,
    get_settings,
    reload_settings,
    settings,
)


__all__ = [
    "DEFAULT_KOKKAI_API_BASE_URL",
    "Settings",
    "settings",
    "get_settings",
    "reload_settings",
]
