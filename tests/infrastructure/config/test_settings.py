"""Settings のユニットテスト."""

import importlib

import pytest

from src.application.exceptions import (
    ConfigurationError,
    InvalidConfigException,
    MissingConfigException,
)
from src.infrastructure.config.settings import (
    DEFAULT_KOKKAI_API_BASE_URL,
    DEFAULT_SERVER_NAME,
    SERVER_VERSION,
    Settings,
)


settings_module = importlib.import_module("src.infrastructure.config.settings")


_ENV_KEYS = (
    "KOKKAI_API_BASE_URL",
    "KOKKAI_API_TIMEOUT",
    "MCP_SERVER_NAME",
    "LOG_LEVEL",
    "DEBUG",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings()

        assert settings.kokkai_api_base_url == DEFAULT_KOKKAI_API_BASE_URL
        assert settings.kokkai_api_timeout == 30.0
        assert settings.server_name == DEFAULT_SERVER_NAME
        assert settings.server_version == SERVER_VERSION
        assert settings.log_level == "INFO"
        assert settings.debug is False

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("KOKKAI_API_BASE_URL", "http://localhost:8080/api/")
        monkeypatch.setenv("KOKKAI_API_TIMEOUT", "5")
        monkeypatch.setenv("MCP_SERVER_NAME", "kokkai-dev")
        monkeypatch.setenv("LOG_LEVEL", "warning")

        settings = Settings()

        assert settings.kokkai_api_base_url == "http://localhost:8080/api"
        assert settings.kokkai_api_timeout == 5.0
        assert settings.server_name == "kokkai-dev"
        assert settings.log_level == "WARNING"

    def test_debug_forces_debug_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DEBUG", "true")
        monkeypatch.setenv("LOG_LEVEL", "ERROR")

        assert Settings().log_level == "DEBUG"

    @pytest.mark.parametrize("value", ["abc", "0", "-1"])
    def test_invalid_timeout(
        self, monkeypatch: pytest.MonkeyPatch, value: str
    ) -> None:
        monkeypatch.setenv("KOKKAI_API_TIMEOUT", value)

        with pytest.raises(InvalidConfigException) as exc_info:
            Settings()

        assert exc_info.value.details["config_key"] == "KOKKAI_API_TIMEOUT"

    def test_validate_accepts_defaults(self) -> None:
        Settings().validate()

    def test_validate_rejects_non_http_url(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("KOKKAI_API_BASE_URL", "ftp://example.com/api")

        with pytest.raises(InvalidConfigException):
            Settings().validate()

    def test_validate_rejects_empty_url(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("KOKKAI_API_BASE_URL", "/")

        with pytest.raises(MissingConfigException):
            Settings().validate()


class TestGetSettings:
    def test_failed_global_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(settings_module, "settings", None)

        with pytest.raises(ConfigurationError):
            settings_module.get_settings()

    def test_reload_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        original = settings_module.settings
        monkeypatch.setenv("MCP_SERVER_NAME", "reloaded")

        try:
            reloaded = settings_module.reload_settings()
            assert reloaded.server_name == "reloaded"
            assert settings_module.get_settings() is reloaded
        finally:
            settings_module.settings = original
