"""例外クラスのテスト."""

import pytest

from src.application.exceptions import (
    ApplicationException,
    InvalidConfigException,
    UnknownToolError,
)
from src.domain.exceptions import (
    DomainException,
    KokkaiMcpException,
    UnknownSearchModeException,
)
from src.domain.value_objects.search_mode import SearchMode


def test_str_includes_error_code() -> None:
    assert str(KokkaiMcpException("失敗", error_code="X-1")) == "[X-1] 失敗"
    assert str(KokkaiMcpException("失敗")) == "失敗"


def test_unknown_tool_error() -> None:
    error = UnknownToolError("search_bills", ["search_speeches"])

    assert isinstance(error, ApplicationException)
    assert error.error_code == "APP-002"
    assert error.message == "Unknown tool: search_bills"
    assert error.details == {
        "tool_name": "search_bills",
        "available_tools": ["search_speeches"],
    }


def test_invalid_config_details() -> None:
    error = InvalidConfigException("KOKKAI_API_TIMEOUT", "-1", "must be positive")

    assert error.error_code == "APP-001"
    assert error.details["value"] == "-1"


def test_search_mode_from_value() -> None:
    assert SearchMode.from_value("meeting-full") is SearchMode.MEETING_FULL

    with pytest.raises(UnknownSearchModeException) as exc_info:
        SearchMode.from_value("tree")

    assert isinstance(exc_info.value, DomainException)
    assert exc_info.value.details == {"mode": "tree"}
