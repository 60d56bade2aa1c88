import pytest
from pydantic import ValidationError

from mcp_add_numbers.settings import ServerSettings


def test_defaults(monkeypatch: pytest.MonkeyPatch):
    for name in ("NAME", "DEBUG", "LOG_LEVEL", "TRANSPORT", "HOST", "PORT"):
        monkeypatch.delenv(f"MCP_ADD_NUMBERS_{name}", raising=False)

    settings = ServerSettings()
    assert settings.name == "mcp-add-numbers"
    assert settings.debug is False
    assert settings.log_level == "INFO"
    assert settings.transport == "stdio"
    assert settings.host == "127.0.0.1"
    assert settings.port == 8000
    assert settings.warn_on_duplicate_tools is True
    assert "add_numbers" in settings.instructions


def test_reads_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("MCP_ADD_NUMBERS_TRANSPORT", "streamable-http")
    monkeypatch.setenv("MCP_ADD_NUMBERS_PORT", "9123")
    monkeypatch.setenv("MCP_ADD_NUMBERS_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("MCP_ADD_NUMBERS_DEBUG", "true")

    settings = ServerSettings()
    assert settings.transport == "streamable-http"
    assert settings.port == 9123
    assert settings.log_level == "DEBUG"
    assert settings.debug is True


def test_arguments_override_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("MCP_ADD_NUMBERS_PORT", "9123")

    assert ServerSettings(port=9999).port == 9999


def test_rejects_invalid_values():
    with pytest.raises(ValidationError):
        ServerSettings(transport="websocket")  # type: ignore[arg-type]

    with pytest.raises(ValidationError):
        ServerSettings(port=0)

    with pytest.raises(ValidationError):
        ServerSettings(log_level="VERBOSE")  # type: ignore[arg-type]
