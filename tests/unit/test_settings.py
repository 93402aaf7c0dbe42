"""Unit tests for environment-driven settings."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from pocketid_mcp.config.settings import EndpointConfig, Settings, get_settings


def test_settings_from_environment():
    settings = get_settings()
    assert settings.pocketid_url == "https://id.example.com"
    assert settings.pocketid_api_key == "test-api-key"
    assert settings.request_timeout_ms == 30_000
    assert settings.mcp_server_name == "pocketid-test"


def test_trailing_slashes_are_stripped(monkeypatch):
    monkeypatch.setenv("POCKETID_URL", " https://id.example.com/// ")
    assert Settings().pocketid_url == "https://id.example.com"


def test_endpoint_from_settings():
    endpoint = EndpointConfig.from_settings(get_settings())
    assert endpoint == EndpointConfig("https://id.example.com", "test-api-key")


def test_log_level_is_case_insensitive(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert Settings().log_level == "DEBUG"


def test_invalid_log_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "LOUD")
    with pytest.raises(ValidationError):
        Settings()


def test_request_timeout_must_be_positive(monkeypatch):
    monkeypatch.setenv("REQUEST_TIMEOUT_MS", "0")
    with pytest.raises(ValidationError):
        Settings()


def test_log_file_under_log_dir(monkeypatch, tmp_path):
    monkeypatch.setenv("LOG_DIR", str(tmp_path))
    monkeypatch.delenv("LOG_FILE", raising=False)
    assert Settings().log_file_path == (tmp_path / "pocketid-mcp.log").resolve()


def test_absolute_log_file_wins(monkeypatch, tmp_path):
    target = tmp_path / "elsewhere" / "server.log"
    monkeypatch.setenv("LOG_DIR", "/ignored")
    monkeypatch.setenv("LOG_FILE", str(target))
    assert Settings().log_file_path == target


def test_relative_log_file_defaults_to_cwd(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("LOG_DIR", raising=False)
    monkeypatch.setenv("LOG_FILE", "mcp.log")
    assert Settings().log_file_path == Path(tmp_path / "mcp.log").resolve()


def test_settings_are_cached():
    assert get_settings() is get_settings()
