"""Tests for environment-driven settings."""

import os

import pytest

from estoque.infrastructure.config import Settings

_VARS = (
    "ESTOQUE_HOST",
    "ESTOQUE_PORT",
    "ESTOQUE_LOG_LEVEL",
    "ESTOQUE_API_URL",
    "ESTOQUE_TIMEOUT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


class TestSettingsFromEnv:

    def test_defaults(self):
        settings = Settings.from_env()
        assert settings == Settings(
            host="0.0.0.0",
            port=5001,
            log_level="INFO",
            api_url="http://localhost:5001",
            timeout=5.0,
        )

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("ESTOQUE_PORT", "8080")
        monkeypatch.setenv("ESTOQUE_LOG_LEVEL", "debug")
        monkeypatch.setenv("ESTOQUE_API_URL", "http://stock.local:8080/")
        monkeypatch.setenv("ESTOQUE_TIMEOUT", "1.5")

        settings = Settings.from_env()

        assert settings.port == 8080
        assert settings.log_level == "DEBUG"
        assert settings.api_url == "http://stock.local:8080"
        assert settings.timeout == 1.5

    def test_reads_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text("ESTOQUE_HOST=127.0.0.1\n", encoding="utf-8")
        try:
            assert Settings.from_env().host == "127.0.0.1"
        finally:
            os.environ.pop("ESTOQUE_HOST", None)

    def test_invalid_port_rejected(self, monkeypatch):
        monkeypatch.setenv("ESTOQUE_PORT", "abc")
        with pytest.raises(ValueError, match="ESTOQUE_PORT"):
            Settings.from_env()
