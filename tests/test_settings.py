"""Tests for environment-driven configuration."""

import pytest

from career_companion.config.settings import ConfigManager


@pytest.fixture
def manager(monkeypatch, tmp_path) -> ConfigManager:
    for name in ("GEMINI_API_KEY", "API_KEY", "GEMINI_MODEL", "GEMINI_THINKING_BUDGET", "LOG_LEVEL", "DATA_DIR", "STORE_PATH"):
        monkeypatch.delenv(name, raising=False)
    return ConfigManager(env_file=str(tmp_path / "absent.env"))


class TestConfigManager:
    def test_defaults(self, manager: ConfigManager) -> None:
        config = manager.get_app_config()

        assert config.gemini.api_key is None
        assert config.gemini.model == "gemini-2.5-flash"
        assert config.gemini.chat_thinking_budget == 0
        assert config.store_path.endswith("career_companion.db")

    def test_environment_overrides(self, manager: ConfigManager, monkeypatch) -> None:
        monkeypatch.setenv("API_KEY", "fallback-key-123456")
        monkeypatch.setenv("GEMINI_MODEL", "gemini-2.5-pro")
        monkeypatch.setenv("GEMINI_THINKING_BUDGET", "512")
        monkeypatch.setenv("DATA_DIR", "/tmp/companion")

        manager.load_config()
        gemini = manager.get_gemini_config()

        assert gemini.api_key == "fallback-key-123456"
        assert gemini.model == "gemini-2.5-pro"
        assert gemini.chat_thinking_budget == 512
        assert manager.config.store_path == "/tmp/companion/career_companion.db"

    def test_missing_key_is_an_error(self, manager: ConfigManager) -> None:
        issues = manager.validate_config()
        assert any("GEMINI_API_KEY" in error for error in issues["errors"])

    def test_masking_and_nested_update(self, manager: ConfigManager) -> None:
        manager.update_config(**{"gemini.api_key": "abcdefghijklmnop", "log_level": "DEBUG"})

        masked = manager.mask_sensitive_config()

        assert masked["gemini"]["api_key"] == "abcdefgh..."
        assert masked["log_level"] == "DEBUG"
        assert manager.validate_config()["errors"] == []
