"""Tests for configuration loading."""

import pytest

from config import ConfigurationError, Settings, load_settings


class TestSettings:
    """Tests for Settings and load_settings."""

    def test_defaults(self, settings):
        """Test default values match the documented behavior."""
        assert settings.llm_model == "llama-3.3-70b-versatile"
        assert settings.document_temperature == 0.2
        assert settings.chat_temperature == 0.7
        assert settings.llm_max_tokens == 3000
        assert settings.document_char_limit == 12000
        assert settings.document_history_window == 4
        assert settings.chat_history_window == 6
        assert settings.min_content_chars == 10
        assert settings.llm_timeout is None

    def test_missing_key(self, monkeypatch):
        """Test a missing API key raises ConfigurationError."""
        monkeypatch.delenv("GROQ_API_KEY", raising=False)
        monkeypatch.delenv("VITE_GROQ_API_KEY", raising=False)

        with pytest.raises(ConfigurationError, match="GROQ_API_KEY"):
            load_settings(_env_file=None)

    def test_blank_key(self):
        """Test a whitespace-only API key is rejected."""
        with pytest.raises(ConfigurationError):
            load_settings(groq_api_key="   ", _env_file=None)

    def test_key_is_stripped(self):
        """Test surrounding whitespace is removed from the key."""
        settings = Settings(groq_api_key="  abc  ", _env_file=None)
        assert settings.groq_api_key == "abc"

    def test_vite_alias(self, monkeypatch):
        """Test the frontend-style variable name is accepted."""
        monkeypatch.delenv("GROQ_API_KEY", raising=False)
        monkeypatch.setenv("VITE_GROQ_API_KEY", "from-vite")

        assert load_settings(_env_file=None).groq_api_key == "from-vite"

    def test_env_overrides(self, monkeypatch):
        """Test numeric constants can be changed through the environment."""
        monkeypatch.setenv("DOCUMENT_CHAR_LIMIT", "500")
        monkeypatch.setenv("CHAT_HISTORY_WINDOW", "2")

        settings = load_settings(_env_file=None)
        assert settings.document_char_limit == 500
        assert settings.chat_history_window == 2
