"""
Unit tests for settings loading.
"""

import pytest
from pydantic import ValidationError

from subnet_quiz.config import Settings, get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:

    def test_defaults(self, monkeypatch):
        for name in ("QUESTION_COUNT", "MAX_STRIKES", "LOG_LEVEL", "LOG_FILE", "SHOW_EXPLANATIONS"):
            monkeypatch.delenv(f"SUBNET_QUIZ_{name}", raising=False)
        settings = Settings(_env_file=None)
        assert settings.question_count == 10
        assert settings.max_strikes == 3
        assert settings.show_explanations is True
        assert settings.log_level == "WARNING"
        assert settings.log_file is None

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("SUBNET_QUIZ_MAX_STRIKES", "5")
        monkeypatch.setenv("SUBNET_QUIZ_LOG_LEVEL", "DEBUG")
        settings = Settings(_env_file=None)
        assert settings.max_strikes == 5
        assert settings.log_level == "DEBUG"

    def test_invalid_value(self, monkeypatch):
        monkeypatch.setenv("SUBNET_QUIZ_QUESTION_COUNT", "0")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_get_settings_cached(self):
        assert get_settings() is get_settings()
