"""Unit tests for application settings."""

from src.application.config import Settings
from src.domain.entities import Difficulty, Operator, SessionMode


def test_settings_defaults(monkeypatch):
    """Test settings defaults match the session defaults."""
    for name in ("DEFAULT_MODE", "DEFAULT_OPERATORS", "FEEDBACK_DELAY_MS", "LOG_LEVEL", "CHALLENGE_SEED"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.app_name == "math-practice-coach"
    assert settings.log_level == "INFO"
    assert settings.tick_interval_seconds == 1.0
    assert settings.feedback_delay_ms == 350
    assert settings.default_mode == SessionMode.BY_TIME
    assert settings.default_question_count == 10
    assert settings.default_total_time_seconds == 10
    assert settings.default_difficulty == Difficulty.NORMAL
    assert settings.default_operators == [Operator.ADDITION, Operator.SUBTRACTION]
    assert settings.challenge_seed is None


def test_settings_from_environment(monkeypatch):
    """Test settings are read from environment variables."""
    monkeypatch.setenv("DEFAULT_MODE", "question_count")
    monkeypatch.setenv("DEFAULT_OPERATORS", '["*", "/"]')
    monkeypatch.setenv("FEEDBACK_DELAY_MS", "500")
    monkeypatch.setenv("CHALLENGE_SEED", "42")

    settings = Settings(_env_file=None)

    assert settings.default_mode == SessionMode.BY_QUESTION_COUNT
    assert settings.default_operators == [Operator.MULTIPLICATION, Operator.DIVISION]
    assert settings.feedback_delay_ms == 500
    assert settings.challenge_seed == 42
