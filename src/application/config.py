"""Application configuration using Pydantic Settings."""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from ..domain.entities.practice import Difficulty, Operator, SessionMode


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application settings
    app_name: str = "math-practice-coach"
    app_version: str = "0.1.0"
    debug: bool = False

    # API settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    # Logging
    log_level: str = "INFO"

    # Session timing
    tick_interval_seconds: float = 1.0
    feedback_delay_ms: int = 350

    # Session defaults
    default_mode: SessionMode = SessionMode.BY_TIME
    default_question_count: int = 10
    default_total_time_seconds: int = 10
    default_difficulty: Difficulty = Difficulty.NORMAL
    default_operators: list[Operator] = [Operator.ADDITION, Operator.SUBTRACTION]

    # Answer verification
    max_answer_length: int = 64

    # Random seed for challenge generation (unset for a fresh seed per session)
    challenge_seed: Optional[int] = None


# Create a singleton instance
settings = Settings()
