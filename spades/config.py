"""Application configuration using Pydantic settings."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from spades.models.enums import Difficulty


class Settings(BaseSettings):
    """Application settings loaded from environment variables (``SPADES_*``)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SPADES_",
        case_sensitive=False,
        extra="ignore",
    )

    # Game Configuration
    default_difficulty: Difficulty = Field(
        default=Difficulty.MEDIUM, description="Difficulty used when none is given"
    )
    winning_score: int = Field(default=500, description="Score needed to win the game")
    rng_seed: Optional[int] = Field(
        default=None, description="Seed for shuffles and bot choices (None = unseeded)"
    )

    # Bot think time in seconds: base + uniform(0, variance)
    bot_think_time_easy: float = Field(default=0.5, description="Easy bot base think time")
    bot_think_variance_easy: float = Field(default=0.5, description="Easy bot think variance")
    bot_think_time_medium: float = Field(default=0.8, description="Medium bot base think time")
    bot_think_variance_medium: float = Field(
        default=0.7, description="Medium bot think variance"
    )
    bot_think_time_hard: float = Field(default=1.0, description="Hard bot base think time")
    bot_think_variance_hard: float = Field(default=1.0, description="Hard bot think variance")

    # Logging
    log_level: str = Field(default="INFO", description="Root log level")

    def think_time_range(self, difficulty: Difficulty) -> tuple[float, float]:
        """Return (base, variance) of the bot think time for a difficulty."""
        ranges = {
            Difficulty.EASY: (self.bot_think_time_easy, self.bot_think_variance_easy),
            Difficulty.MEDIUM: (self.bot_think_time_medium, self.bot_think_variance_medium),
            Difficulty.HARD: (self.bot_think_time_hard, self.bot_think_variance_hard),
        }
        return ranges[difficulty]


# Global settings instance
settings = Settings()
