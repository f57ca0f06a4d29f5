"""
Centralized configuration using pydantic-settings.
Loads from .env file and provides typed access to all constants.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class GameSettings(BaseSettings):
    """Starting configuration applied by initialize_game()."""

    starting_cash: float = Field(default=40.0, ge=0, description="Cash at game start")
    random_seed: Optional[int] = Field(
        default=None,
        description="Seed for the engine RNG (unset = nondeterministic)",
    )

    model_config = {"env_prefix": "GAME_", "env_file": ".env", "extra": "ignore"}


class TickerSettings(BaseSettings):
    """Wall-clock time progression."""

    interval_seconds: float = Field(default=1.0, gt=0, description="Seconds between ticks")
    autostart: bool = Field(
        default=True, description="Start time progression when the API boots"
    )

    model_config = {"env_prefix": "TICKER_", "env_file": ".env", "extra": "ignore"}


class LogSettings(BaseSettings):
    level: str = Field(default="INFO", description="Root log level")

    model_config = {"env_prefix": "LOG_", "env_file": ".env", "extra": "ignore"}


class Settings(BaseSettings):
    """Root settings aggregator."""

    game: GameSettings = Field(default_factory=GameSettings)
    ticker: TickerSettings = Field(default_factory=TickerSettings)
    logging: LogSettings = Field(default_factory=LogSettings)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached instance (for testing)."""
    global _settings
    _settings = None
