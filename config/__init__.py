from config.settings import (
    GameSettings,
    LogSettings,
    Settings,
    TickerSettings,
    get_settings,
    reset_settings,
)
from config.logging_config import setup_logging

__all__ = [
    "GameSettings",
    "LogSettings",
    "Settings",
    "TickerSettings",
    "get_settings",
    "reset_settings",
    "setup_logging",
]
