"""
FastAPI dependency injection providers.
"""

from typing import Optional

from src.simulation_layer.engine import GameEngine

# Single engine per process; the API serves one player
_engine: Optional[GameEngine] = None


def get_engine() -> GameEngine:
    global _engine
    if _engine is None:
        _engine = GameEngine()
    return _engine


def reset_engine() -> None:
    """Reset the singleton instance (for testing)."""
    global _engine
    if _engine is not None:
        _engine.stop_time_progression()
    _engine = None
