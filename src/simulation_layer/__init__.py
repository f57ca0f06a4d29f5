"""
Simulation Layer - game state and its transitions.

Provides:
- GameEngine: generate / reprice / shutdown / time step / lifecycle
- GameState, Business, AIModel: the state model
- Ticker: wall-clock time progression on the asyncio loop
- IdleGameRunner, SimulatedClock: headless replays
"""

from src.simulation_layer.models import (
    SLOPPY_COPY_AI,
    AIModel,
    Business,
    EventType,
    GameEvent,
    GameState,
)
from src.simulation_layer.formulas import MAX_BUSINESS_PRICE
from src.simulation_layer.engine import GameEngine
from src.simulation_layer.ticker import Ticker
from src.simulation_layer.runner import IdleGameRunner, SimulatedClock

__all__ = [
    # State model
    "AIModel",
    "Business",
    "GameState",
    "GameEvent",
    "EventType",
    "SLOPPY_COPY_AI",
    "MAX_BUSINESS_PRICE",
    # Engine
    "GameEngine",
    "Ticker",
    # Headless
    "IdleGameRunner",
    "SimulatedClock",
]
