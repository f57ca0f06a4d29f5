"""
Headless runner: drives a GameEngine with a simulated clock instead of the
wall-clock ticker, and collects per-step snapshots into a DataFrame.
"""

import logging
from datetime import datetime, timedelta
from typing import Optional

import pandas as pd

from src.simulation_layer.engine import GameEngine
from src.simulation_layer.formulas import monthly_profit
from src.simulation_layer.models import add_months

logger = logging.getLogger(__name__)


class SimulatedClock:
    """Manually advanced clock. Pass `clock.now` as the engine's clock."""

    def __init__(self, start: Optional[datetime] = None):
        self.current = start or datetime(2025, 1, 1, 9, 0, 0)

    def now(self) -> datetime:
        return self.current

    def advance(self, seconds: float = 0, months: int = 0) -> datetime:
        if months:
            self.current = add_months(self.current, months)
        if seconds:
            self.current += timedelta(seconds=seconds)
        return self.current


class IdleGameRunner:
    """
    Replays an idle session step by step.
    Each step advances the clock, optionally tries a generation, then settles.
    """

    def __init__(self, engine: GameEngine, clock: SimulatedClock):
        self.engine = engine
        self.clock = clock

    def _snapshot(self, step: int) -> dict:
        state = self.engine.state
        active = state.active_businesses
        return {
            "step": step,
            "timestamp": state.current_date,
            "cash": state.cash,
            "businesses": len(state.businesses),
            "active_businesses": len(active),
            "total_maus": sum(b.maus for b in active),
            "monthly_profit": monthly_profit(active),
            "generation_cooldown": state.generation_cooldown,
        }

    def run(self, steps: int, step_seconds: float = 1.0, auto_generate: bool = True) -> pd.DataFrame:
        """
        Run the session.

        Returns:
            DataFrame with one snapshot row per step.
        """
        rows = []
        for step in range(1, steps + 1):
            self.clock.advance(seconds=step_seconds)
            if auto_generate and self.engine.state.generation_cooldown == 0:
                self.engine.generate_business()
            self.engine.process_time_step()
            rows.append(self._snapshot(step))

        logger.info(
            "Headless run complete: %d steps, %d businesses, cash=%.2f",
            steps,
            len(self.engine.state.businesses),
            self.engine.state.cash,
        )
        return pd.DataFrame(rows)
