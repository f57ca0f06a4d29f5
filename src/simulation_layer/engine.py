"""
Game engine for the idle business simulation.
Owns the GameState and applies every transition to it:

- generate_business: cooldown-gated, may fail with the model's failure rate
- update_business_price / shutdown_business: player actions on one business
- process_time_step: payment, daily profit settlement, cooldown decay
- initialize_game / start_time_progression / stop_time_progression: lifecycle
"""

import asyncio
import logging
import random
from datetime import datetime
from typing import Callable, List, Optional

from config import get_settings
from src.simulation_layer.business_factory import BusinessFactory
from src.simulation_layer.formulas import (
    calculate_maus,
    clamp_price,
    daily_profit,
)
from src.simulation_layer.models import (
    SLOPPY_COPY_AI,
    Business,
    EventType,
    GameEvent,
    GameState,
    add_months,
)
from src.simulation_layer.ticker import Ticker

logger = logging.getLogger(__name__)


class GameEngine:
    """
    Single-writer transition engine.
    Every operation runs to completion synchronously on the caller's thread.
    """

    def __init__(
        self,
        rng: Optional[Callable[[], float]] = None,
        clock: Optional[Callable[[], datetime]] = None,
        starting_cash: Optional[float] = None,
        tick_interval: Optional[float] = None,
    ):
        settings = get_settings()
        if rng is None:
            rng = random.Random(settings.game.random_seed).random
        self.rng = rng
        self.clock = clock or datetime.now
        self.starting_cash = (
            settings.game.starting_cash if starting_cash is None else starting_cash
        )
        self.factory = BusinessFactory(rng=self.rng)
        self.ticker = Ticker(
            self.process_time_step,
            settings.ticker.interval_seconds if tick_interval is None else tick_interval,
        )
        self.events: List[GameEvent] = []
        self.state = GameState.initial(self.clock(), self.starting_cash, SLOPPY_COPY_AI)

    def _record(self, event_type: str, when: datetime, **payload) -> None:
        self.events.append(GameEvent(type=event_type, timestamp=when, payload=payload))

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def initialize_game(self) -> GameState:
        """Stop time, discard everything and start a fresh game."""
        self.stop_time_progression()
        self.events = []
        self.state = GameState.initial(self.clock(), self.starting_cash, SLOPPY_COPY_AI)
        logger.info(
            "New game: cash=%.2f, model=%s",
            self.state.cash,
            self.state.current_ai_model.name,
        )
        return self.state

    @property
    def is_time_running(self) -> bool:
        return self.ticker.is_running

    def start_time_progression(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self.ticker.start(loop)
        logger.info("Time progression started")

    def stop_time_progression(self) -> None:
        if self.ticker.is_running:
            self.ticker.stop()
            logger.info("Time progression stopped")

    # ------------------------------------------------------------------
    # Player actions
    # ------------------------------------------------------------------

    def generate_business(self) -> Optional[Business]:
        """Attempt to generate one business.

        Returns the new business, or None when gated by cooldown or when the
        attempt failed. A failed attempt still consumes the full cooldown.
        """
        state = self.state
        if state.generation_cooldown > 0:
            logger.debug("Generation on cooldown (%ss left)", state.generation_cooldown)
            return None

        now = self.clock()
        model = state.current_ai_model

        failure_roll = self.rng() * 100
        if failure_roll < model.failure_rate:
            state.generation_cooldown = model.cooldown_seconds
            state.last_generation_time = now
            self._record(EventType.GENERATION_FAILED, now, roll=failure_roll)
            logger.info("Generation failed (roll=%.1f < %s)", failure_roll, model.failure_rate)
            return None

        business = self.factory.create(model.quality_multiplier, now)
        state.businesses.append(business)
        state.generation_cooldown = model.cooldown_seconds
        state.last_generation_time = now
        self._record(EventType.BUSINESS_GENERATED, now, business_id=business.id, name=business.name)
        logger.info(
            "Generated %s (usefulness=%.1f, fun=%.1f, cost=%s, maus=%d)",
            business.name,
            business.usefulness,
            business.fun,
            business.operating_cost,
            business.maus,
        )
        return business

    def update_business_price(self, business_id: str, price: float) -> Optional[Business]:
        business = self.state.find_business(business_id)
        if business is None:
            return None

        business.price = clamp_price(price)
        business.maus = calculate_maus(
            business.usefulness,
            business.fun,
            business.price,
            self.state.current_ai_model.quality_multiplier,
        )
        self._record(
            EventType.PRICE_UPDATED,
            self.clock(),
            business_id=business_id,
            price=business.price,
            maus=business.maus,
        )
        return business

    def shutdown_business(self, business_id: str) -> Optional[Business]:
        business = self.state.find_business(business_id)
        if business is None or not business.is_active:
            return business

        business.is_active = False
        self._record(EventType.BUSINESS_SHUTDOWN, self.clock(), business_id=business_id)
        logger.info("Shut down %s", business.name)
        return business

    def upgrade_ai_model(self) -> None:
        """Not available in this version; leaves the state untouched."""
        logger.warning("AI model upgrade is not implemented in this version")
        self._record(EventType.AI_MODEL_UPGRADE_REQUESTED, self.clock())

    # ------------------------------------------------------------------
    # Time
    # ------------------------------------------------------------------

    def process_time_step(self) -> GameState:
        """Settle one tick against the current wall-clock instant."""
        state = self.state
        now = self.clock()
        model = state.current_ai_model

        # 1. Subscription payment (at most one per call, no catch-up)
        cash = state.cash
        if now >= state.next_payment_date:
            cash -= model.monthly_cost
            state.last_payment_date = now
            state.next_payment_date = add_months(now, 1)
            self._record(EventType.PAYMENT_PROCESSED, now, amount=model.monthly_cost)
            logger.info("Paid %s subscription: %s", model.name, model.monthly_cost)

        # 2. Daily-equivalent profit over active businesses
        cash += daily_profit(state.businesses)
        state.cash = max(0.0, cash)

        # 3. Cooldown, derived from the last attempt rather than the last tick
        elapsed = int((now - state.last_generation_time).total_seconds())
        state.generation_cooldown = min(
            state.generation_cooldown,
            max(0, model.cooldown_seconds - elapsed),
        )

        state.current_date = now
        return state
