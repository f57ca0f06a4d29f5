"""
Shared data models for the simulation layer.
"""

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

import pandas as pd


@dataclass(frozen=True)
class AIModel:
    """An AI model tier the player subscribes to."""

    id: str
    name: str
    monthly_cost: float
    quality_level: float  # 0~100
    cooldown_seconds: int
    failure_rate: float  # 0~100, percent chance a generation yields nothing

    @property
    def quality_multiplier(self) -> float:
        return self.quality_level / 100


SLOPPY_COPY_AI = AIModel(
    id="sloppy-copy",
    name="Sloppy Copy",
    monthly_cost=10,
    quality_level=20,
    cooldown_seconds=60,
    failure_rate=30,
)


def add_months(moment: datetime, months: int = 1) -> datetime:
    """Calendar-month offset, clamped to the end of the target month."""
    return (pd.Timestamp(moment) + pd.DateOffset(months=months)).to_pydatetime()


@dataclass
class Business:
    """A generated business. Shutdown only flips is_active."""

    id: str
    name: str
    description: str
    usefulness: float
    fun: float
    operating_cost: float
    price: float
    maus: int
    created_at: datetime
    is_active: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class EventType:
    BUSINESS_GENERATED = "BUSINESS_GENERATED"
    GENERATION_FAILED = "GENERATION_FAILED"
    BUSINESS_SHUTDOWN = "BUSINESS_SHUTDOWN"
    PRICE_UPDATED = "PRICE_UPDATED"
    PAYMENT_PROCESSED = "PAYMENT_PROCESSED"
    AI_MODEL_UPGRADE_REQUESTED = "AI_MODEL_UPGRADE_REQUESTED"


@dataclass
class GameEvent:
    """A single entry in the in-memory game history."""

    type: str
    timestamp: datetime
    payload: Dict[str, Any] = field(default_factory=dict)


@dataclass
class GameState:
    """
    The single source of truth for one game.
    Every transition reads and rewrites this record in place.
    """

    cash: float
    current_date: datetime
    game_start_date: datetime
    last_payment_date: datetime
    next_payment_date: datetime
    current_ai_model: AIModel
    businesses: List[Business] = field(default_factory=list)
    generation_cooldown: float = 0
    last_generation_time: Optional[datetime] = None

    @classmethod
    def initial(cls, now: datetime, starting_cash: float, model: AIModel = SLOPPY_COPY_AI) -> "GameState":
        return cls(
            cash=starting_cash,
            current_date=now,
            game_start_date=now,
            last_payment_date=now,
            next_payment_date=add_months(now, 1),
            current_ai_model=model,
            businesses=[],
            generation_cooldown=0,
            last_generation_time=now,
        )

    @property
    def active_businesses(self) -> List[Business]:
        return [b for b in self.businesses if b.is_active]

    def find_business(self, business_id: str):
        for business in self.businesses:
            if business.id == business_id:
                return business
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Snapshot for host reads (businesses as plain dicts)."""
        return asdict(self)
