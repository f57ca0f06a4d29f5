"""
Business generation: randomized attributes plus flavor-text name/description.
"""

import math
import random
import uuid
from datetime import datetime
from typing import Callable, List, Optional

from src.simulation_layer.formulas import STARTING_PRICE, calculate_maus
from src.simulation_layer.models import Business

NAME_PREFIXES: List[str] = ["Quick", "Smart", "Easy", "Super", "Ultra", "Mega", "Pro", "Fast"]
NAME_SUFFIXES: List[str] = ["Hub", "Pro", "Plus", "Max", "Zone", "Spot", "Lab", "Works"]

DESCRIPTION_TEMPLATES: List[str] = [
    "{name} revolutionizes how you manage your daily tasks",
    "Experience the future of productivity with {name}",
    "{name} makes complex workflows simple and efficient",
    "Transform your business operations with {name}",
    "{name} - the all-in-one solution for modern professionals",
]

# Attribute roll ranges: floor(rng * span) + base
ATTRIBUTE_SPAN = 50
ATTRIBUTE_BASE = 25
QUALITY_BONUS = 25
OPERATING_COST_SPAN = 200
OPERATING_COST_BASE = 50


class BusinessFactory:
    """
    Builds new Business entities from a uniform [0, 1) source.
    The same source is shared with the engine so one seed reproduces a game.
    """

    def __init__(
        self,
        rng: Optional[Callable[[], float]] = None,
        id_factory: Optional[Callable[[], str]] = None,
    ):
        self.rng = rng or random.random
        self.id_factory = id_factory or (lambda: str(uuid.uuid4()))

    def _pick(self, pool: List[str]) -> str:
        return pool[math.floor(self.rng() * len(pool))]

    def generate_name(self) -> str:
        prefix = self._pick(NAME_PREFIXES)
        suffix = self._pick(NAME_SUFFIXES)
        return f"{prefix}{suffix}"

    def generate_description(self, name: str) -> str:
        return self._pick(DESCRIPTION_TEMPLATES).format(name=name)

    def _roll_attribute(self, quality_multiplier: float) -> float:
        return math.floor(self.rng() * ATTRIBUTE_SPAN) + ATTRIBUTE_BASE + quality_multiplier * QUALITY_BONUS

    def create(self, quality_multiplier: float, now: datetime) -> Business:
        """Synthesize one active business at the starting price."""
        name = self.generate_name()
        description = self.generate_description(name)
        usefulness = self._roll_attribute(quality_multiplier)
        fun = self._roll_attribute(quality_multiplier)
        operating_cost = math.floor(self.rng() * OPERATING_COST_SPAN) + OPERATING_COST_BASE

        return Business(
            id=self.id_factory(),
            name=name,
            description=description,
            usefulness=usefulness,
            fun=fun,
            operating_cost=operating_cost,
            price=STARTING_PRICE,
            maus=calculate_maus(usefulness, fun, STARTING_PRICE, quality_multiplier),
            created_at=now,
            is_active=True,
        )
