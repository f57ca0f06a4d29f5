"""
Economy formulas: MAU growth, settlement aggregates, price bounds.
Pure functions, no game state.
"""

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, List, Optional, Tuple

from src.simulation_layer.models import Business, GameState

MAX_BUSINESS_PRICE = 1_000_000_000  # 1 billion
MIN_BUSINESS_PRICE = 1
STARTING_PRICE = 10
DAYS_PER_MONTH = 30  # settlement approximation, not calendar-accurate

# Above this price, growth sits at its floor
PRICE_IMPACT_FLOOR = 0.1
FLOOR_PRICE_THRESHOLD = 90


@dataclass
class BusinessCalculations:
    base_growth_rate: float
    price_impact: float
    quality_multiplier: float
    target_maus: int
    monthly_revenue: float
    monthly_profit: float


@dataclass
class BusinessMetrics:
    revenue: float
    profit: float
    growth_rate: float
    profit_margin: float


@dataclass
class PriceValidation:
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    suggested_price: Optional[float] = None
    price_range: Tuple[float, float] = (MIN_BUSINESS_PRICE, MAX_BUSINESS_PRICE)


@dataclass
class TimeCalculations:
    days_since_start: int
    days_since_last_payment: int
    days_until_next_payment: int
    cooldown_remaining: float
    can_generate: bool
    cooldown_progress: float


def price_impact(price: float) -> float:
    """Higher price linearly suppresses growth, down to a 10% floor."""
    return max(PRICE_IMPACT_FLOOR, 1 - (price / 100))


def calculate_maus(usefulness: float, fun: float, price: float, quality_multiplier: float) -> int:
    base_growth_rate = (usefulness + fun) / 2
    growth = base_growth_rate * price_impact(price) * quality_multiplier
    return max(0, math.floor(growth * 10))


def clamp_price(price: float) -> float:
    if math.isnan(price):
        return STARTING_PRICE
    return max(MIN_BUSINESS_PRICE, min(MAX_BUSINESS_PRICE, price))


def monthly_revenue(businesses: Iterable[Business]) -> float:
    return sum(b.maus * b.price for b in businesses if b.is_active)


def monthly_operating_cost(businesses: Iterable[Business]) -> float:
    return sum(b.operating_cost for b in businesses if b.is_active)


def monthly_profit(businesses: Iterable[Business]) -> float:
    businesses = list(businesses)
    return monthly_revenue(businesses) - monthly_operating_cost(businesses)


def daily_profit(businesses: Iterable[Business]) -> float:
    return monthly_profit(businesses) / DAYS_PER_MONTH


def calculate_business_breakdown(business: Business, quality_multiplier: float) -> BusinessCalculations:
    """Per-business view of the MAU formula and its monthly economics."""
    base = (business.usefulness + business.fun) / 2
    impact = price_impact(business.price)
    target = calculate_maus(business.usefulness, business.fun, business.price, quality_multiplier)
    revenue = target * business.price
    return BusinessCalculations(
        base_growth_rate=base,
        price_impact=impact,
        quality_multiplier=quality_multiplier,
        target_maus=target,
        monthly_revenue=revenue,
        monthly_profit=revenue - business.operating_cost,
    )


def calculate_business_metrics(business: Business, quality_multiplier: float) -> BusinessMetrics:
    revenue = business.maus * business.price
    profit = revenue - business.operating_cost
    base = (business.usefulness + business.fun) / 2
    return BusinessMetrics(
        revenue=revenue,
        profit=profit,
        growth_rate=base * price_impact(business.price) * quality_multiplier,
        profit_margin=profit / revenue if revenue else 0.0,
    )


def validate_price(requested: float) -> PriceValidation:
    """Describe how a requested price relates to the allowed range.

    update_business_price() clamps regardless; this only reports what the
    clamp will do so a host can surface it.
    """
    if math.isnan(requested):
        return PriceValidation(
            is_valid=False,
            errors=["Price must be a number"],
            suggested_price=STARTING_PRICE,
        )

    if requested < MIN_BUSINESS_PRICE:
        return PriceValidation(
            is_valid=False,
            errors=[f"Price must be at least {MIN_BUSINESS_PRICE}"],
            suggested_price=MIN_BUSINESS_PRICE,
        )
    if requested > MAX_BUSINESS_PRICE:
        return PriceValidation(
            is_valid=False,
            errors=[f"Price must be no more than {MAX_BUSINESS_PRICE:,}"],
            suggested_price=MAX_BUSINESS_PRICE,
        )

    warnings = []
    if requested >= FLOOR_PRICE_THRESHOLD:
        warnings.append("Growth is at its 10% floor at this price")
    return PriceValidation(is_valid=True, warnings=warnings, suggested_price=requested)


def _whole_days(delta_seconds: float) -> int:
    return int(delta_seconds / 86400)


def calculate_time_status(state: GameState, now: datetime) -> TimeCalculations:
    cooldown_seconds = state.current_ai_model.cooldown_seconds
    remaining = state.generation_cooldown
    if remaining > 0 and cooldown_seconds:
        progress = (cooldown_seconds - remaining) / cooldown_seconds
    else:
        progress = 1.0
    return TimeCalculations(
        days_since_start=_whole_days((now - state.game_start_date).total_seconds()),
        days_since_last_payment=_whole_days((now - state.last_payment_date).total_seconds()),
        days_until_next_payment=_whole_days((state.next_payment_date - now).total_seconds()),
        cooldown_remaining=remaining,
        can_generate=remaining == 0,
        cooldown_progress=progress,
    )
