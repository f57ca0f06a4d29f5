"""
Pydantic models for API request/response.
"""

from datetime import datetime
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field


class AIModelResponse(BaseModel):
    id: str
    name: str
    monthly_cost: float
    quality_level: float
    cooldown_seconds: int
    failure_rate: float

    model_config = {"from_attributes": True}


class BusinessResponse(BaseModel):
    id: str
    name: str
    description: str
    usefulness: float
    fun: float
    operating_cost: float
    price: float
    maus: int
    created_at: datetime
    is_active: bool

    model_config = {"from_attributes": True}


class GameStateResponse(BaseModel):
    cash: float
    current_date: datetime
    game_start_date: datetime
    last_payment_date: datetime
    next_payment_date: datetime
    current_ai_model: AIModelResponse
    businesses: List[BusinessResponse]
    generation_cooldown: float
    last_generation_time: datetime
    time_running: bool = False

    model_config = {"from_attributes": True}


class GenerateResponse(BaseModel):
    generated: bool
    business: Optional[BusinessResponse] = None
    generation_cooldown: float


class PriceUpdateRequest(BaseModel):
    price: float


class PriceValidationResponse(BaseModel):
    is_valid: bool
    errors: List[str]
    warnings: List[str]
    suggested_price: Optional[float] = None
    price_range: Tuple[float, float]

    model_config = {"from_attributes": True}


class PriceUpdateResponse(BaseModel):
    business: BusinessResponse
    validation: PriceValidationResponse


class BusinessMetricsResponse(BaseModel):
    revenue: float
    profit: float
    growth_rate: float
    profit_margin: float

    model_config = {"from_attributes": True}


class TimeStatusResponse(BaseModel):
    days_since_start: int
    days_since_last_payment: int
    days_until_next_payment: int
    cooldown_remaining: float
    can_generate: bool
    cooldown_progress: float

    model_config = {"from_attributes": True}


class TickerStatusResponse(BaseModel):
    running: bool
    interval_seconds: float
    tick_count: int


class GameEventResponse(BaseModel):
    type: str
    timestamp: datetime
    payload: dict = Field(default_factory=dict)

    model_config = {"from_attributes": True}
