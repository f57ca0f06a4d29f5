"""
Business management API endpoints.

The engine treats unknown ids as a no-op; the HTTP layer reports them as 404.
"""

from fastapi import APIRouter, Depends, HTTPException

from src.app_layer.dependencies import get_engine
from src.app_layer.schemas import (
    BusinessMetricsResponse,
    BusinessResponse,
    PriceUpdateRequest,
    PriceUpdateResponse,
    PriceValidationResponse,
)
from src.simulation_layer.engine import GameEngine
from src.simulation_layer.formulas import calculate_business_metrics, validate_price

router = APIRouter()


def _require_business(engine: GameEngine, business_id: str):
    business = engine.state.find_business(business_id)
    if business is None:
        raise HTTPException(status_code=404, detail=f"Business {business_id} not found")
    return business


@router.put("/{business_id}/price", response_model=PriceUpdateResponse)
async def update_price(
    business_id: str,
    request: PriceUpdateRequest,
    engine: GameEngine = Depends(get_engine),
):
    """Set a price. Out-of-range values are clamped, never rejected."""
    _require_business(engine, business_id)
    validation = validate_price(request.price)
    business = engine.update_business_price(business_id, request.price)
    return PriceUpdateResponse(
        business=BusinessResponse.model_validate(business),
        validation=PriceValidationResponse.model_validate(validation),
    )


@router.post("/{business_id}/shutdown", response_model=BusinessResponse)
async def shutdown_business(business_id: str, engine: GameEngine = Depends(get_engine)):
    _require_business(engine, business_id)
    return engine.shutdown_business(business_id)


@router.get("/{business_id}/metrics", response_model=BusinessMetricsResponse)
async def get_metrics(business_id: str, engine: GameEngine = Depends(get_engine)):
    business = _require_business(engine, business_id)
    return calculate_business_metrics(
        business, engine.state.current_ai_model.quality_multiplier
    )
