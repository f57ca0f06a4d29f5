"""
Game state and lifecycle API endpoints.
"""

from typing import List

from fastapi import APIRouter, Depends

from src.app_layer.dependencies import get_engine
from src.app_layer.schemas import (
    BusinessResponse,
    GameEventResponse,
    GameStateResponse,
    GenerateResponse,
    TimeStatusResponse,
)
from src.simulation_layer.engine import GameEngine
from src.simulation_layer.formulas import calculate_time_status

router = APIRouter()


def _state_response(engine: GameEngine) -> GameStateResponse:
    return GameStateResponse.model_validate(
        {**engine.state.to_dict(), "time_running": engine.is_time_running}
    )


@router.get("/state", response_model=GameStateResponse)
async def get_state(engine: GameEngine = Depends(get_engine)):
    """Full game snapshot."""
    return _state_response(engine)


@router.post("/reset", response_model=GameStateResponse)
async def reset_game(engine: GameEngine = Depends(get_engine)):
    """Discard the current game. Time progression is stopped."""
    engine.initialize_game()
    return _state_response(engine)


@router.post("/generate", response_model=GenerateResponse)
async def generate_business(engine: GameEngine = Depends(get_engine)):
    """Attempt a generation; `generated` is false on cooldown or failure."""
    business = engine.generate_business()
    return GenerateResponse(
        generated=business is not None,
        business=BusinessResponse.model_validate(business) if business else None,
        generation_cooldown=engine.state.generation_cooldown,
    )


@router.post("/upgrade", status_code=501)
async def upgrade_ai_model(engine: GameEngine = Depends(get_engine)):
    engine.upgrade_ai_model()
    return {"detail": "AI model upgrades are not available yet"}


@router.get("/time", response_model=TimeStatusResponse)
async def get_time_status(engine: GameEngine = Depends(get_engine)):
    return calculate_time_status(engine.state, engine.clock())


@router.get("/events", response_model=List[GameEventResponse])
async def list_events(engine: GameEngine = Depends(get_engine)):
    return engine.events
