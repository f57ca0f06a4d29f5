"""
Time progression API endpoints.
Handlers run on the event loop, the same thread the ticker fires on.
"""

from fastapi import APIRouter, Depends

from src.app_layer.dependencies import get_engine
from src.app_layer.schemas import TickerStatusResponse
from src.simulation_layer.engine import GameEngine

router = APIRouter()


def _status(engine: GameEngine) -> TickerStatusResponse:
    return TickerStatusResponse(
        running=engine.is_time_running,
        interval_seconds=engine.ticker.interval_seconds,
        tick_count=engine.ticker.tick_count,
    )


@router.post("/start", response_model=TickerStatusResponse)
async def start_time(engine: GameEngine = Depends(get_engine)):
    engine.start_time_progression()
    return _status(engine)


@router.post("/stop", response_model=TickerStatusResponse)
async def stop_time(engine: GameEngine = Depends(get_engine)):
    engine.stop_time_progression()
    return _status(engine)


@router.get("/status", response_model=TickerStatusResponse)
async def get_status(engine: GameEngine = Depends(get_engine)):
    return _status(engine)
