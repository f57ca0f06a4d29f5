"""
FastAPI application entry point.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from config import get_settings, setup_logging
from src.app_layer.dependencies import get_engine
from src.app_layer.routers import businesses, game, progression


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: fresh game, start the clock
    settings = get_settings()
    setup_logging(settings.logging.level)
    engine = get_engine()
    engine.initialize_game()
    if settings.ticker.autostart:
        engine.start_time_progression()
    yield
    # Shutdown: no ticks after the loop goes away
    engine.stop_time_progression()


app = FastAPI(
    title="Vibe Coder: Idle Business Simulation API",
    description="Generate AI-built businesses, set their prices, watch the cash roll in",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(game.router, prefix="/api/v1/game", tags=["game"])
app.include_router(businesses.router, prefix="/api/v1/businesses", tags=["businesses"])
app.include_router(progression.router, prefix="/api/v1/time", tags=["time"])


@app.get("/health")
async def health_check():
    return {"status": "ok"}
