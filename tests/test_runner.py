from datetime import datetime

from src.simulation_layer.engine import GameEngine
from src.simulation_layer.models import EventType
from src.simulation_layer.runner import IdleGameRunner, SimulatedClock

from tests.conftest import GAME_START, ScriptedRng


def test_simulated_clock_advance():
    clock = SimulatedClock(datetime(2025, 1, 31, 10, 0, 0))
    clock.advance(months=1)
    assert clock.now() == datetime(2025, 2, 28, 10, 0, 0)
    clock.advance(seconds=90)
    assert clock.now() == datetime(2025, 2, 28, 10, 1, 30)


def test_run_collects_one_row_per_step(engine, clock):
    df = IdleGameRunner(engine, clock).run(steps=5, step_seconds=60)

    assert len(df) == 5
    assert list(df.columns) == [
        "step",
        "timestamp",
        "cash",
        "businesses",
        "active_businesses",
        "total_maus",
        "monthly_profit",
        "generation_cooldown",
    ]
    # generation on steps 1, 3, 5: each cooldown clears on the following tick
    assert df["businesses"].tolist() == [1, 1, 2, 2, 3]
    assert (df["cash"] >= 0).all()
    assert df["timestamp"].iloc[-1] == clock.now()


def test_run_without_generation_only_settles(engine, clock):
    df = IdleGameRunner(engine, clock).run(steps=3, step_seconds=60, auto_generate=False)

    assert df["businesses"].tolist() == [0, 0, 0]
    assert df["cash"].tolist() == [40, 40, 40]


def test_run_spanning_a_month_pays_once():
    clock = SimulatedClock(GAME_START)
    engine = GameEngine(rng=ScriptedRng([0.5]), clock=clock.now, starting_cash=40)
    IdleGameRunner(engine, clock).run(steps=4, step_seconds=10 * 86400, auto_generate=False)

    payments = [e for e in engine.events if e.type == EventType.PAYMENT_PROCESSED]
    assert len(payments) == 1
    assert engine.state.cash == 30
