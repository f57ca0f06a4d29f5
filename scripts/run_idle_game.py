"""
CLI entry point for a headless idle session.
Drives the engine with a simulated clock and writes a per-step CSV.
"""

import argparse
import random
import sys
from pathlib import Path

# Ensure project root is in sys.path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import get_settings, setup_logging
from src.simulation_layer.engine import GameEngine
from src.simulation_layer.models import EventType
from src.simulation_layer.runner import IdleGameRunner, SimulatedClock


def main():
    parser = argparse.ArgumentParser(description="Vibe Coder headless idle simulation")
    parser.add_argument("--steps", type=int, default=3600, help="Number of ticks to simulate")
    parser.add_argument(
        "--step-seconds",
        type=float,
        default=60.0,
        help="Simulated seconds per tick (default: 60, one cooldown per tick)",
    )
    parser.add_argument("--seed", type=int, default=None, help="RNG seed (overrides GAME_RANDOM_SEED)")
    parser.add_argument(
        "--no-generate",
        action="store_true",
        help="Never attempt generations (settlement only)",
    )
    parser.add_argument("--output", type=Path, default=None, help="CSV path for per-step snapshots")
    args = parser.parse_args()

    settings = get_settings()
    setup_logging(settings.logging.level)

    seed = args.seed if args.seed is not None else settings.game.random_seed
    clock = SimulatedClock()
    engine = GameEngine(rng=random.Random(seed).random, clock=clock.now)
    engine.initialize_game()

    print("=" * 80)
    print("Vibe Coder Headless Simulation")
    print("=" * 80)
    print(f"Model: {engine.state.current_ai_model.name}")
    print(f"Steps: {args.steps} x {args.step_seconds:g}s")
    print(f"Starting cash: ${engine.state.cash:,.2f}")
    print()

    runner = IdleGameRunner(engine, clock)
    results_df = runner.run(
        steps=args.steps,
        step_seconds=args.step_seconds,
        auto_generate=not args.no_generate,
    )

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        results_df.to_csv(args.output, index=False, encoding="utf-8-sig")
        print(f"  Step log -> {args.output}")

    state = engine.state
    payments = sum(1 for e in engine.events if e.type == EventType.PAYMENT_PROCESSED)
    failures = sum(1 for e in engine.events if e.type == EventType.GENERATION_FAILED)

    print()
    print("=" * 80)
    print("Simulation complete!")
    print("=" * 80)
    print(f"  Simulated until: {state.current_date:%Y-%m-%d %H:%M}")
    print(f"  Final cash: ${state.cash:,.2f}")
    print(f"  Businesses: {len(state.businesses)} ({len(state.active_businesses)} active)")
    print(f"  Failed generations: {failures}")
    print(f"  Subscription payments: {payments}")
    if not results_df.empty:
        print(f"  Peak cash: ${results_df['cash'].max():,.2f}")
        print(f"  Final monthly profit: ${results_df['monthly_profit'].iloc[-1]:,.2f}")


if __name__ == "__main__":
    main()
