from __future__ import annotations

import argparse
import asyncio
import random
from pathlib import Path

from tradesim.config import load_config
from tradesim.monitoring import AuditLog, LogNotifier, Monitor, build_runtime_status, write_runtime_status
from tradesim.runtime import ClockConfig, SimulationClock, SimulationEngine, create_run_context


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the simulated price feed and trading bot clock.")
    parser.add_argument("--config", default="configs/tradesim.yaml")
    parser.add_argument("--run-id", default=None)
    parser.add_argument("--ticks", type=int, default=None, help="Stop after this many ticks")
    parser.add_argument("--interval", type=float, default=None, help="Seconds between ticks")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--enable", action="store_true", help="Arm the bot before the first tick")
    args = parser.parse_args()

    config_path = Path(args.config)
    config = load_config(config_path)
    context = create_run_context(config_path, config, run_id=args.run_id, seed=args.seed)

    monitor = Monitor(LogNotifier(prefix=config.monitoring.notify_prefix, symbol=context.symbol))
    audit = AuditLog(Path(config.monitoring.audit_log_path), run_id=context.run_id, config_hash=context.config_hash)
    audit.log("run_start", context.as_payload())

    rng = random.Random(context.seed)
    engine = SimulationEngine(
        config.feed,
        config.indicators,
        config.ledger,
        dispatch_strategy=config.runtime.dispatch_strategy,
    )
    state = engine.bootstrap(config.feed.base_price, rng=rng)
    audit.log(
        "bootstrap",
        {"samples": len(state.series), "current_price": state.current_price},
    )

    interval = args.interval if args.interval is not None else config.runtime.tick_interval_seconds
    clock = SimulationClock(
        engine,
        state,
        config.bot,
        clock_config=ClockConfig(interval_seconds=interval),
        rng=rng,
        audit_log=audit,
        monitor=monitor,
    )
    if args.enable and not clock.config.enabled:
        clock.toggle()

    status_path = Path(config.runtime.status_path)

    def on_tick(_result) -> None:
        write_runtime_status(status_path, build_runtime_status(clock.state, clock.config, ticks=clock.ticks))

    clock.on_tick = on_tick

    print(f"Simulation started (run_id={context.run_id}, symbol={clock.config.symbol})")

    async def _runner() -> None:
        stop_event = asyncio.Event()
        await clock.run_forever(stop_event, max_ticks=args.ticks)

    try:
        asyncio.run(_runner())
    except KeyboardInterrupt:
        audit.log("run_stop", {"reason": "keyboard_interrupt"})
        print("Simulation stopped")

    statistics = clock.state.statistics
    print(
        f"Trades: {statistics.total_trades}  Win rate: {statistics.win_rate:.1f}%  "
        f"Total profit: {statistics.total_profit:.2f}  Last price: {clock.state.current_price:.2f}"
    )


if __name__ == "__main__":
    main()
