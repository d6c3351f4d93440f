"""Asyncio clock driving periodic simulation ticks."""

from __future__ import annotations

import asyncio
import inspect
import random
from dataclasses import asdict, dataclass, replace
from typing import Any, Awaitable, Callable, Optional

from tradesim.config.models import BotConfig, validate_bot_config
from tradesim.monitoring.monitor import Monitor
from tradesim.runtime.engine import SimulationEngine, SimulationState, TickResult, toggle


TickCallback = Callable[[TickResult], Awaitable[None] | None]


@dataclass(frozen=True)
class ClockConfig:
    interval_seconds: float = 3.0


class SimulationClock:
    """Owns the simulation state and is its only writer.

    Ticks run one after another on a single task; each one reads ``config``
    once at its start, so edits made between ticks apply from the next tick.
    """

    def __init__(
        self,
        engine: SimulationEngine,
        state: SimulationState,
        config: BotConfig,
        clock_config: Optional[ClockConfig] = None,
        rng: Optional[random.Random] = None,
        audit_log: Optional[object] = None,
        monitor: Optional[Monitor] = None,
        on_tick: Optional[TickCallback] = None,
    ) -> None:
        self.engine = engine
        self.state = state
        self.config = config
        self.clock_config = clock_config or ClockConfig()
        self.rng = rng
        self.monitor = monitor
        self.on_tick = on_tick
        self.ticks = 0
        self._audit_log = audit_log

    def _log(self, event: str, payload: dict[str, Any]) -> None:
        if self._audit_log is None:
            return
        self._audit_log.log(event, payload)

    def toggle(self) -> BotConfig:
        self.config = toggle(self.config)
        self._log("bot_toggled", {"enabled": self.config.enabled})
        if self.monitor is not None:
            self.monitor.bot_toggled(self.config.enabled)
        return self.config

    def update_config(self, **changes: Any) -> BotConfig:
        if "enabled" in changes:
            raise ValueError("Use toggle() to arm or disarm the bot")
        updated = replace(self.config, **changes)
        validate_bot_config(updated)
        self.config = updated
        self._log("config_updated", {key: str(value) for key, value in changes.items()})
        return self.config

    def step(self) -> TickResult:
        config = self.config
        try:
            result = self.engine.tick(self.state, config, rng=self.rng)
        except Exception as exc:
            self._log("tick_error", {"tick": self.ticks + 1, "error": str(exc)})
            raise
        self.state = result.state
        self.ticks += 1

        self._log(
            "tick",
            {
                "tick": self.ticks,
                "enabled": config.enabled,
                "sample": asdict(result.sample),
            },
        )
        if result.signal is not None:
            self._log(
                "signal",
                {"side": result.signal.side.value, "price": result.signal.price, "reason": result.signal.reason},
            )
        if result.trade is not None:
            self._log("trade", asdict(result.trade))
            self._log("statistics", asdict(result.state.statistics))
            if self.monitor is not None:
                self.monitor.trade_executed(result.trade, result.state.statistics)
        return result

    async def _maybe_call(self, result: TickResult) -> None:
        if self.on_tick is None:
            return
        outcome = self.on_tick(result)
        if inspect.isawaitable(outcome):
            await outcome

    async def run_forever(
        self,
        stop_event: Optional[asyncio.Event] = None,
        max_ticks: Optional[int] = None,
    ) -> None:
        if max_ticks is not None and max_ticks < 0:
            raise ValueError(f"max_ticks must be non-negative, got {max_ticks}")
        if stop_event is None:
            stop_event = asyncio.Event()
        loop = asyncio.get_running_loop()
        interval = self.clock_config.interval_seconds
        completed = 0

        try:
            while not stop_event.is_set() and (max_ticks is None or completed < max_ticks):
                start = loop.time()
                result = self.step()
                await self._maybe_call(result)
                completed += 1
                if max_ticks is not None and completed >= max_ticks:
                    break
                elapsed = loop.time() - start
                delay = max(0.0, interval - elapsed)
                if delay:
                    try:
                        await asyncio.wait_for(stop_event.wait(), timeout=delay)
                    except asyncio.TimeoutError:
                        pass
        finally:
            self._log("clock_stopped", {"ticks": self.ticks})
            if self.monitor is not None:
                self.monitor.clock_stopped(self.ticks)
