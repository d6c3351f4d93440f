"""Runtime status reporting."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Optional

from tradesim.config.models import BotConfig
from tradesim.ledger.models import Statistics, Trade
from tradesim.market.models import PriceSample
from tradesim.runtime.engine import SimulationState


@dataclass(frozen=True)
class RuntimeStatus:
    symbol: str
    strategy: str
    enabled: bool
    ticks: int
    current_price: float
    latest: Optional[PriceSample]
    open_position: Optional[Trade]
    statistics: Statistics
    recent_trades: list[Trade]


def build_runtime_status(
    state: SimulationState,
    config: BotConfig,
    ticks: int = 0,
    recent: int = 10,
) -> RuntimeStatus:
    return RuntimeStatus(
        symbol=config.symbol,
        strategy=config.strategy.value,
        enabled=config.enabled,
        ticks=ticks,
        current_price=state.current_price,
        latest=state.latest,
        open_position=state.open_position,
        statistics=state.statistics,
        recent_trades=list(state.trades[-recent:]) if recent > 0 else [],
    )


def write_runtime_status(path: str | Path, status: RuntimeStatus) -> None:
    payload = asdict(status)
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2, default=str), encoding="utf-8")


def read_runtime_status(path: str | Path) -> dict | None:
    path = Path(path)
    if not path.exists():
        return None
    return json.loads(path.read_text(encoding="utf-8"))
