"""Run identity for a simulation session."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from tradesim.config.loader import compute_config_hash
from tradesim.config.models import SimulatorConfig


@dataclass(frozen=True)
class RunContext:
    run_id: str
    config_path: Path
    config_hash: str
    started_at: datetime
    symbol: str
    strategy: str
    seed: Optional[int]

    def as_payload(self) -> dict[str, Any]:
        return {
            "config": str(self.config_path),
            "started_at": self.started_at.isoformat(),
            "symbol": self.symbol,
            "strategy": self.strategy,
            "seed": self.seed,
        }


def _symbol_slug(symbol: str) -> str:
    return re.sub(r"[^A-Za-z0-9]+", "", symbol).lower() or "sim"


def create_run_context(
    config_path: str | Path,
    config: SimulatorConfig,
    run_id: Optional[str] = None,
    seed: Optional[int] = None,
) -> RunContext:
    """Stamp a run with its config hash, instrument and rng seed.

    ``seed`` overrides ``config.runtime.seed`` when given.
    """
    path = Path(config_path)
    config_hash = compute_config_hash(path)
    started_at = datetime.now(timezone.utc)
    if seed is None:
        seed = config.runtime.seed
    if run_id is None:
        stamp = started_at.strftime("%Y%m%dT%H%M%SZ")
        run_id = f"{config.run_id_prefix}-{_symbol_slug(config.bot.symbol)}-{stamp}-{config_hash[:8]}"
    return RunContext(
        run_id=run_id,
        config_path=path,
        config_hash=config_hash,
        started_at=started_at,
        symbol=config.bot.symbol,
        strategy=config.bot.strategy.value,
        seed=seed,
    )
