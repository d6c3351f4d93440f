"""Trade log and statistics models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from tradesim.strategy.models import Side


@dataclass(frozen=True)
class Trade:
    id: str
    timestamp: int
    symbol: str
    side: Side
    price: float
    amount: float
    profit: Optional[float] = None


@dataclass(frozen=True)
class Statistics:
    total_trades: int = 0
    win_rate: float = 0.0
    total_profit: float = 0.0
