"""Market data structures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PriceSample:
    timestamp: int  # epoch milliseconds
    price: float
    sma_fast: Optional[float] = None
    sma_slow: Optional[float] = None
    rsi: float = 50.0

    @property
    def has_averages(self) -> bool:
        return self.sma_fast is not None and self.sma_slow is not None
