"""Rolling indicator helpers for the simulated price series."""

from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence

from tradesim.config.models import IndicatorConfig
from tradesim.market.models import PriceSample

INDICATOR_DECIMALS = 2
NEUTRAL_RSI = 50.0


def sma(prices: Sequence[float], window: int) -> Optional[float]:
    if window <= 0 or len(prices) < window:
        return None
    slice_ = prices[-window:]
    return sum(slice_) / window


def rsi(prices: Sequence[float], period: int) -> float:
    """Simplified RSI over the last ``period`` deltas.

    Gains and losses are both averaged over ``period`` rather than over the
    number of up or down moves, with no Wilder smoothing. A zero average loss
    yields 100.
    """
    if period <= 0 or len(prices) < period + 1:
        return NEUTRAL_RSI
    deltas = [prices[i] - prices[i - 1] for i in range(len(prices) - period, len(prices))]
    avg_gain = sum(delta for delta in deltas if delta > 0) / period
    avg_loss = -sum(delta for delta in deltas if delta < 0) / period
    if avg_loss == 0:
        return 100.0
    rs = avg_gain / avg_loss
    return 100.0 - (100.0 / (1.0 + rs))


def _rounded(value: Optional[float]) -> Optional[float]:
    if value is None:
        return None
    return round(value, INDICATOR_DECIMALS)


def annotate(
    series: Sequence[PriceSample],
    config: IndicatorConfig,
    start: int = 0,
) -> tuple[PriceSample, ...]:
    """Recompute indicator fields for samples at index ``start`` onward.

    Each sample only sees the retained history up to and including itself,
    so annotating just the newest sample gives the same values a full pass
    over the same series would.
    """
    prices = [sample.price for sample in series]
    start = max(0, start)
    annotated = list(series[:start])
    for index in range(start, len(series)):
        history = prices[: index + 1]
        annotated.append(
            replace(
                series[index],
                sma_fast=_rounded(sma(history, config.fast_window)),
                sma_slow=_rounded(sma(history, config.slow_window)),
                rsi=round(rsi(history, config.rsi_period), INDICATOR_DECIMALS),
            )
        )
    return tuple(annotated)
