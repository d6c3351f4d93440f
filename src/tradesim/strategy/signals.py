"""Crossover and RSI signal detection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Sequence

from tradesim.config.models import IndicatorConfig, Strategy
from tradesim.market.models import PriceSample
from tradesim.strategy.models import Side, Signal

if TYPE_CHECKING:
    from tradesim.ledger.models import Trade


@dataclass(frozen=True)
class Conditions:
    bullish_crossover: bool
    bearish_crossover: bool
    oversold: bool
    overbought: bool


def _entry_reasons(conditions: Conditions, strategy: Strategy) -> list[str]:
    reasons = []
    if strategy in (Strategy.SMA_CROSSOVER, Strategy.COMBINED) and conditions.bullish_crossover:
        reasons.append("bullish_crossover")
    if strategy in (Strategy.RSI, Strategy.COMBINED) and conditions.oversold:
        reasons.append("oversold")
    return reasons


def _exit_reasons(conditions: Conditions, strategy: Strategy) -> list[str]:
    reasons = []
    if strategy in (Strategy.SMA_CROSSOVER, Strategy.COMBINED) and conditions.bearish_crossover:
        reasons.append("bearish_crossover")
    if strategy in (Strategy.RSI, Strategy.COMBINED) and conditions.overbought:
        reasons.append("overbought")
    return reasons


class SignalDetector:
    """Decide whether to open or close the single position.

    Unless ``dispatch_strategy`` is set, every strategy name evaluates the
    combined crossover-or-RSI rule set. With dispatch on, ``SMA_CROSSOVER``
    only reacts to crossovers and ``RSI`` only to the oversold/overbought
    thresholds.
    """

    def __init__(self, config: Optional[IndicatorConfig] = None, dispatch_strategy: bool = False) -> None:
        self.config = config or IndicatorConfig()
        self.dispatch_strategy = dispatch_strategy

    def conditions(self, previous: PriceSample, latest: PriceSample) -> Conditions:
        return Conditions(
            bullish_crossover=previous.sma_fast <= previous.sma_slow and latest.sma_fast > latest.sma_slow,
            bearish_crossover=previous.sma_fast >= previous.sma_slow and latest.sma_fast < latest.sma_slow,
            oversold=latest.rsi < self.config.rsi_oversold,
            overbought=latest.rsi > self.config.rsi_overbought,
        )

    def evaluate(
        self,
        series: Sequence[PriceSample],
        last_trade: Optional["Trade"],
        strategy: Strategy = Strategy.COMBINED,
    ) -> Optional[Signal]:
        if len(series) < 2:
            return None
        previous, latest = series[-2], series[-1]
        if not previous.has_averages or not latest.has_averages:
            return None

        effective = strategy if self.dispatch_strategy else Strategy.COMBINED
        conditions = self.conditions(previous, latest)

        flat = last_trade is None or last_trade.side == Side.SELL
        entry = _entry_reasons(conditions, effective)
        if entry and flat:
            return Signal(side=Side.BUY, price=latest.price, reason="+".join(entry))

        exit_ = _exit_reasons(conditions, effective)
        if exit_ and last_trade is not None and last_trade.side == Side.BUY:
            return Signal(side=Side.SELL, price=latest.price, reason="+".join(exit_))

        return None
