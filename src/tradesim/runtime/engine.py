"""Simulation state and the pure tick transition."""

from __future__ import annotations

import random
import time
from dataclasses import dataclass, field, replace
from typing import Optional

from tradesim.config.models import BotConfig, FeedConfig, IndicatorConfig, LedgerConfig
from tradesim.ledger.book import append_trade, compute_statistics, record_trade
from tradesim.ledger.models import Statistics, Trade
from tradesim.market.generator import append_samples, extend, random_walk
from tradesim.market.models import PriceSample
from tradesim.strategy.indicators import annotate
from tradesim.strategy.models import Side, Signal
from tradesim.strategy.signals import SignalDetector


@dataclass(frozen=True)
class SimulationState:
    series: tuple[PriceSample, ...] = ()
    trades: tuple[Trade, ...] = ()
    statistics: Statistics = field(default_factory=Statistics)
    trade_seq: int = 0

    @property
    def latest(self) -> Optional[PriceSample]:
        return self.series[-1] if self.series else None

    @property
    def current_price(self) -> float:
        return self.series[-1].price if self.series else 0.0

    @property
    def last_trade(self) -> Optional[Trade]:
        return self.trades[-1] if self.trades else None

    @property
    def open_position(self) -> Optional[Trade]:
        last = self.last_trade
        if last is not None and last.side == Side.BUY:
            return last
        return None


@dataclass(frozen=True)
class TickResult:
    state: SimulationState
    sample: PriceSample
    signal: Optional[Signal] = None
    trade: Optional[Trade] = None


def toggle(config: BotConfig) -> BotConfig:
    return replace(config, enabled=not config.enabled)


def _trade_id(seq: int) -> str:
    return f"T{seq:06d}"


class SimulationEngine:
    def __init__(
        self,
        feed: Optional[FeedConfig] = None,
        indicators: Optional[IndicatorConfig] = None,
        ledger: Optional[LedgerConfig] = None,
        dispatch_strategy: bool = False,
    ) -> None:
        self.feed = feed or FeedConfig()
        self.indicators = indicators or IndicatorConfig()
        self.ledger = ledger or LedgerConfig()
        self.detector = SignalDetector(self.indicators, dispatch_strategy=dispatch_strategy)

    def bootstrap(
        self,
        base_price: Optional[float] = None,
        rng: Optional[random.Random] = None,
        now_ms: Optional[int] = None,
    ) -> SimulationState:
        """Build the initial history ending one step before ``now_ms``."""
        if base_price is None:
            base_price = self.feed.base_price
        if now_ms is None:
            now_ms = int(time.time() * 1000)
        count = self.feed.bootstrap_count
        step = self.feed.bootstrap_step_ms
        samples = random_walk(
            base_price,
            now_ms - count * step,
            self.feed.bootstrap_volatility,
            count,
            step,
            rng=rng,
            price_floor=self.feed.price_floor,
        )
        series = annotate(append_samples((), samples, self.feed.max_samples), self.indicators)
        return SimulationState(series=series)

    def tick(
        self,
        state: SimulationState,
        config: BotConfig,
        rng: Optional[random.Random] = None,
    ) -> TickResult:
        """Advance one sample and, when the bot is enabled, act on any signal.

        ``state`` is never modified; the returned result carries the new state.
        """
        if state.series:
            fresh = extend(
                state.series,
                self.feed.tick_volatility,
                1,
                self.feed.tick_step_ms,
                rng=rng,
                price_floor=self.feed.price_floor,
            )
        else:
            fresh = random_walk(
                self.feed.base_price,
                int(time.time() * 1000),
                self.feed.tick_volatility,
                1,
                self.feed.tick_step_ms,
                rng=rng,
                price_floor=self.feed.price_floor,
            )
        combined = append_samples(state.series, fresh, self.feed.max_samples)
        series = annotate(combined, self.indicators, start=len(combined) - len(fresh))
        sample = series[-1]
        advanced = replace(state, series=series)

        if not config.enabled:
            return TickResult(state=advanced, sample=sample)

        last_trade = state.last_trade
        signal = self.detector.evaluate(series, last_trade, config.strategy)
        if signal is None:
            return TickResult(state=advanced, sample=sample)

        seq = state.trade_seq + 1
        trade = record_trade(signal, config, last_trade, _trade_id(seq), sample.timestamp)
        trades = append_trade(state.trades, trade, self.ledger.max_trades)
        new_state = replace(
            advanced,
            trades=trades,
            statistics=compute_statistics(trades),
            trade_seq=seq,
        )
        return TickResult(state=new_state, sample=sample, signal=signal, trade=trade)
