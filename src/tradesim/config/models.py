"""Configuration models for reproducible simulation runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

MIN_CAPITAL = 1000.0
MAX_CAPITAL = 100000.0
MIN_RISK_PCT = 0.5
MAX_RISK_PCT = 10.0


class Strategy(str, Enum):
    SMA_CROSSOVER = "sma_crossover"
    RSI = "rsi"
    COMBINED = "combined"


@dataclass(frozen=True)
class BotConfig:
    symbol: str = "BTC/USD"
    strategy: Strategy = Strategy.SMA_CROSSOVER
    enabled: bool = False
    capital: float = 10000.0
    risk_per_trade_pct: float = 2.0


@dataclass(frozen=True)
class FeedConfig:
    base_price: float = 45000.0
    bootstrap_count: int = 100
    bootstrap_volatility: float = 0.02
    bootstrap_step_ms: int = 60_000
    tick_volatility: float = 0.015
    tick_step_ms: int = 3_000
    max_samples: int = 100
    price_floor: float = 0.01


@dataclass(frozen=True)
class IndicatorConfig:
    fast_window: int = 20
    slow_window: int = 50
    rsi_period: int = 14
    rsi_oversold: float = 30.0
    rsi_overbought: float = 70.0


@dataclass(frozen=True)
class LedgerConfig:
    max_trades: int = 50


@dataclass(frozen=True)
class RuntimeConfig:
    tick_interval_seconds: float = 3.0
    dispatch_strategy: bool = False
    seed: int | None = None
    status_path: str = "runtime/status.json"


@dataclass(frozen=True)
class MonitoringConfig:
    audit_log_path: str = "runtime/audit.log"
    notify_prefix: str = "[TRADESIM]"


@dataclass(frozen=True)
class SimulatorConfig:
    name: str
    version: str
    run_id_prefix: str
    bot: BotConfig = field(default_factory=BotConfig)
    feed: FeedConfig = field(default_factory=FeedConfig)
    indicators: IndicatorConfig = field(default_factory=IndicatorConfig)
    ledger: LedgerConfig = field(default_factory=LedgerConfig)
    runtime: RuntimeConfig = field(default_factory=RuntimeConfig)
    monitoring: MonitoringConfig = field(default_factory=MonitoringConfig)


def validate_bot_config(config: BotConfig) -> None:
    """Reject bot settings outside the ranges the dashboard inputs allow."""
    if not config.symbol or not config.symbol.strip():
        raise ValueError("symbol must not be empty")
    if not isinstance(config.strategy, Strategy):
        raise ValueError(f"Invalid strategy: {config.strategy}")
    if not MIN_CAPITAL <= config.capital <= MAX_CAPITAL:
        raise ValueError(f"capital must be within [{MIN_CAPITAL:g}, {MAX_CAPITAL:g}], got {config.capital}")
    if not MIN_RISK_PCT <= config.risk_per_trade_pct <= MAX_RISK_PCT:
        raise ValueError(
            f"risk_per_trade_pct must be within [{MIN_RISK_PCT:g}, {MAX_RISK_PCT:g}], "
            f"got {config.risk_per_trade_pct}"
        )


def validate_feed_config(config: FeedConfig) -> None:
    if config.base_price <= 0:
        raise ValueError("base_price must be positive")
    if config.price_floor <= 0:
        raise ValueError("price_floor must be positive")
    if config.bootstrap_count < 0:
        raise ValueError("bootstrap_count must be non-negative")
    for key in ("bootstrap_volatility", "tick_volatility"):
        value = getattr(config, key)
        if not 0 <= value < 1:
            raise ValueError(f"{key} must be within [0, 1), got {value}")
    if config.bootstrap_step_ms <= 0 or config.tick_step_ms <= 0:
        raise ValueError("sample spacing must be positive")
    if config.max_samples < 2:
        raise ValueError("max_samples must hold at least two samples")


def validate_indicator_config(config: IndicatorConfig) -> None:
    if config.fast_window <= 0 or config.slow_window <= 0 or config.rsi_period <= 0:
        raise ValueError("indicator windows must be positive")
    if config.fast_window >= config.slow_window:
        raise ValueError("fast_window must be shorter than slow_window")
    if not 0 <= config.rsi_oversold < config.rsi_overbought <= 100:
        raise ValueError("RSI thresholds must satisfy 0 <= oversold < overbought <= 100")
