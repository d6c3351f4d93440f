"""Load simulator configuration files."""

from __future__ import annotations

import hashlib
from dataclasses import asdict
from pathlib import Path
from typing import Any

import yaml

from tradesim.config.models import (
    BotConfig,
    FeedConfig,
    IndicatorConfig,
    LedgerConfig,
    MonitoringConfig,
    RuntimeConfig,
    SimulatorConfig,
    Strategy,
    validate_bot_config,
    validate_feed_config,
    validate_indicator_config,
)


def load_config(path: str | Path) -> SimulatorConfig:
    path = Path(path)
    data = _load_yaml(path)

    name = _require(data, "name")
    version = str(_require(data, "version"))
    run_id_prefix = data.get("run_id_prefix", name)

    bot = _parse_bot(_require(data, "bot"))
    feed = _parse_feed(data.get("feed", {}) or {})
    indicators = _parse_indicators(data.get("indicators", {}) or {})
    ledger = _parse_ledger(data.get("ledger", {}) or {})
    runtime = _parse_runtime(data.get("runtime", {}) or {})
    monitoring = _parse_monitoring(data.get("monitoring", {}) or {})

    validate_bot_config(bot)
    validate_feed_config(feed)
    validate_indicator_config(indicators)
    if ledger.max_trades <= 0:
        raise ValueError("ledger.max_trades must be positive")
    if runtime.tick_interval_seconds <= 0:
        raise ValueError("runtime.tick_interval_seconds must be positive")

    return SimulatorConfig(
        name=name,
        version=version,
        run_id_prefix=run_id_prefix,
        bot=bot,
        feed=feed,
        indicators=indicators,
        ledger=ledger,
        runtime=runtime,
        monitoring=monitoring,
    )


def compute_config_hash(path: str | Path) -> str:
    path = Path(path)
    content = path.read_bytes()
    return hashlib.sha256(content).hexdigest()


def parse_strategy(value: Any) -> Strategy:
    if isinstance(value, Strategy):
        return value
    normalized = str(value).strip().lower().replace(" ", "_").replace("-", "_")
    try:
        return Strategy(normalized)
    except ValueError as exc:
        raise ValueError(f"Invalid strategy: {value}") from exc


def _load_yaml(path: Path) -> dict[str, Any]:
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Config must be a mapping")
    return data


def _require(data: dict[str, Any], key: str) -> Any:
    if key not in data:
        raise ValueError(f"Missing required config key: {key}")
    return data[key]


def _parse_bot(data: dict[str, Any]) -> BotConfig:
    return BotConfig(
        symbol=str(data.get("symbol", "BTC/USD")),
        strategy=parse_strategy(data.get("strategy", Strategy.SMA_CROSSOVER.value)),
        enabled=bool(data.get("enabled", False)),
        capital=float(data.get("capital", 10000.0)),
        risk_per_trade_pct=float(data.get("risk_per_trade_pct", 2.0)),
    )


def _parse_feed(data: dict[str, Any]) -> FeedConfig:
    return FeedConfig(
        base_price=float(data.get("base_price", 45000.0)),
        bootstrap_count=int(data.get("bootstrap_count", 100)),
        bootstrap_volatility=float(data.get("bootstrap_volatility", 0.02)),
        bootstrap_step_ms=int(data.get("bootstrap_step_ms", 60_000)),
        tick_volatility=float(data.get("tick_volatility", 0.015)),
        tick_step_ms=int(data.get("tick_step_ms", 3_000)),
        max_samples=int(data.get("max_samples", 100)),
        price_floor=float(data.get("price_floor", 0.01)),
    )


def _parse_indicators(data: dict[str, Any]) -> IndicatorConfig:
    return IndicatorConfig(
        fast_window=int(data.get("fast_window", 20)),
        slow_window=int(data.get("slow_window", 50)),
        rsi_period=int(data.get("rsi_period", 14)),
        rsi_oversold=float(data.get("rsi_oversold", 30.0)),
        rsi_overbought=float(data.get("rsi_overbought", 70.0)),
    )


def _parse_ledger(data: dict[str, Any]) -> LedgerConfig:
    return LedgerConfig(max_trades=int(data.get("max_trades", 50)))


def _parse_runtime(data: dict[str, Any]) -> RuntimeConfig:
    seed = data.get("seed")
    return RuntimeConfig(
        tick_interval_seconds=float(data.get("tick_interval_seconds", 3.0)),
        dispatch_strategy=bool(data.get("dispatch_strategy", False)),
        seed=None if seed is None else int(seed),
        status_path=str(data.get("status_path", "runtime/status.json")),
    )


def _parse_monitoring(data: dict[str, Any]) -> MonitoringConfig:
    return MonitoringConfig(
        audit_log_path=str(data.get("audit_log_path", "runtime/audit.log")),
        notify_prefix=str(data.get("notify_prefix", "[TRADESIM]")),
    )


def serialize_config(config: SimulatorConfig) -> dict[str, Any]:
    payload = asdict(config)
    payload["bot"]["strategy"] = config.bot.strategy.value
    return payload
