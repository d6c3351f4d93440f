from pathlib import Path

import pytest

yaml = pytest.importorskip("yaml")

from tradesim.config import Strategy, load_config, parse_strategy, serialize_config

SAMPLE = Path(__file__).resolve().parents[1] / "configs" / "tradesim.yaml"


def test_load_config_sample():
    config = load_config(SAMPLE)
    assert config.name == "tradesim"
    assert config.bot.symbol == "BTC/USD"
    assert config.bot.strategy == Strategy.SMA_CROSSOVER
    assert config.bot.enabled is False
    assert config.indicators.slow_window == 50
    assert config.feed.max_samples == 100
    assert config.ledger.max_trades == 50
    assert config.runtime.seed is None


def test_serialize_config_uses_plain_values():
    payload = serialize_config(load_config(SAMPLE))
    assert payload["bot"]["strategy"] == "sma_crossover"
    assert payload["runtime"]["tick_interval_seconds"] == 3.0


def test_parse_strategy_accepts_display_names():
    assert parse_strategy("SMA Crossover") == Strategy.SMA_CROSSOVER
    assert parse_strategy("rsi") == Strategy.RSI
    assert parse_strategy("Combined") == Strategy.COMBINED
    with pytest.raises(ValueError):
        parse_strategy("martingale")


def test_out_of_range_inputs_rejected(tmp_path):
    base = SAMPLE.read_text(encoding="utf-8")

    target = tmp_path / "capital.yaml"
    target.write_text(base.replace("capital: 10000", "capital: 500"), encoding="utf-8")
    with pytest.raises(ValueError, match="capital"):
        load_config(target)

    target = tmp_path / "risk.yaml"
    target.write_text(base.replace("risk_per_trade_pct: 2", "risk_per_trade_pct: 12"), encoding="utf-8")
    with pytest.raises(ValueError, match="risk_per_trade_pct"):
        load_config(target)

    target = tmp_path / "windows.yaml"
    target.write_text(base.replace("fast_window: 20", "fast_window: 60"), encoding="utf-8")
    with pytest.raises(ValueError, match="fast_window"):
        load_config(target)


def test_missing_bot_section(tmp_path):
    target = tmp_path / "bare.yaml"
    target.write_text("name: x\nversion: 1\n", encoding="utf-8")
    with pytest.raises(ValueError, match="bot"):
        load_config(target)
