import random

from tradesim.config import BotConfig, RuntimeConfig, SimulatorConfig, Strategy
from tradesim.ledger import Statistics, Trade
from tradesim.monitoring import (
    AuditLog,
    LogNotifier,
    Monitor,
    build_runtime_status,
    read_runtime_status,
    write_runtime_status,
)
from tradesim.runtime import SimulationEngine, create_run_context
from tradesim.strategy import Side


def test_audit_log_appends_json_lines(tmp_path):
    audit = AuditLog(tmp_path / "nested" / "audit.log", run_id="run-1", config_hash="abc")
    audit.log("tick", {"tick": 1})
    audit.log("trade", {"side": Side.BUY})

    events = audit.read_events()
    assert [event["event"] for event in events] == ["tick", "trade"]
    assert events[0]["run_id"] == "run-1"
    assert events[1]["payload"]["side"] == "buy"


def test_runtime_status_snapshot(tmp_path):
    engine = SimulationEngine()
    state = engine.bootstrap(rng=random.Random(3), now_ms=0)
    status = build_runtime_status(state, BotConfig(symbol="ETH/USD"), ticks=7)

    assert status.current_price == state.current_price
    assert status.open_position is None

    path = tmp_path / "status.json"
    write_runtime_status(path, status)
    payload = read_runtime_status(path)
    assert payload["symbol"] == "ETH/USD"
    assert payload["strategy"] == "sma_crossover"
    assert payload["ticks"] == 7
    assert payload["latest"]["price"] == state.current_price
    assert payload["statistics"] == {"total_trades": 0, "win_rate": 0.0, "total_profit": 0.0}
    assert read_runtime_status(tmp_path / "missing.json") is None


def test_monitor_formats_trades(capsys):
    monitor = Monitor(LogNotifier(prefix="[T]"))
    trade = Trade(id="T000002", timestamp=0, symbol="BTC/USD", side=Side.SELL, price=110.0, amount=1.0, profit=10.0)
    monitor.trade_executed(trade, Statistics(total_trades=2, win_rate=100.0, total_profit=10.0))

    out = capsys.readouterr().out
    assert out.startswith("[T] TRADE: SELL 1.000000 BTC/USD @ 110.00 profit 10.00")
    assert "win rate 100.0%" in out


def test_log_notifier_tags_symbol(capsys):
    monitor = Monitor(LogNotifier(prefix="[T]", symbol="ETH/USD"))
    monitor.bot_toggled(True)
    monitor.clock_stopped(4)

    lines = capsys.readouterr().out.splitlines()
    assert lines == ["[T] ETH/USD BOT: enabled", "[T] ETH/USD CLOCK: stopped after 4 ticks"]


def test_run_context_stamps_symbol_and_seed(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("name: x\n", encoding="utf-8")
    config = SimulatorConfig(
        name="x",
        version="1",
        run_id_prefix="tradesim",
        bot=BotConfig(symbol="BTC/USD", strategy=Strategy.RSI),
        runtime=RuntimeConfig(seed=11),
    )

    context = create_run_context(config_path, config)
    assert context.run_id.startswith("tradesim-btcusd-")
    assert context.run_id.endswith(context.config_hash[:8])
    assert context.seed == 11
    assert context.as_payload()["symbol"] == "BTC/USD"
    assert context.as_payload()["strategy"] == "rsi"

    override = create_run_context(config_path, config, run_id="fixed", seed=99)
    assert override.run_id == "fixed"
    assert override.seed == 99
