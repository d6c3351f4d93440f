import pytest

from tradesim.config import BotConfig
from tradesim.ledger import Statistics, Trade, append_trade, compute_statistics, position_size, record_trade
from tradesim.strategy import Side, Signal


def _config(**overrides):
    values = {"symbol": "BTC/USD", "capital": 10000.0, "risk_per_trade_pct": 1.0}
    values.update(overrides)
    return BotConfig(**values)


def _trade(index, side, profit=None):
    return Trade(
        id=f"T{index:06d}",
        timestamp=index,
        symbol="BTC/USD",
        side=side,
        price=100.0,
        amount=1.0,
        profit=profit,
    )


def test_position_size_rounds_to_six_places():
    assert position_size(10000.0, 2.0, 45000.0) == 0.004444
    assert position_size(10000.0, 1.0, 100.0) == 1.0
    assert position_size(10000.0, 1.0, 0.0) == 0.0


def test_sell_profit_uses_entry_amount():
    config = _config()
    buy = record_trade(Signal(Side.BUY, 100.0, "oversold"), config, None, "T000001", 1)
    sell = record_trade(Signal(Side.SELL, 110.0, "overbought"), config, buy, "T000002", 2)

    assert buy.amount == 1.0
    assert buy.profit is None
    assert sell.side == Side.SELL
    assert sell.amount == buy.amount
    assert sell.profit == 10.0
    assert sell.symbol == "BTC/USD"


def test_record_trade_rejects_second_open_position():
    config = _config()
    buy = record_trade(Signal(Side.BUY, 100.0, "oversold"), config, None, "T000001", 1)

    with pytest.raises(ValueError):
        record_trade(Signal(Side.BUY, 101.0, "oversold"), config, buy, "T000002", 2)
    with pytest.raises(ValueError):
        record_trade(Signal(Side.SELL, 101.0, "overbought"), config, None, "T000002", 2)


def test_statistics_over_closed_trades():
    trades = [
        _trade(1, Side.BUY),
        _trade(2, Side.SELL, profit=10.0),
        _trade(3, Side.BUY),
        _trade(4, Side.SELL, profit=-5.0),
    ]
    stats = compute_statistics(trades)

    assert stats.total_trades == 4
    assert stats.win_rate == 50.0
    assert stats.total_profit == 5.0


def test_statistics_rounding_and_empty_log():
    assert compute_statistics([]) == Statistics(0, 0.0, 0.0)
    assert compute_statistics([_trade(1, Side.BUY)]) == Statistics(1, 0.0, 0.0)

    trades = [
        _trade(1, Side.SELL, profit=1.004),
        _trade(2, Side.SELL, profit=-2.0),
        _trade(3, Side.SELL, profit=3.0),
    ]
    stats = compute_statistics(trades)
    assert stats.win_rate == 66.7
    assert stats.total_profit == 2.0


def test_trade_log_is_bounded_fifo():
    trades = ()
    for index in range(1, 61):
        side = Side.BUY if index % 2 else Side.SELL
        trades = append_trade(trades, _trade(index, side), max_trades=50)

    assert len(trades) == 50
    assert trades[0].id == "T000011"
    assert trades[-1].id == "T000060"
