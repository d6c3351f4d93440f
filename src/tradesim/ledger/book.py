"""Trade recording and statistics over the bounded trade log."""

from __future__ import annotations

from typing import Optional, Sequence

from tradesim.config.models import BotConfig
from tradesim.ledger.models import Statistics, Trade
from tradesim.ledger.sizer import position_size
from tradesim.strategy.models import Side, Signal


def record_trade(
    signal: Signal,
    config: BotConfig,
    last_trade: Optional[Trade],
    trade_id: str,
    timestamp: int,
) -> Trade:
    """Turn a signal into a trade.

    Size is fixed at entry: a sell closes the preceding buy with the same
    amount and realizes ``(sell_price - buy_price) * buy_amount``.
    """
    if signal.side == Side.BUY:
        if last_trade is not None and last_trade.side != Side.SELL:
            raise ValueError("Cannot open a position while one is already open")
        return Trade(
            id=trade_id,
            timestamp=timestamp,
            symbol=config.symbol,
            side=Side.BUY,
            price=signal.price,
            amount=position_size(config.capital, config.risk_per_trade_pct, signal.price),
        )

    if last_trade is None or last_trade.side != Side.BUY:
        raise ValueError("Cannot close a position that is not open")
    profit = (signal.price - last_trade.price) * last_trade.amount
    return Trade(
        id=trade_id,
        timestamp=timestamp,
        symbol=config.symbol,
        side=Side.SELL,
        price=signal.price,
        amount=last_trade.amount,
        profit=profit,
    )


def append_trade(trades: Sequence[Trade], trade: Trade, max_trades: int = 50) -> tuple[Trade, ...]:
    updated = tuple(trades) + (trade,)
    if len(updated) > max_trades:
        updated = updated[-max_trades:]
    return updated


def compute_statistics(trades: Sequence[Trade]) -> Statistics:
    closed = [trade for trade in trades if trade.side == Side.SELL and trade.profit is not None]
    total_profit = sum(trade.profit for trade in closed)
    win_rate = 0.0
    if closed:
        wins = sum(1 for trade in closed if trade.profit > 0)
        win_rate = wins / len(closed) * 100.0
    return Statistics(
        total_trades=len(trades),
        win_rate=round(win_rate, 1),
        total_profit=round(total_profit, 2),
    )
