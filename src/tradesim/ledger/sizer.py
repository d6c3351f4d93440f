"""Risk-based position sizing."""

from __future__ import annotations

AMOUNT_DECIMALS = 6


def position_size(capital: float, risk_per_trade_pct: float, price: float) -> float:
    if price <= 0:
        return 0.0
    risk_budget = capital * risk_per_trade_pct / 100.0
    return round(risk_budget / price, AMOUNT_DECIMALS)
