"""Trade ledger and performance statistics."""

from tradesim.ledger.book import append_trade, compute_statistics, record_trade
from tradesim.ledger.models import Statistics, Trade
from tradesim.ledger.sizer import position_size

__all__ = [
    "Statistics",
    "Trade",
    "append_trade",
    "compute_statistics",
    "position_size",
    "record_trade",
]
