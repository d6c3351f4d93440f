"""Trade and bot notifications."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from tradesim.ledger.models import Statistics, Trade


class Notifier:
    def notify(self, event: str, message: str) -> None:  # pragma: no cover - interface
        raise NotImplementedError


@dataclass
class LogNotifier(Notifier):
    """Print notifications, tagged with the traded symbol when one is set."""

    prefix: str = "[TRADESIM]"
    symbol: Optional[str] = None

    def notify(self, event: str, message: str) -> None:
        tag = f"{self.prefix} {self.symbol}" if self.symbol else self.prefix
        print(f"{tag} {event}: {message}")


@dataclass
class MemoryNotifier(Notifier):
    events: list[tuple[str, str]] = field(default_factory=list)

    def notify(self, event: str, message: str) -> None:
        self.events.append((event, message))


@dataclass
class Monitor:
    notifier: Notifier

    def trade_executed(self, trade: Trade, statistics: Statistics) -> None:
        message = f"{trade.side.value.upper()} {trade.amount:.6f} {trade.symbol} @ {trade.price:.2f}"
        if trade.profit is not None:
            message += f" profit {trade.profit:.2f}"
        message += (
            f" | trades {statistics.total_trades}, win rate {statistics.win_rate:.1f}%,"
            f" total profit {statistics.total_profit:.2f}"
        )
        self.notifier.notify("TRADE", message)

    def bot_toggled(self, enabled: bool) -> None:
        self.notifier.notify("BOT", "enabled" if enabled else "disabled")

    def clock_stopped(self, ticks: int) -> None:
        self.notifier.notify("CLOCK", f"stopped after {ticks} ticks")
