"""Indicators and signal detection."""

from tradesim.strategy.indicators import annotate, rsi, sma
from tradesim.strategy.models import Side, Signal
from tradesim.strategy.signals import Conditions, SignalDetector

__all__ = [
    "Conditions",
    "Side",
    "Signal",
    "SignalDetector",
    "annotate",
    "rsi",
    "sma",
]
