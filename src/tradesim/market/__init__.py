"""Synthetic market data."""

from tradesim.market.generator import append_samples, extend, random_walk
from tradesim.market.models import PriceSample

__all__ = [
    "PriceSample",
    "append_samples",
    "extend",
    "random_walk",
]
