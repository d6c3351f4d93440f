"""Bounded random-walk price generator."""

from __future__ import annotations

import random
from typing import Optional, Sequence

from tradesim.market.models import PriceSample

PRICE_DECIMALS = 2
DEFAULT_PRICE_FLOOR = 0.01


def random_walk(
    last_price: float,
    start_timestamp: int,
    volatility: float,
    count: int,
    step_ms: int,
    rng: Optional[random.Random] = None,
    price_floor: float = DEFAULT_PRICE_FLOOR,
) -> list[PriceSample]:
    """Generate ``count`` samples continuing a multiplicative walk from ``last_price``.

    Each step draws ``u`` uniformly from ``[-volatility, +volatility]`` and
    moves the price by ``(1 + u)``. Prices are rounded to two decimals when
    generated and the walk continues from the rounded value, so indicator math
    downstream sees exactly what is stored. Prices never drop below
    ``price_floor``.
    """
    source = rng if rng is not None else random
    samples: list[PriceSample] = []
    price = last_price
    for index in range(count):
        change = source.uniform(-volatility, volatility)
        price = max(round(price * (1.0 + change), PRICE_DECIMALS), price_floor)
        samples.append(PriceSample(timestamp=start_timestamp + index * step_ms, price=price))
    return samples


def extend(
    series: Sequence[PriceSample],
    volatility: float,
    count: int,
    step_ms: int,
    rng: Optional[random.Random] = None,
    price_floor: float = DEFAULT_PRICE_FLOOR,
) -> list[PriceSample]:
    """Continue ``series`` from its newest sample; returns only the new samples."""
    if not series:
        raise ValueError("Cannot extend an empty series")
    last = series[-1]
    return random_walk(
        last.price,
        last.timestamp + step_ms,
        volatility,
        count,
        step_ms,
        rng=rng,
        price_floor=price_floor,
    )


def append_samples(
    series: Sequence[PriceSample],
    samples: Sequence[PriceSample],
    max_samples: int,
) -> tuple[PriceSample, ...]:
    combined = tuple(series) + tuple(samples)
    if len(combined) > max_samples:
        combined = combined[-max_samples:]
    return combined
