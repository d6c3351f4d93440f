import random

from tradesim.market import PriceSample, append_samples, extend, random_walk


def test_random_walk_stays_positive_and_rounded():
    rng = random.Random(7)
    samples = random_walk(45000.0, 0, 0.02, 500, 60_000, rng=rng)

    assert len(samples) == 500
    assert all(sample.price > 0 for sample in samples)
    assert all(round(sample.price, 2) == sample.price for sample in samples)
    assert [sample.timestamp for sample in samples] == [i * 60_000 for i in range(500)]


def test_zero_volatility_keeps_price_flat():
    samples = random_walk(123.45, 1000, 0.0, 10, 3000, rng=random.Random(1))
    assert {sample.price for sample in samples} == {123.45}


def test_price_floor_clamps_walk():
    samples = random_walk(0.02, 0, 0.9, 200, 1, rng=random.Random(3), price_floor=0.01)
    assert min(sample.price for sample in samples) >= 0.01


def test_new_samples_have_no_indicators():
    sample = random_walk(100.0, 0, 0.01, 1, 1, rng=random.Random(0))[0]
    assert sample.sma_fast is None
    assert sample.sma_slow is None
    assert sample.rsi == 50.0


def test_extend_continues_from_newest_sample():
    series = [PriceSample(timestamp=0, price=100.0), PriceSample(timestamp=3000, price=101.0)]
    fresh = extend(series, 0.0, 2, 3000, rng=random.Random(0))

    assert [sample.timestamp for sample in fresh] == [6000, 9000]
    assert [sample.price for sample in fresh] == [101.0, 101.0]


def test_append_samples_evicts_oldest_first():
    series = tuple(PriceSample(timestamp=i, price=100.0 + i) for i in range(100))
    fresh = [PriceSample(timestamp=100, price=200.0), PriceSample(timestamp=101, price=201.0)]

    combined = append_samples(series, fresh, max_samples=100)

    assert len(combined) == 100
    assert combined[0].timestamp == 2
    assert combined[-1].timestamp == 101
