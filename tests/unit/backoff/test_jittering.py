r"""Unit tests for jitter and the process-wide random source."""

from __future__ import annotations

import random

import pytest

from aretry.backoff import (
    ConstantBackoff,
    get_random_source,
    jitter,
    reset_random_source,
    set_random_source,
)


@pytest.fixture(autouse=True)
def _reset_source():
    yield
    reset_random_source()


@pytest.mark.parametrize("delay", [0.001, 0.5, 1.0, 10.0, 1e6])
def test_jitter_within_bounds(delay: float) -> None:
    rng = random.Random(0)
    for _ in range(200):
        assert 0.0 <= jitter(delay, rng=rng) <= delay


def test_jitter_zero_delay() -> None:
    assert jitter(0.0, rng=random.Random(0)) == 0.0


def test_jitter_is_reproducible_with_seed() -> None:
    first = [jitter(1.0, rng=random.Random(7)) for _ in range(3)]
    second = [jitter(1.0, rng=random.Random(7)) for _ in range(3)]
    assert first == second


def test_jitter_different_seeds_give_different_values() -> None:
    values = {jitter(1.0, rng=random.Random(seed)) for seed in range(20)}
    assert len(values) > 1


def test_jitter_uses_process_wide_source() -> None:
    set_random_source(random.Random(3))
    first = jitter(1.0)
    set_random_source(random.Random(3))
    assert jitter(1.0) == first


def test_get_random_source_is_lazy_singleton() -> None:
    reset_random_source()
    source = get_random_source()
    assert isinstance(source, random.Random)
    assert get_random_source() is source


def test_set_random_source() -> None:
    rng = random.Random(42)
    set_random_source(rng)
    assert get_random_source() is rng


def test_reset_random_source() -> None:
    rng = random.Random(42)
    set_random_source(rng)
    reset_random_source()
    assert get_random_source() is not rng


def test_strategy_jitter_with_explicit_rng() -> None:
    delays = list(ConstantBackoff(2.0).jitter(rng=random.Random(1)).take(50))
    assert len(delays) == 50
    assert all(0.0 <= delay <= 2.0 for delay in delays)
    assert len(set(delays)) > 1


def test_strategy_jitter_is_reproducible() -> None:
    first = list(ConstantBackoff(2.0).jitter(rng=random.Random(5)).take(5))
    second = list(ConstantBackoff(2.0).jitter(rng=random.Random(5)).take(5))
    assert first == second


def test_strategy_jitter_resolves_source_at_call_time() -> None:
    backoff = ConstantBackoff(1.0).jitter()
    set_random_source(random.Random(9))
    expected = random.Random(9).uniform(0.0, 1.0)
    assert backoff.next_delay() == expected
