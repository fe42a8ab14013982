r"""Unit tests for FibonacciBackoff strategy."""

from __future__ import annotations

import itertools

import pytest

from aretry.backoff import MAX_DELAY, FibonacciBackoff


def test_fibonacci_backoff_basic() -> None:
    """Test basic Fibonacci backoff calculation."""
    backoff = FibonacciBackoff(base_delay=10.0)
    assert list(itertools.islice(backoff, 6)) == [10.0, 10.0, 20.0, 30.0, 50.0, 80.0]


def test_fibonacci_backoff_default_values() -> None:
    backoff = FibonacciBackoff()
    assert backoff.base_delay == 1.0
    assert list(itertools.islice(backoff, 7)) == [1.0, 1.0, 2.0, 3.0, 5.0, 8.0, 13.0]


def test_fibonacci_backoff_from_millis() -> None:
    assert FibonacciBackoff.from_millis(500).base_delay == 0.5


def test_fibonacci_backoff_saturates_at_max_delay() -> None:
    backoff = FibonacciBackoff(base_delay=MAX_DELAY)
    assert list(itertools.islice(backoff, 4)) == [MAX_DELAY] * 4


def test_fibonacci_backoff_never_exceeds_max_delay() -> None:
    delays = list(itertools.islice(FibonacciBackoff(base_delay=1.0), 2000))
    assert all(delay <= MAX_DELAY for delay in delays)
    assert delays[-1] == MAX_DELAY


def test_fibonacci_backoff_invalid_base_delay() -> None:
    """Test that negative base_delay raises ValueError."""
    with pytest.raises(ValueError, match=r"base_delay must be non-negative"):
        FibonacciBackoff(base_delay=-1.0)
