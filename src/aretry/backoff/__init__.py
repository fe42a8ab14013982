r"""Backoff strategies and combinators for retry delays.

This package provides lazy delay sequences (constant, exponential,
Fibonacci, iterable-backed) and the combinators that decorate them
(map, jitter, delay cap, retry cap, deadline).
"""

from __future__ import annotations

__all__ = [
    "MAX_DELAY",
    "BaseBackoffStrategy",
    "ConstantBackoff",
    "DeadlineBackoff",
    "ExponentialBackoff",
    "FibonacciBackoff",
    "IterableBackoff",
    "LimitedDelayBackoff",
    "LimitedRetriesBackoff",
    "MappedBackoff",
    "NoRetryBackoff",
    "as_strategy",
    "get_random_source",
    "jitter",
    "reset_random_source",
    "set_random_source",
]

from aretry.backoff.base import MAX_DELAY, BaseBackoffStrategy
from aretry.backoff.combinators import (
    DeadlineBackoff,
    LimitedDelayBackoff,
    LimitedRetriesBackoff,
    MappedBackoff,
)
from aretry.backoff.constant import ConstantBackoff
from aretry.backoff.exponential import ExponentialBackoff
from aretry.backoff.fibonacci import FibonacciBackoff
from aretry.backoff.iterable import IterableBackoff, NoRetryBackoff, as_strategy
from aretry.backoff.jittering import (
    get_random_source,
    jitter,
    reset_random_source,
    set_random_source,
)
