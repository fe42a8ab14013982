r"""aretry - Composable retry strategies for asynchronous operations.

This package retries a fallible action according to a pluggable delay
strategy. Strategies are lazy sequences of delays built from a base
generator (constant, exponential, Fibonacci) decorated with
combinators (jitter, delay cap, retry cap, deadline). The execution
engine alternates attempts and waits until the action succeeds, the
retry condition rejects an error, or the strategy is exhausted.

Key Features:
    - Lazy, chainable backoff strategies with overflow-safe growth
    - Full jitter with an injectable random source
    - Custom retry conditions (predicate, exception types)
    - Injectable timer, async and blocking executors
    - Callback hooks for logging, metrics and alerting
    - Original action errors are re-raised unchanged

Example:
    ```pycon
    >>> import asyncio
    >>> from aretry import retry_async
    >>> from aretry.backoff import ExponentialBackoff
    >>> async def action() -> int:
    ...     return 42
    ...
    >>> strategy = ExponentialBackoff.from_millis(10).jitter().take(3)  # limit to 3 retries
    >>> asyncio.run(retry_async(strategy, action))
    42

    ```
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_BASE_DELAY",
    "DEFAULT_FACTOR",
    "DEFAULT_MAX_RETRIES",
    "AlwaysRetry",
    "AsyncRetryExecutor",
    "AttemptInfo",
    "BaseRetryCondition",
    "CallbackConfig",
    "FailureInfo",
    "RetryConfig",
    "RetryError",
    "RetryExecutor",
    "RetryIf",
    "RetryInfo",
    "RetryOnException",
    "RetryState",
    "SuccessInfo",
    "TimerError",
    "__version__",
    "retry",
    "retry_async",
    "with_retry",
]

from importlib.metadata import PackageNotFoundError, version

from aretry.callbacks import AttemptInfo, FailureInfo, RetryInfo, SuccessInfo
from aretry.core.config import (
    DEFAULT_BASE_DELAY,
    DEFAULT_FACTOR,
    DEFAULT_MAX_RETRIES,
    RetryConfig,
)
from aretry.decorators import with_retry
from aretry.engine import (
    AlwaysRetry,
    AsyncRetryExecutor,
    BaseRetryCondition,
    CallbackConfig,
    RetryExecutor,
    RetryIf,
    RetryOnException,
    RetryState,
)
from aretry.exceptions import RetryError, TimerError
from aretry.runner import retry
from aretry.runner_async import retry_async

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
