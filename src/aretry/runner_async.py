r"""Entry point to retry an asynchronous action.

This module provides ``retry_async``, the functional interface to
``AsyncRetryExecutor``.
"""

from __future__ import annotations

__all__ = ["retry_async"]

from typing import TYPE_CHECKING, TypeVar

from aretry.engine.config import CallbackConfig
from aretry.engine.executor_async import AsyncRetryExecutor

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Iterable

    from aretry.backoff.base import BaseBackoffStrategy
    from aretry.callbacks import AttemptInfo, FailureInfo, RetryInfo, SuccessInfo
    from aretry.engine.condition import BaseRetryCondition

T = TypeVar("T")


async def retry_async(
    strategy: BaseBackoffStrategy | Iterable[float],
    action: Callable[[], Awaitable[T]],
    condition: BaseRetryCondition | Callable[[Exception], bool] | None = None,
    *,
    timer: Callable[[float], Awaitable[object]] | None = None,
    on_attempt: Callable[[AttemptInfo], None] | None = None,
    on_retry: Callable[[RetryInfo], None] | None = None,
    on_success: Callable[[SuccessInfo], None] | None = None,
    on_failure: Callable[[FailureInfo], None] | None = None,
) -> T:
    """Run an async action, retrying it according to a backoff
    strategy.

    The action is attempted immediately. Each time it raises, the
    condition decides whether the error is retryable, then the strategy
    provides the delay to wait before the next attempt. The run stops
    at the first success, when the condition rejects an error, or when
    the strategy is exhausted.

    Args:
        strategy: The backoff strategy, or an iterable of delays in
            seconds. It is consumed by the run.
        action: Zero-argument function returning an awaitable, called
            once per attempt.
        condition: Optional retry condition or predicate function of
            the error. Defaults to retrying on any error.
        timer: Optional coroutine function suspending for a number of
            seconds. Defaults to ``asyncio.sleep``.
        on_attempt: Optional callback called before each attempt.
        on_retry: Optional callback called before each wait.
        on_success: Optional callback called when an attempt succeeds.
        on_failure: Optional callback called when the run fails.

    Returns:
        The value of the first successful attempt.

    Raises:
        Exception: The exception raised by the last attempt, unchanged.
        TimerError: If the timer fails while waiting between attempts.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry import retry_async
        >>> from aretry.backoff import ExponentialBackoff
        >>> async def action() -> int:
        ...     return 1
        ...
        >>> strategy = ExponentialBackoff.from_millis(10).jitter().take(3)
        >>> asyncio.run(retry_async(strategy, action))
        1

        ```
    """
    executor = AsyncRetryExecutor(
        strategy,
        condition,
        callback_config=CallbackConfig(
            on_attempt=on_attempt,
            on_retry=on_retry,
            on_success=on_success,
            on_failure=on_failure,
        ),
        timer=timer,
    )
    return await executor.execute(action)
