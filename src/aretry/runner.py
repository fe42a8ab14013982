r"""Entry point to retry a blocking action.

This module provides ``retry``, the functional interface to
``RetryExecutor``.
"""

from __future__ import annotations

__all__ = ["retry"]

from typing import TYPE_CHECKING, TypeVar

from aretry.engine.config import CallbackConfig
from aretry.engine.executor import RetryExecutor

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from aretry.backoff.base import BaseBackoffStrategy
    from aretry.callbacks import AttemptInfo, FailureInfo, RetryInfo, SuccessInfo
    from aretry.engine.condition import BaseRetryCondition

T = TypeVar("T")


def retry(
    strategy: BaseBackoffStrategy | Iterable[float],
    action: Callable[[], T],
    condition: BaseRetryCondition | Callable[[Exception], bool] | None = None,
    *,
    timer: Callable[[float], object] | None = None,
    on_attempt: Callable[[AttemptInfo], None] | None = None,
    on_retry: Callable[[RetryInfo], None] | None = None,
    on_success: Callable[[SuccessInfo], None] | None = None,
    on_failure: Callable[[FailureInfo], None] | None = None,
) -> T:
    """Run a blocking action, retrying it according to a backoff
    strategy.

    This is the blocking counterpart of ``retry_async``: the calling
    thread sleeps between attempts.

    Args:
        strategy: The backoff strategy, or an iterable of delays in
            seconds. It is consumed by the run.
        action: Zero-argument function called once per attempt.
        condition: Optional retry condition or predicate function of
            the error. Defaults to retrying on any error.
        timer: Optional function blocking for a number of seconds.
            Defaults to ``time.sleep``.
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
        >>> from aretry import retry
        >>> retry([0.01, 0.01], lambda: "done")
        'done'

        ```
    """
    executor = RetryExecutor(
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
    return executor.execute(action)
