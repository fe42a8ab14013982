r"""Asynchronous retry executor.

This module provides the AsyncRetryExecutor class that drives repeated
attempts of an asynchronous action, suspending on an injectable timer
between attempts.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor"]

import asyncio
import logging
import time
from typing import TYPE_CHECKING, TypeVar

from aretry.engine.executor_core import BaseRetryExecutor, RetryState
from aretry.exceptions import TimerError

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Iterable

    from aretry.backoff.base import BaseBackoffStrategy
    from aretry.engine.condition import BaseRetryCondition
    from aretry.engine.config import CallbackConfig

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


class AsyncRetryExecutor(BaseRetryExecutor):
    """Executes an async action with automatic retry logic.

    The first attempt starts immediately. After each failed attempt the
    retry condition is consulted, then the backoff strategy; if both
    allow it, the executor suspends on the timer for the produced delay
    and starts the next attempt. Attempts never overlap.

    Cancelling the task running ``execute`` cancels whichever operation
    is outstanding (the action or the timer) and produces no outcome.

    Args:
        strategy: The backoff strategy, or an iterable of delays in
            seconds.
        condition: Optional retry condition or predicate function of
            the error. Defaults to retrying on any error.
        callback_config: Optional lifecycle callbacks.
        timer: Optional coroutine function suspending for a number of
            seconds. Defaults to ``asyncio.sleep``.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry.backoff import ConstantBackoff
        >>> from aretry.engine import AsyncRetryExecutor
        >>> calls = []
        >>> async def action() -> str:
        ...     calls.append(1)
        ...     if len(calls) < 3:
        ...         raise ConnectionError("unavailable")
        ...     return "ok"
        ...
        >>> executor = AsyncRetryExecutor(ConstantBackoff(0.01).take(5))
        >>> asyncio.run(executor.execute(action))
        'ok'
        >>> executor.attempts
        3

        ```
    """

    def __init__(
        self,
        strategy: BaseBackoffStrategy | Iterable[float],
        condition: BaseRetryCondition | Callable[[Exception], bool] | None = None,
        callback_config: CallbackConfig | None = None,
        timer: Callable[[float], Awaitable[object]] | None = None,
    ) -> None:
        super().__init__(strategy, condition, callback_config)
        self.timer = timer if timer is not None else asyncio.sleep

    async def execute(self, action: Callable[[], Awaitable[T]]) -> T:
        """Run the action until it succeeds or may no longer be retried.

        Args:
            action: Zero-argument function returning an awaitable. It is
                called once per attempt.

        Returns:
            The value of the first successful attempt.

        Raises:
            Exception: The exception raised by the last attempt, unchanged,
                when the retry condition rejects it or the backoff
                strategy is exhausted.
            TimerError: If the timer fails while waiting between two
                attempts.
            RuntimeError: If the executor was already executed.
        """
        self._begin()
        start_time = time.monotonic()
        attempt = 0
        while True:
            self._start_attempt(attempt)
            try:
                result = await action()
            except Exception as exc:  # noqa: BLE001
                error = exc
            else:
                self._succeed(attempt, result, start_time)
                return result

            delay = self._next_delay(error, attempt, start_time)
            if delay is None:
                raise error

            try:
                await self.timer(delay)
            except Exception as exc:
                self.state = RetryState.FAILED
                logger.debug(f"Timer failed while waiting {delay:.3f}s: {exc}")
                raise TimerError(delay=delay, cause=exc) from exc
            attempt += 1
