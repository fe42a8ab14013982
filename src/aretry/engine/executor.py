r"""Synchronous retry executor.

This module provides the RetryExecutor class, the blocking counterpart
of AsyncRetryExecutor. It blocks the calling thread between attempts,
so it is meant for code that does not run on an event loop.
"""

from __future__ import annotations

__all__ = ["RetryExecutor"]

import logging
import time
from typing import TYPE_CHECKING, TypeVar

from aretry.engine.executor_core import BaseRetryExecutor, RetryState
from aretry.exceptions import TimerError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from aretry.backoff.base import BaseBackoffStrategy
    from aretry.engine.condition import BaseRetryCondition
    from aretry.engine.config import CallbackConfig

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


class RetryExecutor(BaseRetryExecutor):
    """Executes a blocking action with automatic retry logic.

    Args:
        strategy: The backoff strategy, or an iterable of delays in
            seconds.
        condition: Optional retry condition or predicate function of
            the error. Defaults to retrying on any error.
        callback_config: Optional lifecycle callbacks.
        timer: Optional function blocking for a number of seconds.
            Defaults to ``time.sleep``.

    Example:
        ```pycon
        >>> from aretry.backoff import ConstantBackoff
        >>> from aretry.engine import RetryExecutor
        >>> executor = RetryExecutor(ConstantBackoff(0.01).take(2))
        >>> executor.execute(lambda: 42)
        42

        ```
    """

    def __init__(
        self,
        strategy: BaseBackoffStrategy | Iterable[float],
        condition: BaseRetryCondition | Callable[[Exception], bool] | None = None,
        callback_config: CallbackConfig | None = None,
        timer: Callable[[float], object] | None = None,
    ) -> None:
        super().__init__(strategy, condition, callback_config)
        self.timer = timer if timer is not None else time.sleep

    def execute(self, action: Callable[[], T]) -> T:
        """Run the action until it succeeds or may no longer be retried.

        Args:
            action: Zero-argument function called once per attempt.

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
                result = action()
            except Exception as exc:  # noqa: BLE001
                error = exc
            else:
                self._succeed(attempt, result, start_time)
                return result

            delay = self._next_delay(error, attempt, start_time)
            if delay is None:
                raise error

            try:
                self.timer(delay)
            except Exception as exc:
                self.state = RetryState.FAILED
                logger.debug(f"Timer failed while waiting {delay:.3f}s: {exc}")
                raise TimerError(delay=delay, cause=exc) from exc
            attempt += 1
