r"""Shared core logic for retry executors.

This module provides the retry state machine states and the logic
shared by the synchronous and asynchronous executors: ownership of the
backoff strategy and the retry condition, and the decision taken after
a failed attempt.

A run goes through the following states::

    ATTEMPTING --success--> SUCCEEDED
        |
      failure
        v
    EVALUATING --condition rejects--> FAILED
        |
      condition accepts
        v
    AWAITING_DELAY --strategy exhausted--> FAILED
        |
      delay produced
        v
    SLEEPING --timer fires--> ATTEMPTING
"""

from __future__ import annotations

__all__ = ["BaseRetryExecutor", "RetryState"]

import logging
from enum import Enum
from typing import TYPE_CHECKING

from aretry.backoff.iterable import as_strategy
from aretry.callbacks import FAILURE_REASON_CONDITION, FAILURE_REASON_EXHAUSTED
from aretry.engine.condition import as_condition
from aretry.engine.config import CallbackConfig
from aretry.engine.manager import CallbackManager

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from aretry.backoff.base import BaseBackoffStrategy
    from aretry.engine.condition import BaseRetryCondition

logger: logging.Logger = logging.getLogger(__name__)


class RetryState(Enum):
    """States of a retry run."""

    ATTEMPTING = "attempting"
    EVALUATING = "evaluating"
    AWAITING_DELAY = "awaiting_delay"
    SLEEPING = "sleeping"
    SUCCEEDED = "succeeded"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        """Indicate if no transition leaves this state."""
        return self in (RetryState.SUCCEEDED, RetryState.FAILED)


class BaseRetryExecutor:
    """Base class of the retry executors.

    An executor drives exactly one retry run: it exclusively owns the
    backoff strategy for the duration of the run, so it cannot be
    executed twice.

    Args:
        strategy: The backoff strategy, or an iterable of delays in
            seconds.
        condition: Optional retry condition or predicate function of
            the error. Defaults to retrying on any error.
        callback_config: Optional lifecycle callbacks.

    Attributes:
        strategy: The backoff strategy consumed by the run.
        condition: The retry condition.
        callbacks: Manager for invoking callbacks.
        state: The current state of the run, or ``None`` before it starts.
        attempts: The number of attempts started so far.
    """

    def __init__(
        self,
        strategy: BaseBackoffStrategy | Iterable[float],
        condition: BaseRetryCondition | Callable[[Exception], bool] | None = None,
        callback_config: CallbackConfig | None = None,
    ) -> None:
        self.strategy: BaseBackoffStrategy = as_strategy(strategy)
        self.condition: BaseRetryCondition = as_condition(condition)
        self.callbacks: CallbackManager = CallbackManager(
            callback_config if callback_config is not None else CallbackConfig()
        )
        self.state: RetryState | None = None
        self.attempts = 0

    def _begin(self) -> None:
        if self.state is not None:
            msg = (
                f"{self.__class__.__qualname__} drives a single run and was already "
                f"executed (state={self.state.value})"
            )
            raise RuntimeError(msg)

    def _start_attempt(self, attempt: int) -> None:
        self.state = RetryState.ATTEMPTING
        self.attempts = attempt + 1
        self.callbacks.on_attempt(attempt)

    def _succeed(self, attempt: int, result: object, start_time: float) -> None:
        self.state = RetryState.SUCCEEDED
        logger.debug(f"Attempt {attempt + 1} succeeded")
        self.callbacks.on_success(attempt, result, start_time)

    def _next_delay(self, error: Exception, attempt: int, start_time: float) -> float | None:
        """Decide what happens after a failed attempt.

        Args:
            error: The exception raised by the attempt.
            attempt: The failed attempt number (0-indexed).
            start_time: ``time.monotonic()`` value when the run started.

        Returns:
            The delay to wait before the next attempt, or ``None`` if
            the run failed and ``error`` must be raised.
        """
        self.state = RetryState.EVALUATING
        if not self.condition.should_retry(error):
            logger.debug(
                f"Attempt {attempt + 1} failed with {type(error).__name__}, "
                "retry condition rejected the error"
            )
            self._fail(error, attempt, FAILURE_REASON_CONDITION, start_time)
            return None

        self.state = RetryState.AWAITING_DELAY
        delay = self.strategy.next_delay()
        if delay is None:
            logger.debug(
                f"Attempt {attempt + 1} failed with {type(error).__name__}, "
                "backoff strategy is exhausted"
            )
            self._fail(error, attempt, FAILURE_REASON_EXHAUSTED, start_time)
            return None

        self.state = RetryState.SLEEPING
        logger.debug(
            f"Attempt {attempt + 1} failed with {type(error).__name__}, "
            f"waiting {delay:.3f}s before retry"
        )
        self.callbacks.on_retry(attempt, delay, error)
        return delay

    def _fail(self, error: Exception, attempt: int, reason: str, start_time: float) -> None:
        self.state = RetryState.FAILED
        self.callbacks.on_failure(attempt, error, reason, start_time)
