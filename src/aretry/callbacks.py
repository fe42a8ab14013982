r"""Callback types and data structures for observability.

The retry engine does not log metrics or emit telemetry on its own. It
exposes four lifecycle hooks instead, so callers can plug in logging,
metrics or alerting:

- on_attempt: Called before each attempt of the action
- on_retry: Called before each wait between two attempts
- on_success: Called when an attempt succeeds
- on_failure: Called when the run ends in failure

Example:
    ```pycon
    >>> import asyncio
    >>> from aretry import retry_async
    >>> from aretry.backoff import ConstantBackoff
    >>> from aretry.callbacks import RetryInfo
    >>> def log_retry(retry_info: RetryInfo) -> None:
    ...     print(f"Retry after attempt {retry_info.attempt} in {retry_info.delay}s")
    ...
    >>> async def action() -> int:
    ...     return 42
    ...
    >>> asyncio.run(retry_async(ConstantBackoff(0.1).take(3), action, on_retry=log_retry))
    42

    ```
"""

from __future__ import annotations

__all__ = [
    "FAILURE_REASON_CONDITION",
    "FAILURE_REASON_EXHAUSTED",
    "AttemptInfo",
    "FailureInfo",
    "RetryInfo",
    "SuccessInfo",
    "invoke_on_attempt",
    "invoke_on_failure",
    "invoke_on_retry",
    "invoke_on_success",
]

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

# The retry condition rejected the error of the last attempt
FAILURE_REASON_CONDITION = "condition"
# The backoff strategy had no delay left
FAILURE_REASON_EXHAUSTED = "exhausted"


@dataclass
class AttemptInfo:
    """Information passed to on_attempt callback.

    Attributes:
        attempt: The current attempt number (1-indexed). First attempt is 1.
    """

    attempt: int


@dataclass
class RetryInfo:
    """Information passed to on_retry callback.

    Attributes:
        attempt: The number of the attempt that just failed (1-indexed).
        delay: The delay in seconds before the next attempt.
        error: The exception that triggered the retry.
    """

    attempt: int
    delay: float
    error: Exception


@dataclass
class SuccessInfo:
    """Information passed to on_success callback.

    Attributes:
        attempt: The attempt number that succeeded (1-indexed).
        result: The value returned by the action.
        total_time: Total time spent on all attempts including waits (seconds).
    """

    attempt: int
    result: Any
    total_time: float


@dataclass
class FailureInfo:
    """Information passed to on_failure callback.

    Attributes:
        attempt: The final attempt number (1-indexed).
        error: The exception raised by the final attempt.
        reason: Why the run stopped: ``"condition"`` if the retry
            condition rejected the error, ``"exhausted"`` if the backoff
            strategy had no delay left.
        total_time: Total time spent on all attempts including waits (seconds).
    """

    attempt: int
    error: Exception
    reason: str
    total_time: float


def invoke_on_attempt(
    on_attempt: Callable[[AttemptInfo], None] | None,
    *,
    attempt: int,
) -> None:
    """Invoke on_attempt callback if provided.

    Args:
        on_attempt: Optional callback to invoke before each attempt.
        attempt: The current attempt number (0-indexed internally). The
            callback receives this as a 1-indexed value (attempt + 1).
    """
    if on_attempt is not None:
        on_attempt(AttemptInfo(attempt=attempt + 1))


def invoke_on_retry(
    on_retry: Callable[[RetryInfo], None] | None,
    *,
    attempt: int,
    delay: float,
    error: Exception,
) -> None:
    """Invoke on_retry callback if provided.

    Args:
        on_retry: Optional callback to invoke before each wait.
        attempt: The failed attempt number (0-indexed internally).
        delay: The delay in seconds before the next attempt.
        error: The exception raised by the failed attempt.
    """
    if on_retry is not None:
        on_retry(RetryInfo(attempt=attempt + 1, delay=delay, error=error))


def invoke_on_success(
    on_success: Callable[[SuccessInfo], None] | None,
    *,
    attempt: int,
    result: Any,
    total_time: float,
) -> None:
    """Invoke on_success callback if provided.

    Args:
        on_success: Optional callback to invoke on success.
        attempt: The successful attempt number (0-indexed internally).
        result: The value returned by the action.
        total_time: Total time of the run in seconds.
    """
    if on_success is not None:
        on_success(SuccessInfo(attempt=attempt + 1, result=result, total_time=total_time))


def invoke_on_failure(
    on_failure: Callable[[FailureInfo], None] | None,
    *,
    attempt: int,
    error: Exception,
    reason: str,
    total_time: float,
) -> None:
    """Invoke on_failure callback if provided.

    Args:
        on_failure: Optional callback to invoke on final failure.
        attempt: The final attempt number (0-indexed internally).
        error: The exception raised by the final attempt.
        reason: Why the run stopped.
        total_time: Total time of the run in seconds.
    """
    if on_failure is not None:
        on_failure(
            FailureInfo(attempt=attempt + 1, error=error, reason=reason, total_time=total_time)
        )
