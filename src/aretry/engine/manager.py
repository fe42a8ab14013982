r"""Callback manager for orchestrating retry lifecycle events.

This module provides the CallbackManager class that handles invocation
of user-defined callbacks at various points in the retry lifecycle.
"""

from __future__ import annotations

__all__ = ["CallbackManager"]

import time
from typing import TYPE_CHECKING, Any

from aretry.callbacks import (
    invoke_on_attempt,
    invoke_on_failure,
    invoke_on_retry,
    invoke_on_success,
)

if TYPE_CHECKING:
    from aretry.engine.config import CallbackConfig


class CallbackManager:
    """Manages callback invocations during the retry lifecycle.

    Exceptions raised by a callback are not caught: they propagate out
    of the retry run.

    Attributes:
        callbacks: Configuration containing callback functions for lifecycle events.
    """

    def __init__(self, callbacks: CallbackConfig) -> None:
        self.callbacks = callbacks

    def on_attempt(self, attempt: int) -> None:
        """Invoke on_attempt callback.

        Args:
            attempt: Current attempt number (0-indexed).
        """
        invoke_on_attempt(self.callbacks.on_attempt, attempt=attempt)

    def on_retry(self, attempt: int, delay: float, error: Exception) -> None:
        """Invoke on_retry callback.

        Args:
            attempt: Failed attempt number (0-indexed).
            delay: Delay in seconds before the next attempt.
            error: Exception that triggered the retry.
        """
        invoke_on_retry(self.callbacks.on_retry, attempt=attempt, delay=delay, error=error)

    def on_success(self, attempt: int, result: Any, start_time: float) -> None:
        """Invoke on_success callback.

        Args:
            attempt: Attempt number that succeeded (0-indexed).
            result: The value returned by the action.
            start_time: ``time.monotonic()`` value when the run started.
        """
        invoke_on_success(
            self.callbacks.on_success,
            attempt=attempt,
            result=result,
            total_time=time.monotonic() - start_time,
        )

    def on_failure(self, attempt: int, error: Exception, reason: str, start_time: float) -> None:
        """Invoke on_failure callback.

        Args:
            attempt: Final attempt number (0-indexed).
            error: The exception raised by the final attempt.
            reason: Why the run stopped.
            start_time: ``time.monotonic()`` value when the run started.
        """
        invoke_on_failure(
            self.callbacks.on_failure,
            attempt=attempt,
            error=error,
            reason=reason,
            total_time=time.monotonic() - start_time,
        )
