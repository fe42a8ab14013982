r"""Exceptions raised by the retry machinery.

Errors raised by the retried action are never wrapped: the final
failure of a run re-raises the exception of the last attempt as is.
The exceptions defined here describe failures of the retry machinery
itself.
"""

from __future__ import annotations

__all__ = ["RetryError", "TimerError"]


class RetryError(Exception):
    """Base class of the errors raised by the retry machinery."""


class TimerError(RetryError):
    """Raised when the timer fails to suspend between two attempts.

    This is an execution environment problem, distinct from an error of
    the retried action, so it is never passed to the retry condition
    and never retried.

    Args:
        delay: The delay in seconds the timer was asked to wait.
        cause: The exception raised by the timer.

    Example:
        ```pycon
        >>> from aretry import TimerError
        >>> error = TimerError(delay=0.5, cause=RuntimeError("event loop is closed"))
        >>> error.delay
        0.5
        >>> str(error)
        'timer failed while waiting 0.5s before the next attempt: event loop is closed'

        ```
    """

    def __init__(self, delay: float, cause: BaseException) -> None:
        super().__init__(f"timer failed while waiting {delay}s before the next attempt: {cause}")
        self.delay = delay
        self.cause = cause
