r"""Retry conditions deciding whether a failed attempt may be retried.

A condition is evaluated exactly once per failed attempt, after the
action failed and before a delay is requested from the backoff
strategy. When it returns False, the run stops immediately with the
error of that attempt, without consuming a delay or waiting.
"""

from __future__ import annotations

__all__ = [
    "AlwaysRetry",
    "BaseRetryCondition",
    "RetryIf",
    "RetryOnException",
    "as_condition",
]

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class BaseRetryCondition(ABC):
    """Abstract base class for retry conditions."""

    @abstractmethod
    def should_retry(self, error: Exception) -> bool:
        """Decide whether the attempt that raised ``error`` may be
        retried.

        Args:
            error: The exception raised by the action.

        Returns:
            True to retry (if the backoff strategy allows it), False to
            stop with ``error``.
        """


class AlwaysRetry(BaseRetryCondition):
    """Retry on any error. This is the default condition.

    Example:
        ```pycon
        >>> from aretry.engine import AlwaysRetry
        >>> AlwaysRetry().should_retry(ValueError("boom"))
        True

        ```
    """

    def should_retry(self, error: Exception) -> bool:  # noqa: ARG002
        return True

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"


class RetryIf(BaseRetryCondition):
    """Retry when a user-supplied predicate accepts the error.

    Args:
        predicate: Function of the error returning True to retry.

    Example:
        ```pycon
        >>> from aretry.engine import RetryIf
        >>> condition = RetryIf(lambda error: "transient" in str(error))
        >>> condition.should_retry(RuntimeError("transient failure"))
        True
        >>> condition.should_retry(RuntimeError("fatal failure"))
        False

        ```
    """

    def __init__(self, predicate: Callable[[Exception], bool]) -> None:
        if not callable(predicate):
            msg = f"predicate must be callable, got {type(predicate).__name__}"
            raise TypeError(msg)
        self.predicate = predicate

    def should_retry(self, error: Exception) -> bool:
        return bool(self.predicate(error))


class RetryOnException(BaseRetryCondition):
    """Retry only when the error is an instance of the given types.

    Args:
        *exception_types: The retryable exception types.

    Example:
        ```pycon
        >>> from aretry.engine import RetryOnException
        >>> condition = RetryOnException(ConnectionError, TimeoutError)
        >>> condition.should_retry(ConnectionResetError())
        True
        >>> condition.should_retry(KeyError("missing"))
        False

        ```
    """

    def __init__(self, *exception_types: type[Exception]) -> None:
        if not exception_types:
            msg = "at least one exception type is required"
            raise ValueError(msg)
        self.exception_types = exception_types

    def should_retry(self, error: Exception) -> bool:
        return isinstance(error, self.exception_types)

    def __repr__(self) -> str:
        names = ", ".join(exc_type.__name__ for exc_type in self.exception_types)
        return f"{self.__class__.__qualname__}({names})"


def as_condition(
    condition: BaseRetryCondition | Callable[[Exception], bool] | None,
) -> BaseRetryCondition:
    """Convert a condition-like object to a retry condition.

    Args:
        condition: ``None`` for the default (retry on any error), a
            predicate function of the error, or a retry condition
            (returned unchanged).

    Returns:
        The retry condition.

    Example:
        ```pycon
        >>> from aretry.engine import AlwaysRetry, RetryIf, as_condition
        >>> isinstance(as_condition(None), AlwaysRetry)
        True
        >>> isinstance(as_condition(lambda error: False), RetryIf)
        True

        ```
    """
    if condition is None:
        return AlwaysRetry()
    if isinstance(condition, BaseRetryCondition):
        return condition
    return RetryIf(condition)
