r"""Fibonacci backoff strategy."""

from __future__ import annotations

__all__ = ["FibonacciBackoff"]

from aretry.backoff.base import MAX_DELAY, BaseBackoffStrategy


class FibonacciBackoff(BaseBackoffStrategy):
    """Fibonacci backoff strategy.

    Each delay is the sum of the two previous ones:
    ``base_delay * (1, 1, 2, 3, 5, 8, 13, ...)``.

    This strategy provides a middle ground between constant and
    exponential backoff, starting slow and ramping up gradually. Like
    ``ExponentialBackoff``, it saturates at ``MAX_DELAY``.

    Args:
        base_delay: The base delay in seconds (default: 1.0).

    Example:
        ```pycon
        >>> from aretry.backoff import FibonacciBackoff
        >>> list(FibonacciBackoff(base_delay=1.0).take(6))
        [1.0, 1.0, 2.0, 3.0, 5.0, 8.0]

        ```
    """

    def __init__(self, base_delay: float = 1.0) -> None:
        if base_delay < 0:
            msg = f"base_delay must be non-negative, got {base_delay}"
            raise ValueError(msg)

        self.base_delay = base_delay
        self._current = min(base_delay, MAX_DELAY)
        self._following = self._current

    @classmethod
    def from_millis(cls, base_millis: float) -> FibonacciBackoff:
        """Create a Fibonacci backoff from a base delay in milliseconds.

        Args:
            base_millis: The base delay in milliseconds.

        Returns:
            The Fibonacci backoff strategy.
        """
        return cls(base_delay=base_millis / 1000)

    def _next_delay(self) -> float:
        delay = self._current
        self._current, self._following = (
            self._following,
            min(self._current + self._following, MAX_DELAY),
        )
        return delay

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(base_delay={self.base_delay})"
