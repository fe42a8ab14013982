r"""Constant backoff strategy."""

from __future__ import annotations

__all__ = ["ConstantBackoff"]

from aretry.backoff.base import BaseBackoffStrategy


class ConstantBackoff(BaseBackoffStrategy):
    """Constant/fixed interval backoff strategy.

    Returns the same delay for every retry, forever. Combine it with
    ``take`` to bound the number of retries.

    Args:
        delay: The fixed delay in seconds to use for all retries
            (default: 1.0).

    Example:
        ```pycon
        >>> from aretry.backoff import ConstantBackoff
        >>> backoff = ConstantBackoff(delay=2.5)
        >>> backoff.next_delay()
        2.5
        >>> backoff.next_delay()
        2.5
        >>> list(ConstantBackoff(delay=0.1).take(3))
        [0.1, 0.1, 0.1]

        ```
    """

    def __init__(self, delay: float = 1.0) -> None:
        if delay < 0:
            msg = f"delay must be non-negative, got {delay}"
            raise ValueError(msg)

        self.delay = delay

    @classmethod
    def from_millis(cls, millis: float) -> ConstantBackoff:
        """Create a constant backoff from a delay in milliseconds.

        Args:
            millis: The fixed delay in milliseconds.

        Returns:
            The constant backoff strategy.

        Example:
            ```pycon
            >>> from aretry.backoff import ConstantBackoff
            >>> ConstantBackoff.from_millis(250).delay
            0.25

            ```
        """
        return cls(delay=millis / 1000)

    def _next_delay(self) -> float:
        return self.delay

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(delay={self.delay})"
