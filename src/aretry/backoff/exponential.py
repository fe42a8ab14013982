r"""Exponential backoff strategy."""

from __future__ import annotations

__all__ = ["ExponentialBackoff"]

import logging
import math

from aretry.backoff.base import MAX_DELAY, BaseBackoffStrategy

logger: logging.Logger = logging.getLogger(__name__)


class ExponentialBackoff(BaseBackoffStrategy):
    """Exponential backoff strategy.

    Produces ``base_delay``, ``base_delay * factor``,
    ``base_delay * factor ** 2``, ... The sequence is infinite, so it is
    usually combined with ``take`` and/or ``limit_delay``.

    The current delay is multiplied by ``factor`` after every yield.
    When the product would exceed ``MAX_DELAY``, the strategy saturates:
    it yields ``MAX_DELAY`` for this and every following delay instead
    of overflowing.

    Args:
        base_delay: The first delay in seconds (default: 0.3).
        factor: The multiplicative growth factor (default: 2.0).
            Must be >= 1.

    Example:
        ```pycon
        >>> from aretry.backoff import ExponentialBackoff
        >>> backoff = ExponentialBackoff(base_delay=0.5)
        >>> backoff.next_delay()  # First retry
        0.5
        >>> backoff.next_delay()  # Second retry
        1.0
        >>> backoff.next_delay()  # Third retry
        2.0
        >>> list(ExponentialBackoff(base_delay=1.0, factor=10.0).take(3))
        [1.0, 10.0, 100.0]

        ```
    """

    def __init__(self, base_delay: float = 0.3, factor: float = 2.0) -> None:
        if base_delay < 0:
            msg = f"base_delay must be non-negative, got {base_delay}"
            raise ValueError(msg)
        if not math.isfinite(factor) or factor < 1:
            msg = f"factor must be a finite number >= 1, got {factor}"
            raise ValueError(msg)

        self.base_delay = base_delay
        self.factor = factor
        self._current = min(base_delay, MAX_DELAY)

    @classmethod
    def from_millis(cls, base_millis: float, factor: float = 2.0) -> ExponentialBackoff:
        """Create an exponential backoff from a base delay in
        milliseconds.

        Args:
            base_millis: The first delay in milliseconds.
            factor: The multiplicative growth factor (default: 2.0).

        Returns:
            The exponential backoff strategy.

        Example:
            ```pycon
            >>> from aretry.backoff import ExponentialBackoff
            >>> list(ExponentialBackoff.from_millis(10).take(3))
            [0.01, 0.02, 0.04]

            ```
        """
        return cls(base_delay=base_millis / 1000, factor=factor)

    @property
    def saturated(self) -> bool:
        """Indicate if the strategy reached ``MAX_DELAY``."""
        return self._current >= MAX_DELAY

    def _next_delay(self) -> float:
        delay = self._current
        if delay < MAX_DELAY:
            following = delay * self.factor
            if following >= MAX_DELAY:
                logger.debug(f"Exponential backoff saturated at {MAX_DELAY}s")
                following = MAX_DELAY
            self._current = following
        return delay

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(base_delay={self.base_delay}, "
            f"factor={self.factor})"
        )
