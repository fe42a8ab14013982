r"""Abstract base class for backoff strategies."""

from __future__ import annotations

__all__ = ["MAX_DELAY", "BaseBackoffStrategy"]

from abc import ABC, abstractmethod
from datetime import timedelta
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import random
    from collections.abc import Callable

    from aretry.backoff.combinators import (
        DeadlineBackoff,
        LimitedDelayBackoff,
        LimitedRetriesBackoff,
        MappedBackoff,
    )

# Largest delay a strategy may produce, in seconds. Growing strategies
# saturate to this value instead of overflowing.
MAX_DELAY: float = timedelta.max.total_seconds()


class BaseBackoffStrategy(ABC):
    """Abstract base class for backoff strategies.

    A backoff strategy is a lazy, single-pass sequence of delays (in
    seconds) to wait between two attempts. Each call to ``next_delay``
    either returns the next delay and advances the internal state, or
    returns ``None`` to signal that the sequence is exhausted.
    Exhaustion is permanent: once ``None`` has been returned, every
    later call returns ``None`` as well.

    Strategies are also iterators, so they can be consumed with a
    ``for`` loop or ``itertools``. The combinator methods (``map``,
    ``jitter``, ``limit_delay``, ``take``, ``deadline``) wrap the
    current strategy and return a new one; the wrapped strategy must
    not be used directly afterwards.

    Example:
        ```pycon
        >>> from aretry.backoff import ExponentialBackoff
        >>> strategy = ExponentialBackoff(base_delay=0.1).limit_delay(0.3).take(4)
        >>> list(strategy)
        [0.1, 0.2, 0.3, 0.3]

        ```
    """

    _exhausted: bool = False

    @abstractmethod
    def _next_delay(self) -> float | None:
        """Produce the next delay of the sequence.

        Returns:
            The next delay in seconds, or ``None`` if the sequence is
            exhausted.
        """

    def next_delay(self) -> float | None:
        """Return the next delay, or ``None`` once the sequence is
        exhausted.

        Returns:
            The next delay in seconds, or ``None``.
        """
        if self._exhausted:
            return None
        delay = self._next_delay()
        if delay is None:
            self._exhausted = True
        return delay

    @property
    def exhausted(self) -> bool:
        """Indicate if the strategy has signalled exhaustion."""
        return self._exhausted

    def __iter__(self) -> BaseBackoffStrategy:
        return self

    def __next__(self) -> float:
        delay = self.next_delay()
        if delay is None:
            raise StopIteration
        return delay

    def map(self, func: Callable[[float], float]) -> MappedBackoff:
        """Apply ``func`` to every delay produced by this strategy.

        Args:
            func: The transformation applied to each delay.

        Returns:
            The wrapping strategy.
        """
        from aretry.backoff.combinators import MappedBackoff

        return MappedBackoff(self, func)

    def jitter(self, rng: random.Random | None = None) -> MappedBackoff:
        """Replace every delay ``d`` by a random delay in ``[0, d]``.

        Args:
            rng: Optional random source. When ``None``, the
                process-wide source returned by
                ``aretry.backoff.get_random_source`` is used.

        Returns:
            The wrapping strategy.
        """
        from functools import partial

        from aretry.backoff.jittering import jitter

        return self.map(partial(jitter, rng=rng))

    def limit_delay(self, maximum: float) -> LimitedDelayBackoff:
        """Clamp every delay produced by this strategy to ``maximum``.

        Args:
            maximum: The largest delay in seconds.

        Returns:
            The wrapping strategy.
        """
        from aretry.backoff.combinators import LimitedDelayBackoff

        return LimitedDelayBackoff(self, maximum)

    def take(self, max_retries: int) -> LimitedRetriesBackoff:
        """Yield at most ``max_retries`` delays from this strategy.

        Args:
            max_retries: The maximum number of delays, i.e. retries.

        Returns:
            The wrapping strategy.
        """
        from aretry.backoff.combinators import LimitedRetriesBackoff

        return LimitedRetriesBackoff(self, max_retries)

    def deadline(
        self, max_duration: float, clock: Callable[[], float] | None = None
    ) -> DeadlineBackoff:
        """Stop yielding delays once ``max_duration`` seconds have
        elapsed.

        Args:
            max_duration: The time budget in seconds, measured from the
                creation of the wrapper.
            clock: Optional monotonic clock. Defaults to
                ``time.monotonic``.

        Returns:
            The wrapping strategy.
        """
        from aretry.backoff.combinators import DeadlineBackoff

        return DeadlineBackoff(self, max_duration, clock=clock)
