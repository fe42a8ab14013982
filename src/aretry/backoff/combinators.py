r"""Backoff strategy decorators.

Each combinator wraps exactly one inner strategy, owns it, and only
sees the delays that inner strategy produces. Combinators can be
chained in any order; the order of construction is the order in which
the transformations are applied.
"""

from __future__ import annotations

__all__ = [
    "DeadlineBackoff",
    "LimitedDelayBackoff",
    "LimitedRetriesBackoff",
    "MappedBackoff",
]

import time
from typing import TYPE_CHECKING

from aretry.backoff.base import BaseBackoffStrategy

if TYPE_CHECKING:
    from collections.abc import Callable


class MappedBackoff(BaseBackoffStrategy):
    """Apply a function to every delay of the inner strategy.

    Exhaustion of the inner strategy propagates unchanged: ``func`` is
    only called for delays the inner strategy actually produces.

    Args:
        inner: The wrapped strategy.
        func: The transformation applied to each delay.

    Example:
        ```pycon
        >>> from aretry.backoff import ConstantBackoff, MappedBackoff
        >>> backoff = MappedBackoff(ConstantBackoff(1.0).take(2), lambda d: d / 2)
        >>> list(backoff)
        [0.5, 0.5]

        ```
    """

    def __init__(self, inner: BaseBackoffStrategy, func: Callable[[float], float]) -> None:
        self.inner = inner
        self.func = func

    def _next_delay(self) -> float | None:
        delay = self.inner.next_delay()
        if delay is None:
            return None
        return self.func(delay)


class LimitedDelayBackoff(BaseBackoffStrategy):
    """Clamp every delay of the inner strategy to a maximum.

    Only the magnitude of the delays changes, never their number.

    Args:
        inner: The wrapped strategy.
        maximum: The largest delay in seconds. Must be > 0.

    Example:
        ```pycon
        >>> from aretry.backoff import ConstantBackoff, LimitedDelayBackoff
        >>> list(LimitedDelayBackoff(ConstantBackoff(1.0).take(2), maximum=0.7))
        [0.7, 0.7]

        ```
    """

    def __init__(self, inner: BaseBackoffStrategy, maximum: float) -> None:
        if maximum <= 0:
            msg = f"maximum must be positive, got {maximum}"
            raise ValueError(msg)

        self.inner = inner
        self.maximum = maximum

    def _next_delay(self) -> float | None:
        delay = self.inner.next_delay()
        if delay is None:
            return None
        return min(delay, self.maximum)


class LimitedRetriesBackoff(BaseBackoffStrategy):
    """Yield at most ``max_retries`` delays of the inner strategy.

    Once the limit is reached the strategy is exhausted, whatever the
    state of the inner strategy. With ``max_retries=0`` no delay is ever
    produced, so the action is attempted exactly once.

    Args:
        inner: The wrapped strategy.
        max_retries: The maximum number of delays. Must be >= 0.

    Example:
        ```pycon
        >>> from aretry.backoff import ConstantBackoff, LimitedRetriesBackoff
        >>> list(LimitedRetriesBackoff(ConstantBackoff(1.0), max_retries=2))
        [1.0, 1.0]

        ```
    """

    def __init__(self, inner: BaseBackoffStrategy, max_retries: int) -> None:
        if max_retries < 0:
            msg = f"max_retries must be >= 0, got {max_retries}"
            raise ValueError(msg)

        self.inner = inner
        self.max_retries = max_retries
        self._count = 0

    @property
    def remaining(self) -> int:
        """The number of delays that may still be produced."""
        return self.max_retries - self._count

    def _next_delay(self) -> float | None:
        if self._count >= self.max_retries:
            return None
        self._count += 1
        return self.inner.next_delay()


class DeadlineBackoff(BaseBackoffStrategy):
    """Stop the inner strategy once a time budget has elapsed.

    The budget is measured from the creation of the wrapper. Delays
    are not shortened to fit in the budget: a delay requested just
    before the deadline is returned in full.

    Args:
        inner: The wrapped strategy.
        max_duration: The time budget in seconds. Must be > 0.
        clock: Optional monotonic clock returning seconds. Defaults to
            ``time.monotonic``.

    Example:
        ```pycon
        >>> from aretry.backoff import ConstantBackoff, DeadlineBackoff
        >>> now = [0.0]
        >>> backoff = DeadlineBackoff(ConstantBackoff(1.0), 5.0, clock=lambda: now[0])
        >>> backoff.next_delay()
        1.0
        >>> now[0] = 6.0
        >>> backoff.next_delay() is None
        True

        ```
    """

    def __init__(
        self,
        inner: BaseBackoffStrategy,
        max_duration: float,
        clock: Callable[[], float] | None = None,
    ) -> None:
        if max_duration <= 0:
            msg = f"max_duration must be positive, got {max_duration}"
            raise ValueError(msg)

        self.inner = inner
        self.max_duration = max_duration
        self._clock = clock if clock is not None else time.monotonic
        self._start = self._clock()

    def _next_delay(self) -> float | None:
        if self._clock() - self._start > self.max_duration:
            return None
        return self.inner.next_delay()
