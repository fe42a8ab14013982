r"""Backoff strategies backed by an explicit sequence of delays."""

from __future__ import annotations

__all__ = ["IterableBackoff", "NoRetryBackoff", "as_strategy"]

from typing import TYPE_CHECKING

from aretry.backoff.base import BaseBackoffStrategy

if TYPE_CHECKING:
    from collections.abc import Iterable


class IterableBackoff(BaseBackoffStrategy):
    """Backoff strategy that yields the delays of an iterable.

    The iterable is consumed lazily, so it may be infinite (for
    example a generator).

    Args:
        delays: The delays in seconds.

    Example:
        ```pycon
        >>> from aretry.backoff import IterableBackoff
        >>> backoff = IterableBackoff([0.01, 0.02, 0.03])
        >>> list(backoff)
        [0.01, 0.02, 0.03]
        >>> backoff.next_delay() is None
        True

        ```
    """

    def __init__(self, delays: Iterable[float]) -> None:
        self._delays = iter(delays)

    def _next_delay(self) -> float | None:
        delay = next(self._delays, None)
        if delay is not None and delay < 0:
            msg = f"delays must be non-negative, got {delay}"
            raise ValueError(msg)
        return delay


class NoRetryBackoff(BaseBackoffStrategy):
    """Backoff strategy that never retries.

    The action is attempted exactly once.

    Example:
        ```pycon
        >>> from aretry.backoff import NoRetryBackoff
        >>> list(NoRetryBackoff())
        []

        ```
    """

    def _next_delay(self) -> None:
        return None

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"


def as_strategy(strategy: BaseBackoffStrategy | Iterable[float]) -> BaseBackoffStrategy:
    """Convert an iterable of delays to a backoff strategy.

    Args:
        strategy: A backoff strategy, returned unchanged, or an
            iterable of delays in seconds.

    Returns:
        The backoff strategy.

    Raises:
        TypeError: If ``strategy`` is not iterable.

    Example:
        ```pycon
        >>> from aretry.backoff import ConstantBackoff, IterableBackoff, as_strategy
        >>> strategy = ConstantBackoff(1.0)
        >>> as_strategy(strategy) is strategy
        True
        >>> isinstance(as_strategy([1.0, 2.0]), IterableBackoff)
        True

        ```
    """
    if isinstance(strategy, BaseBackoffStrategy):
        return strategy
    try:
        return IterableBackoff(strategy)
    except TypeError as exc:
        msg = (
            "strategy must be a BaseBackoffStrategy or an iterable of delays, "
            f"got {type(strategy).__name__}"
        )
        raise TypeError(msg) from exc
