r"""Random jitter for backoff delays.

Jitter spreads the retries of independent clients over time, so they
do not all hit a recovering service at the same instant.

The policy implemented here is "full jitter": a delay ``d`` is replaced
by a delay drawn uniformly in ``[0, d]``.

The random source is process-wide state. It is created lazily from
system entropy on first use and can be replaced with a seeded
``random.Random`` to make delays reproducible, e.g. in tests.
"""

from __future__ import annotations

__all__ = ["get_random_source", "jitter", "reset_random_source", "set_random_source"]

import random
import threading

_random_source: random.Random | None = None
_lock = threading.Lock()


def get_random_source() -> random.Random:
    """Return the process-wide random source used for jitter.

    Returns:
        The random source, created on first use.
    """
    global _random_source  # noqa: PLW0603
    with _lock:
        if _random_source is None:
            _random_source = random.Random()  # noqa: S311
        return _random_source


def set_random_source(rng: random.Random) -> None:
    """Replace the process-wide random source used for jitter.

    Args:
        rng: The new random source.

    Example:
        ```pycon
        >>> import random
        >>> from aretry.backoff.jittering import get_random_source, set_random_source
        >>> rng = random.Random(42)
        >>> set_random_source(rng)
        >>> get_random_source() is rng
        True

        ```
    """
    global _random_source  # noqa: PLW0603
    with _lock:
        _random_source = rng


def reset_random_source() -> None:
    """Drop the process-wide random source.

    A new source seeded from system entropy is created on next use.
    """
    global _random_source  # noqa: PLW0603
    with _lock:
        _random_source = None


def jitter(delay: float, rng: random.Random | None = None) -> float:
    """Apply full jitter to a delay.

    Args:
        delay: The delay in seconds.
        rng: Optional random source. Defaults to the process-wide
            source.

    Returns:
        A delay drawn uniformly in ``[0, delay]``.

    Example:
        ```pycon
        >>> import random
        >>> from aretry.backoff import jitter
        >>> 0.0 <= jitter(2.0, rng=random.Random(0)) <= 2.0
        True
        >>> jitter(0.0)
        0.0

        ```
    """
    if rng is None:
        rng = get_random_source()
    return min(max(rng.uniform(0.0, delay), 0.0), delay)
