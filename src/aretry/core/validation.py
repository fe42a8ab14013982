r"""Parameter validation utilities for retry configuration.

This module provides validation functions for retry parameters to ensure
they meet the required constraints before being used to build a backoff
strategy.
"""

from __future__ import annotations

__all__ = ["validate_backoff_params", "validate_retry_params"]

import math


def validate_retry_params(
    max_retries: int,
    max_delay: float | None = None,
    max_total_time: float | None = None,
) -> None:
    """Validate retry parameters.

    Args:
        max_retries: Maximum number of retries. Must be >= 0. A value
            of 0 means no retries (only the initial attempt).
        max_delay: Maximum delay cap in seconds. Must be > 0 if provided.
        max_total_time: Maximum time budget in seconds after which no
            retry is started. Must be > 0 if provided.

    Raises:
        ValueError: If max_retries is negative, or if max_delay or
            max_total_time are non-positive.

    Example:
        ```pycon
        >>> from aretry.core import validate_retry_params
        >>> validate_retry_params(max_retries=3)
        >>> validate_retry_params(max_retries=3, max_delay=5.0)
        >>> validate_retry_params(max_retries=-1)  # doctest: +SKIP

        ```
    """
    if max_retries < 0:
        msg = f"max_retries must be >= 0, got {max_retries}"
        raise ValueError(msg)
    if max_delay is not None and max_delay <= 0:
        msg = f"max_delay must be > 0, got {max_delay}"
        raise ValueError(msg)
    if max_total_time is not None and max_total_time <= 0:
        msg = f"max_total_time must be > 0, got {max_total_time}"
        raise ValueError(msg)


def validate_backoff_params(base_delay: float, factor: float) -> None:
    """Validate exponential backoff parameters.

    Args:
        base_delay: The first delay in seconds. Must be >= 0.
        factor: The multiplicative growth factor. Must be a finite
            number >= 1.

    Raises:
        ValueError: If a parameter is out of range.

    Example:
        ```pycon
        >>> from aretry.core import validate_backoff_params
        >>> validate_backoff_params(base_delay=0.3, factor=2.0)

        ```
    """
    if base_delay < 0:
        msg = f"base_delay must be >= 0, got {base_delay}"
        raise ValueError(msg)
    if not math.isfinite(factor) or factor < 1:
        msg = f"factor must be a finite number >= 1, got {factor}"
        raise ValueError(msg)
