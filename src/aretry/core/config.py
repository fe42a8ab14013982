r"""Configuration dataclass and defaults for retry runs.

This module provides configuration constants and a dataclass-based
configuration object that builds the usual backoff strategy chain
(exponential backoff, optional jitter, delay cap, retry cap and time
budget).
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_BASE_DELAY",
    "DEFAULT_FACTOR",
    "DEFAULT_MAX_RETRIES",
    "RetryConfig",
]

from dataclasses import asdict, dataclass, replace
from typing import TYPE_CHECKING, Any

from aretry.backoff.exponential import ExponentialBackoff
from aretry.core.validation import validate_backoff_params, validate_retry_params

if TYPE_CHECKING:
    from aretry.backoff.base import BaseBackoffStrategy

# Default maximum number of retries
# Total attempts = max_retries + 1 (initial attempt)
DEFAULT_MAX_RETRIES = 3

# Default first delay of the exponential backoff, in seconds
# With factor 2.0: 1st retry waits 0.3s, 2nd waits 0.6s, 3rd waits 1.2s
DEFAULT_BASE_DELAY = 0.3

# Default growth factor of the exponential backoff
DEFAULT_FACTOR = 2.0


@dataclass
class RetryConfig:
    """Configuration for retry behavior.

    A config is immutable in spirit and reusable: every call to
    ``build_strategy`` returns a fresh, unconsumed strategy, so one
    config can drive many independent runs.

    Args:
        max_retries: Maximum number of retries. Must be >= 0.
        base_delay: First delay of the exponential backoff in seconds.
        factor: Growth factor of the exponential backoff. Must be >= 1.
        max_delay: Optional cap in seconds applied to every delay.
        jitter: Whether to apply full jitter to the delays. Jitter is
            applied before the delay cap.
        max_total_time: Optional time budget in seconds; once elapsed,
            no retry is started.

    Example:
        ```pycon
        >>> from aretry.core import RetryConfig
        >>> config = RetryConfig(max_retries=4, base_delay=1.0, max_delay=5.0)
        >>> list(config.build_strategy())
        [1.0, 2.0, 4.0, 5.0]
        >>> merged = config.merge(max_retries=2)  # Override specific parameters
        >>> list(merged.build_strategy())
        [1.0, 2.0]
        >>> config.max_retries  # Original unchanged
        4

        ```
    """

    max_retries: int = DEFAULT_MAX_RETRIES
    base_delay: float = DEFAULT_BASE_DELAY
    factor: float = DEFAULT_FACTOR
    max_delay: float | None = None
    jitter: bool = False
    max_total_time: float | None = None

    def __post_init__(self) -> None:
        """Validate configuration parameters after initialization.

        Raises:
            ValueError: If any parameter fails validation.
        """
        validate_retry_params(
            max_retries=self.max_retries,
            max_delay=self.max_delay,
            max_total_time=self.max_total_time,
        )
        validate_backoff_params(base_delay=self.base_delay, factor=self.factor)

    def merge(self, **overrides: Any) -> RetryConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new RetryConfig instance with overrides applied.
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary format.

        Returns:
            Dictionary with the retry configuration parameters.

        Example:
            ```pycon
            >>> from aretry.core import RetryConfig
            >>> RetryConfig(max_retries=5).to_dict()["max_retries"]
            5

            ```
        """
        return asdict(self)

    def build_strategy(self) -> BaseBackoffStrategy:
        """Build a fresh backoff strategy from this configuration.

        The chain is: exponential backoff, then jitter (if enabled),
        then the delay cap (if set), then the retry cap, then the time
        budget (if set).

        Returns:
            The backoff strategy.
        """
        strategy: BaseBackoffStrategy = ExponentialBackoff(
            base_delay=self.base_delay, factor=self.factor
        )
        if self.jitter:
            strategy = strategy.jitter()
        if self.max_delay is not None:
            strategy = strategy.limit_delay(self.max_delay)
        strategy = strategy.take(self.max_retries)
        if self.max_total_time is not None:
            strategy = strategy.deadline(self.max_total_time)
        return strategy
