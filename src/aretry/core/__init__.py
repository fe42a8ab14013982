r"""Core configuration and validation for retry runs."""

from __future__ import annotations

__all__ = [
    "DEFAULT_BASE_DELAY",
    "DEFAULT_FACTOR",
    "DEFAULT_MAX_RETRIES",
    "RetryConfig",
    "validate_backoff_params",
    "validate_retry_params",
]

from aretry.core.config import (
    DEFAULT_BASE_DELAY,
    DEFAULT_FACTOR,
    DEFAULT_MAX_RETRIES,
    RetryConfig,
)
from aretry.core.validation import validate_backoff_params, validate_retry_params
