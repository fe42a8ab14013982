r"""Retry engine implementing class-based composition pattern.

Public API:
    - BaseRetryCondition: Decides whether a failed attempt may be retried
    - AlwaysRetry, RetryIf, RetryOnException: Retry conditions
    - CallbackConfig: Configuration for callbacks
    - CallbackManager: Manager for callback invocations
    - RetryState: States of a retry run
    - RetryExecutor: Synchronous retry executor
    - AsyncRetryExecutor: Asynchronous retry executor
"""

from __future__ import annotations

__all__ = [
    "AlwaysRetry",
    "AsyncRetryExecutor",
    "BaseRetryCondition",
    "BaseRetryExecutor",
    "CallbackConfig",
    "CallbackManager",
    "RetryExecutor",
    "RetryIf",
    "RetryOnException",
    "RetryState",
    "as_condition",
]

from aretry.engine.condition import (
    AlwaysRetry,
    BaseRetryCondition,
    RetryIf,
    RetryOnException,
    as_condition,
)
from aretry.engine.config import CallbackConfig
from aretry.engine.executor import RetryExecutor
from aretry.engine.executor_async import AsyncRetryExecutor
from aretry.engine.executor_core import BaseRetryExecutor, RetryState
from aretry.engine.manager import CallbackManager
