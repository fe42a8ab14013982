r"""Decorator adding automatic retries to a function.

A backoff strategy is single-pass, so a decorated function cannot share
one strategy between its calls. The decorator takes a strategy factory
instead and builds a fresh strategy for every call.
"""

from __future__ import annotations

__all__ = ["with_retry"]

import functools
import inspect
from typing import TYPE_CHECKING, Any

from aretry.backoff.base import BaseBackoffStrategy
from aretry.core.config import RetryConfig
from aretry.engine.condition import as_condition
from aretry.engine.executor import RetryExecutor
from aretry.engine.executor_async import AsyncRetryExecutor

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from aretry.engine.condition import BaseRetryCondition
    from aretry.engine.config import CallbackConfig


def with_retry(
    strategy_factory: RetryConfig | Callable[[], BaseBackoffStrategy | Iterable[float]],
    condition: BaseRetryCondition | Callable[[Exception], bool] | None = None,
    *,
    timer: Callable[[float], Any] | None = None,
    callback_config: CallbackConfig | None = None,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorate a sync or async function to retry it on failure.

    Each call of the decorated function is an independent retry run
    with its own strategy. Coroutine functions are retried with
    ``AsyncRetryExecutor``, other functions with ``RetryExecutor``.

    Args:
        strategy_factory: A ``RetryConfig``, or a zero-argument function
            returning a new backoff strategy (or iterable of delays)
            each time it is called.
        condition: Optional retry condition or predicate function of
            the error. Defaults to retrying on any error.
        timer: Optional timer; a coroutine function for async functions,
            a blocking function otherwise. Defaults to ``asyncio.sleep``
            or ``time.sleep``.
        callback_config: Optional lifecycle callbacks shared by all calls.

    Returns:
        The decorator.

    Raises:
        TypeError: If ``strategy_factory`` is a strategy instance or is
            not callable.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry import with_retry
        >>> from aretry.backoff import ExponentialBackoff
        >>> @with_retry(lambda: ExponentialBackoff.from_millis(10).take(3))
        ... async def fetch(key: str) -> str:
        ...     return key.upper()
        ...
        >>> asyncio.run(fetch("hello"))
        'HELLO'

        ```
    """
    factory = _as_factory(strategy_factory)
    retry_condition = as_condition(condition)

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                executor = AsyncRetryExecutor(
                    factory(), retry_condition, callback_config=callback_config, timer=timer
                )
                return await executor.execute(functools.partial(func, *args, **kwargs))

            return async_wrapper

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            executor = RetryExecutor(
                factory(), retry_condition, callback_config=callback_config, timer=timer
            )
            return executor.execute(functools.partial(func, *args, **kwargs))

        return wrapper

    return decorator


def _as_factory(
    strategy_factory: RetryConfig | Callable[[], BaseBackoffStrategy | Iterable[float]],
) -> Callable[[], BaseBackoffStrategy | Iterable[float]]:
    if isinstance(strategy_factory, RetryConfig):
        return strategy_factory.build_strategy
    if isinstance(strategy_factory, BaseBackoffStrategy):
        msg = (
            "with_retry needs a strategy factory, not a strategy instance: strategies "
            "are single-pass. Use e.g. `lambda: ExponentialBackoff(...).take(3)`"
        )
        raise TypeError(msg)
    if not callable(strategy_factory):
        msg = (
            "strategy_factory must be a RetryConfig or a callable, "
            f"got {type(strategy_factory).__name__}"
        )
        raise TypeError(msg)
    return strategy_factory
