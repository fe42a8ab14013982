r"""Unit tests for the with_retry decorator."""

from __future__ import annotations

from unittest.mock import AsyncMock, Mock, call

import pytest

from aretry import CallbackConfig, RetryConfig, with_retry
from aretry.backoff import ConstantBackoff, ExponentialBackoff


class TransientError(Exception):
    pass


def test_with_retry_sync_function() -> None:
    timer = Mock()
    calls = []

    @with_retry(lambda: ConstantBackoff(0.1).take(3), timer=timer)
    def divide(a: int, b: int) -> float:
        calls.append((a, b))
        if len(calls) < 2:
            raise TransientError
        return a / b

    assert divide(6, b=3) == 2.0
    assert calls == [(6, 3), (6, 3)]
    timer.assert_called_once_with(0.1)


def test_with_retry_preserves_metadata() -> None:
    @with_retry(lambda: ConstantBackoff(0.1))
    def fetch() -> None:
        """Fetch something."""

    assert fetch.__name__ == "fetch"
    assert fetch.__doc__ == "Fetch something."


def test_with_retry_fresh_strategy_per_call() -> None:
    timer = Mock()
    factory = Mock(side_effect=lambda: [0.5])
    func = Mock(side_effect=[TransientError(), "a", TransientError(), "b"])
    wrapped = with_retry(factory, timer=timer)(func)

    assert wrapped() == "a"
    assert wrapped() == "b"
    assert factory.call_count == 2
    assert timer.call_args_list == [call(0.5), call(0.5)]


def test_with_retry_exhausted() -> None:
    error = TransientError("last")
    wrapped = with_retry(lambda: [0.1], timer=Mock())(
        Mock(side_effect=[TransientError(), error], __name__="f")
    )

    with pytest.raises(TransientError) as exc_info:
        wrapped()
    assert exc_info.value is error


def test_with_retry_condition() -> None:
    func = Mock(side_effect=KeyError("k"))
    wrapped = with_retry(lambda: [0.1, 0.1], lambda error: False, timer=Mock())(func)

    with pytest.raises(KeyError):
        wrapped()
    func.assert_called_once()


def test_with_retry_config(mock_sleep: Mock) -> None:
    func = Mock(side_effect=TransientError())
    wrapped = with_retry(RetryConfig(max_retries=2, base_delay=1.0))(func)

    with pytest.raises(TransientError):
        wrapped()

    assert func.call_count == 3
    assert mock_sleep.call_args_list == [call(1.0), call(2.0)]


def test_with_retry_callback_config(mock_callback: Mock) -> None:
    wrapped = with_retry(
        lambda: [0.1], timer=Mock(), callback_config=CallbackConfig(on_retry=mock_callback)
    )(Mock(side_effect=[TransientError(), 1]))

    assert wrapped() == 1
    mock_callback.assert_called_once()


def test_with_retry_strategy_instance() -> None:
    with pytest.raises(TypeError, match=r"needs a strategy factory"):
        with_retry(ExponentialBackoff().take(3))


def test_with_retry_not_callable() -> None:
    with pytest.raises(TypeError, match=r"strategy_factory must be a RetryConfig or a callable"):
        with_retry(42)


@pytest.mark.asyncio
async def test_with_retry_async_function() -> None:
    timer = AsyncMock()
    calls = []

    @with_retry(lambda: ConstantBackoff(0.2).take(3), timer=timer)
    async def fetch(key: str) -> str:
        calls.append(key)
        if len(calls) < 3:
            raise TransientError
        return key.upper()

    assert await fetch("id") == "ID"
    assert calls == ["id", "id", "id"]
    assert timer.call_args_list == [call(0.2), call(0.2)]


@pytest.mark.asyncio
async def test_with_retry_async_default_timer(mock_asleep: Mock) -> None:
    @with_retry(lambda: [0.3])
    async def fetch() -> int:
        if not mock_asleep.called:
            raise TransientError
        return 5

    assert await fetch() == 5
    mock_asleep.assert_called_once_with(0.3)
