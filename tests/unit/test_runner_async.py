r"""Unit tests for retry_async."""

from __future__ import annotations

from unittest.mock import AsyncMock, Mock, call

import pytest

from aretry import RetryOnException, TimerError, retry_async
from aretry.backoff import ConstantBackoff, ExponentialBackoff, FibonacciBackoff
from aretry.callbacks import AttemptInfo


class TransientError(Exception):
    pass


@pytest.mark.asyncio
async def test_retry_async_success() -> None:
    action = AsyncMock(return_value={"id": 1})
    assert await retry_async(ConstantBackoff(1.0).take(3), action, timer=AsyncMock()) == {"id": 1}
    action.assert_awaited_once()


@pytest.mark.asyncio
async def test_retry_async_fails_twice_then_succeeds() -> None:
    timer = AsyncMock()
    action = AsyncMock(side_effect=[TransientError(), TransientError(), "ok"])

    assert await retry_async(ConstantBackoff.from_millis(10).take(5), action, timer=timer) == "ok"
    assert action.await_count == 3
    assert timer.call_args_list == [call(0.01), call(0.01)]


@pytest.mark.asyncio
async def test_retry_async_exhausted() -> None:
    error = TransientError("final")
    action = AsyncMock(side_effect=[TransientError(), TransientError(), error])

    with pytest.raises(TransientError) as exc_info:
        await retry_async(ConstantBackoff.from_millis(1).take(2), action, timer=AsyncMock())

    assert exc_info.value is error
    assert action.await_count == 3


@pytest.mark.asyncio
async def test_retry_async_with_condition() -> None:
    action = AsyncMock(side_effect=[TransientError(), PermissionError("denied")])

    with pytest.raises(PermissionError, match=r"denied"):
        await retry_async(
            ConstantBackoff(0.1), action, RetryOnException(TransientError), timer=AsyncMock()
        )

    assert action.await_count == 2


@pytest.mark.asyncio
async def test_retry_async_iterable_of_delays() -> None:
    timer = AsyncMock()
    action = AsyncMock(side_effect=[TransientError(), TransientError(), 7])

    assert await retry_async([0.5, 1.0, 2.0], action, timer=timer) == 7
    assert timer.call_args_list == [call(0.5), call(1.0)]


@pytest.mark.asyncio
async def test_retry_async_exponential_with_cap(mock_asleep: Mock) -> None:
    action = AsyncMock(side_effect=[TransientError()] * 4 + ["ok"])
    strategy = ExponentialBackoff.from_millis(100).limit_delay(0.3).take(6)

    assert await retry_async(strategy, action) == "ok"
    assert mock_asleep.call_args_list == [call(0.1), call(0.2), call(0.3), call(0.3)]


@pytest.mark.asyncio
async def test_retry_async_fibonacci(mock_asleep: Mock) -> None:
    action = AsyncMock(side_effect=[TransientError()] * 4 + ["ok"])

    assert await retry_async(FibonacciBackoff(1.0).take(10), action) == "ok"
    assert mock_asleep.call_args_list == [call(1.0), call(1.0), call(2.0), call(3.0)]


@pytest.mark.asyncio
async def test_retry_async_jitter_bounds(mock_asleep: Mock, seeded_random_source: object) -> None:
    action = AsyncMock(side_effect=[TransientError()] * 3 + ["ok"])

    assert await retry_async(ConstantBackoff(2.0).jitter().take(5), action) == "ok"
    assert len(mock_asleep.call_args_list) == 3
    for args, _ in mock_asleep.call_args_list:
        assert 0.0 <= args[0] <= 2.0


@pytest.mark.asyncio
async def test_retry_async_timer_error() -> None:
    timer = AsyncMock(side_effect=RuntimeError("no loop"))

    with pytest.raises(TimerError, match=r"no loop"):
        await retry_async([0.1], AsyncMock(side_effect=TransientError()), timer=timer)


@pytest.mark.asyncio
async def test_retry_async_callbacks() -> None:
    on_attempt, on_retry, on_success, on_failure = Mock(), Mock(), Mock(), Mock()

    await retry_async(
        [0.1],
        AsyncMock(side_effect=[TransientError(), "ok"]),
        timer=AsyncMock(),
        on_attempt=on_attempt,
        on_retry=on_retry,
        on_success=on_success,
        on_failure=on_failure,
    )

    assert on_attempt.call_args_list == [call(AttemptInfo(attempt=1)), call(AttemptInfo(attempt=2))]
    on_retry.assert_called_once()
    on_success.assert_called_once()
    on_failure.assert_not_called()
