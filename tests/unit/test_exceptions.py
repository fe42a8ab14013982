r"""Unit tests for the retry machinery exceptions."""

from __future__ import annotations

import pytest

from aretry import RetryError, TimerError


def test_timer_error_is_retry_error() -> None:
    assert issubclass(TimerError, RetryError)
    assert issubclass(RetryError, Exception)


def test_timer_error_attributes() -> None:
    cause = RuntimeError("event loop is closed")
    error = TimerError(delay=1.5, cause=cause)

    assert error.delay == 1.5
    assert error.cause is cause


def test_timer_error_message() -> None:
    error = TimerError(delay=0.25, cause=OSError("interrupted"))
    assert str(error) == "timer failed while waiting 0.25s before the next attempt: interrupted"


def test_timer_error_raise() -> None:
    with pytest.raises(RetryError, match=r"timer failed"):
        raise TimerError(delay=0.1, cause=RuntimeError())
