r"""Unit tests for retry conditions."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from aretry.engine import (
    AlwaysRetry,
    BaseRetryCondition,
    RetryIf,
    RetryOnException,
    as_condition,
)


def test_base_retry_condition_is_abstract() -> None:
    with pytest.raises(TypeError, match=r"Can't instantiate abstract class"):
        BaseRetryCondition()  # type: ignore[abstract]


@pytest.mark.parametrize("error", [ValueError("boom"), RuntimeError(), KeyError("key")])
def test_always_retry(error: Exception) -> None:
    assert AlwaysRetry().should_retry(error)


def test_always_retry_repr() -> None:
    assert repr(AlwaysRetry()) == "AlwaysRetry()"


def test_retry_if_calls_predicate_once() -> None:
    predicate = Mock(return_value=False)
    error = ValueError("boom")
    assert not RetryIf(predicate).should_retry(error)
    predicate.assert_called_once_with(error)


def test_retry_if_coerces_to_bool() -> None:
    condition = RetryIf(lambda error: error.args[0])
    assert condition.should_retry(ValueError(1)) is True
    assert condition.should_retry(ValueError(0)) is False


def test_retry_if_not_callable() -> None:
    with pytest.raises(TypeError, match=r"predicate must be callable"):
        RetryIf(42)  # type: ignore[arg-type]


def test_retry_on_exception() -> None:
    condition = RetryOnException(ConnectionError, TimeoutError)
    assert condition.should_retry(ConnectionResetError())
    assert condition.should_retry(TimeoutError())
    assert not condition.should_retry(ValueError())


def test_retry_on_exception_requires_types() -> None:
    with pytest.raises(ValueError, match=r"at least one exception type is required"):
        RetryOnException()


def test_retry_on_exception_repr() -> None:
    assert repr(RetryOnException(ValueError, KeyError)) == "RetryOnException(ValueError, KeyError)"


def test_as_condition_none() -> None:
    assert isinstance(as_condition(None), AlwaysRetry)


def test_as_condition_condition() -> None:
    condition = RetryOnException(ValueError)
    assert as_condition(condition) is condition


def test_as_condition_callable() -> None:
    predicate = Mock(return_value=True)
    condition = as_condition(predicate)
    assert isinstance(condition, RetryIf)
    assert condition.predicate is predicate
