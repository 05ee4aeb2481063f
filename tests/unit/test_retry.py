"""Unit tests for retry_async."""

import pytest

from dossier.shared.utils.retry import retry_async


class Flaky:
    def __init__(self, failures: int, exc: type[Exception] = ConnectionError) -> None:
        self.failures = failures
        self.exc = exc
        self.calls = 0

    async def __call__(self) -> str:
        self.calls += 1
        if self.calls <= self.failures:
            raise self.exc("boom")
        return "ok"


@pytest.fixture
def delays() -> list[float]:
    return []


@pytest.fixture
def fake_sleep(delays: list[float]):
    async def sleep(seconds: float) -> None:
        delays.append(seconds)

    return sleep


async def test_succeeds_after_transient_failures(fake_sleep, delays) -> None:
    operation = Flaky(failures=2)
    result = await retry_async(
        operation,
        max_attempts=3,
        backoff_seconds=0.5,
        retry_on=(ConnectionError,),
        description="test",
        sleep=fake_sleep,
    )
    assert result == "ok"
    assert operation.calls == 3
    assert delays == [0.5, 1.0]


async def test_raises_last_error_when_attempts_exhausted(fake_sleep, delays) -> None:
    operation = Flaky(failures=5)
    with pytest.raises(ConnectionError):
        await retry_async(
            operation,
            max_attempts=3,
            backoff_seconds=1,
            retry_on=(ConnectionError,),
            description="test",
            sleep=fake_sleep,
        )
    assert operation.calls == 3
    assert delays == [1, 2]


async def test_non_retryable_errors_propagate_immediately(fake_sleep, delays) -> None:
    operation = Flaky(failures=1, exc=KeyError)
    with pytest.raises(KeyError):
        await retry_async(
            operation,
            max_attempts=3,
            backoff_seconds=1,
            retry_on=(ConnectionError,),
            description="test",
            sleep=fake_sleep,
        )
    assert operation.calls == 1
    assert delays == []


async def test_rejects_zero_attempts() -> None:
    with pytest.raises(ValueError):
        await retry_async(
            Flaky(0), max_attempts=0, backoff_seconds=0, retry_on=(), description="test"
        )
