"""Bounded retry with exponential backoff for outbound calls (blob store, email)."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def retry_async(
    operation: Callable[[], Awaitable[T]],
    *,
    max_attempts: int,
    backoff_seconds: float,
    retry_on: tuple[type[BaseException], ...],
    description: str,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> T:
    """Run operation, retrying on the given exception types.

    Waits backoff_seconds * 2**attempt between attempts. Exceptions outside
    retry_on propagate immediately; the last retryable exception propagates
    once max_attempts is exhausted.

    Args:
        operation: Zero-argument coroutine factory (called once per attempt).
        max_attempts: Total attempts (>= 1).
        backoff_seconds: Base delay for the exponential backoff.
        retry_on: Exception types that are worth another attempt.
        description: Short label used in log messages.
        sleep: Injected for tests.
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be >= 1")
    for attempt in range(max_attempts):
        try:
            return await operation()
        except retry_on as exc:
            if attempt == max_attempts - 1:
                logger.warning(
                    "%s failed after %d attempt(s): %s", description, max_attempts, exc
                )
                raise
            delay = backoff_seconds * (2**attempt)
            logger.info(
                "%s failed (attempt %d/%d), retrying in %.2fs: %s",
                description,
                attempt + 1,
                max_attempts,
                delay,
                exc,
            )
            await sleep(delay)
    raise RuntimeError(f"{description} exhausted retries")  # unreachable
