"""Concurrent aggregation helpers: fail-fast vs. settle-all with fallbacks."""
import asyncio
import logging
from collections.abc import Awaitable, Iterable
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
F = TypeVar("F")


async def gather_strict(*aws: Awaitable[T]) -> list[T]:
    """Run awaitables concurrently; the first failure propagates to the caller.

    Use for single-resource responses where any missing part fails the request.
    """
    return list(await asyncio.gather(*aws))


async def gather_settled(
    aws: Iterable[Awaitable[T]],
    *,
    fallback: F,
    label: str,
) -> list[T | F]:
    """Run awaitables concurrently and wait for all of them.

    Each awaitable that raises is logged and replaced by `fallback` in the
    result list, so one failing item never fails its siblings. Results keep
    the input order.

    Args:
        aws: Awaitables to run (e.g. one sentiment call per headline).
        fallback: Value substituted for each failed awaitable.
        label: Names the batch in log messages (e.g. "sentiment").
    """
    results = await asyncio.gather(*aws, return_exceptions=True)
    settled: list[T | F] = []
    for index, result in enumerate(results):
        if isinstance(result, Exception):
            logger.warning("%s item %d failed, using fallback: %s", label, index, result)
            settled.append(fallback)
        elif isinstance(result, BaseException):
            raise result
        else:
            settled.append(result)
    return settled
