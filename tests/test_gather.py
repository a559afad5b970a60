import asyncio

import pytest

from stock_analyzer_api.services.utils import gather_settled, gather_strict


async def ok(value, delay=0.0):
    await asyncio.sleep(delay)
    return value


async def boom(message="boom"):
    raise RuntimeError(message)


async def test_gather_settled_substitutes_fallback_per_failure():
    results = await gather_settled(
        [ok("a", 0.01), boom(), ok("c")],
        fallback="fallback",
        label="test",
    )
    assert results == ["a", "fallback", "c"]


async def test_gather_settled_all_failing():
    results = await gather_settled([boom(), boom()], fallback=None, label="test")
    assert results == [None, None]


async def test_gather_settled_empty_batch():
    assert await gather_settled([], fallback=None, label="test") == []


async def test_gather_strict_returns_in_order():
    assert await gather_strict(ok(1, 0.01), ok(2)) == [1, 2]


async def test_gather_strict_propagates_first_failure():
    with pytest.raises(RuntimeError, match="bad"):
        await gather_strict(ok(1), boom("bad"))
