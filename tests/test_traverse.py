from __future__ import annotations

import pytest

import when as W
from fakes import flush, later


@pytest.mark.asyncio
async def test_map_awaits_elements() -> None:
    assert await W.map([1, W.resolve(2), later(3)], lambda x: x * 10) == [10, 20, 30]


@pytest.mark.asyncio
async def test_map_func_may_return_promises_and_coroutines() -> None:
    assert await W.map([1, 2], lambda x: later(x + 1)) == [2, 3]
    assert await W.map([1, 2], lambda x: W.resolve(-x)) == [-1, -2]


@pytest.mark.asyncio
async def test_map_keeps_input_order() -> None:
    first, second = W.defer(), W.defer()
    p = W.map([first.promise, second.promise], str.upper)
    second.resolve("b")
    await flush()
    first.resolve("a")
    assert await p == ["A", "B"]


@pytest.mark.asyncio
async def test_map_runs_concurrently() -> None:
    started: list[int] = []
    gate = W.defer()

    def start(x: int):
        started.append(x)
        return gate.promise

    p = W.map([1, 2, 3], start)
    await flush()
    assert started == [1, 2, 3]
    gate.resolve("open")
    assert await p == ["open", "open", "open"]


@pytest.mark.asyncio
async def test_map_rejects_on_element_failure() -> None:
    mapped: list[int] = []
    with pytest.raises(W.RejectionError) as info:
        await W.map([W.reject("bad")], mapped.append)
    assert info.value.reason == "bad"
    assert mapped == []


@pytest.mark.asyncio
async def test_map_rejects_when_map_func_raises() -> None:
    with pytest.raises(ZeroDivisionError):
        await W.map([1, 0], lambda x: 1 / x)


@pytest.mark.asyncio
async def test_map_over_promise_for_collection() -> None:
    assert await W.map(W.resolve([1, 2]), lambda x: x + 1) == [2, 3]
