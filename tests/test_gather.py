from __future__ import annotations

import pytest
from kungfu import Error, Ok

import when as W
from fakes import boom, flush, later


class TestAll:
    @pytest.mark.asyncio
    async def test_mixed_values_and_promises(self) -> None:
        assert await W.all([1, W.resolve(2), later(3)]) == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_empty(self) -> None:
        assert await W.all([]) == []

    @pytest.mark.asyncio
    async def test_promise_for_collection(self) -> None:
        assert await W.all(W.resolve([1, W.resolve(2)])) == [1, 2]

    @pytest.mark.asyncio
    async def test_any_iterable(self) -> None:
        assert await W.all(x * 2 for x in range(3)) == [0, 2, 4]

    @pytest.mark.asyncio
    async def test_outer_rejection_propagates(self) -> None:
        with pytest.raises(W.RejectionError) as info:
            await W.all(W.reject("outer"))
        assert info.value.reason == "outer"

    @pytest.mark.asyncio
    async def test_keeps_input_order(self) -> None:
        first, second = W.defer(), W.defer()
        p = W.all([first.promise, second.promise])
        second.resolve("b")
        await flush()
        first.resolve("a")
        assert await p == ["a", "b"]

    @pytest.mark.asyncio
    async def test_first_rejection_wins(self) -> None:
        first, second = W.defer(), W.defer()
        p = W.all([first.promise, second.promise])
        second.reject("second")
        await flush()
        first.reject("first")
        await flush()
        assert p.inspect() == Error("second")

    @pytest.mark.asyncio
    async def test_rejects_before_pending_elements_settle(self) -> None:
        pending = W.defer()
        p = W.all([pending.promise, W.reject("early")])
        await flush()
        assert p.inspect() == Error("early")
        assert pending.promise.inspect() is None

    @pytest.mark.asyncio
    async def test_relays_progress(self) -> None:
        d = W.defer()
        seen: list[str] = []
        W.all([d.promise, 1]).then(None, None, seen.append)
        await flush()
        d.notify("halfway")
        await flush()
        assert seen == ["halfway"]


@pytest.mark.asyncio
async def test_join_spreads_arguments() -> None:
    assert await W.join(1, W.resolve(2), later(3)) == [1, 2, 3]
    assert await W.join() == []


class TestSettle:
    @pytest.mark.asyncio
    async def test_snapshots_every_element(self) -> None:
        exc = ValueError("v")
        outcomes = await W.settle([1, W.reject("x"), boom(exc)])
        assert outcomes == [Ok(1), Error("x"), Error(exc)]
        assert [W.state_of(o) for o in outcomes] == ["fulfilled", "rejected", "rejected"]

    @pytest.mark.asyncio
    async def test_waits_for_every_element(self) -> None:
        slow = W.defer()
        p = W.settle([W.reject("fast"), slow.promise])
        await flush()
        assert p.inspect() is None
        slow.resolve("slow")
        assert await p == [Error("fast"), Ok("slow")]

    @pytest.mark.asyncio
    async def test_empty(self) -> None:
        assert await W.settle([]) == []

    @pytest.mark.asyncio
    async def test_outer_rejection_propagates(self) -> None:
        with pytest.raises(W.RejectionError):
            await W.settle(W.reject("outer"))
