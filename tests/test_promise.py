from __future__ import annotations

import asyncio

import pytest
from kungfu import Error, Ok

from when import Promise, RejectionError, defer
from fakes import ForeignThenable, boom, flush, later


class TestSettlement:
    @pytest.mark.asyncio
    async def test_resolver_fulfils(self) -> None:
        p = Promise(lambda resolve, reject, notify: resolve(42))
        assert await p == 42

    @pytest.mark.asyncio
    async def test_settles_once(self) -> None:
        def resolver(resolve, reject, notify):
            resolve(1)
            resolve(2)
            reject("late")

        assert await Promise(resolver) == 1

    @pytest.mark.asyncio
    async def test_reject_with_exception_raises_it(self) -> None:
        exc = ValueError("bad")
        with pytest.raises(ValueError) as info:
            await Promise.reject(exc)
        assert info.value is exc

    @pytest.mark.asyncio
    async def test_reject_with_plain_value_is_wrapped(self) -> None:
        with pytest.raises(RejectionError) as info:
            await Promise.reject("nope")
        assert info.value.reason == "nope"

    @pytest.mark.asyncio
    async def test_resolver_raising_rejects(self) -> None:
        def resolver(resolve, reject, notify):
            raise KeyError("k")

        with pytest.raises(KeyError):
            await Promise(resolver)

    @pytest.mark.asyncio
    async def test_inspect(self) -> None:
        d = defer()
        assert d.promise.inspect() is None
        d.resolve(1)
        assert d.promise.inspect() == Ok(1)
        assert Promise.reject("e").inspect() == Error("e")

    @pytest.mark.asyncio
    async def test_resolving_with_itself_is_a_type_error(self) -> None:
        d = defer()
        d.resolve(d.promise)
        with pytest.raises(TypeError):
            await d.promise

    @pytest.mark.asyncio
    async def test_repr(self) -> None:
        assert repr(Promise.resolve(1)) == "<Promise fulfilled: 1>"
        assert repr(Promise.reject("x")) == "<Promise rejected: 'x'>"
        assert repr(defer().promise) == "<Promise pending>"


def test_requires_running_loop() -> None:
    with pytest.raises(RuntimeError):
        Promise.resolve(1)


class TestThen:
    @pytest.mark.asyncio
    async def test_maps_value(self) -> None:
        assert await Promise.resolve(21).then(lambda x: x * 2) == 42

    @pytest.mark.asyncio
    async def test_callbacks_run_on_a_later_turn(self) -> None:
        seen: list[int] = []
        Promise.resolve(1).then(seen.append)
        assert seen == []
        await flush()
        assert seen == [1]

    @pytest.mark.asyncio
    async def test_missing_handler_passes_through(self) -> None:
        p = Promise.reject("x").then(lambda v: v)
        assert await p.catch(lambda reason: reason + "!") == "x!"

    @pytest.mark.asyncio
    async def test_handler_raising_rejects(self) -> None:
        def explode(_):
            raise ValueError("handler")

        with pytest.raises(ValueError, match="handler"):
            await Promise.resolve(1).then(explode)

    @pytest.mark.asyncio
    async def test_handler_result_is_adopted(self) -> None:
        p = Promise.resolve(1).then(lambda x: Promise.resolve(x + 1))
        assert await p == 2

    @pytest.mark.asyncio
    async def test_recovery_fulfils(self) -> None:
        assert await Promise.reject("x").then(None, lambda reason: "recovered") == "recovered"


class TestAdoption:
    @pytest.mark.asyncio
    async def test_resolve_returns_same_promise(self) -> None:
        p = Promise.resolve(1)
        assert Promise.resolve(p) is p

    @pytest.mark.asyncio
    async def test_adopts_coroutine(self) -> None:
        assert await Promise.resolve(later(5)) == 5

    @pytest.mark.asyncio
    async def test_adopts_failing_coroutine(self) -> None:
        with pytest.raises(ValueError):
            await Promise.resolve(boom(ValueError("coro")))

    @pytest.mark.asyncio
    async def test_adopts_asyncio_future(self) -> None:
        future = asyncio.get_running_loop().create_future()
        p = Promise.resolve(future)
        future.set_result("done")
        assert await p == "done"

    @pytest.mark.asyncio
    async def test_adopts_foreign_thenable(self) -> None:
        thenable = ForeignThenable()
        p = Promise.resolve(thenable)
        thenable.fulfil(3)
        assert await p == 3

    @pytest.mark.asyncio
    async def test_adopts_foreign_rejection(self) -> None:
        thenable = ForeignThenable()
        p = Promise.resolve(thenable)
        thenable.fail("foreign")
        with pytest.raises(RejectionError) as info:
            await p
        assert info.value.reason == "foreign"

    @pytest.mark.asyncio
    async def test_rejection_error_from_coroutine_is_unwrapped(self) -> None:
        async def awaits_rejected():
            return await Promise.reject("inner")

        p = Promise.resolve(awaits_rejected())
        await flush()
        assert p.inspect() == Error("inner")


class TestProgress:
    @pytest.mark.asyncio
    async def test_notify_reaches_observer(self) -> None:
        d = defer()
        seen: list[str] = []
        d.promise.then(None, None, seen.append)
        d.notify("half")
        await flush()
        assert seen == ["half"]

    @pytest.mark.asyncio
    async def test_progress_flows_through_chain(self) -> None:
        d = defer()
        seen: list[int] = []
        d.promise.then(lambda v: v).then(None, None, seen.append)
        d.notify(1)
        await flush()
        assert seen == [1]

    @pytest.mark.asyncio
    async def test_progress_handler_result_is_forwarded(self) -> None:
        d = defer()
        seen: list[int] = []
        d.promise.then(None, None, lambda update: update * 10).then(None, None, seen.append)
        d.notify(2)
        await flush()
        assert seen == [20]

    @pytest.mark.asyncio
    async def test_notify_after_settlement_is_ignored(self) -> None:
        d = defer()
        seen: list[str] = []
        d.promise.then(None, None, seen.append)
        d.resolve("done")
        d.notify("late")
        await flush()
        assert seen == []
