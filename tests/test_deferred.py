from __future__ import annotations

import dataclasses

import pytest

from when import Deferred, DeferredResolver, Promise, RejectionError, defer
from fakes import flush


@pytest.mark.asyncio
async def test_defer_returns_fresh_pairs() -> None:
    first, second = defer(), defer()
    assert isinstance(first, Deferred)
    assert isinstance(first.promise, Promise)
    assert first.promise is not second.promise

    first.resolve("a")
    await flush()
    assert second.promise.inspect() is None


@pytest.mark.asyncio
async def test_resolve_settles_once() -> None:
    d = defer()
    d.resolve(1)
    d.resolve(2)
    d.reject("ignored")
    assert await d.promise == 1


@pytest.mark.asyncio
async def test_reject() -> None:
    d = defer()
    d.reject("no")
    d.resolve("ignored")
    with pytest.raises(RejectionError) as info:
        await d.promise
    assert info.value.reason == "no"


@pytest.mark.asyncio
async def test_resolve_with_promise_adopts_it() -> None:
    d, source = defer(), defer()
    d.resolve(source.promise)
    source.resolve("adopted")
    assert await d.promise == "adopted"


@pytest.mark.asyncio
async def test_resolve_locks_while_adopting() -> None:
    d, source = defer(), defer()
    d.resolve(source.promise)
    d.resolve("too late")
    source.resolve("adopted")
    assert await d.promise == "adopted"


@pytest.mark.asyncio
async def test_notify_many_times() -> None:
    d = defer()
    seen: list[int] = []
    d.promise.then(None, None, seen.append)
    for step in (1, 2, 3):
        d.notify(step)
    await flush()
    assert seen == [1, 2, 3]


@pytest.mark.asyncio
async def test_pair_is_immutable() -> None:
    d = defer()
    with pytest.raises(dataclasses.FrozenInstanceError):
        d.promise = Promise.resolve(1)  # type: ignore[misc]


@pytest.mark.asyncio
async def test_resolver_view_settles_the_pair() -> None:
    d = defer()
    resolver = d.resolver
    assert isinstance(resolver, DeferredResolver)
    assert resolver == (d.resolve, d.reject, d.notify)

    seen: list[str] = []
    d.promise.then(None, None, seen.append)
    resolver.notify("working")
    await flush()
    resolver.resolve("done")
    resolver.reject("ignored")
    assert await d.promise == "done"
    assert seen == ["working"]
