"""
Lowering promises back to values and Results.

Functions for waiting on a promise and getting its outcome as a kungfu
Result or a plain value.
"""

from __future__ import annotations

import asyncio
import typing

from kungfu import Error, LazyCoroResult, Ok

from .._helpers import is_promise_like
from .._types import MaybePromise, Outcome
from ..promise import Promise


async def to_result[T](promise: MaybePromise[T]) -> Outcome[T]:
    """
    Wait for promise to settle and return Ok(value) or Error(reason).

    Never raises for a rejection. Works with any thenable; other values go
    through Promise.resolve first.

    Example:
        import when as W
        from when import lifting as L

        match await L.down.to_result(W.any(mirrors)):
            case Ok(body): ...
            case Error(reasons): ...
    """
    source = promise if is_promise_like(promise) else Promise.resolve(promise)
    settled: asyncio.Future[Outcome[T]] = asyncio.get_running_loop().create_future()

    def store(outcome: Outcome[T]) -> None:
        if not settled.done():
            settled.set_result(outcome)

    typing.cast(typing.Any, source).then(
        lambda value: store(Ok(value)),
        lambda reason: store(Error(reason)),
    )
    return await settled


async def unsafe[T](promise: MaybePromise[T]) -> T:
    """
    Wait and unwrap, raises UnwrapError on rejection.

    NOTE: Use `await promise` to get the rejection reason itself raised.
    """
    result = await to_result(promise)
    return result.unwrap()


async def or_else[T](promise: MaybePromise[T], default: T) -> T:
    """Wait and return the value, or default if the promise rejected."""
    result = await to_result(promise)
    match result:
        case Ok(v):
            return v
        case Error(_):
            return default


def to_lazy[T](promise: MaybePromise[T]) -> LazyCoroResult[T, typing.Any]:
    """
    View a promise as a kungfu LazyCoroResult.

    The promise is already running; the LazyCoroResult only defers waiting
    for it, so every await observes the same outcome.
    """
    return LazyCoroResult(lambda: to_result(promise))


__all__ = (
    "or_else",
    "to_lazy",
    "to_result",
    "unsafe",
)
