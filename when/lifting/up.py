"""
Lifting values into promises.

Plain values, failures, kungfu Results and LazyCoroResults become promises
that the combinators can compose.
"""

from __future__ import annotations

import asyncio
import typing

from kungfu import Error, LazyCoroResult, Ok, Result

from .._types import Notify, PromiseLib, Reject, Resolve, Thenable
from ..promise import Promise


def pure[T](value: T) -> Thenable[T]:
    """
    Promise fulfilled with value (thenables and awaitables are adopted).

    **Grammar:** `L.up.pure(value)` reads as "lift up pure value"
    """
    return Promise.resolve(value)


def fail(reason: typing.Any) -> Thenable[typing.Never]:
    """
    Promise rejected with reason. Dual of pure().

    **Grammar:** `L.up.fail(reason)` reads as "lift up fail with reason"
    """
    return Promise.reject(reason)


def from_resultM[T, E](result: Result[T, E], *, lib: PromiseLib) -> Thenable[T]:
    """Generic from_result."""
    match result:
        case Ok(value):
            return lib.resolve(value)
        case Error(reason):
            return lib.reject(reason)


def from_result[T, E](result: Result[T, E]) -> Thenable[T]:
    """
    Already computed Result as a promise: Ok fulfils, Error rejects.

    **When to use:** feeding Result-returning code into the combinators.

    Example:
        import when as W
        from when import lifting as L

        def validate(raw: dict) -> Result[User, str]: ...

        users = await W.all([L.up.from_result(validate(r)) for r in rows])
    """
    return from_resultM(result, lib=Promise)


def from_lazyM[T, E](lazy: LazyCoroResult[T, E], *, lib: PromiseLib) -> Thenable[T]:
    """Generic from_lazy."""

    def resolver(resolve: Resolve, reject: Reject, notify: Notify) -> None:
        def done(task: asyncio.Future[Result[T, E]]) -> None:
            if task.cancelled():
                reject(asyncio.CancelledError())
                return
            exc = task.exception()
            if exc is not None:
                reject(exc)
                return
            match task.result():
                case Ok(value):
                    resolve(value)
                case Error(reason):
                    reject(reason)

        asyncio.ensure_future(lazy()).add_done_callback(done)

    return lib(resolver)


def from_lazy[T, E](lazy: LazyCoroResult[T, E]) -> Thenable[T]:
    """
    Start a LazyCoroResult now and return a promise for its outcome.

    Ok fulfils, Error rejects with the error value, an exception raised by
    the coroutine rejects with that exception.

    NOTE: LazyCoroResult is lazy, promises are not. The computation is
          scheduled as a task as soon as this is called.
    """
    return from_lazyM(lazy, lib=Promise)


__all__ = (
    "fail",
    "from_lazy",
    "from_lazyM",
    "from_result",
    "from_resultM",
    "pure",
)
