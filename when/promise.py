"""
Promise
=======

Default future primitive: a thenable on top of asyncio.Future.

asyncio owns settlement and schedules every callback on a later loop turn.
This class adds what the combinators need on top: construction from a
resolver, rejection with any reason (the settled state is a kungfu Result),
adoption of thenables and awaitables, and progress observers.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
import typing
from collections.abc import Callable, Generator

from kungfu import Error, LazyCoroResult, Ok

from ._errors import RejectionError
from ._helpers import is_promise_like
from ._types import Notify, Outcome, Reject, Resolve, Resolver

logger = logging.getLogger(__name__)

# kungfu Results have an incompatible `then`, so they are never adopted
_RESULT_HINT = (
    "Promise cannot be resolved with a kungfu {}; "
    "use lifting.up.from_result() or lifting.up.from_lazy()"
)


class Promise[T]:
    """
    Eventual value observable with then(on_fulfilled, on_rejected, on_progress).

    Settles once. `resolve`/`reject` handed to the resolver lock the promise on
    first use, later calls are no-ops; `notify` works until settlement.
    Promises are awaitable: `await p` returns the value or raises the reason
    (wrapped in RejectionError if it is not an exception).

    Example:
        p = Promise(lambda resolve, reject, notify: resolve(42))
        doubled = p.then(lambda x: x * 2)
        assert await doubled == 84
    """

    __slots__ = ("_loop", "_future", "_progress", "_locked")

    def __init__(
        self,
        resolver: Resolver,
        /,
        *,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        self._loop = loop if loop is not None else asyncio.get_running_loop()
        self._future: asyncio.Future[Outcome[T]] = self._loop.create_future()
        self._progress: list[Notify] = []
        self._locked = False
        try:
            resolver(self._resolve, self._reject, self._notify)
        except Exception as exc:
            self._reject(exc)

    # Constructors

    @classmethod
    def resolve(cls, value: typing.Any = None, /) -> Promise[typing.Any]:
        """Promise for value; thenables and awaitables are adopted, promises returned as-is."""
        if isinstance(value, cls):
            return value
        return cls(lambda resolve, _reject, _notify: resolve(value))

    @classmethod
    def reject(cls, reason: typing.Any, /) -> Promise[typing.Never]:
        """Promise already rejected with reason."""
        return cls(lambda _resolve, reject, _notify: reject(reason))

    # Observation

    def then(
        self,
        on_fulfilled: Callable[[T], typing.Any] | None = None,
        on_rejected: Callable[[typing.Any], typing.Any] | None = None,
        on_progress: Callable[[typing.Any], typing.Any] | None = None,
        /,
    ) -> Promise[typing.Any]:
        """
        Register observers and return a promise for the handler's result.

        A missing handler passes the outcome through. A handler that raises
        rejects the returned promise with the exception.
        """

        def resolver(resolve: Resolve, reject: Reject, notify: Notify) -> None:
            def on_settled(future: asyncio.Future[Outcome[T]]) -> None:
                match future.result():
                    case Ok(value):
                        handler, argument, passthrough = on_fulfilled, value, resolve
                    case Error(reason):
                        handler, argument, passthrough = on_rejected, reason, reject

                if handler is None:
                    passthrough(argument)
                    return
                try:
                    resolve(handler(argument))
                except Exception as exc:
                    logger.debug("then() handler %r raised %r, rejecting", handler, exc)
                    reject(exc)

            def on_update(update: typing.Any) -> None:
                if on_progress is None:
                    notify(update)
                    return
                try:
                    notify(on_progress(update))
                except Exception as exc:
                    notify(exc)

            self._future.add_done_callback(on_settled)
            if not self._future.done():
                self._progress.append(on_update)

        return type(self)(resolver, loop=self._loop)

    def catch(self, on_rejected: Callable[[typing.Any], typing.Any], /) -> Promise[typing.Any]:
        """Shorthand for then(None, on_rejected)."""
        return self.then(None, on_rejected)

    def inspect(self) -> Outcome[T] | None:
        """Settled outcome as Ok(value) / Error(reason), None while pending."""
        if not self._future.done():
            return None
        return self._future.result()

    def __await__(self) -> Generator[typing.Any, None, T]:
        outcome = yield from self._future.__await__()
        match outcome:
            case Ok(value):
                return value
            case Error(reason) if isinstance(reason, BaseException):
                raise reason
            case Error(reason):
                raise RejectionError(reason)

    def __repr__(self) -> str:
        match self.inspect():
            case Ok(value):
                return f"<Promise fulfilled: {value!r}>"
            case Error(reason):
                return f"<Promise rejected: {reason!r}>"
            case _:
                return "<Promise pending>"

    # Capabilities

    def _resolve(self, value: typing.Any = None) -> None:
        if self._locked:
            return
        self._locked = True
        self._adopt(value)

    def _reject(self, reason: typing.Any) -> None:
        if self._locked:
            return
        self._locked = True
        self._settle(Error(reason))

    def _notify(self, update: typing.Any = None) -> None:
        if self._future.done():
            return
        for observer in tuple(self._progress):
            self._loop.call_soon(observer, update)

    # Settlement

    def _adopt(self, value: typing.Any) -> None:
        if value is self:
            self._settle(Error(TypeError("Promise cannot be resolved with itself")))
        elif isinstance(value, (Ok, Error, LazyCoroResult)):
            self._settle(Error(TypeError(_RESULT_HINT.format(type(value).__name__))))
        elif is_promise_like(value):
            try:
                value.then(self._adopt, self._fail, self._notify)
            except Exception as exc:
                self._settle(Error(exc))
        elif inspect.isawaitable(value):
            task = asyncio.ensure_future(value, loop=self._loop)
            task.add_done_callback(self._absorb)
        else:
            self._settle(Ok(value))

    def _fail(self, reason: typing.Any) -> None:
        self._settle(Error(reason))

    def _absorb(self, task: asyncio.Future[typing.Any]) -> None:
        if task.cancelled():
            self._settle(Error(asyncio.CancelledError()))
            return
        exc = task.exception()
        if exc is None:
            self._adopt(task.result())
        elif isinstance(exc, RejectionError):
            self._settle(Error(exc.reason))
        else:
            self._settle(Error(exc))

    def _settle(self, outcome: Outcome[T]) -> None:
        if self._future.done():
            return
        self._future.set_result(outcome)
        self._progress.clear()


__all__ = ("Promise",)
