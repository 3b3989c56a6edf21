"""
Calling plain functions with promised arguments.

Functions and the Lifted builder that await every argument, invoke a
synchronous (or async) function and hand back a promise for its result.
"""

from __future__ import annotations

import types
import typing
from collections.abc import Callable, Sequence
from dataclasses import dataclass, replace

from .._types import MaybePromise, PromiseLib, Thenable
from ..collection.gather import gatherM
from ..promise import Promise


def callM[R](
    func: Callable[..., R],
    /,
    *args: typing.Any,
    lib: PromiseLib,
    **kwargs: typing.Any,
) -> Thenable[R]:
    """Generic call: await positional and keyword argument values, then invoke func."""
    names = tuple(kwargs)
    arity = len(args)

    def invoke(values: list[typing.Any]) -> R:
        return func(*values[:arity], **dict(zip(names, values[arity:])))

    return gatherM([*args, *kwargs.values()], lib=lib).then(invoke)


def applyM[R](
    func: Callable[..., R],
    args: Sequence[typing.Any] | Thenable[Sequence[typing.Any]] | None = None,
    *,
    lib: PromiseLib,
) -> Thenable[R]:
    """Generic apply: call func with the elements of args (or with nothing)."""
    if args is None:
        return callM(func, lib=lib)
    return lib.resolve(args).then(lambda values: callM(func, *values, lib=lib))


@dataclass(frozen=True, slots=True)
class Lifted:
    """
    Promise-returning version of func with optional bound leading arguments.

    Immutable builder: bind() returns a new Lifted, the original keeps its
    arguments. Stored on a class, it binds the instance as the receiver like
    a plain method would.

    Example:
        from when import lifting as L

        add = L.lift(lambda a, b, c: a + b + c)
        add_ten = add.bind(10)
        await add_ten(L.up.pure(1), 2)  # 13
    """

    func: Callable[..., typing.Any]
    bound: tuple[typing.Any, ...] = ()
    lib: PromiseLib = Promise

    def bind(self, *args: MaybePromise[typing.Any]) -> Lifted:
        """Append bound arguments; they go after the ones already bound."""
        return replace(self, bound=(*self.bound, *args))

    def __call__(self, *args: typing.Any, **kwargs: typing.Any) -> Thenable[typing.Any]:
        return callM(self.func, *self.bound, *args, lib=self.lib, **kwargs)

    def __get__(self, instance: object, owner: type | None = None) -> Lifted:
        if instance is None:
            return self
        return replace(self, func=types.MethodType(self.func, instance))


def liftM(func: Callable[..., typing.Any], *bound: MaybePromise[typing.Any], lib: PromiseLib) -> Lifted:
    """Generic lift."""
    return Lifted(func, bound, lib)


def call[R](func: Callable[..., R], /, *args: typing.Any, **kwargs: typing.Any) -> Thenable[R]:
    """
    Call func with awaited arguments and return a promise for its result.

    Arguments (keyword values too) may be promises. func runs on a later loop
    turn; if it raises, the promise rejects with the exception. If an
    argument rejects, func is never called.

    Example:
        from when import lifting as L

        parsed = L.call(json.loads, fetch_body(url))
    """
    return callM(func, *args, lib=Promise, **kwargs)


# `try` is a keyword
attempt = call


def apply[R](
    func: Callable[..., R],
    args: Sequence[typing.Any] | Thenable[Sequence[typing.Any]] | None = None,
) -> Thenable[R]:
    """call() with an argument sequence, or a promise for one."""
    return applyM(func, args, lib=Promise)


def lift(func: Callable[..., typing.Any], *bound: MaybePromise[typing.Any]) -> Lifted:
    """
    Make func accept promises and return a promise.

    lift(f, a)(b, c) calls f(a, b, c) once a, b and c have all fulfilled.
    """
    return liftM(func, *bound, lib=Promise)


def lifted(func: Callable[..., typing.Any]) -> Lifted:
    """
    Decorator form of lift().

    Example:
        from when import lifting as L

        @L.lifted
        def parse(raw: str) -> dict: ...

        config = await parse(read_file("app.json"))
    """
    return lift(func)


__all__ = (
    "Lifted",
    "apply",
    "applyM",
    "attempt",
    "call",
    "callM",
    "lift",
    "liftM",
    "lifted",
)
