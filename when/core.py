"""
Core entry points
=================

when() / promise() / resolve() / reject(), and bind() which assembles the
whole toolkit over an injected primitive.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass

from ._types import MISSING, Inputs, MaybePromise, Namer, PromiseLib, Resolver, Thenable
from .collection.fold import reduce_rightM, reduceM
from .collection.gather import allM, joinM, settleM
from .collection.traverse import mapM
from .concurrency.race import anyM, someM
from .control.unfold import iterateM, unfoldM
from .deferred import Deferred, deferM
from .lifting.bulk import LiftAllPolicy, lift_allM
from .lifting.call import Lifted, applyM, callM, liftM
from .lifting.compose import Composed, composeM
from .promise import Promise

type Handler = Callable[[typing.Any], typing.Any] | None


# ============================================================================
# Generic entry point (lib injection)
# ============================================================================


def whenM(
    value: MaybePromise[typing.Any],
    on_fulfilled: Handler = None,
    on_rejected: Handler = None,
    on_progress: Handler = None,
    *,
    lib: PromiseLib,
) -> Thenable[typing.Any]:
    """Generic when: trust value through lib.resolve, then observe it."""
    return lib.resolve(value).then(on_fulfilled, on_rejected, on_progress)


# ============================================================================
# Sugar for Promise
# ============================================================================


def when(
    value: MaybePromise[typing.Any],
    on_fulfilled: Handler = None,
    on_rejected: Handler = None,
    on_progress: Handler = None,
) -> Thenable[typing.Any]:
    """
    Observe a value or a thenable of any origin with a trusted Promise.

    Example:
        import when as W

        W.when(legacy_thenable, on_fulfilled=print, on_rejected=log_failure)
    """
    return whenM(value, on_fulfilled, on_rejected, on_progress, lib=Promise)


def promise(resolver: Resolver) -> Promise[typing.Any]:
    """Promise(resolver): resolver(resolve, reject, notify) runs right away."""
    return Promise(resolver)


def resolve(value: typing.Any = None) -> Promise[typing.Any]:
    """Promise for value (thenables and awaitables are adopted)."""
    return Promise.resolve(value)


def reject(reason: typing.Any) -> Promise[typing.Never]:
    """Promise rejected with reason."""
    return Promise.reject(reason)


# ============================================================================
# Toolkit over an injected primitive
# ============================================================================


@dataclass(frozen=True, slots=True)
class When:
    """
    Every combinator and lifting helper bound to one primitive.

    Built by bind(); holds nothing but lib, so any number of toolkits over
    different primitives can coexist.

    Example:
        import when as W

        T = W.bind(MyPromise)
        values = await T.all([1, T.resolve(2)])
    """

    lib: PromiseLib

    # Entry points

    def __call__(
        self,
        value: MaybePromise[typing.Any],
        on_fulfilled: Handler = None,
        on_rejected: Handler = None,
        on_progress: Handler = None,
    ) -> Thenable[typing.Any]:
        return whenM(value, on_fulfilled, on_rejected, on_progress, lib=self.lib)

    def promise(self, resolver: Resolver) -> Thenable[typing.Any]:
        return self.lib(resolver)

    def resolve(self, value: typing.Any = None) -> Thenable[typing.Any]:
        return self.lib.resolve(value)

    def reject(self, reason: typing.Any) -> Thenable[typing.Any]:
        return self.lib.reject(reason)

    def defer(self) -> Deferred:
        return deferM(lib=self.lib)

    # Collections

    def all(self, inputs: Inputs[typing.Any]) -> Thenable[list[typing.Any]]:
        return allM(inputs, lib=self.lib)

    def join(self, *inputs: MaybePromise[typing.Any]) -> Thenable[list[typing.Any]]:
        return joinM(*inputs, lib=self.lib)

    def settle(self, inputs: Inputs[typing.Any]) -> Thenable[list[typing.Any]]:
        return settleM(inputs, lib=self.lib)

    def map(
        self,
        inputs: Inputs[typing.Any],
        map_func: Callable[[typing.Any], typing.Any],
    ) -> Thenable[list[typing.Any]]:
        return mapM(inputs, map_func, lib=self.lib)

    def reduce(
        self,
        inputs: Inputs[typing.Any],
        f: Callable[..., typing.Any],
        initial: typing.Any = MISSING,
    ) -> Thenable[typing.Any]:
        return reduceM(inputs, f, initial, lib=self.lib)

    def reduce_right(
        self,
        inputs: Inputs[typing.Any],
        f: Callable[..., typing.Any],
        initial: typing.Any = MISSING,
    ) -> Thenable[typing.Any]:
        return reduce_rightM(inputs, f, initial, lib=self.lib)

    # Races

    def any(self, inputs: Inputs[typing.Any]) -> Thenable[typing.Any]:
        return anyM(inputs, lib=self.lib)

    def some(self, inputs: Inputs[typing.Any], how_many: int) -> Thenable[list[typing.Any]]:
        return someM(inputs, how_many, lib=self.lib)

    # Control

    def iterate(
        self,
        f: Callable[[typing.Any], typing.Any],
        condition: Callable[[typing.Any], typing.Any],
        handler: Callable[[typing.Any], typing.Any],
        seed: typing.Any,
    ) -> Thenable[typing.Any]:
        return iterateM(f, condition, handler, seed, lib=self.lib)

    def unfold(
        self,
        unspool: Callable[[typing.Any], typing.Any],
        condition: Callable[[typing.Any], typing.Any],
        handler: Callable[[typing.Any], typing.Any],
        seed: typing.Any,
    ) -> Thenable[typing.Any]:
        return unfoldM(unspool, condition, handler, seed, lib=self.lib)

    # Lifting

    def lift(self, func: Callable[..., typing.Any], *bound: MaybePromise[typing.Any]) -> Lifted:
        return liftM(func, *bound, lib=self.lib)

    def call(self, func: Callable[..., typing.Any], /, *args: typing.Any, **kwargs: typing.Any) -> Thenable[typing.Any]:
        return callM(func, *args, lib=self.lib, **kwargs)

    def attempt(self, func: Callable[..., typing.Any], /, *args: typing.Any, **kwargs: typing.Any) -> Thenable[typing.Any]:
        return callM(func, *args, lib=self.lib, **kwargs)

    def apply(self, func: Callable[..., typing.Any], args: typing.Any = None) -> Thenable[typing.Any]:
        return applyM(func, args, lib=self.lib)

    def compose(
        self,
        f: Callable[..., typing.Any],
        *funcs: Callable[[typing.Any], typing.Any],
    ) -> Composed:
        return composeM(f, *funcs, lib=self.lib)

    def lift_all(
        self,
        target: object,
        namer: Namer | None = None,
        *,
        policy: LiftAllPolicy = LiftAllPolicy(),
    ) -> typing.Any:
        return lift_allM(target, namer, lib=self.lib, policy=policy)


def bind(lib: PromiseLib) -> When:
    """Assemble the toolkit over lib. bind(Promise) matches the module-level sugar."""
    return When(lib)


__all__ = (
    "When",
    "bind",
    "promise",
    "reject",
    "resolve",
    "when",
    "whenM",
)
