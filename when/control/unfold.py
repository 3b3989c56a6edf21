"""Unfold combinators

Generate a sequence of (possibly asynchronous) values from a seed."""

from __future__ import annotations

import typing
from collections.abc import Callable

from .._types import PromiseLib, Thenable
from ..promise import Promise

# Each of these may return a plain value or a promise for one
type Unspool[S, V] = Callable[[S], typing.Any]
type Condition[S] = Callable[[S], typing.Any]
type Handler[V] = Callable[[V], typing.Any]


# Generic combinators (lib injection)
def unfoldM[S, V](
    unspool: Unspool[S, V],
    condition: Condition[S],
    handler: Handler[V],
    seed: S | Thenable[S],
    *,
    lib: PromiseLib,
) -> Thenable[S]:
    """
    Generic unfold.

    Until condition(seed) holds: (value, seed) = unspool(seed), then
    handler(value) is awaited before the next round.
    """

    def resume(current: typing.Any) -> Thenable[S]:
        return lib.resolve(current).then(check)

    def check(current: S) -> Thenable[S]:
        def decide(done: typing.Any) -> typing.Any:
            if done:
                return current
            return lib.resolve(unspool(current)).then(emit)

        return lib.resolve(condition(current)).then(decide)

    def emit(pair: tuple[typing.Any, typing.Any]) -> Thenable[S]:
        value, next_seed = pair
        return lib.resolve(value).then(handler).then(lambda _: resume(next_seed))

    return resume(seed)


def iterateM[S](
    f: Callable[[S], typing.Any],
    condition: Condition[S],
    handler: Handler[S],
    seed: S | Thenable[S],
    *,
    lib: PromiseLib,
) -> Thenable[S]:
    """Generic iterate: unfold where each value is also the next seed's source."""

    def unspool(x: S) -> Thenable[tuple[S, S]]:
        return lib.resolve(f(x)).then(lambda following: (x, following))

    return unfoldM(unspool, condition, handler, seed, lib=lib)


# Sugar for Promise
def unfold[S, V](
    unspool: Unspool[S, V],
    condition: Condition[S],
    handler: Handler[V],
    seed: S | Thenable[S],
) -> Thenable[S]:
    """
    Build values from a seed until condition(seed) is true.

    unspool(seed) returns (value, next_seed) or a promise for that pair;
    handler(value) runs, and is awaited, before the next round. Fulfils with
    the seed that satisfied condition.

    Example:
        import when as W

        # pages 0..4, each handed to store() in order
        await W.unfold(lambda n: (fetch_page(n), n + 1), lambda n: n >= 5, store, 0)
    """
    return unfoldM(unspool, condition, handler, seed, lib=Promise)


def iterate[S](
    f: Callable[[S], typing.Any],
    condition: Condition[S],
    handler: Handler[S],
    seed: S | Thenable[S],
) -> Thenable[S]:
    """
    Produce seed, f(seed), f(f(seed)), ... passing each to handler.

    Stops at the first x for which condition(x) is true and fulfils with it;
    that final x is not handed to handler.
    """
    return iterateM(f, condition, handler, seed, lib=Promise)


__all__ = ("iterate", "iterateM", "unfold", "unfoldM")
