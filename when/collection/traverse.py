"""Traverse combinators

Promise-aware map with lib injection."""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable

from .._helpers import resolve_items
from .._types import Inputs, PromiseLib, Thenable
from ..promise import Promise
from .gather import gatherM


# Generic combinator (lib injection)
def mapM[A, B](
    inputs: Inputs[A],
    map_func: Callable[[A], B | Thenable[B] | Awaitable[B]],
    *,
    lib: PromiseLib,
) -> Thenable[list[B]]:
    """Generic map. Elements are mapped concurrently, results keep input order."""

    def traverse(items: list[typing.Any]) -> Thenable[list[B]]:
        mapped = [lib.resolve(item).then(map_func) for item in items]
        return gatherM(mapped, lib=lib)

    return resolve_items(inputs, traverse, lib=lib)


# Sugar for Promise
def map[A, B](
    inputs: Inputs[A],
    map_func: Callable[[A], B | Thenable[B] | Awaitable[B]],
) -> Thenable[list[B]]:
    """
    Promise-aware map: each element is awaited, then passed to map_func.

    map_func may return a value, a promise or a coroutine. Rejects with the
    first element or map_func failure, like all().

    Example:
        import when as W

        sizes = await W.map([fetch("a"), fetch("b")], len)
    """
    return mapM(inputs, map_func, lib=Promise)


__all__ = ("map", "mapM")
