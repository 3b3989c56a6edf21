"""
Asynchronous left-to-right function composition.
"""

from __future__ import annotations

import types
import typing
from collections.abc import Callable
from dataclasses import dataclass, replace

from .._types import PromiseLib, Thenable
from ..collection.fold import reduceM
from ..promise import Promise
from .call import callM


def _pipe(value: typing.Any, stage: Callable[[typing.Any], typing.Any]) -> typing.Any:
    return stage(value)


@dataclass(frozen=True, slots=True)
class Composed:
    """
    Pipeline first -> stages[0] -> ... -> stages[-1].

    Stored on a class, it binds the instance as the receiver of every stage,
    so each one is called like a method of that instance.
    """

    first: Callable[..., typing.Any]
    stages: tuple[Callable[[typing.Any], typing.Any], ...] = ()
    lib: PromiseLib = Promise

    def __call__(self, *args: typing.Any, **kwargs: typing.Any) -> Thenable[typing.Any]:
        head = callM(self.first, *args, lib=self.lib, **kwargs)
        return reduceM(list(self.stages), _pipe, head, lib=self.lib)

    def __get__(self, instance: object, owner: type | None = None) -> Composed:
        if instance is None:
            return self
        return replace(
            self,
            first=types.MethodType(self.first, instance),
            stages=tuple(types.MethodType(stage, instance) for stage in self.stages),
        )


def composeM(
    f: Callable[..., typing.Any],
    *funcs: Callable[[typing.Any], typing.Any],
    lib: PromiseLib,
) -> Composed:
    """Generic compose."""
    return Composed(f, funcs, lib)


def compose(
    f: Callable[..., typing.Any],
    *funcs: Callable[[typing.Any], typing.Any],
) -> Composed:
    """
    Pipeline h where h(*args) == funcs[-1](...funcs[0](f(*args))).

    Arguments to h may be promises. Each stage gets the previous stage's
    fulfilled value and may return a value, a promise or a coroutine. A stage
    that raises or rejects rejects the pipeline, later stages never run.

    Example:
        from when import lifting as L

        load_user = L.compose(fetch_json, parse_user, enrich)
        user = await load_user("/users/42")
    """
    return composeM(f, *funcs, lib=Promise)


__all__ = ("Composed", "compose", "composeM")
