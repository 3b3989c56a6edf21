"""
Fold combinators
================

Sequential reduce / reduce_right over promises and values.
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Awaitable, Callable

from .._errors import EmptyReduceError
from .._helpers import call_trimmed, resolve_items
from .._types import MISSING, Inputs, PromiseLib, Thenable
from ..promise import Promise

logger = logging.getLogger(__name__)

# reducer(accumulated, value, index, length); shorter signatures get a prefix
type Reducer[A, T] = Callable[..., A | Thenable[A] | Awaitable[A]]


# ============================================================================
# Generic combinator (lib injection)
# ============================================================================


def foldM[A, T](
    inputs: Inputs[T],
    f: Reducer[A, T],
    initial: typing.Any = MISSING,
    *,
    lib: PromiseLib,
    from_right: bool = False,
) -> Thenable[A]:
    """
    Generic fold.

    Step i+1 is chained onto step i, so f never runs before the previous
    accumulator and the current element have both settled.
    """
    name = "reduce_right" if from_right else "reduce"

    def fold(items: list[typing.Any]) -> Thenable[A]:
        length = len(items)
        order = list(range(length - 1, -1, -1) if from_right else range(length))

        if initial is MISSING:
            if not order:
                logger.debug("%s() of empty input without initial value", name)
                return lib.reject(EmptyReduceError(name))
            seed, *order = order
            acc = lib.resolve(items[seed])
        else:
            acc = lib.resolve(initial)

        for index in order:
            acc = acc.then(step(items[index], index, length))
        return acc

    def step(item: typing.Any, index: int, length: int) -> Callable[[A], Thenable[A]]:
        def run(accumulated: A) -> Thenable[A]:
            return lib.resolve(item).then(
                lambda value: call_trimmed(f, accumulated, value, index, length)
            )

        return run

    return resolve_items(inputs, fold, lib=lib)


def reduceM[A, T](
    inputs: Inputs[T],
    f: Reducer[A, T],
    initial: typing.Any = MISSING,
    *,
    lib: PromiseLib,
) -> Thenable[A]:
    """Generic left fold."""
    return foldM(inputs, f, initial, lib=lib)


def reduce_rightM[A, T](
    inputs: Inputs[T],
    f: Reducer[A, T],
    initial: typing.Any = MISSING,
    *,
    lib: PromiseLib,
) -> Thenable[A]:
    """Generic right fold."""
    return foldM(inputs, f, initial, lib=lib, from_right=True)


# ============================================================================
# Sugar for Promise
# ============================================================================


def reduce[A, T](
    inputs: Inputs[T],
    f: Reducer[A, T],
    initial: typing.Any = MISSING,
) -> Thenable[A]:
    """
    Left fold where elements, initial and f's results may all be promises.

    f is called as f(accumulated, value, index, length); a reducer requiring
    fewer positional parameters gets only the leading ones (parameters with
    defaults keep them, builtins like max get two). Without initial
    the first element seeds the fold, and empty input rejects with
    EmptyReduceError. The first failure skips every remaining step.

    Example:
        import when as W

        total = await W.reduce([1, W.resolve(2), 3], lambda a, b: a + b, 0)  # 6
    """
    return reduceM(inputs, f, initial, lib=Promise)


def reduce_right[A, T](
    inputs: Inputs[T],
    f: Reducer[A, T],
    initial: typing.Any = MISSING,
) -> Thenable[A]:
    """reduce() from the last element to the first; index counts from the left."""
    return reduce_rightM(inputs, f, initial, lib=Promise)


__all__ = ("foldM", "reduce", "reduceM", "reduce_right", "reduce_rightM")
