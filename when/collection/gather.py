"""
Gather combinators
==================

all / join / settle: wait for every element, keep input order.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Sequence

from kungfu import Error, Ok

from .._helpers import identity, resolve_items
from .._types import Inputs, MaybePromise, Notify, Outcome, PromiseLib, Reject, Resolve, Thenable
from ..promise import Promise


# ============================================================================
# Generic combinators (lib injection)
# ============================================================================


def gatherM[T](
    items: Sequence[MaybePromise[T]],
    *,
    lib: PromiseLib,
    wrap_value: Callable[[T], typing.Any] = identity,
    wrap_reason: Callable[[typing.Any], typing.Any] | None = None,
) -> Thenable[list[typing.Any]]:
    """
    Generic index-aligned gather over an already materialised sequence.

    Each element's value is stored as wrap_value(value) at its own index.
    With wrap_reason=None the first rejection rejects the result; otherwise
    rejections are stored as wrap_reason(reason) and the result never rejects.
    """

    def resolver(resolve: Resolve, reject: Reject, notify: Notify) -> None:
        pending = len(items)
        slots: list[typing.Any] = [None] * pending
        if pending == 0:
            resolve(slots)
            return

        def store(index: int, wrap: Callable[[typing.Any], typing.Any]) -> Callable[[typing.Any], None]:
            def handler(x: typing.Any) -> None:
                nonlocal pending
                slots[index] = wrap(x)
                pending -= 1
                if pending == 0:
                    resolve(slots)

            return handler

        for index, item in enumerate(items):
            on_rejected = reject if wrap_reason is None else store(index, wrap_reason)
            lib.resolve(item).then(store(index, wrap_value), on_rejected, notify)

    return lib(resolver)


def allM[T](inputs: Inputs[T], *, lib: PromiseLib) -> Thenable[list[T]]:
    """Generic all: values in input order, first rejection wins."""
    return resolve_items(inputs, lambda items: gatherM(items, lib=lib), lib=lib)


def joinM(*inputs: MaybePromise[typing.Any], lib: PromiseLib) -> Thenable[list[typing.Any]]:
    """Generic join: all() over the arguments."""
    return allM(list(inputs), lib=lib)


def settleM[T](inputs: Inputs[T], *, lib: PromiseLib) -> Thenable[list[Outcome[T]]]:
    """Generic settle: Ok/Error snapshot per element, in input order."""
    return resolve_items(
        inputs,
        lambda items: gatherM(items, lib=lib, wrap_value=Ok, wrap_reason=Error),
        lib=lib,
    )


# ============================================================================
# Sugar for Promise
# ============================================================================


def all[T](inputs: Inputs[T]) -> Thenable[list[T]]:
    """
    Resolve once every element has fulfilled.

    inputs may mix values and promises, or be a promise for such a list.
    The result keeps input order; it rejects with the reason of the first
    element to reject (the rest keep running, but are ignored).

    Example:
        import when as W

        values = await W.all([1, W.resolve(2), 3])  # [1, 2, 3]
    """
    return allM(inputs, lib=Promise)


def join(*inputs: MaybePromise[typing.Any]) -> Thenable[list[typing.Any]]:
    """all() over positional arguments: join(a, b, c) == all([a, b, c])."""
    return joinM(*inputs, lib=Promise)


def settle[T](inputs: Inputs[T]) -> Thenable[list[Outcome[T]]]:
    """
    Wait for every element to settle, never reject because of them.

    Fulfils with Ok(value) / Error(reason) per element, in input order.
    Only an outer promise for the collection rejecting rejects the result.
    """
    return settleM(inputs, lib=Promise)


__all__ = ("all", "allM", "gatherM", "join", "joinM", "settle", "settleM")
