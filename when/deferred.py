"""
Deferred
========

A promise together with the capabilities that settle it.

The promise is the consumer side, resolve/reject/notify are the producer
side; either may be handed out independently.
"""

from __future__ import annotations

import typing
from dataclasses import dataclass

from ._types import Notify, PromiseLib, Reject, Resolve, Thenable
from .promise import Promise


class DeferredResolver(typing.NamedTuple):
    """Producer side of a Deferred, safe to hand out without the promise."""

    resolve: Resolve
    reject: Reject
    notify: Notify


@dataclass(frozen=True, slots=True)
class Deferred:
    """Promise paired with its resolve/reject/notify capabilities."""

    promise: Thenable[typing.Any]
    resolve: Resolve
    reject: Reject
    notify: Notify

    @property
    def resolver(self) -> DeferredResolver:
        return DeferredResolver(self.resolve, self.reject, self.notify)


# ============================================================================
# Generic constructor
# ============================================================================


def deferM(*, lib: PromiseLib) -> Deferred:
    """Create a fresh Deferred over lib."""
    captured: dict[str, typing.Any] = {}

    def capture(resolve: Resolve, reject: Reject, notify: Notify) -> None:
        captured.update(resolve=resolve, reject=reject, notify=notify)

    # lib runs the resolver synchronously, so captured is filled here
    promise = lib(capture)
    return Deferred(promise=promise, **captured)


# ============================================================================
# Sugar for Promise
# ============================================================================


def defer() -> Deferred:
    """
    Create a {promise, resolve, reject, notify} pair.

    Example:
        d = defer()
        d.promise.then(print)
        d.resolve("done")
        d.resolve("ignored")  # already settled, no-op
    """
    return deferM(lib=Promise)


__all__ = ("Deferred", "DeferredResolver", "defer", "deferM")
