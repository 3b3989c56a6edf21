"""
Core type definitions for when.

The future primitive is consumed only through the protocols below, so every
combinator can be assembled over any implementation that satisfies them.
"""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable, Iterable

from kungfu import Result

# ============================================================================
# Primitive contract
# ============================================================================


@typing.runtime_checkable
class Thenable[T](typing.Protocol):
    """Anything that can be observed with then(on_fulfilled, on_rejected, on_progress)."""

    def then(
        self,
        on_fulfilled: Callable[[T], typing.Any] | None = None,
        on_rejected: Callable[[typing.Any], typing.Any] | None = None,
        on_progress: Callable[[typing.Any], typing.Any] | None = None,
        /,
    ) -> Thenable[typing.Any]: ...


# Capabilities handed to a resolver
type Resolve = Callable[[typing.Any], None]
type Reject = Callable[[typing.Any], None]
type Notify = Callable[[typing.Any], None]

# Resolver = function(resolve, reject, notify) run synchronously at construction
type Resolver = Callable[[Resolve, Reject, Notify], None]


class PromiseLib(typing.Protocol):
    """
    The injected future primitive.

    `lib(resolver)` constructs a pending future, `lib.resolve(x)` and
    `lib.reject(reason)` build settled ones. The Promise class satisfies
    this protocol as-is.
    """

    def __call__(self, resolver: Resolver, /) -> Thenable[typing.Any]: ...

    def resolve(self, value: typing.Any = None, /) -> Thenable[typing.Any]: ...

    def reject(self, reason: typing.Any, /) -> Thenable[typing.Any]: ...


# ============================================================================
# Type aliases
# ============================================================================

# Bare value, thenable or awaitable
type MaybePromise[T] = T | Thenable[T] | Awaitable[T]

# Combinator input: a collection, or a future for one
type Inputs[T] = Iterable[MaybePromise[T]] | Thenable[Iterable[MaybePromise[T]]]

# Outcome = per-element settlement snapshot: Ok(value) or Error(reason)
type Outcome[T] = Result[T, typing.Any]

type State = typing.Literal["pending", "fulfilled", "rejected"]

type Namer = Callable[[str], str]


class _Missing:
    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"


# Marks an omitted optional argument where None is a legitimate value
MISSING: typing.Final = _Missing()


__all__ = (
    "Inputs",
    "MISSING",
    "MaybePromise",
    "Namer",
    "Notify",
    "Outcome",
    "PromiseLib",
    "Reject",
    "Resolve",
    "Resolver",
    "State",
    "Thenable",
)
