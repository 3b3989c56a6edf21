"""Internal helpers for when.

Common functions used across multiple combinator modules.
These are not part of the public API but are useful when assembling
combinators over a custom primitive."""

from __future__ import annotations

import inspect
import typing
from collections.abc import Callable

from kungfu import Error, Ok

from ._types import Inputs, Outcome, PromiseLib, State, Thenable


# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x


def is_promise_like(x: object) -> bool:
    """
    True if x exposes a callable `then`, i.e. is a thenable of any origin.

    Lookup is static (inspect.getattr_static), so a `then` property or a
    custom __getattr__ on x is never executed during detection.
    """
    if x is None or not isinstance(x, Thenable):
        return False
    return callable(inspect.getattr_static(x, "then", None))


def resolve_items[R](
    inputs: Inputs[typing.Any],
    body: Callable[[list[typing.Any]], R],
    *,
    lib: PromiseLib,
) -> Thenable[typing.Any]:
    """
    Resolve inputs (a collection or a future for one), then run body on it.

    The collection is materialised into a list once, so its length is fixed
    for the rest of the combinator. An outer rejection skips body.
    """
    return lib.resolve(inputs).then(lambda items: body(list(items)))


def state_of(outcome: Outcome[typing.Any] | None) -> State:
    """Name the state an outcome snapshot describes (None means pending)."""
    match outcome:
        case Ok(_):
            return "fulfilled"
        case Error(_):
            return "rejected"
        case None:
            return "pending"
        case _:
            raise TypeError(f"Not an outcome: {outcome!r}")


# Arity assumed for callables without an introspectable signature (builtins
# such as max): the functools.reduce convention
UNKNOWN_ARITY: typing.Final = 2


def positional_arity(func: Callable[..., typing.Any]) -> int | None:
    """
    Number of required positional arguments func declares, None if it takes *args.

    Parameters with defaults are not counted, so they keep their defaults.
    Callables without a signature count as UNKNOWN_ARITY.
    """
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return UNKNOWN_ARITY

    count = 0
    for param in signature.parameters.values():
        match param.kind:
            case inspect.Parameter.VAR_POSITIONAL:
                return None
            case inspect.Parameter.POSITIONAL_ONLY | inspect.Parameter.POSITIONAL_OR_KEYWORD:
                if param.default is inspect.Parameter.empty:
                    count += 1
            case _:
                pass
    return count


def call_trimmed[R](func: Callable[..., R], *args: typing.Any) -> R:
    """
    Call func with as many leading args as it requires.

    Lets reducers written as `lambda acc, x: ...` (or plain `max`) receive
    the same (acc, value, index, length) call as a four-argument reducer.
    Only *args reducers get every argument.
    """
    arity = positional_arity(func)
    if arity is None:
        return func(*args)
    return func(*args[:arity])


__all__ = (
    "call_trimmed",
    "identity",
    "is_promise_like",
    "positional_arity",
    "resolve_items",
    "state_of",
)
