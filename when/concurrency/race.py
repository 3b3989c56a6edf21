"""
Race combinators
================

any / some: settle on settlement order rather than input order.
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable
from dataclasses import dataclass, field

from .._errors import EmptyRaceError, UnreachableQuorumError
from .._helpers import resolve_items
from .._types import Inputs, Notify, PromiseLib, Reject, Resolve, Thenable
from ..promise import Promise

logger = logging.getLogger(__name__)


def _empty() -> list[typing.Any]:
    return []


@dataclass(slots=True)
class RaceResult:
    """
    State of a some() race.

    winners hold values and losers hold reasons, both in settlement order.
    The race is decided once either budget reaches zero.
    """

    to_fulfil: int
    to_reject: int
    winners: list[typing.Any] = field(default_factory=_empty)
    losers: list[typing.Any] = field(default_factory=_empty)

    @property
    def decided(self) -> bool:
        return self.to_fulfil <= 0 or self.to_reject <= 0


# ============================================================================
# Generic combinators (lib injection)
# ============================================================================


def someM[T](inputs: Inputs[T], how_many: int, *, lib: PromiseLib) -> Thenable[list[T]]:
    """
    Generic some combinator.

    Fulfil with the first how_many values; reject once
    (len(inputs) - how_many) + 1 inputs have rejected.
    """
    if how_many <= 0:
        return lib.resolve([])

    def race(items: list[typing.Any]) -> Thenable[list[T]]:
        count = len(items)
        if how_many > count:
            logger.debug("some(): %d winners requested from %d inputs", how_many, count)
            return lib.reject(UnreachableQuorumError(how_many, count))

        def resolver(resolve: Resolve, reject: Reject, notify: Notify) -> None:
            state = RaceResult(to_fulfil=how_many, to_reject=count - how_many + 1)

            def on_fulfilled(value: T) -> None:
                if state.decided:
                    return
                state.winners.append(value)
                state.to_fulfil -= 1
                if state.to_fulfil == 0:
                    resolve(state.winners)

            def on_rejected(reason: typing.Any) -> None:
                if state.decided:
                    return
                state.losers.append(reason)
                state.to_reject -= 1
                if state.to_reject == 0:
                    logger.debug("some(): quorum of %d unreachable after %d rejections", how_many, len(state.losers))
                    reject(state.losers)

            for item in items:
                lib.resolve(item).then(on_fulfilled, on_rejected, notify)

        return lib(resolver)

    return resolve_items(inputs, race, lib=lib)


def anyM[T](inputs: Inputs[T], *, lib: PromiseLib) -> Thenable[T]:
    """
    Generic any combinator.

    Fulfil with the first value; reject only when every input rejected,
    with all reasons in input order.
    """

    def race(items: list[typing.Any]) -> Thenable[T]:
        count = len(items)
        if count == 0:
            logger.debug("any(): empty input")
            return lib.reject(EmptyRaceError())

        def resolver(resolve: Resolve, reject: Reject, notify: Notify) -> None:
            pending = count
            reasons: list[typing.Any] = [None] * count

            def reject_at(index: int) -> Callable[[typing.Any], None]:
                def on_rejected(reason: typing.Any) -> None:
                    nonlocal pending
                    reasons[index] = reason
                    pending -= 1
                    if pending == 0:
                        reject(reasons)

                return on_rejected

            for index, item in enumerate(items):
                lib.resolve(item).then(resolve, reject_at(index), notify)

        return lib(resolver)

    return resolve_items(inputs, race, lib=lib)


# ============================================================================
# Sugar for Promise
# ============================================================================


def any[T](inputs: Inputs[T]) -> Thenable[T]:
    """
    One-winner race: value of whichever input fulfils first.

    Rejects with the list of every reason (input order) if all inputs reject,
    and with EmptyRaceError for an empty collection.
    """
    return anyM(inputs, lib=Promise)


def some[T](inputs: Inputs[T], how_many: int) -> Thenable[list[T]]:
    """
    Multi-winner race: the first how_many values, in the order they fulfilled.

    Rejects as soon as success is impossible, i.e. after
    (len(inputs) - how_many) + 1 rejections, with those reasons in the order
    they arrived. how_many <= 0 fulfils with [] right away; asking for more
    winners than inputs rejects with UnreachableQuorumError.

    Example:
        import when as W

        fastest_two = await W.some([mirror_a(), mirror_b(), mirror_c()], 2)
    """
    return someM(inputs, how_many, lib=Promise)


__all__ = ("RaceResult", "any", "anyM", "some", "someM")
