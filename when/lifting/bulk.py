"""
Bulk lifting: turn a whole synchronous API into a promise-returning one.
"""

from __future__ import annotations

import inspect
import logging
import types
import typing
from collections.abc import Mapping
from dataclasses import dataclass

from .._helpers import identity
from .._types import Namer, PromiseLib
from ..promise import Promise
from .call import Lifted

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LiftAllPolicy:
    """Configuration for lift_all: what besides public callables to carry over."""

    keep_attributes: bool = True
    include_private: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.keep_attributes, bool):
            raise TypeError("LiftAllPolicy.keep_attributes must be a bool")
        if not isinstance(self.include_private, bool):
            raise TypeError("LiftAllPolicy.include_private must be a bool")


def _members(target: object, policy: LiftAllPolicy) -> list[tuple[str, typing.Any]]:
    if isinstance(target, Mapping):
        members = list(target.items())
    else:
        members = inspect.getmembers(target)
    return [
        (name, member)
        for name, member in members
        if policy.include_private or not str(name).startswith("_")
    ]


def lift_allM(
    target: object,
    namer: Namer | None = None,
    *,
    lib: PromiseLib,
    policy: LiftAllPolicy = LiftAllPolicy(),
) -> typing.Any:
    """Generic lift_all."""
    rename = namer if namer is not None else identity
    output: dict[str, typing.Any] = {}

    for name, member in _members(target, policy):
        if callable(member):
            output[rename(name)] = Lifted(member, lib=lib)
        elif policy.keep_attributes:
            output[name] = member

    logger.debug("lift_all(): %d members from %s", len(output), type(target).__name__)
    if isinstance(target, Mapping):
        return output
    return types.SimpleNamespace(**output)


def lift_all(
    target: object,
    namer: Namer | None = None,
    *,
    policy: LiftAllPolicy = LiftAllPolicy(),
) -> typing.Any:
    """
    Lift every public callable of target (module, class, instance or mapping).

    namer maps each function's name to its name in the result (for example to
    add a suffix); by default names are kept. Non-callable members are copied
    unchanged unless policy.keep_attributes is False. A mapping gives back a
    dict, anything else a SimpleNamespace.

    Example:
        import os.path
        from when import lifting as L

        apath = L.lift_all(os.path, lambda name: f"{name}_async")
        exists = await apath.exists_async("/tmp")
    """
    return lift_allM(target, namer, lib=Promise, policy=policy)


__all__ = ("LiftAllPolicy", "lift_all", "lift_allM")
