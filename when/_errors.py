from __future__ import annotations

import typing


class RejectionError(Exception):
    """Awaited promise was rejected with a reason that is not an exception."""

    reason: typing.Any

    def __init__(self, reason: typing.Any) -> None:
        self.reason = reason
        super().__init__(f"Promise rejected with {reason!r}")


class ContractViolationError(Exception):
    """Combinator was given inputs it cannot be defined over."""


class EmptyRaceError(ContractViolationError):
    """any() got an empty collection, so nothing can ever win."""

    def __init__(self) -> None:
        super().__init__("any() requires at least one input")


class UnreachableQuorumError(ContractViolationError):
    """some() asked for more winners than there are inputs."""

    how_many: int
    count: int

    def __init__(self, how_many: int, count: int) -> None:
        self.how_many = how_many
        self.count = count
        super().__init__(f"some() needs {how_many} fulfilled inputs but only {count} were given")


class EmptyReduceError(ContractViolationError):
    """reduce() of an empty collection without an initial value."""

    def __init__(self, name: str = "reduce") -> None:
        super().__init__(f"{name}() of empty input with no initial value")


__all__ = (
    "ContractViolationError",
    "EmptyRaceError",
    "EmptyReduceError",
    "RejectionError",
    "UnreachableQuorumError",
)
