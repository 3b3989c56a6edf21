"""
Promise combinators and function lifting for asyncio.

Building blocks for composing many eventual values: aggregation, racing,
sequential reduction and settlement snapshots, plus adapters that let plain
synchronous functions consume and produce promises.

Architecture:
- Generic combinators (*M functions) work with any primitive via lib injection
- Sugar functions bound to the default Promise (no suffix)
- bind(lib) assembles the whole toolkit over another primitive

Recommended import:
    import when as W

    values = await W.all([fetch("a"), fetch("b")])
"""

# Core types
from ._types import (
    MISSING,
    Inputs,
    MaybePromise,
    Namer,
    Notify,
    Outcome,
    PromiseLib,
    Reject,
    Resolve,
    Resolver,
    State,
    Thenable,
)

# Errors
from ._errors import (
    ContractViolationError,
    EmptyRaceError,
    EmptyReduceError,
    RejectionError,
    UnreachableQuorumError,
)

# Internal helpers (for custom primitives)
from . import _helpers
from ._helpers import is_promise_like, state_of

# Primitive
from .promise import Promise
from .deferred import Deferred, DeferredResolver, defer, deferM

# Lift helpers
from . import lifting
from .lifting import (
    # Promise
    Composed,
    Lifted,
    LiftAllPolicy,
    apply,
    attempt,
    call,
    compose,
    lift,
    lift_all,
    lifted,
    # Generic
    applyM,
    callM,
    composeM,
    liftM,
    lift_allM,
)

# Collection operations
from .collection import (
    # Promise
    all,
    join,
    map,
    reduce,
    reduce_right,
    settle,
    # Generic
    allM,
    foldM,
    gatherM,
    joinM,
    mapM,
    reduceM,
    reduce_rightM,
    settleM,
)

# Concurrency
from .concurrency import (
    RaceResult,
    # Promise
    any,
    some,
    # Generic
    anyM,
    someM,
)

# Control flow
from .control import (
    # Promise
    iterate,
    unfold,
    # Generic
    iterateM,
    unfoldM,
)

# Entry points
from .core import When, bind, promise, reject, resolve, when, whenM

__all__ = (
    # Types
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
    # Errors
    "ContractViolationError",
    "EmptyRaceError",
    "EmptyReduceError",
    "RejectionError",
    "UnreachableQuorumError",
    # Helpers
    "_helpers",
    "is_promise_like",
    "state_of",
    # Primitive
    "Deferred",
    "DeferredResolver",
    "Promise",
    "defer",
    "deferM",
    # Entry points
    "When",
    "bind",
    "promise",
    "reject",
    "resolve",
    "when",
    "whenM",
    # Lift
    "lifting",
    "Composed",
    "LiftAllPolicy",
    "Lifted",
    "apply",
    "applyM",
    "attempt",
    "call",
    "callM",
    "compose",
    "composeM",
    "lift",
    "liftM",
    "lift_all",
    "lift_allM",
    "lifted",
    # Collection
    "all",
    "allM",
    "foldM",
    "gatherM",
    "join",
    "joinM",
    "map",
    "mapM",
    "reduce",
    "reduceM",
    "reduce_right",
    "reduce_rightM",
    "settle",
    "settleM",
    # Concurrency
    "RaceResult",
    "any",
    "anyM",
    "some",
    "someM",
    # Control
    "iterate",
    "iterateM",
    "unfold",
    "unfoldM",
)
