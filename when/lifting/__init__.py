"""
Lift helpers with semantic namespaces.

Supports the same import styles as the rest of the package:
    from when import lifting as L   # Recommended
    from when import lifting     # Explicit

Architecture:
- L.up.*    - values, failures and kungfu Results into promises
- L.down.*  - promises back into values and kungfu Results
- L.lift()  - plain functions into promise-accepting, promise-returning ones
- L.call()  - one call with promised arguments

Examples:
    from when import lifting as L

    # Lifting functions
    parse = L.lift(json.loads)
    config = await parse(read_file("app.json"))

    # One-off calls
    size = await L.call(len, fetch_body(url))

    # Pipelines
    load = L.compose(fetch_json, parse_user, enrich)

    # Whole APIs
    apath = L.lift_all(os.path)

    # Results in and out
    p = L.up.from_result(Ok(42))
    r = await L.down.to_result(p)  # Ok(42)
"""

from __future__ import annotations

# Import namespaces
from . import down as down_ns
from . import up as up_ns

# From call namespace - calling and lifting functions
from .call import Lifted, apply, applyM, attempt, call, callM, lift, liftM, lifted

# Composition and bulk lifting
from .bulk import LiftAllPolicy, lift_all, lift_allM
from .compose import Composed, compose, composeM

# From up namespace
from .up import fail, from_lazy, from_result, pure

# From down namespace
from .down import or_else, to_lazy, to_result, unsafe

# Namespace aliases for explicit use: L.up.*, L.down.*
up = up_ns
down = down_ns

__all__ = (
    # Namespaces
    "up",
    "down",
    # Call
    "Lifted",
    "apply",
    "applyM",
    "attempt",
    "call",
    "callM",
    "lift",
    "liftM",
    "lifted",
    # Compose
    "Composed",
    "compose",
    "composeM",
    # Bulk
    "LiftAllPolicy",
    "lift_all",
    "lift_allM",
    # Up
    "pure",
    "fail",
    "from_result",
    "from_lazy",
    # Down
    "to_result",
    "to_lazy",
    "unsafe",
    "or_else",
)
