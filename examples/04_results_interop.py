from __future__ import annotations

from _infra import FakeDirectory, User, banner, run

from kungfu import Error, LazyCoroResult, Ok

import when as W
from when import lifting as L


async def main() -> None:
    banner("04_results_interop: kungfu Results in and out")

    directory = FakeDirectory(users={1: User(id=1, name="ada"), 2: User(id=2, name="linus")})

    # LazyCoroResult -> promise: Ok fulfils, Error rejects
    lookups = [L.up.from_lazy(LazyCoroResult(lambda uid=uid: directory.find_user(uid))) for uid in (1, 2, 3)]
    for outcome in await W.settle(lookups):
        match outcome:
            case Ok(user):
                print(f"found {user.name}")
            case Error(err):
                print(f"missing: {err}")

    # Promise -> LazyCoroResult, for code that speaks kungfu
    names = L.down.to_lazy(W.map([L.up.from_lazy(LazyCoroResult(lambda: directory.find_user(1)))], lambda u: u.name))
    print(await names)

    # Defaults instead of exceptions
    print(await L.down.or_else(W.any([]), "nobody"))


if __name__ == "__main__":
    run(main)
