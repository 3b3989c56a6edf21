from __future__ import annotations

from _infra import FakeMirror, banner, run

from kungfu import Error, Ok

import when as W
from when import lifting as L


async def main() -> None:
    banner("02_mirror_race: any + some + settle")

    mirrors = [
        FakeMirror(name="eu", delay_seconds=0.03),
        FakeMirror(name="us", delay_seconds=0.01, down=True),
        FakeMirror(name="asia", delay_seconds=0.02),
    ]

    # First mirror to answer wins, failures only matter if all of them fail
    fastest = await W.any([m.download("release.tar") for m in mirrors])
    print(f"fastest: {fastest!r}")

    # Two independent copies for checksum comparison
    copies = await W.some([m.download("release.tar") for m in mirrors], 2)
    print(f"copies: {copies}")

    # Health report: one snapshot per mirror, never rejects
    report = await W.settle([m.download("health") for m in mirrors])
    for mirror, outcome in zip(mirrors, report):
        print(f"{mirror.name}: {W.state_of(outcome)}")

    # Ask for more copies than there are healthy mirrors
    match await L.down.to_result(W.some([m.download("release.tar") for m in mirrors], 3)):
        case Ok(all_three):
            print(f"three copies: {all_three}")
        case Error(reasons):
            print(f"three copies impossible: {[str(r) for r in reasons]}")


if __name__ == "__main__":
    run(main)
