from __future__ import annotations

import json
import os.path

from _infra import FakeMirror, banner, run

import when as W
from when import lifting as L


@L.lifted
def parse_manifest(raw: bytes) -> dict[str, str]:
    return {"name": raw.decode(), "format": "tar"}


async def main() -> None:
    banner("03_lift_api: lift + compose + lift_all")

    mirror = FakeMirror(name="eu", delay_seconds=0.01)

    # Lifted functions accept promises and return one
    manifest = await parse_manifest(mirror.download("manifest"))
    print(manifest)

    # Pipelines: each stage gets the previous stage's value
    describe = L.compose(mirror.download, lambda raw: raw.upper(), len)
    print(f"described length: {await describe('manifest')}")

    # Whole synchronous APIs, renamed to make the async boundary visible
    apath = L.lift_all(os.path, lambda name: f"{name}_async")
    print(f"joined: {await apath.join_async(W.resolve('/srv'), 'releases')}")

    # One-off calls with promised arguments, failures become rejections
    outcome = await L.down.to_result(L.call(json.loads, W.resolve("{not json")))
    print(f"json.loads: {W.state_of(outcome)}")


if __name__ == "__main__":
    run(main)
