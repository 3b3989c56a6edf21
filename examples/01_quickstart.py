from __future__ import annotations

from _infra import FakeMirror, banner, run

import when as W


async def main() -> None:
    banner("01_quickstart: all + map + reduce")

    mirror = FakeMirror(name="primary", delay_seconds=0.01)

    # Every download starts right away, results keep input order
    bodies = await W.all([mirror.download(path) for path in ("a.txt", "b.txt", "c.txt")])
    print(bodies)

    # map awaits each element, then applies a plain function
    sizes = await W.map([mirror.download("big.bin"), b"inline"], len)
    print(f"sizes: {sizes}")

    # reduce runs strictly in order, each step may itself be async
    total = await W.reduce(sizes, lambda acc, size: acc + size, 0)
    print(f"total bytes: {total}")


if __name__ == "__main__":
    run(main)
