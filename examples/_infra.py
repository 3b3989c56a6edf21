from __future__ import annotations

import asyncio
import sys
from collections.abc import Callable, Coroutine
from dataclasses import dataclass, field
from pathlib import Path

from kungfu import Error, Ok, Result

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class Failure(Exception):
    message: str
    transient: bool = False

    def __str__(self) -> str:  # pragma: no cover (examples only)
        return self.message


@dataclass(frozen=True, slots=True)
class User:
    id: int
    name: str
    is_active: bool = True


def _empty_users() -> dict[int, User]:
    return {}


@dataclass(slots=True)
class FakeMirror:
    """Download mirror with a fixed latency that may be down."""

    name: str
    delay_seconds: float = 0.0
    down: bool = False

    async def download(self, path: str) -> bytes:
        await asyncio.sleep(self.delay_seconds)
        if self.down:
            raise Failure(f"{self.name}: unavailable", transient=True)
        return f"{path}@{self.name}".encode()


@dataclass(slots=True)
class FakeDirectory:
    """User directory returning kungfu Results."""

    users: dict[int, User] = field(default_factory=_empty_users)
    delay_seconds: float = 0.0

    async def find_user(self, user_id: int) -> Result[User, Failure]:
        await asyncio.sleep(self.delay_seconds)
        user = self.users.get(user_id)
        if user is None:
            return Error(Failure(f"directory: no user {user_id}"))
        return Ok(user)


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())
