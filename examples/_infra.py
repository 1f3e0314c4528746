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

from deferrables import Deferred, lift as L  # noqa: E402


@dataclass(frozen=True, slots=True)
class ReplicaDown(Exception):
    replica: str
    attempt: int

    def __str__(self) -> str:  # pragma: no cover (examples only)
        return f"{self.replica} down (attempt {self.attempt})"


@dataclass(slots=True)
class Replica:
    """Replica answering after latency, failing for the first `outages` attempts."""

    name: str
    latency: float = 0.0
    outages: int = 0
    attempts: int = 0
    log: list[str] = field(default_factory=list)

    async def _read(self, key: str) -> Result[str, ReplicaDown]:
        self.attempts += 1
        attempt = self.attempts
        await asyncio.sleep(self.latency)
        if attempt <= self.outages:
            self.log.append(f"#{attempt} down")
            return Error(ReplicaDown(self.name, attempt))
        self.log.append(f"#{attempt} ok")
        return Ok(f"{key}@{self.name}")

    def read(self, key: str) -> Deferred[str, ReplicaDown | Exception]:
        """One attempt, as a Deferred completed on the running loop."""
        return L.from_lazy_coro_result(lambda: self._read(key))


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())
