"""
Подъем значений в Deferred и обратно.

Functions for turning plain values, Result and kungfu LazyCoroResult into
Deferred, and for handing a Deferred back to LazyCoroResult pipelines.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Never

from kungfu import Error, LazyCoroResult, Result

from .deferred import Deferred

logger = logging.getLogger(__name__)

# Strong references to bridge tasks, the loop only keeps weak ones
_background: set[asyncio.Task[None]] = set()


def succeeded[T](value: T) -> Deferred[T, Never]:
    """
    Already-succeeded Deferred.

    **When to use:** As the return value of an attempt factory that
    resolves synchronously.

    Example:
        from deferrables import lift as L

        d = L.succeeded(42)
        d.outcome  # Ok(42)
    """
    deferred: Deferred[T, Never] = Deferred()
    deferred.succeed(value)
    return deferred


def failed[E](error: E) -> Deferred[Never, E]:
    """
    Already-failed Deferred. Dual of succeeded().

    Example:
        from deferrables import lift as L

        d = L.failed("boom")
        d.outcome  # Error('boom')
    """
    deferred: Deferred[Never, E] = Deferred()
    deferred.fail(error)
    return deferred


def from_result[T, E](result: Result[T, E]) -> Deferred[T, E]:
    """
    Lift already-computed Result into a completed Deferred.

    NOTE: This is NOT lazy — result is already computed.
    """
    deferred: Deferred[T, E] = Deferred()
    deferred.complete(result)
    return deferred


def from_lazy_coro_result[T, E](
    interp: Callable[[], Awaitable[Result[T, E]]],
) -> Deferred[T, E | Exception]:
    """
    Run a LazyCoroResult (or any thunk returning an awaitable Result) as an
    asyncio task and complete a Deferred with what it returns.

    If the coroutine raises, the Deferred fails with the exception.
    Must be called with a running event loop.

    Example:
        from deferrables import lift as L

        d = L.from_lazy_coro_result(fetch_user(42))
        result = await d  # Ok(User(...)) or Error(...)
    """
    deferred: Deferred[T, E | Exception] = Deferred()

    async def run() -> None:
        try:
            result: Result[T, E | Exception] = await interp()
        except Exception as exc:
            result = Error(exc)
        if deferred.is_completed:
            logger.debug("Discarding %r, %r already completed", result, deferred)
            return
        deferred.complete(result)

    task = asyncio.get_running_loop().create_task(run())
    _background.add(task)
    task.add_done_callback(_background.discard)
    return deferred


def to_lazy_coro_result[T, E](deferred: Deferred[T, E]) -> LazyCoroResult[T, E]:
    """
    Hand a Deferred to LazyCoroResult pipelines.

    Awaiting the returned LazyCoroResult waits for the Deferred and yields
    its Result. Awaiting it again yields the same Result.
    """

    async def run() -> Result[T, E]:
        return await deferred

    return LazyCoroResult(run)


__all__ = (
    "succeeded",
    "failed",
    "from_result",
    "from_lazy_coro_result",
    "to_lazy_coro_result",
)
