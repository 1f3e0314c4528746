"""
Reactors
========

Next-tick scheduling for sequential combinators.

A reactor answers two questions: is an event loop running right now,
and "run this callback on a later loop iteration, not synchronously".
"""

from __future__ import annotations

import asyncio
import typing

from .._errors import ReactorNotRunningError
from .._types import Callback


class Reactor(typing.Protocol):
    """External cooperative scheduler."""

    def is_running(self) -> bool: ...

    def next_tick(self, callback: Callback, /) -> None: ...


class AsyncioReactor:
    """
    Reactor backed by an asyncio event loop.

    Unbound (default): uses whatever loop is running in the current thread.
    Bound: always schedules on the given loop.
    """

    __slots__ = ("_loop",)

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def is_running(self) -> bool:
        if self._loop is not None:
            return self._loop.is_running()
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            return False
        return True

    def next_tick(self, callback: Callback, /) -> None:
        loop = self._loop
        if loop is None:
            try:
                loop = asyncio.get_running_loop()
            except RuntimeError as exc:
                raise ReactorNotRunningError() from exc
        loop.call_soon(callback)

    def __repr__(self) -> str:
        return f"AsyncioReactor(loop={self._loop!r})"


class NullReactor:
    """Reactor that is never running. Under 'auto' this selects the inline strategy."""

    __slots__ = ()

    def is_running(self) -> bool:
        return False

    def next_tick(self, callback: Callback, /) -> None:
        _ = callback
        raise ReactorNotRunningError()

    def __repr__(self) -> str:
        return "NullReactor()"


__all__ = ("Reactor", "AsyncioReactor", "NullReactor")
