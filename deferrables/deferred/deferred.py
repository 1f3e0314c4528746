"""Deferred

Single-assignment completion cell with handler registration.

- Pending until succeed() / fail() / complete()
- Terminal afterwards, outcome stored as kungfu Result[T, E]
- Handlers registered after completion fire immediately

Built on top of kungfu library patterns."""

from __future__ import annotations

import asyncio
import typing
from collections.abc import Generator
from typing import Self

from kungfu import Error, Ok, Result

from .._errors import AlreadyCompletedError
from .._types import Handler, OutcomeHandler


class Deferred[T, E]:
    """Asynchronous completion value.

    Handlers run synchronously, in registration order, on whatever call
    completes the deferred. Exceptions raised by a handler propagate to
    that caller.

    Example:
        d = Deferred[int, str]()
        d.on_success(print).on_failure(log_error)
        d.succeed(42)  # prints 42
    """

    __slots__ = ("_outcome", "_handlers")

    def __init__(self) -> None:
        self._outcome: Result[T, E] | None = None
        self._handlers: list[OutcomeHandler[T, E]] = []

    # State

    @property
    def outcome(self) -> Result[T, E] | None:
        """Stored Result, or None while pending."""
        return self._outcome

    @property
    def is_pending(self) -> bool:
        return self._outcome is None

    @property
    def is_completed(self) -> bool:
        return self._outcome is not None

    # Terminal transitions

    def succeed(self, value: T, /) -> None:
        """Complete with Ok(value)."""
        self.complete(Ok(value))

    def fail(self, error: E, /) -> None:
        """Complete with Error(error)."""
        self.complete(Error(error))

    def complete(self, result: Result[T, E], /) -> None:
        """
        Complete with an already-built Result.

        Raises AlreadyCompletedError if the deferred is not pending.
        """
        if self._outcome is not None:
            raise AlreadyCompletedError(self._outcome)
        self._outcome = result
        handlers, self._handlers = self._handlers, []
        for handler in handlers:
            handler(result)

    # Handler registration

    def on_complete(self, handler: OutcomeHandler[T, E], /) -> Self:
        """Run handler with the Result once terminal (immediately if already)."""
        if self._outcome is None:
            self._handlers.append(handler)
        else:
            handler(self._outcome)
        return self

    def on_success(self, handler: Handler[T], /) -> Self:
        """Run handler with the value if the deferred succeeds."""

        def dispatch(result: Result[T, E]) -> None:
            match result:
                case Ok(value):
                    handler(value)
                case Error(_):
                    pass

        return self.on_complete(dispatch)

    def on_failure(self, handler: Handler[E], /) -> Self:
        """Run handler with the error if the deferred fails."""

        def dispatch(result: Result[T, E]) -> None:
            match result:
                case Error(error):
                    handler(error)
                case Ok(_):
                    pass

        return self.on_complete(dispatch)

    # Protocol methods

    def __await__(self) -> Generator[typing.Any, None, Result[T, E]]:
        """Wait for completion inside a running asyncio loop. Never raises on failure."""
        return self._wait().__await__()

    async def _wait(self) -> Result[T, E]:
        if self._outcome is not None:
            return self._outcome

        future: asyncio.Future[Result[T, E]] = asyncio.get_running_loop().create_future()

        def resolve(result: Result[T, E]) -> None:
            # Awaiting task may have been cancelled meanwhile
            if not future.done():
                future.set_result(result)

        self.on_complete(resolve)
        return await future

    def __repr__(self) -> str:
        state = "pending" if self._outcome is None else repr(self._outcome)
        return f"{type(self).__name__}({state})"


__all__ = ("Deferred",)
