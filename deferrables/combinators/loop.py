"""
Loop combinators
================

Combinators over deferreds produced one at a time by a factory.

Attempts are strictly sequential: attempt k+1 is requested only after
attempt k has completed. Two strategies:

- next_tick: each cycle starts from a fresh reactor callback, so the loop
  never blocks the reactor for more than one attempt per tick, never grows
  the stack and always completes asynchronously.
- inline: iterative while-loop for deferreds that resolve synchronously.
  If an attempt is still pending, the loop resumes from its completion.
"""

from __future__ import annotations

import logging
import typing
from typing import Never, Self

from .._types import AttemptFactory
from ..deferred import Deferred
from ..reactor import SchedulePolicy
from .base import Base

logger = logging.getLogger(__name__)


class Loop[T, E, A, F](Base[T, E, A, F]):
    """Base for combinators repeatedly running attempts from a factory."""

    __slots__ = ("_factory", "_policy", "_stopped", "_calls")

    def __init__(
        self,
        factory: AttemptFactory[A, F],
        *,
        policy: SchedulePolicy | None = None,
    ) -> None:
        super().__init__()
        self._factory = factory
        self._policy = policy if policy is not None else SchedulePolicy()
        self._stopped = False
        self._calls = 0

    @property
    def stopped(self) -> bool:
        """True once this combinator has completed, by policy or from outside."""
        return self._stopped

    @property
    def calls(self) -> int:
        """How many times the factory has been invoked."""
        return self._calls

    def setup(self) -> Self:
        """Start iterating with the strategy chosen by the schedule policy."""
        self.on_complete(self._stop)

        if self._is_done():
            self._check()
            return self

        strategy = self._policy.resolve()
        logger.debug("%s running with %s strategy", type(self).__name__, strategy)
        if strategy == "next_tick":
            self._schedule_next()
        else:
            self._run_inline()
        return self

    # Strategies

    def _schedule_next(self, _outcome: typing.Any = None) -> None:
        if self._stopped:
            return
        self._policy.reactor.next_tick(self._on_tick)

    def _on_tick(self) -> None:
        if self._stopped:
            return
        attempt = self._next_attempt()
        if attempt is not None:
            attempt.on_complete(self._schedule_next)

    def _run_inline(self, _outcome: typing.Any = None) -> None:
        while not self._stopped:
            attempt = self._next_attempt()
            if attempt is None:
                return
            if attempt.is_pending:
                attempt.on_complete(self._run_inline)
                return

    # One attempt cycle

    def _next_attempt(self) -> Deferred[A, F] | None:
        self._calls += 1
        try:
            attempt = self._factory()
        except Exception as exc:
            logger.debug("%s factory raised on call %d: %r", type(self).__name__, self._calls, exc)
            self.fail(exc)
            return None
        return self.register_attempt(attempt)

    def _stop(self, _outcome: typing.Any) -> None:
        self._stopped = True


class UntilSuccess[A, F](Loop[A, Exception, A, F]):
    """
    Runs attempts one after another until one succeeds, then succeeds with
    its value.

    Fails only if the factory itself raises. May run forever if attempts
    keep failing.
    """

    __slots__ = ()

    def _is_done(self) -> bool:
        return len(self._successes) > 0

    def _finish(self) -> None:
        self.succeed(self._successes[0])


class UntilFailure[A, F](Loop[Never, F | Exception, A, F]):
    """
    Runs attempts one after another until one fails, then fails with its
    error.

    Also fails if the factory raises. Like a while-loop, may run forever if
    attempts keep succeeding.
    """

    __slots__ = ()

    def _is_done(self) -> bool:
        return len(self._failures) > 0

    def _finish(self) -> None:
        self.fail(self._failures[0])


# ============================================================================
# Sugar
# ============================================================================


def loop_until_success[A, F](
    factory: AttemptFactory[A, F],
    *,
    policy: SchedulePolicy | None = None,
) -> UntilSuccess[A, F]:
    """Retry factory() sequentially until an attempt succeeds."""
    return UntilSuccess(factory, policy=policy).setup()


def loop_until_failure[A, F](
    factory: AttemptFactory[A, F],
    *,
    policy: SchedulePolicy | None = None,
) -> UntilFailure[A, F]:
    """Repeat factory() sequentially until an attempt fails."""
    return UntilFailure(factory, policy=policy).setup()


__all__ = (
    "Loop",
    "UntilSuccess",
    "UntilFailure",
    "loop_until_success",
    "loop_until_failure",
)
