"""
Base combinator
===============

Result accumulator shared by Join and Loop.

Every registered attempt ends up in exactly one of successes / failures,
in completion order. After each completion the combinator re-checks its
policy and finishes the first time it holds.
"""

from __future__ import annotations

import logging
import typing

from .._errors import CancelledError
from ..deferred import Deferred

logger = logging.getLogger(__name__)


class Base[T, E, A, F](Deferred[T, E]):
    """
    Deferred derived from other deferreds under a completion policy.

    T, E: this combinator's own success / failure types.
    A, F: success / failure types of the attempts it watches.

    Subclasses define _is_done() and _finish().
    """

    __slots__ = ("_successes", "_failures", "_attempts", "_finished")

    def __init__(self) -> None:
        super().__init__()
        self._successes: list[A] = []
        self._failures: list[F] = []
        self._attempts = 0
        self._finished = False

    @property
    def successes(self) -> list[A]:
        """Values of succeeded attempts, in completion order (copy)."""
        return list(self._successes)

    @property
    def failures(self) -> list[F]:
        """Errors of failed attempts, in completion order (copy)."""
        return list(self._failures)

    @property
    def attempts(self) -> int:
        """How many attempts have been registered."""
        return self._attempts

    def register_attempt(self, op: Deferred[A, F], /) -> Deferred[A, F]:
        """Record op's outcome when it completes, then re-check the policy. Returns op."""
        self._attempts += 1
        op.on_success(self._record_success)
        op.on_failure(self._record_failure)
        return op

    def cancel(self, error: typing.Any = None) -> None:
        """
        Force-complete with a failure before the policy is satisfied.

        Outstanding attempts keep being recorded but can no longer finish
        this combinator. No-op if already completed.
        """
        if self.is_completed:
            return
        logger.debug("Cancelling %r after %d attempts", self, self._attempts)
        self.fail(error if error is not None else CancelledError(self._attempts))

    # Policy hooks

    def _is_done(self) -> bool:
        raise NotImplementedError

    def _finish(self) -> None:
        raise NotImplementedError

    # Internals

    def _record_success(self, value: A) -> None:
        self._successes.append(value)
        self._check()

    def _record_failure(self, error: F) -> None:
        self._failures.append(error)
        self._check()

    def _check(self) -> None:
        if self._finished or not self._is_done():
            return
        self._finished = True
        if self.is_completed:
            # Completed from outside first, nothing left to finish
            return
        logger.debug(
            "Finishing %s: %d successes, %d failures",
            type(self).__name__,
            len(self._successes),
            len(self._failures),
        )
        self._finish()


__all__ = ("Base",)
