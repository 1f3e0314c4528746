"""
Join combinators
================

Combinators over a fixed set of deferreds known up front.

All operations are registered at once and may complete in any order;
outcomes are interpreted in the order they actually complete.
"""

from __future__ import annotations

from typing import Never, Self

from ..deferred import Deferred
from .base import Base


class Join[T, E, A, F](Base[T, E, A, F]):
    """Base for combinators waiting on some or all of a fixed set of operations."""

    __slots__ = ("_operations",)

    def __init__(self, *operations: Deferred[A, F]) -> None:
        super().__init__()
        self._operations = operations

    @property
    def operations(self) -> tuple[Deferred[A, F], ...]:
        return self._operations

    def setup(self) -> Self:
        """
        Register every operation, in order.

        If the policy already holds (e.g. InParallel over nothing), finish
        right away and register nothing.
        """
        if self._is_done():
            self._check()
            return self
        for op in self._operations:
            self.register_attempt(op)
        return self

    def _all_completed(self) -> bool:
        return len(self._successes) + len(self._failures) >= len(self._operations)


class FirstSuccess[A, F](Join[A, Never, A, F]):
    """
    Succeeds with the value of the chronologically first operation to succeed.

    NOTE: Never fails. If every operation fails (or there are none), this
          stays pending forever.
    """

    __slots__ = ()

    def _is_done(self) -> bool:
        return len(self._successes) > 0

    def _finish(self) -> None:
        self.succeed(self._successes[0])


class InParallel[A, F](Join[tuple[list[A], list[F]], Never, A, F]):
    """
    Waits for every operation to succeed or fail, then succeeds with
    (successes, failures).

    NOTE: Never fails. Stays pending if any operation never completes.
    """

    __slots__ = ()

    def _is_done(self) -> bool:
        return self._all_completed()

    def _finish(self) -> None:
        self.succeed((self.successes, self.failures))


# ============================================================================
# Sugar
# ============================================================================


def join_first_success[A, F](*operations: Deferred[A, F]) -> FirstSuccess[A, F]:
    """First operation to succeed wins. Never fails on its own."""
    return FirstSuccess(*operations).setup()


def in_parallel[A, F](*operations: Deferred[A, F]) -> InParallel[A, F]:
    """Wait for all operations, report (successes, failures). Never fails."""
    return InParallel(*operations).setup()


__all__ = ("Join", "FirstSuccess", "InParallel", "join_first_success", "in_parallel")
