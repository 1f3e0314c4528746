from __future__ import annotations

import typing


class AlreadyCompletedError(Exception):
    """Deferred was asked to succeed or fail a second time."""

    outcome: typing.Any

    def __init__(self, outcome: typing.Any) -> None:
        self.outcome = outcome
        super().__init__(f"Deferred already completed with {outcome!r}")


class CancelledError(Exception):
    """Combinator was force-completed before its policy was satisfied."""

    attempts: int

    def __init__(self, attempts: int) -> None:
        self.attempts = attempts
        super().__init__(f"Cancelled after {attempts} attempts")


class ReactorNotRunningError(RuntimeError):
    """Next-tick scheduling was requested without a running reactor."""

    def __init__(self) -> None:
        super().__init__("No reactor is running to schedule the next tick")


__all__ = ("AlreadyCompletedError", "CancelledError", "ReactorNotRunningError")
