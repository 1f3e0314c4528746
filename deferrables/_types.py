"""
Core type definitions for deferrables.

Типы и алиасы используемые по всей библиотеке.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from kungfu import Result

if typing.TYPE_CHECKING:
    from .deferred import Deferred

# ============================================================================
# Type aliases
# ============================================================================

# Handler = success or failure callback registered on a Deferred
type Handler[A] = Callable[[A], None]

# OutcomeHandler = completion callback, receives the stored Result
type OutcomeHandler[T, E] = Callable[[Result[T, E]], None]

# AttemptFactory = zero-argument function producing one new Deferred per call
# NOTE: May raise. A raise is treated as a failure of the whole loop.
type AttemptFactory[T, E] = Callable[[], Deferred[T, E]]

# Callback = what a reactor runs on the next tick
type Callback = Callable[[], None]

__all__ = (
    "Handler",
    "OutcomeHandler",
    "AttemptFactory",
    "Callback",
)
