"""
Combinators over deferred values.

Compose many Deferreds, known up front or produced one at a time,
into a single derived Deferred.

Architecture:
- Deferred: single-assignment completion cell, outcome is a kungfu Result
- Base: result accumulator (successes / failures in completion order)
- Join family: fixed set of operations (first success, in parallel)
- Loop family: lazily produced operations, one at a time
  (until success, until failure), on reactor ticks or inline
"""

# Core types
from ._types import AttemptFactory, Callback, Handler, OutcomeHandler

# Deferred + lift helpers
from . import deferred
from .deferred import Deferred
from .deferred import lift
from .deferred.lift import failed, from_lazy_coro_result, from_result, succeeded, to_lazy_coro_result

# Reactors and scheduling config
from .reactor import AsyncioReactor, NullReactor, Reactor, SchedulePolicy

# Combinators
from .combinators import (
    Base,
    # Join
    FirstSuccess,
    InParallel,
    Join,
    in_parallel,
    join_first_success,
    # Loop
    Loop,
    UntilFailure,
    UntilSuccess,
    loop_until_failure,
    loop_until_success,
)

# Errors
from ._errors import AlreadyCompletedError, CancelledError, ReactorNotRunningError

__all__ = (
    # Types
    "AttemptFactory",
    "Callback",
    "Handler",
    "OutcomeHandler",
    # Deferred
    "deferred",
    "Deferred",
    # Lift module (namespace import - preferred)
    "lift",
    # Lift functions (direct import)
    "succeeded",
    "failed",
    "from_result",
    "from_lazy_coro_result",
    "to_lazy_coro_result",
    # Reactors
    "Reactor",
    "AsyncioReactor",
    "NullReactor",
    "SchedulePolicy",
    # Accumulator
    "Base",
    # Join
    "Join",
    "FirstSuccess",
    "InParallel",
    "join_first_success",
    "in_parallel",
    # Loop
    "Loop",
    "UntilSuccess",
    "UntilFailure",
    "loop_until_success",
    "loop_until_failure",
    # Errors
    "AlreadyCompletedError",
    "CancelledError",
    "ReactorNotRunningError",
)
