from .base import Base
from .join import FirstSuccess, InParallel, Join, in_parallel, join_first_success
from .loop import Loop, UntilFailure, UntilSuccess, loop_until_failure, loop_until_success

__all__ = (
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
)
