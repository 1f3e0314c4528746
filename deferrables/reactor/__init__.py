from .policy import SchedulePolicy
from .reactor import AsyncioReactor, NullReactor, Reactor

__all__ = (
    # Protocol
    "Reactor",
    # Implementations
    "AsyncioReactor",
    "NullReactor",
    # Config
    "SchedulePolicy",
)
