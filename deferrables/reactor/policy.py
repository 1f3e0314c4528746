"""Schedule policy

Configuration for how a Loop runs its attempt cycles."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from .._errors import ReactorNotRunningError
from .reactor import AsyncioReactor, NullReactor, Reactor


@dataclass(frozen=True, slots=True)
class SchedulePolicy:
    """
    Which strategy a Loop uses, and on which reactor.

    - "auto": next_tick if the reactor is running, inline otherwise
    - "next_tick": every cycle on a fresh reactor tick, always asynchronous
    - "inline": plain iterative loop, synchronous when attempts are
    """

    strategy: Literal["auto", "next_tick", "inline"] = "auto"
    reactor: Reactor = field(default_factory=AsyncioReactor)

    def __post_init__(self) -> None:
        if self.strategy not in ("auto", "next_tick", "inline"):
            raise ValueError("SchedulePolicy.strategy must be 'auto', 'next_tick' or 'inline'")

    @classmethod
    def inline(cls) -> SchedulePolicy:
        """Never defer to a reactor."""
        return cls(strategy="inline", reactor=NullReactor())

    @classmethod
    def next_tick(cls, reactor: Reactor | None = None) -> SchedulePolicy:
        """Always defer each cycle to the next tick of reactor (asyncio by default)."""
        return cls(strategy="next_tick", reactor=reactor if reactor is not None else AsyncioReactor())

    def resolve(self) -> Literal["next_tick", "inline"]:
        """
        Pick the concrete strategy.

        Consults reactor.is_running() once. Raises ReactorNotRunningError
        when "next_tick" is forced without a running reactor.
        """
        match self.strategy:
            case "inline":
                return "inline"
            case "next_tick":
                if not self.reactor.is_running():
                    raise ReactorNotRunningError()
                return "next_tick"
            case _:
                return "next_tick" if self.reactor.is_running() else "inline"


__all__ = ("SchedulePolicy",)
