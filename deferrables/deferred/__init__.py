"""
Deferred
========

Deferred - single-assignment completion value:
- pending / succeeded(value) / failed(error)
- handler registration (on_success / on_failure / on_complete)
- outcome хранится как kungfu Result

Plus lift helpers bridging to kungfu LazyCoroResult.
"""

from . import lift
from .deferred import Deferred
from .lift import failed, from_lazy_coro_result, from_result, succeeded, to_lazy_coro_result

__all__ = (
    "Deferred",
    "lift",
    "succeeded",
    "failed",
    "from_result",
    "from_lazy_coro_result",
    "to_lazy_coro_result",
)
