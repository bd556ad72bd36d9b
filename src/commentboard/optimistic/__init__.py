"""Optimistic overlay on top of authoritative state."""

from commentboard.optimistic.overlay import (
    OptimisticState,
    PendingUpdate,
    append_reducer,
    apply_optimistic,
)

__all__ = ['OptimisticState', 'PendingUpdate', 'append_reducer', 'apply_optimistic']
