"""Optimistic client state.

The view shown to the user is the last authoritative state with every
not-yet-confirmed value folded on top, oldest first. Adding a value is
synchronous so it is visible before the network call starts; each pending
value is later committed or rolled back on its own.
"""

import itertools
from dataclasses import dataclass
from typing import Awaitable, Callable, Generic, List, Optional, Sequence, TypeVar

from commentboard.utils.logger import setup_logger

T = TypeVar("T")

optimistic_logger = setup_logger("commentboard.optimistic")

Reducer = Callable[[List[T], T], List[T]]


def append_reducer(state: List[T], value: T) -> List[T]:
    return [*state, value]


def apply_optimistic(base: Sequence[T], pending: T, reducer: Reducer = append_reducer) -> List[T]:
    """Return a new state with pending layered on base; base is left untouched."""
    return reducer(list(base), pending)


@dataclass
class _Pending(Generic[T]):
    token: int
    value: T


class PendingUpdate(Generic[T]):
    """Handle for one optimistic value.

    The caller invokes commit() once the mutation is confirmed and
    rollback() on the failure branch. Whichever runs first wins; later
    calls are no-ops.
    """

    def __init__(self, state: "OptimisticState[T]", token: int, value: T):
        self._state = state
        self.token = token
        self.value = value

    def commit(self) -> None:
        self._state._commit(self.token)

    def rollback(self) -> None:
        self._state._resolve(self.token)

    @property
    def pending(self) -> bool:
        return self._state._is_pending(self.token)


class OptimisticState(Generic[T]):
    """Authoritative base state plus a FIFO queue of optimistic values."""

    def __init__(self, base: Sequence[T] = (), reducer: Reducer = append_reducer):
        self._base: List[T] = list(base)
        self._reducer = reducer
        self._pending: List[_Pending[T]] = []
        self._tokens = itertools.count(1)

    @property
    def base(self) -> List[T]:
        return list(self._base)

    @property
    def view(self) -> List[T]:
        state = list(self._base)
        for entry in self._pending:
            state = self._reducer(state, entry.value)
        return state

    @property
    def pending_values(self) -> List[T]:
        return [entry.value for entry in self._pending]

    def add(self, value: T) -> PendingUpdate[T]:
        """Layer value on the current view immediately."""
        token = next(self._tokens)
        self._pending.append(_Pending(token, value))
        return PendingUpdate(self, token, value)

    def refresh(self, authoritative: Sequence[T]) -> None:
        """Replace the base with freshly fetched ground truth."""
        self._base = list(authoritative)

    async def submit(
        self,
        value: T,
        mutation: Callable[[T], Awaitable[object]],
        refetch: Optional[Callable[[], Awaitable[Sequence[T]]]] = None,
    ):
        """
        Show value optimistically, run the mutation, then reconcile.

        A result whose `success` attribute is false, or an exception from
        the mutation, rolls the value back. On success the value is
        committed and, when refetch is given, the base is replaced by its
        result. A failing refetch is logged and leaves the committed value
        in the base; the mutation result is still returned.

        Args:
            value: Value to show before the mutation resolves
            mutation: Coroutine function performing the write
            refetch: Coroutine function returning the authoritative state

        Returns:
            The mutation's result
        """
        update = self.add(value)
        try:
            result = await mutation(value)
        except Exception:
            update.rollback()
            raise

        if not getattr(result, "success", False):
            update.rollback()
            return result

        update.commit()
        if refetch is not None:
            try:
                self.refresh(await refetch())
            except Exception as e:
                # The write is durable; keep the committed value and report success
                optimistic_logger.warning("refetch_failed", extra={
                    "data": {"error": str(e), "error_type": type(e).__name__}
                })
        return result

    def _commit(self, token: int) -> None:
        # Confirmed values stay visible until the next refresh replaces the base
        for entry in self._pending:
            if entry.token == token:
                self._base = self._reducer(self._base, entry.value)
        self._resolve(token)

    def _resolve(self, token: int) -> None:
        self._pending = [entry for entry in self._pending if entry.token != token]

    def _is_pending(self, token: int) -> bool:
        return any(entry.token == token for entry in self._pending)
