"""Outcomes of a write operation."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple, Union


@dataclass(frozen=True)
class ValidationFailed:
    """Input was rejected; nothing was written."""
    errors: Dict[str, List[str]]
    values: Dict[str, str] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return False


@dataclass(frozen=True)
class Committed:
    """Record persisted and dependent tags invalidated.

    `stale_tags` lists tags whose invalidation could not be delivered;
    readers of those tags may see old data until the process restarts.
    """
    record: Any = None
    stale_tags: Tuple[str, ...] = ()

    @property
    def success(self) -> bool:
        return True


@dataclass(frozen=True)
class PersistenceFailed:
    """Input was valid but the store could not be written."""
    reason: str

    @property
    def success(self) -> bool:
        return False


MutationResult = Union[ValidationFailed, Committed, PersistenceFailed]
