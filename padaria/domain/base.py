"""Base classes for domain layer.

Provides the foundational record and entity abstractions shared by
catalog types.
"""

from abc import ABC
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Generic, Self, TypeVar


def utcnow() -> datetime:
    """Get the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


# ============================================================================
# Record Base
# ============================================================================


@dataclass(kw_only=True)
class Record(ABC):
    """Base class for stored records.

    Records are compared by their attributes; timestamps are excluded
    from comparison so a copy taken before and after a no-op save
    still compares equal.

    Attributes:
        created_at: Timestamp when the record was created.
        updated_at: Timestamp of last modification.
    """

    created_at: datetime = field(default_factory=utcnow, compare=False)
    updated_at: datetime = field(default_factory=utcnow, compare=False)

    def copy(self) -> Self:
        """Return a detached shallow copy of this record.

        Stores hand out copies so callers can never mutate stored state
        behind the store's back.

        Returns:
            New record with identical attribute values.
        """
        return replace(self)

    def _touch(self) -> None:
        """Update the updated_at timestamp."""
        self.updated_at = utcnow()


# ============================================================================
# Entity Base
# ============================================================================


T = TypeVar("T")


@dataclass(kw_only=True)
class Entity(Record, Generic[T]):
    """Base class for records with a generated identity.

    The identity is assigned once at creation and never changes.

    Attributes:
        id: Unique identifier for this entity.
    """

    id: T
