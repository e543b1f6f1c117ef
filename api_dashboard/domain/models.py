from __future__ import annotations

import enum
from dataclasses import dataclass


class RecordStatus(str, enum.Enum):
    """Lifecycle state shown for each user record."""

    ACTIVE = "active"
    PENDING = "pending"
    INACTIVE = "inactive"

    @classmethod
    def contains(cls, value: str) -> bool:
        return value in {status.value for status in cls}


@dataclass(frozen=True, slots=True)
class UserRecord:
    """One user entry held by the record store.

    ``status`` is a plain string: values outside :class:`RecordStatus` are
    kept as given unless the store runs in strict mode.
    """

    id: str
    name: str
    email: str
    status: str = RecordStatus.ACTIVE.value
    created_at: str = ""


@dataclass(frozen=True, slots=True)
class RecordStats:
    """Aggregate counts displayed above the record table."""

    total: int
    active: int
    pending: int
    inactive: int
