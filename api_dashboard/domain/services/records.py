"""
In-memory record store backing the dashboard.

Records are kept in insertion order and keyed by id. Updates replace the
frozen record at its existing position, so ``id`` and ``created_at`` can only
be set once, at creation.
"""

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import replace
from datetime import UTC, datetime
from typing import Any
from uuid import uuid4

import structlog

from api_dashboard.domain.models import RecordStats, RecordStatus, UserRecord
from api_dashboard.schemas.records import RecordUpdate

logger = structlog.get_logger()

IdFactory = Callable[[], str]
Clock = Callable[[], datetime]

MAX_ID_ATTEMPTS = 100


class RecordStoreError(Exception):
    """Base class for record store failures."""


class RecordNotFoundError(RecordStoreError):
    """Raised when no record matches the requested id."""

    def __init__(self, record_id: str) -> None:
        super().__init__(f"User '{record_id}' not found")
        self.record_id = record_id


class InvalidStatusError(RecordStoreError):
    """Raised in strict mode when a status is not a known RecordStatus."""

    def __init__(self, value: str) -> None:
        allowed = ", ".join(status.value for status in RecordStatus)
        super().__init__(f"Unsupported status '{value}' (expected one of: {allowed})")
        self.value = value


class DuplicateRecordError(RecordStoreError):
    """Raised when the initial collection repeats an id."""

    def __init__(self, record_id: str) -> None:
        super().__init__(f"Duplicate record id '{record_id}'")
        self.record_id = record_id


def uuid_ids() -> IdFactory:
    return lambda: uuid4().hex


def counter_ids(start: int = 1) -> IdFactory:
    """Return a factory yielding "1", "2", ... starting at ``start``."""
    counter = itertools.count(start)
    return lambda: str(next(counter))


def _utcnow() -> datetime:
    return datetime.now(UTC)


class RecordStore:
    """Ordered collection of user records with CRUD and aggregate queries."""

    def __init__(
        self,
        records: Iterable[UserRecord] = (),
        *,
        id_factory: IdFactory | None = None,
        clock: Clock | None = None,
        strict_status: bool = False,
    ) -> None:
        self._records: dict[str, UserRecord] = {}
        for record in records:
            if not record.id:
                raise RecordStoreError("Records must have a non-empty id")
            if record.id in self._records:
                raise DuplicateRecordError(record.id)
            self._records[record.id] = record
        self._id_factory = id_factory or uuid_ids()
        self._clock = clock or _utcnow
        self.strict_status = strict_status

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._records

    def __iter__(self) -> Iterator[UserRecord]:
        return iter(list(self._records.values()))

    def create(self, name: str, email: str, status: str = RecordStatus.ACTIVE) -> UserRecord:
        """Append a new record with a fresh id and today's date."""
        record = UserRecord(
            id=self._next_id(),
            name=name,
            email=email,
            status=self._normalize_status(status),
            created_at=self._clock().astimezone(UTC).date().isoformat(),
        )
        self._records[record.id] = record
        logger.info("record_created", record_id=record.id, status=record.status)
        return record

    def read(self, record_id: str) -> UserRecord:
        try:
            return self._records[record_id]
        except KeyError:
            raise RecordNotFoundError(record_id) from None

    def update(self, record_id: str, fields: RecordUpdate | Mapping[str, Any]) -> UserRecord:
        """Apply the supplied name/email/status to an existing record.

        Fields left out of ``fields`` keep their previous value. Raises
        :class:`RecordNotFoundError` without touching the collection when the
        id is unknown.
        """
        current = self.read(record_id)
        if not isinstance(fields, RecordUpdate):
            fields = RecordUpdate.model_validate(dict(fields))

        changes = fields.changes()
        if "status" in changes:
            changes["status"] = self._normalize_status(changes["status"])

        updated = replace(current, **changes)
        self._records[record_id] = updated
        logger.info("record_updated", record_id=record_id, fields=sorted(changes))
        return updated

    def delete(self, record_id: str) -> bool:
        """Remove the record if present; deleting an unknown id is a no-op."""
        removed = self._records.pop(record_id, None)
        if removed is None:
            return False
        logger.info("record_deleted", record_id=record_id)
        return True

    def list_records(self) -> list[UserRecord]:
        return list(self._records.values())

    def count_by_status(self, status: str) -> int:
        wanted = status.value if isinstance(status, RecordStatus) else status
        return sum(1 for record in self._records.values() if record.status == wanted)

    def stats(self) -> RecordStats:
        return RecordStats(
            total=len(self._records),
            active=self.count_by_status(RecordStatus.ACTIVE),
            pending=self.count_by_status(RecordStatus.PENDING),
            inactive=self.count_by_status(RecordStatus.INACTIVE),
        )

    def _next_id(self) -> str:
        for _ in range(MAX_ID_ATTEMPTS):
            candidate = self._id_factory()
            if candidate and candidate not in self._records:
                return candidate
        raise RecordStoreError(f"Could not generate a unique id after {MAX_ID_ATTEMPTS} attempts")

    def _normalize_status(self, status: str) -> str:
        value = status.value if isinstance(status, RecordStatus) else str(status)
        if self.strict_status and not RecordStatus.contains(value):
            raise InvalidStatusError(value)
        return value
