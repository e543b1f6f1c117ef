"""
Dashboard actions over a record store.

Each action runs one store operation, renders the simulated HTTP response for
it and remembers that text as the dashboard's current response panel.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import structlog

from api_dashboard.core.config import Settings, get_settings
from api_dashboard.core.logging import setup_logging
from api_dashboard.domain.models import RecordStats, RecordStatus, UserRecord
from api_dashboard.domain.reference_data import seed_records
from api_dashboard.domain.services import response_formatter
from api_dashboard.domain.services.records import (
    RecordNotFoundError,
    RecordStore,
    counter_ids,
    uuid_ids,
)
from api_dashboard.schemas.records import RecordUpdate

logger = structlog.get_logger()


@dataclass(frozen=True, slots=True)
class Notice:
    """Short outcome message for an action."""

    title: str
    description: str
    variant: str = "default"


@dataclass(slots=True)
class DashboardResult:
    response: str
    notice: Notice | None = None
    record: UserRecord | None = None


class DashboardService:
    """Runs CRUD actions and renders their simulated API responses."""

    def __init__(self, store: RecordStore, *, resource_path: str = "/api/users") -> None:
        self.store = store
        self.resource_path = resource_path
        self.last_response = ""

    def create_record(
        self, name: str, email: str, status: str = RecordStatus.ACTIVE
    ) -> DashboardResult:
        record = self.store.create(name, email, status)
        return self._finish(
            response_formatter.format_created(record, resource_path=self.resource_path),
            notice=Notice(
                "Record Created", "New user record has been successfully created via API."
            ),
            record=record,
        )

    def inspect_record(self, record_id: str) -> DashboardResult:
        try:
            record = self.store.read(record_id)
        except RecordNotFoundError:
            return self._not_found("GET", record_id)
        return self._finish(
            response_formatter.format_read(record, resource_path=self.resource_path),
            record=record,
        )

    def update_record(
        self,
        record_id: str,
        fields: RecordUpdate | Mapping[str, Any] | None = None,
        **changes: Any,
    ) -> DashboardResult:
        """Update a record from a field set and/or keyword changes.

        Keyword changes win over entries of ``fields`` with the same name.
        """
        if isinstance(fields, RecordUpdate):
            fields = fields.changes()
        payload = RecordUpdate.model_validate({**dict(fields or {}), **changes})

        try:
            record = self.store.update(record_id, payload)
        except RecordNotFoundError:
            return self._not_found("PUT", record_id)
        return self._finish(
            response_formatter.format_updated(
                record_id, payload, resource_path=self.resource_path
            ),
            notice=Notice("Record Updated", "User record has been successfully updated via API."),
            record=record,
        )

    def delete_record(self, record_id: str) -> DashboardResult:
        # DELETE is idempotent: an unknown id still answers 204
        self.store.delete(record_id)
        return self._finish(
            response_formatter.format_deleted(record_id, resource_path=self.resource_path),
            notice=Notice(
                "Record Deleted",
                "User record has been successfully deleted via API.",
                variant="destructive",
            ),
        )

    def simulate_call(self, method: str, endpoint: str) -> DashboardResult:
        """Render a simulated request that returns the full collection."""
        response = response_formatter.format_query(method, endpoint, self.store.list_records())
        logger.info("api_call_simulated", method=method, endpoint=endpoint)
        return self._finish(
            response,
            notice=Notice(
                "API Call Simulated", f"{method} request to {endpoint} executed successfully."
            ),
        )

    def stats(self) -> RecordStats:
        return self.store.stats()

    def _not_found(self, method: str, record_id: str) -> DashboardResult:
        logger.warning("record_not_found", method=method, record_id=record_id)
        return self._finish(
            response_formatter.format_not_found(
                method, record_id, resource_path=self.resource_path
            ),
            notice=Notice(
                "Record Not Found",
                f"User record '{record_id}' does not exist.",
                variant="destructive",
            ),
        )

    def _finish(
        self,
        response: str,
        *,
        notice: Notice | None = None,
        record: UserRecord | None = None,
    ) -> DashboardResult:
        self.last_response = response
        return DashboardResult(response=response, notice=notice, record=record)


def build_dashboard(settings: Settings | None = None) -> DashboardService:
    """Wire a dashboard and its store from settings."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, log_format=settings.log_format)

    initial = seed_records() if settings.seed_records else []
    if settings.id_strategy == "counter":
        id_factory = counter_ids(start=len(initial) + 1)
    else:
        id_factory = uuid_ids()

    store = RecordStore(initial, id_factory=id_factory, strict_status=settings.strict_status)
    logger.info(
        "dashboard_ready",
        service=settings.app_name,
        environment=settings.environment,
        version=settings.version,
        records=len(store),
    )
    return DashboardService(store, resource_path=settings.resource_path)
