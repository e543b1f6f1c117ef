from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from datetime import UTC, datetime
from typing import Any

from api_dashboard.domain.models import UserRecord
from api_dashboard.schemas.records import QueryEnvelope, RecordPayload, RecordUpdate

DEFAULT_RESOURCE_PATH = "/api/users"


def _status_line(method: str, path: str, status: str) -> str:
    return f"{method} {path} - Status: {status}"


def _dump(body: Any) -> str:
    return json.dumps(body, indent=2, ensure_ascii=False)


def _record_body(record: UserRecord) -> dict[str, Any]:
    return RecordPayload.model_validate(record).model_dump(by_alias=True)


def _format_timestamp(moment: datetime) -> str:
    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_created(record: UserRecord, *, resource_path: str = DEFAULT_RESOURCE_PATH) -> str:
    """Render the response for a newly created record."""
    header = _status_line("POST", resource_path, "201 Created")
    return f"{header}\n{_dump(_record_body(record))}"


def format_read(record: UserRecord, *, resource_path: str = DEFAULT_RESOURCE_PATH) -> str:
    header = _status_line("GET", f"{resource_path}/{record.id}", "200 OK")
    return f"{header}\n{_dump(_record_body(record))}"


def format_updated(
    record_id: str,
    fields: RecordUpdate | Mapping[str, Any],
    *,
    resource_path: str = DEFAULT_RESOURCE_PATH,
) -> str:
    """Render the response for an update, echoing the id and the supplied fields."""
    if not isinstance(fields, RecordUpdate):
        fields = RecordUpdate.model_validate(dict(fields))
    header = _status_line("PUT", f"{resource_path}/{record_id}", "200 OK")
    return f"{header}\n{_dump({'id': record_id, **fields.changes()})}"


def format_deleted(record_id: str, *, resource_path: str = DEFAULT_RESOURCE_PATH) -> str:
    return _status_line("DELETE", f"{resource_path}/{record_id}", "204 No Content")


def format_not_found(
    method: str, record_id: str, *, resource_path: str = DEFAULT_RESOURCE_PATH
) -> str:
    header = _status_line(method, f"{resource_path}/{record_id}", "404 Not Found")
    body = {"detail": f"User '{record_id}' not found"}
    return f"{header}\n{_dump(body)}"


def format_query(
    method: str,
    path: str,
    snapshot: Iterable[UserRecord],
    *,
    now: datetime | None = None,
) -> str:
    """Render a simulated call returning the whole collection.

    The body carries the method, endpoint, a UTC timestamp (``now`` or the
    current time) and every record in ``snapshot``.
    """
    envelope = QueryEnvelope(
        method=method,
        endpoint=path,
        timestamp=_format_timestamp(now or datetime.now(UTC)),
        data=[RecordPayload.model_validate(record) for record in snapshot],
    )
    header = _status_line(method, path, "200 OK")
    return f"{header}\n{_dump(envelope.model_dump(by_alias=True))}"
