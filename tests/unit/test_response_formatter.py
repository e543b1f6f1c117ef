from __future__ import annotations

import json
from datetime import UTC, datetime, timedelta, timezone

from api_dashboard.domain.models import UserRecord
from api_dashboard.domain.reference_data import seed_records
from api_dashboard.domain.services import response_formatter
from api_dashboard.schemas.records import RecordUpdate

RECORD = UserRecord(
    id="abc123", name="Alice", email="a@x.com", status="active", created_at="2024-02-01"
)


def _split(response: str) -> tuple[str, object]:
    header, _, body = response.partition("\n")
    return header, json.loads(body)


def test_format_created_renders_201_and_ordered_record() -> None:
    response = response_formatter.format_created(RECORD)

    assert response == (
        "POST /api/users - Status: 201 Created\n"
        "{\n"
        '  "id": "abc123",\n'
        '  "name": "Alice",\n'
        '  "email": "a@x.com",\n'
        '  "status": "active",\n'
        '  "createdAt": "2024-02-01"\n'
        "}"
    )


def test_format_read_targets_record_path() -> None:
    header, body = _split(response_formatter.format_read(RECORD))

    assert header == "GET /api/users/abc123 - Status: 200 OK"
    assert body["createdAt"] == "2024-02-01"


def test_format_updated_echoes_only_supplied_fields() -> None:
    response = response_formatter.format_updated("abc123", {"status": "pending"})

    header, body = _split(response)
    assert header == "PUT /api/users/abc123 - Status: 200 OK"
    assert list(body) == ["id", "status"]
    assert body == {"id": "abc123", "status": "pending"}


def test_format_updated_accepts_update_model() -> None:
    fields = RecordUpdate(name="Alicia", email="alicia@x.com")
    _, body = _split(response_formatter.format_updated("abc123", fields))

    assert body == {"id": "abc123", "name": "Alicia", "email": "alicia@x.com"}


def test_format_deleted_has_no_body() -> None:
    response = response_formatter.format_deleted("abc123")
    assert response == "DELETE /api/users/abc123 - Status: 204 No Content"


def test_format_not_found() -> None:
    header, body = _split(response_formatter.format_not_found("PUT", "zzz"))

    assert header == "PUT /api/users/zzz - Status: 404 Not Found"
    assert body == {"detail": "User 'zzz' not found"}


def test_custom_resource_path() -> None:
    response = response_formatter.format_deleted("7", resource_path="/v2/members")
    assert response == "DELETE /v2/members/7 - Status: 204 No Content"


def test_format_query_includes_timestamp_and_snapshot() -> None:
    now = datetime(2024, 2, 1, 9, 30, 15, 250000, tzinfo=UTC)
    records = seed_records()

    header, body = _split(
        response_formatter.format_query("GET", "/api/users", records, now=now)
    )

    assert header == "GET /api/users - Status: 200 OK"
    assert list(body) == ["method", "endpoint", "status", "timestamp", "data"]
    assert body["method"] == "GET"
    assert body["endpoint"] == "/api/users"
    assert body["status"] == "200 OK"
    assert body["timestamp"] == "2024-02-01T09:30:15.250Z"
    assert [item["name"] for item in body["data"]] == ["John Doe", "Jane Smith", "Bob Johnson"]
    assert body["data"][0] == {
        "id": "1",
        "name": "John Doe",
        "email": "john.doe@example.com",
        "status": "active",
        "createdAt": "2024-01-15",
    }


def test_format_query_normalizes_timestamp_to_utc() -> None:
    now = datetime(2024, 2, 1, 11, 0, tzinfo=timezone(timedelta(hours=2)))
    _, body = _split(response_formatter.format_query("GET", "/api/users/1", [], now=now))

    assert body["timestamp"] == "2024-02-01T09:00:00.000Z"
    assert body["data"] == []


def test_format_query_defaults_to_current_time() -> None:
    _, body = _split(response_formatter.format_query("GET", "/api/users", []))
    assert body["timestamp"].endswith("Z")


def test_non_ascii_is_kept_verbatim() -> None:
    record = UserRecord(id="9", name="Zoë", email="z@x.com", created_at="2024-02-01")
    assert '"name": "Zoë"' in response_formatter.format_created(record)
