from __future__ import annotations

from api_dashboard.domain.models import RecordStatus, UserRecord

SEED_RECORD_DEFINITIONS = [
    {
        "id": "1",
        "name": "John Doe",
        "email": "john.doe@example.com",
        "status": RecordStatus.ACTIVE.value,
        "created_at": "2024-01-15",
    },
    {
        "id": "2",
        "name": "Jane Smith",
        "email": "jane.smith@example.com",
        "status": RecordStatus.PENDING.value,
        "created_at": "2024-01-14",
    },
    {
        "id": "3",
        "name": "Bob Johnson",
        "email": "bob.johnson@example.com",
        "status": RecordStatus.INACTIVE.value,
        "created_at": "2024-01-13",
    },
]


def seed_records() -> list[UserRecord]:
    """Return fresh copies of the records the dashboard starts with."""
    return [UserRecord(**definition) for definition in SEED_RECORD_DEFINITIONS]
