"""Domain services."""

from api_dashboard.domain.services.dashboard import (
    DashboardResult,
    DashboardService,
    Notice,
    build_dashboard,
)
from api_dashboard.domain.services.records import (
    DuplicateRecordError,
    InvalidStatusError,
    RecordNotFoundError,
    RecordStore,
    RecordStoreError,
    counter_ids,
    uuid_ids,
)

__all__ = [
    "DashboardResult",
    "DashboardService",
    "DuplicateRecordError",
    "InvalidStatusError",
    "Notice",
    "RecordNotFoundError",
    "RecordStore",
    "RecordStoreError",
    "build_dashboard",
    "counter_ids",
    "uuid_ids",
]
