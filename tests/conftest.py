from __future__ import annotations

from collections.abc import Callable, Iterator
from datetime import UTC, datetime

import pytest

from api_dashboard.core.config import get_settings
from api_dashboard.domain.reference_data import seed_records
from api_dashboard.domain.services.dashboard import DashboardService
from api_dashboard.domain.services.records import RecordStore, counter_ids

FIXED_NOW = datetime(2024, 2, 1, 9, 30, 15, 250000, tzinfo=UTC)


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def fixed_clock() -> Callable[[], datetime]:
    return lambda: FIXED_NOW


@pytest.fixture()
def store(fixed_clock: Callable[[], datetime]) -> RecordStore:
    """Store holding the three seed records, with ids continuing at "4"."""
    return RecordStore(seed_records(), id_factory=counter_ids(start=4), clock=fixed_clock)


@pytest.fixture()
def empty_store(fixed_clock: Callable[[], datetime]) -> RecordStore:
    return RecordStore(id_factory=counter_ids(), clock=fixed_clock)


@pytest.fixture()
def dashboard(store: RecordStore) -> DashboardService:
    return DashboardService(store)
