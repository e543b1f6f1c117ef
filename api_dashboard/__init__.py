"""In-memory user record store with simulated REST responses."""

from api_dashboard.domain.services import DashboardService, RecordStore, build_dashboard

__all__ = ["DashboardService", "RecordStore", "build_dashboard"]
