from api_dashboard.domain.models import RecordStats, RecordStatus, UserRecord

__all__ = ["RecordStats", "RecordStatus", "UserRecord"]
