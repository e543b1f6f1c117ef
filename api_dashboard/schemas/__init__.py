from api_dashboard.schemas.records import QueryEnvelope, RecordPayload, RecordUpdate

__all__ = ["QueryEnvelope", "RecordPayload", "RecordUpdate"]
