from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class RecordPayload(BaseModel):
    """JSON shape of a record inside a simulated response body."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str
    status: str
    created_at: str = Field(serialization_alias="createdAt")


class RecordUpdate(BaseModel):
    """Partial field set accepted by an update; unset fields keep their value."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    email: str | None = None
    status: str | None = None

    def changes(self) -> dict[str, str]:
        return {
            key: value
            for key, value in self.model_dump(mode="json", exclude_unset=True).items()
            if value is not None
        }


class QueryEnvelope(BaseModel):
    """Body rendered for a simulated collection query."""

    method: str
    endpoint: str
    status: str = "200 OK"
    timestamp: str
    data: list[RecordPayload]
