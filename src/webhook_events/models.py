"""
Pydantic models for event envelopes and the HTTP contract around them.
"""

from typing import Any, Protocol

from pydantic import BaseModel, ConfigDict, Field


class EventEnvelope(BaseModel):
    """Envelope exchanged between a publisher and a consumer."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    type: str = Field(..., description="Event type used to pick a handler", min_length=1)
    data: Any = Field(default=None, description="Opaque event payload")


class HealthStatus(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Overall service status")
    registered_event_types: list[str] = Field(
        default_factory=list, description="Event types with a registered handler"
    )


class EventRequest(Protocol):
    """Inbound request as seen by the consumer."""

    body: Any

    def header(self, name: str) -> str | None: ...


class JsonWriter(Protocol):
    def json(self, body: Any) -> Any: ...


class EventResponse(Protocol):
    """Outbound response as written by the consumer."""

    def status(self, code: int) -> JsonWriter: ...

    def send_status(self, code: int) -> Any: ...
