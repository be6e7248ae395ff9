"""Health check response schemas."""

from enum import Enum

from fastapi import status
from pydantic import BaseModel, Field

DATABASE_CONNECTED = "connected"
DATABASE_CONNECTION_ERROR = "database connection error"
DATABASE_PING_FAILED = "database ping failed"


class HealthStatus(str, Enum):
    """Reported service status."""

    HEALTHY = "healthy"
    READY = "ready"
    NOT_READY = "not ready"


class StatusResponse(BaseModel):
    """Health or readiness status.

    Serialized without unset fields, so the body is one of:
    ``{"status": "healthy"}``, ``{"status": "ready", "database": "connected"}``
    or ``{"status": "not ready", "error": "<reason>"}``.
    """

    status: HealthStatus = Field(..., description="Service status")
    database: str | None = Field(None, description="Database state when ready")
    error: str | None = Field(None, description="Failure reason when not ready")

    @classmethod
    def healthy(cls) -> "StatusResponse":
        return cls(status=HealthStatus.HEALTHY)

    @classmethod
    def ready(cls) -> "StatusResponse":
        return cls(status=HealthStatus.READY, database=DATABASE_CONNECTED)

    @classmethod
    def not_ready(cls, error: str) -> "StatusResponse":
        return cls(status=HealthStatus.NOT_READY, error=error)

    @property
    def http_status(self) -> int:
        """HTTP status code matching this result."""
        if self.status == HealthStatus.NOT_READY:
            return status.HTTP_503_SERVICE_UNAVAILABLE
        return status.HTTP_200_OK

    def to_body(self) -> dict[str, str]:
        """JSON body with unset fields dropped."""
        return self.model_dump(mode="json", exclude_none=True)
