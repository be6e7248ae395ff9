"""Pydantic schemas for API responses."""

from healthcheck.schemas.health import HealthStatus, StatusResponse

__all__ = ["HealthStatus", "StatusResponse"]
