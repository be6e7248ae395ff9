"""Core service components."""

from healthcheck.core.health_reporter import (
    DatabaseConnection,
    DatabaseHandle,
    HealthReporter,
    LogSink,
)

__all__ = ["DatabaseConnection", "DatabaseHandle", "HealthReporter", "LogSink"]
