"""Health reporter: process liveness and database readiness."""

from typing import Any, Protocol

from healthcheck.logging_config import get_logger
from healthcheck.schemas.health import (
    DATABASE_CONNECTION_ERROR,
    DATABASE_PING_FAILED,
    StatusResponse,
)


class DatabaseConnection(Protocol):
    """Live database connection."""

    async def ping(self) -> None:
        """Round-trip to the database, raise on failure."""
        ...

    async def close(self) -> None:
        """Release the connection."""
        ...


class DatabaseHandle(Protocol):
    """Source of database connections."""

    async def acquire(self) -> DatabaseConnection:
        """Obtain a live connection, raise if none is available."""
        ...


class LogSink(Protocol):
    """Structured logger."""

    def info(self, event: str, **kwargs: Any) -> Any: ...

    def warning(self, event: str, **kwargs: Any) -> Any: ...


class HealthReporter:
    """
    Reports liveness and readiness of the service.

    Holds non-owning references to a logger and a database handle for the
    lifetime of the process. The database handle is not validated here: an
    absent or unusable handle is reported as a connection error by
    :meth:`readiness`.
    """

    def __init__(self, logger: LogSink | None, db: DatabaseHandle | None):
        self.logger = logger if logger is not None else get_logger(__name__)
        self.db = db

    def liveness(self) -> StatusResponse:
        """Report that the process is running. Performs no I/O."""
        return StatusResponse.healthy()

    async def readiness(self) -> StatusResponse:
        """
        Report whether the database is reachable.

        Acquires a connection and pings it once. Failures are reported in the
        result and never raised; there are no retries.

        Returns:
            ``ready`` with ``database="connected"``, or ``not ready`` with
            ``"database connection error"`` / ``"database ping failed"``
        """
        if self.db is None:
            self.logger.warning("readiness_check_failed", stage="acquire", error_type="NoDatabaseHandle")
            return StatusResponse.not_ready(DATABASE_CONNECTION_ERROR)

        try:
            connection = await self.db.acquire()
        except Exception as e:
            self.logger.warning(
                "readiness_check_failed",
                stage="acquire",
                error_type=type(e).__name__,
            )
            return StatusResponse.not_ready(DATABASE_CONNECTION_ERROR)

        try:
            await connection.ping()
        except Exception as e:
            self.logger.warning(
                "readiness_check_failed",
                stage="ping",
                error_type=type(e).__name__,
            )
            return StatusResponse.not_ready(DATABASE_PING_FAILED)
        finally:
            await self._release(connection)

        return StatusResponse.ready()

    async def _release(self, connection: DatabaseConnection) -> None:
        try:
            await connection.close()
        except Exception as e:
            self.logger.warning("readiness_connection_release_failed", error_type=type(e).__name__)
