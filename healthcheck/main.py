"""Main FastAPI application."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from healthcheck.config import settings
from healthcheck.core.health_reporter import HealthReporter
from healthcheck.database import SQLAlchemyDatabase, close_db, engine
from healthcheck.logging_config import configure_logging, get_logger
from healthcheck.routes import health

# Configure logging
configure_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    # Startup
    logger.info("application_starting", version=settings.app_version, env=settings.app_env)

    database = SQLAlchemyDatabase(engine)
    app.state.health_reporter = HealthReporter(
        logger=get_logger("healthcheck.health"),
        db=database,
    )
    logger.info("health_reporter_initialized")

    logger.info("application_started")

    yield

    # Shutdown
    logger.info("application_shutting_down")
    database.close()
    await close_db()
    logger.info("application_stopped")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Service liveness and database readiness checks",
    docs_url="/docs",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Include routers
app.include_router(health.router, prefix=settings.api_prefix.rstrip("/"))


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "status": "running",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "healthcheck.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )
