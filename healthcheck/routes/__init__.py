"""API routes."""

from healthcheck.routes import health

__all__ = ["health"]
