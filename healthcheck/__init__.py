"""Liveness and readiness endpoints for a database-backed HTTP service."""

