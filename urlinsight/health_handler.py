"""Health and status endpoints."""

from __future__ import annotations

from datetime import datetime
from http import HTTPStatus
from typing import Any, Protocol

from flask import jsonify


class _HealthStatus(Protocol):
    service: str
    healthy: bool
    database: Any
    checked: datetime


class _HealthService(Protocol):
    def check(self) -> _HealthStatus: ...


def _rfc3339(moment: datetime) -> str:
    """Format *moment* as RFC 3339 with whole seconds and ``Z`` for UTC."""
    if moment.tzinfo is None:
        moment = moment.astimezone()
    text = moment.replace(microsecond=0).isoformat()
    if text.endswith("+00:00"):
        return text[: -len("+00:00")] + "Z"
    return text


class HealthHandler:
    """Serves the welcome and health endpoints from a health service."""

    def __init__(self, health_service: _HealthService) -> None:
        self._health_service = health_service

    def home(self):
        """Return a welcome message and the service name."""
        return (
            jsonify(
                {
                    "message": "Hello World!",
                    "service": self._health_service.check().service,
                    "status": "running",
                }
            ),
            int(HTTPStatus.OK),
        )

    def health(self):
        """Return the server and database status; 503 when unhealthy."""
        stat = self._health_service.check()
        code = HTTPStatus.OK if stat.healthy else HTTPStatus.SERVICE_UNAVAILABLE
        return (
            jsonify(
                {
                    "service": stat.service,
                    "status": "ok",
                    "database": stat.database,
                    "checked": _rfc3339(stat.checked),
                }
            ),
            int(code),
        )

    def register_routes(self, blueprint) -> None:
        """Mount the health endpoints on *blueprint* (or an application)."""
        blueprint.add_url_rule("/status", view_func=self.home, methods=["GET"])
        blueprint.add_url_rule("/health", view_func=self.health, methods=["GET"])