"""HTTP endpoints for managing URLs and their crawls."""

from __future__ import annotations

import re
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, Mapping, Optional

from flask import g, jsonify, request

from urlinsight.url import CreateURLInput, Status, UpdateURLInput

_UINT_RE = re.compile(r"[0-9]+")
_INT_RE = re.compile(r"[+-]?[0-9]+")
_UINT64_MAX = 2**64 - 1
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


@dataclass(frozen=True)
class PageRequest:
    """Requested page number and page size."""

    page: int = 1
    page_size: int = 10


def _atoi(text: str) -> int:
    """Parse a decimal integer; 0 when malformed, clamped to 64 bits."""
    if not _INT_RE.fullmatch(text):
        return 0
    return max(_INT64_MIN, min(_INT64_MAX, int(text)))


def pagination_from_query(args: Mapping[str, str]) -> PageRequest:
    """Read ``page`` and ``page_size`` from query arguments."""
    return PageRequest(
        page=_atoi(args.get("page", "1")),
        page_size=_atoi(args.get("page_size", "10")),
    )


def _parse_id(raw: str) -> Optional[int]:
    if not _UINT_RE.fullmatch(raw):
        return None
    value = int(raw)
    return value if value <= _UINT64_MAX else None


def _jsonable(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    to_dict = getattr(value, "to_dict", None)
    return to_dict() if callable(to_dict) else value


def _reply(body: Any, status: HTTPStatus):
    return jsonify(body), int(status)


def _error(message: str, status: HTTPStatus = HTTPStatus.BAD_REQUEST):
    return _reply({"error": message}, status)


def _payload() -> Any:
    return request.get_json(force=True, silent=True)


class URLHandler:
    """Serves the protected URL endpoints from a URL service."""

    def __init__(self, url_service) -> None:
        self._service = url_service

    def create(self):
        """Create a URL row from the JSON body."""
        try:
            data = CreateURLInput.from_dict(_payload())
        except ValueError:
            return _error("invalid payload")
        try:
            new_id = self._service.create(data)
        except Exception as exc:
            return _error(str(exc))
        return _reply({"id": new_id}, HTTPStatus.CREATED)

    def list(self):
        """List the current user's URLs, paginated."""
        user_id = g.user_id
        try:
            items = self._service.list(user_id, pagination_from_query(request.args))
        except Exception as exc:
            return _error(str(exc), HTTPStatus.INTERNAL_SERVER_ERROR)
        return _reply(_jsonable(items), HTTPStatus.OK)

    def get(self, id):
        """Return one URL row."""
        url_id = _parse_id(id)
        if url_id is None:
            return _error("invalid id")
        try:
            dto = self._service.get(url_id)
        except Exception as exc:
            return _error(str(exc), HTTPStatus.NOT_FOUND)
        return _reply(_jsonable(dto), HTTPStatus.OK)

    def update(self, id):
        """Update a URL row from the JSON body."""
        url_id = _parse_id(id)
        if url_id is None:
            return _error("invalid id")
        try:
            data = UpdateURLInput.from_dict(_payload())
        except ValueError:
            return _error("invalid payload")
        try:
            self._service.update(url_id, data)
        except Exception as exc:
            return _error(str(exc))
        return _reply({"message": "updated"}, HTTPStatus.OK)

    def delete(self, id):
        """Delete a URL row."""
        url_id = _parse_id(id)
        if url_id is None:
            return _error("invalid id")
        try:
            self._service.delete(url_id)
        except Exception as exc:
            return _error(str(exc))
        return _reply({"message": "deleted"}, HTTPStatus.OK)

    def start(self, id):
        """Queue a crawl of the URL."""
        url_id = _parse_id(id)
        if url_id is None:
            return _error("invalid id")
        try:
            self._service.start(url_id)
        except Exception as exc:
            return _error(str(exc))
        return _reply({"status": Status.QUEUED.value}, HTTPStatus.ACCEPTED)

    def stop(self, id):
        """Stop a crawl of the URL."""
        url_id = _parse_id(id)
        if url_id is None:
            return _error("invalid id")
        try:
            self._service.stop(url_id)
        except Exception as exc:
            return _error(str(exc))
        return _reply({"status": Status.STOPPED.value}, HTTPStatus.ACCEPTED)

    def results(self, id):
        """Return the latest analysis snapshot and links for the URL."""
        url_id = _parse_id(id)
        if url_id is None:
            return _error("invalid id")
        try:
            dto = self._service.results(url_id)
        except Exception as exc:
            return _error(str(exc))
        return _reply(_jsonable(dto), HTTPStatus.OK)

    def register_protected_routes(self, blueprint) -> None:
        """Mount the URL endpoints on *blueprint* (or an application)."""
        routes = [
            ("/urls", self.create, "POST"),
            ("/urls", self.list, "GET"),
            ("/urls/<id>", self.get, "GET"),
            ("/urls/<id>", self.update, "PUT"),
            ("/urls/<id>", self.delete, "DELETE"),
            ("/urls/<id>/start", self.start, "PATCH"),
            ("/urls/<id>/stop", self.stop, "PATCH"),
            ("/urls/<id>/results", self.results, "GET"),
        ]
        for rule, view, method in routes:
            blueprint.add_url_rule(rule, view_func=view, methods=[method])