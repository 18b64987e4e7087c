"""Hyperlinks found on an analysed page."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, ClassVar, Mapping, Optional

from urlinsight.url import _is_url

STATUS_CODE_MIN = 100
STATUS_CODE_MAX = 599


def _timestamp(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def _int_field(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key, 0)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key} must be an integer")
    return value


@dataclass(kw_only=True)
class Link:
    """A link found on a URL's page, with the status it answered."""

    __tablename__: ClassVar[str] = "links"

    id: int = 0
    url_id: int = 0
    href: str = ""
    is_external: bool = False
    status_code: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    def to_dto(self) -> LinkDTO:
        """Return the response view of this link."""
        return LinkDTO(
            id=self.id,
            url_id=self.url_id,
            href=self.href,
            is_external=self.is_external,
            status_code=self.status_code,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


@dataclass(kw_only=True)
class LinkDTO:
    """Link data sent in responses."""

    id: int
    url_id: int
    href: str
    is_external: bool
    status_code: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping."""
        return {
            "id": self.id,
            "url_id": self.url_id,
            "href": self.href,
            "is_external": self.is_external,
            "status_code": self.status_code,
            "created_at": _timestamp(self.created_at),
            "updated_at": _timestamp(self.updated_at),
        }


@dataclass(frozen=True, kw_only=True)
class CreateLinkInput:
    """Validated fields for recording a link."""

    url_id: int
    href: str
    is_external: bool = False
    status_code: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CreateLinkInput:
        """Validate a decoded JSON payload; raise ValueError when it is invalid."""
        if not isinstance(data, Mapping):
            raise ValueError("payload must be an object")
        url_id = _int_field(data, "url_id")
        if url_id < 0:
            raise ValueError("url_id must be a non-negative integer")
        if url_id == 0:
            raise ValueError("url_id is required")
        href = data.get("href", "")
        if not isinstance(href, str):
            raise ValueError("href must be a string")
        if not href:
            raise ValueError("href is required")
        if not _is_url(href):
            raise ValueError("href must be a valid URL")
        is_external = data.get("is_external", False)
        if not isinstance(is_external, bool):
            raise ValueError("is_external must be a boolean")
        status_code = _int_field(data, "status_code")
        if status_code == 0:
            raise ValueError("status_code is required")
        if not STATUS_CODE_MIN <= status_code <= STATUS_CODE_MAX:
            raise ValueError(
                f"status_code must be between {STATUS_CODE_MIN} and {STATUS_CODE_MAX}"
            )
        return cls(url_id=url_id, href=href, is_external=is_external, status_code=status_code)


def link_from_create_input(data: CreateLinkInput) -> Link:
    """Build a new link from validated input."""
    now = datetime.now(timezone.utc)
    return Link(
        url_id=data.url_id,
        href=data.href,
        is_external=data.is_external,
        status_code=data.status_code,
        created_at=now,
        updated_at=now,
    )