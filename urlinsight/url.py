"""URLs submitted for analysis and their processing status."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar, Mapping, Optional
from urllib.parse import ParseResult, urlparse

if TYPE_CHECKING:
    from urlinsight.analysis_result import AnalysisResult
    from urlinsight.link import Link


class Status(str, Enum):
    """Processing state of a URL."""

    QUEUED = "queued"
    RUNNING = "running"
    DONE = "done"
    ERROR = "error"
    STOPPED = "stopped"


# A client may set every status except "stopped", which only the crawler sets.
_SETTABLE_STATUSES = frozenset({"queued", "running", "done", "error"})


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _timestamp(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def _is_url(value: str) -> bool:
    """Return True when *value* is an absolute URL."""
    try:
        parts = urlparse(value)
    except ValueError:
        return False
    if not parts.scheme:
        return False
    opaque = bool(parts.path) and not parts.path.startswith("/") and not parts.netloc
    return bool(parts.netloc or parts.fragment or opaque)


def _check_payload(data: Any) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError("payload must be an object")
    return data


def _string_field(data: Mapping[str, Any], key: str, *, required: bool = False) -> str:
    value = data.get(key, "")
    if value is None:
        value = ""
    if not isinstance(value, str):
        raise ValueError(f"{key} must be a string")
    if required and not value:
        raise ValueError(f"{key} is required")
    return value


def _id_field(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key, 0)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"{key} must be a non-negative integer")
    if value == 0:
        raise ValueError(f"{key} is required")
    return value


@dataclass(kw_only=True)
class URL:
    """A URL owned by a user, queued for analysis."""

    __tablename__: ClassVar[str] = "urls"

    id: int = 0
    user_id: int = 0
    original_url: str = ""
    status: Status = Status.QUEUED
    analysis_results: list[AnalysisResult] = field(default_factory=list)
    links: list[Link] = field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        self.status = Status(self.status)

    def to_dto(self) -> URLDTO:
        """Return the response view of this URL."""
        return URLDTO(
            id=self.id,
            user_id=self.user_id,
            original_url=self.original_url,
            status=self.status,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    def parsed_url(self) -> Optional[ParseResult]:
        """Return the parsed original URL, or None if it cannot be parsed."""
        try:
            parsed = urlparse(self.original_url)
            # Accessing the port validates it.
            parsed.port
        except ValueError:
            return None
        return parsed


@dataclass(kw_only=True)
class URLDTO:
    """URL data sent in responses."""

    id: int
    user_id: int
    original_url: str
    status: Status
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping."""
        return {
            "id": self.id,
            "user_id": self.user_id,
            "original_url": self.original_url,
            "status": Status(self.status).value,
            "created_at": _timestamp(self.created_at),
            "updated_at": _timestamp(self.updated_at),
        }


@dataclass(frozen=True, kw_only=True)
class CreateURLInput:
    """Validated fields for creating a URL."""

    user_id: int
    original_url: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CreateURLInput:
        """Validate a decoded JSON payload; raise ValueError when it is invalid."""
        data = _check_payload(data)
        user_id = _id_field(data, "user_id")
        original_url = _string_field(data, "original_url", required=True)
        if not _is_url(original_url):
            raise ValueError("original_url must be a valid URL")
        return cls(user_id=user_id, original_url=original_url)


@dataclass(frozen=True, kw_only=True)
class UpdateURLInput:
    """Validated optional fields for updating a URL; None means unchanged."""

    original_url: Optional[str] = None
    status: Optional[Status] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> UpdateURLInput:
        """Validate a decoded JSON payload; raise ValueError when it is invalid."""
        data = _check_payload(data)
        original_url = _string_field(data, "original_url")
        if original_url and not _is_url(original_url):
            raise ValueError("original_url must be a valid URL")
        status = _string_field(data, "status")
        if status and status not in _SETTABLE_STATUSES:
            raise ValueError(
                "status must be one of " + " ".join(sorted(_SETTABLE_STATUSES))
            )
        return cls(
            original_url=original_url or None,
            status=Status(status) if status else None,
        )


def url_from_create_input(data: CreateURLInput) -> URL:
    """Build a new queued URL from validated input."""
    now = _now()
    return URL(
        user_id=data.user_id,
        original_url=data.original_url,
        status=Status.QUEUED,
        created_at=now,
        updated_at=now,
    )