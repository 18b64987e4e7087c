"""Metadata parsed from an analysed page."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, ClassVar, Mapping, Optional

_HEADING_LEVELS = range(1, 7)


def _timestamp(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def _int_field(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key, 0)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key} must be an integer")
    if value < 0:
        raise ValueError(f"{key} must be greater than or equal to 0")
    return value


@dataclass(kw_only=True)
class AnalysisResult:
    """Parsed metadata for a URL, including link counts."""

    __tablename__: ClassVar[str] = "analysis_results"

    id: int = 0
    url_id: int = 0
    html_version: str = ""
    title: str = ""
    h1_count: int = 0
    h2_count: int = 0
    h3_count: int = 0
    h4_count: int = 0
    h5_count: int = 0
    h6_count: int = 0
    has_login_form: bool = False
    internal_link_count: int = 0
    external_link_count: int = 0
    broken_link_count: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    def to_dto(self) -> AnalysisResultDTO:
        """Return the response view of this result (without link counts)."""
        return AnalysisResultDTO(
            id=self.id,
            url_id=self.url_id,
            html_version=self.html_version,
            title=self.title,
            h1_count=self.h1_count,
            h2_count=self.h2_count,
            h3_count=self.h3_count,
            h4_count=self.h4_count,
            h5_count=self.h5_count,
            h6_count=self.h6_count,
            has_login_form=self.has_login_form,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


@dataclass(kw_only=True)
class AnalysisResultDTO:
    """Analysis result data sent in responses."""

    id: int
    url_id: int
    html_version: str
    title: str
    h1_count: int = 0
    h2_count: int = 0
    h3_count: int = 0
    h4_count: int = 0
    h5_count: int = 0
    h6_count: int = 0
    has_login_form: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping."""
        out: dict[str, Any] = {
            "id": self.id,
            "url_id": self.url_id,
            "html_version": self.html_version,
            "title": self.title,
        }
        for level in _HEADING_LEVELS:
            key = f"h{level}_count"
            out[key] = getattr(self, key)
        out["has_login_form"] = self.has_login_form
        out["created_at"] = _timestamp(self.created_at)
        out["updated_at"] = _timestamp(self.updated_at)
        return out


@dataclass(frozen=True, kw_only=True)
class CreateAnalysisResultInput:
    """Validated fields for recording an analysis result."""

    url_id: int
    html_version: str
    title: str = ""
    h1_count: int = 0
    h2_count: int = 0
    h3_count: int = 0
    h4_count: int = 0
    h5_count: int = 0
    h6_count: int = 0
    has_login_form: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CreateAnalysisResultInput:
        """Validate a decoded JSON payload; raise ValueError when it is invalid."""
        if not isinstance(data, Mapping):
            raise ValueError("payload must be an object")
        url_id = _int_field(data, "url_id")
        if url_id == 0:
            raise ValueError("url_id is required")
        html_version = data.get("html_version", "")
        if not isinstance(html_version, str):
            raise ValueError("html_version must be a string")
        if not html_version:
            raise ValueError("html_version is required")
        title = data.get("title", "")
        if title is None:
            title = ""
        if not isinstance(title, str):
            raise ValueError("title must be a string")
        counts = {
            f"h{level}_count": _int_field(data, f"h{level}_count")
            for level in _HEADING_LEVELS
        }
        has_login_form = data.get("has_login_form", False)
        if not isinstance(has_login_form, bool):
            raise ValueError("has_login_form must be a boolean")
        return cls(
            url_id=url_id,
            html_version=html_version,
            title=title,
            has_login_form=has_login_form,
            **counts,
        )


def analysis_result_from_create_input(data: CreateAnalysisResultInput) -> AnalysisResult:
    """Build a new analysis result from validated input."""
    now = datetime.now(timezone.utc)
    return AnalysisResult(
        url_id=data.url_id,
        html_version=data.html_version,
        title=data.title,
        h1_count=data.h1_count,
        h2_count=data.h2_count,
        h3_count=data.h3_count,
        h4_count=data.h4_count,
        h5_count=data.h5_count,
        h6_count=data.h6_count,
        has_login_form=data.has_login_form,
        created_at=now,
        updated_at=now,
    )