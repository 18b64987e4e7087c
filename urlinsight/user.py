"""Registered users."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, ClassVar, Mapping, Optional

if TYPE_CHECKING:
    from urlinsight.url import URL

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s.]+(\.[^@\s.]+)*$")

USERNAME_MIN = 3
USERNAME_MAX = 50
PASSWORD_MIN = 6


def _timestamp(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def _string_field(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key, "")
    if value is None:
        value = ""
    if not isinstance(value, str):
        raise ValueError(f"{key} must be a string")
    if not value:
        raise ValueError(f"{key} is required")
    return value


@dataclass(kw_only=True)
class User:
    """A registered user; the password is never exposed in responses."""

    __tablename__: ClassVar[str] = "users"

    id: int = 0
    username: str = ""
    email: str = ""
    password: str = field(default="", repr=False)
    urls: list[URL] = field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    def to_dto(self) -> UserDTO:
        """Return the response view of this user."""
        return UserDTO(
            id=self.id,
            username=self.username,
            email=self.email,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


@dataclass(kw_only=True)
class UserDTO:
    """User data sent in responses."""

    id: int
    username: str
    email: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping."""
        return {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "created_at": _timestamp(self.created_at),
            "updated_at": _timestamp(self.updated_at),
        }


@dataclass(frozen=True, kw_only=True)
class CreateUserInput:
    """Validated fields for registering a user."""

    username: str
    email: str
    password: str = field(repr=False)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CreateUserInput:
        """Validate a decoded JSON payload; raise ValueError when it is invalid."""
        if not isinstance(data, Mapping):
            raise ValueError("payload must be an object")
        username = _string_field(data, "username")
        if not USERNAME_MIN <= len(username) <= USERNAME_MAX:
            raise ValueError(
                f"username must be between {USERNAME_MIN} and {USERNAME_MAX} characters"
            )
        email = _string_field(data, "email")
        if not _EMAIL_RE.match(email):
            raise ValueError("email must be a valid e-mail address")
        password = _string_field(data, "password")
        if len(password) < PASSWORD_MIN:
            raise ValueError(f"password must be at least {PASSWORD_MIN} characters")
        return cls(username=username, email=email, password=password)


def user_from_create_input(data: CreateUserInput) -> User:
    """Build a new user from validated input."""
    now = datetime.now(timezone.utc)
    return User(
        username=data.username,
        email=data.email,
        password=data.password,
        created_at=now,
        updated_at=now,
    )