"""JWT claims and revoked token records."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Any, ClassVar, Optional


@dataclass(kw_only=True)
class TokenClaims:
    """Standard JWT claims plus the user the token was issued for."""

    user_id: int = 0
    audience: str = ""
    expires_at: int = 0
    id: str = ""
    issued_at: int = 0
    issuer: str = ""
    not_before: int = 0
    subject: str = ""


def new_jti() -> str:
    """Return a new unique token identifier."""
    return str(uuid.uuid4())


@dataclass(kw_only=True)
class BlacklistedToken:
    """A revoked token identifier and when it expires."""

    __tablename__: ClassVar[str] = "blacklisted_tokens"

    id: int = 0
    jti: str = ""
    expires_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    def to_dto(self) -> BlacklistedTokenDTO:
        """Return the response view of this record."""
        return BlacklistedTokenDTO(jti=self.jti, expires_at=self.expires_at)


@dataclass(kw_only=True)
class BlacklistedTokenDTO:
    """Revoked token data sent in responses."""

    jti: str
    expires_at: Optional[datetime] = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping."""
        return {
            "jti": self.jti,
            "expires_at": self.expires_at.isoformat() if self.expires_at else None,
        }


def from_jti(jti: str, expires_at: datetime) -> BlacklistedToken:
    """Build a revoked-token record for *jti*."""
    return BlacklistedToken(jti=jti, expires_at=expires_at)