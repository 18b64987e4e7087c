import uuid
from datetime import datetime, timezone

from urlinsight.token import (
    BlacklistedTokenDTO,
    TokenClaims,
    from_jti,
    new_jti,
)

EXPIRY = datetime(2025, 7, 13, tzinfo=timezone.utc)


def test_new_jti_is_uuid4():
    jti = new_jti()
    assert str(uuid.UUID(jti)) == jti
    assert uuid.UUID(jti).version == 4


def test_new_jti_unique():
    assert len({new_jti() for _ in range(50)}) == 50


def test_from_jti_builds_record():
    record = from_jti("abc123", EXPIRY)
    assert record.jti == "abc123"
    assert record.expires_at == EXPIRY
    assert record.id == 0


def test_to_dto_and_dict():
    dto = from_jti("abc123", EXPIRY).to_dto()
    assert dto == BlacklistedTokenDTO(jti="abc123", expires_at=EXPIRY)
    out = dto.to_dict()
    assert out["jti"] == "abc123"
    assert datetime.fromisoformat(out["expires_at"]) == EXPIRY


def test_claims_hold_user_and_id():
    claims = TokenClaims(user_id=42, id="abc123")
    assert claims.user_id == 42
    assert claims.id == "abc123"
    assert claims.expires_at == 0