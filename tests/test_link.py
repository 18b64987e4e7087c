from datetime import datetime, timezone

import pytest

from urlinsight.link import CreateLinkInput, Link, LinkDTO, link_from_create_input

FIXED = datetime(2025, 7, 12, tzinfo=timezone.utc)


def test_to_dto_copies_fields():
    link = Link(id=1, url_id=42, href="https://linked-site.com", is_external=True,
                status_code=200, created_at=FIXED, updated_at=FIXED)
    assert link.to_dto() == LinkDTO(id=1, url_id=42, href="https://linked-site.com",
                                    is_external=True, status_code=200,
                                    created_at=FIXED, updated_at=FIXED)


def test_dto_to_dict():
    out = Link(id=2, url_id=42, href="https://example1.com", status_code=301,
               created_at=FIXED, updated_at=FIXED).to_dto().to_dict()
    assert out["href"] == "https://example1.com"
    assert out["is_external"] is False
    assert out["status_code"] == 301
    assert datetime.fromisoformat(out["updated_at"]) == FIXED


def test_create_input_round_trip_to_link():
    data = CreateLinkInput.from_dict(
        {"url_id": 42, "href": "https://linked-site.com", "is_external": True, "status_code": 200}
    )
    link = link_from_create_input(data)
    assert (link.url_id, link.href, link.is_external, link.status_code) == (
        42, "https://linked-site.com", True, 200,
    )
    assert link.created_at == link.updated_at
    assert link.created_at is not None


@pytest.mark.parametrize("status_code", [100, 599])
def test_create_input_status_bounds_accepted(status_code):
    data = CreateLinkInput.from_dict(
        {"url_id": 1, "href": "http://example.com", "status_code": status_code}
    )
    assert data.status_code == status_code


@pytest.mark.parametrize(
    "payload",
    [
        {"href": "http://example.com", "status_code": 200},
        {"url_id": 1, "status_code": 200},
        {"url_id": 1, "href": "relative/path", "status_code": 200},
        {"url_id": 1, "href": "http://example.com"},
        {"url_id": 1, "href": "http://example.com", "status_code": 99},
        {"url_id": 1, "href": "http://example.com", "status_code": 600},
        {"url_id": 1, "href": "http://example.com", "status_code": 200, "is_external": "yes"},
    ],
)
def test_create_input_rejects(payload):
    with pytest.raises(ValueError):
        CreateLinkInput.from_dict(payload)