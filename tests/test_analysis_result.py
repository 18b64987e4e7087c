from datetime import datetime, timezone

import pytest

from urlinsight.analysis_result import (
    AnalysisResult,
    CreateAnalysisResultInput,
    analysis_result_from_create_input,
)

FIXED = datetime(2025, 7, 10, tzinfo=timezone.utc)


def _result():
    return AnalysisResult(
        id=1, url_id=42, html_version="HTML5", title="Test Page",
        h1_count=2, h2_count=5, h3_count=3, has_login_form=True,
        internal_link_count=4, external_link_count=2, broken_link_count=1,
        created_at=FIXED, updated_at=FIXED,
    )


def test_to_dto_copies_fields_and_drops_link_counts():
    dto = _result().to_dto()
    assert (dto.id, dto.url_id, dto.html_version, dto.title) == (1, 42, "HTML5", "Test Page")
    assert (dto.h1_count, dto.h2_count, dto.h3_count) == (2, 5, 3)
    assert dto.has_login_form is True
    assert not hasattr(dto, "internal_link_count")


def test_dto_to_dict_keys():
    out = _result().to_dto().to_dict()
    assert "broken_link_count" not in out
    assert out["h2_count"] == 5
    assert out["has_login_form"] is True
    assert datetime.fromisoformat(out["created_at"]) == FIXED


def test_create_input_round_trip():
    data = CreateAnalysisResultInput.from_dict(
        {"url_id": 42, "html_version": "HTML5", "title": "Test Page",
         "h1_count": 2, "h2_count": 5, "h3_count": 3, "has_login_form": True}
    )
    result = analysis_result_from_create_input(data)
    assert result.url_id == 42
    assert result.title == "Test Page"
    assert (result.h1_count, result.h2_count, result.h3_count, result.h6_count) == (2, 5, 3, 0)
    assert result.has_login_form is True
    assert result.broken_link_count == 0
    assert result.created_at == result.updated_at


def test_create_input_title_optional():
    data = CreateAnalysisResultInput.from_dict({"url_id": 1, "html_version": "HTML 5"})
    assert data.title == ""


@pytest.mark.parametrize(
    "payload",
    [
        {"html_version": "HTML5"},
        {"url_id": 1},
        {"url_id": 1, "html_version": "HTML5", "h4_count": -1},
        {"url_id": 1, "html_version": "HTML5", "h1_count": "2"},
        {"url_id": 1, "html_version": "HTML5", "has_login_form": 1},
    ],
)
def test_create_input_rejects(payload):
    with pytest.raises(ValueError):
        CreateAnalysisResultInput.from_dict(payload)