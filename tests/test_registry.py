from urlinsight.analysis_result import AnalysisResult
from urlinsight.link import Link
from urlinsight.registry import all_models
from urlinsight.token import BlacklistedToken
from urlinsight.url import URL
from urlinsight.user import User


def test_all_models_order():
    assert all_models() == [User, URL, AnalysisResult, Link, BlacklistedToken]


def test_table_names_unique_and_known():
    names = [model.__tablename__ for model in all_models()]
    assert names == ["users", "urls", "analysis_results", "links", "blacklisted_tokens"]


def test_returns_fresh_list():
    models = all_models()
    models.clear()
    assert len(all_models()) == 5