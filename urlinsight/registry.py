"""The set of stored models, in migration order."""

from __future__ import annotations

from urlinsight.analysis_result import AnalysisResult
from urlinsight.link import Link
from urlinsight.token import BlacklistedToken
from urlinsight.url import URL
from urlinsight.user import User


def all_models() -> list[type]:
    """Return every stored model class, in the order tables are created."""
    return [User, URL, AnalysisResult, Link, BlacklistedToken]