"""Request authentication by HTTP Basic credentials or bearer JWT."""

from __future__ import annotations

import base64
import binascii
from http import HTTPStatus
from typing import Callable, Optional

from flask import g, jsonify, request

_BASIC_PREFIX = "Basic "
_BEARER_PREFIX = "Bearer "


def _abort(status: HTTPStatus, message: str):
    return jsonify({"error": message}), int(status)


def _authenticate_basic(auth_service, encoded: str):
    try:
        payload = base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError):
        return _abort(HTTPStatus.BAD_REQUEST, "invalid base64 credentials")
    email, sep, rest = payload.decode("utf-8", errors="replace").partition(":")
    if not sep:
        return _abort(HTTPStatus.BAD_REQUEST, "invalid basic auth format")
    try:
        user = auth_service.authenticate_basic(email, rest)
    except Exception:
        return _abort(HTTPStatus.UNAUTHORIZED, "invalid credentials")
    g.user_id = user.id
    return None


def _authenticate_bearer(auth_service, encoded: str):
    try:
        claims = auth_service.validate(encoded)
    except Exception:
        return _abort(HTTPStatus.UNAUTHORIZED, "invalid or expired token")
    try:
        revoked = auth_service.is_token_revoked(claims.id)
    except Exception:
        revoked = True
    if revoked:
        return _abort(
            HTTPStatus.UNAUTHORIZED, "token has been revoked or an error occurred"
        )
    try:
        auth_service.find_user_by_id(claims.user_id)
    except Exception:
        return _abort(HTTPStatus.UNAUTHORIZED, "user no longer exists")
    g.user_id = claims.user_id
    g.jti = claims.id
    return None


def auth_middleware(auth_service) -> Callable[[], Optional[tuple]]:
    """Return a before-request hook accepting Basic or Bearer authorization.

    On success the hook sets ``g.user_id`` (and ``g.jti`` for tokens) and lets
    the request through; otherwise it answers with a JSON error.
    """

    def authenticate():
        header = request.headers.get("Authorization", "")
        if not header:
            return _abort(HTTPStatus.UNAUTHORIZED, "authorization header missing")
        if header.startswith(_BASIC_PREFIX):
            return _authenticate_basic(auth_service, header[len(_BASIC_PREFIX):])
        if header.startswith(_BEARER_PREFIX):
            return _authenticate_bearer(auth_service, header[len(_BEARER_PREFIX):])
        return _abort(HTTPStatus.UNAUTHORIZED, "unsupported authorization type")

    return authenticate