from __future__ import annotations

from typing import Any

from .errors import ApiError, AuthError

_AUTH_STATUSES = (401, 403)


def is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


def is_error_payload(status_code: int, data: Any) -> bool:
    if not is_success(status_code):
        return True
    if not isinstance(data, dict):
        return False
    if "error" in data:
        return True
    return "status" in data and "message" in data


def make_api_error(status_code: int, data: Any) -> ApiError:
    if isinstance(data, dict):
        body = data
    elif data is None:
        body = {}
    else:
        body = {"raw": data}
    if status_code in _AUTH_STATUSES or body.get("status") in _AUTH_STATUSES:
        return AuthError(status_code, body)
    return ApiError(status_code, body)
