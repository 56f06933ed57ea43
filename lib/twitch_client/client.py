from __future__ import annotations

import json
import secrets
from typing import Any, Iterable, Mapping
from urllib.parse import quote_plus, urlencode

from .config_types import ClientConfig
from .errors import ApiError, DecodeError
from .errors_utils import is_error_payload, is_success, make_api_error
from .models import AppToken, UserToken, ValidationResult
from .transport import HttpResponse, HttpTransport, Transport

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def generate_state(length: int = 24) -> str:
    """Random string suitable for the OAuth ``state`` parameter."""
    return secrets.token_urlsafe(length)


class TwitchClient:
    """Thin client for the Twitch OAuth endpoints and the Helix API.

    Token and data methods return an :class:`ApiError` value instead of
    raising it; ``TransportError`` and ``DecodeError`` are raised.
    """

    def __init__(self, cfg: ClientConfig, *, transport: HttpTransport | None = None):
        self._cfg = cfg
        self._t: HttpTransport = transport if transport is not None else Transport(cfg)

    def close(self) -> None:
        self._t.close()

    def __enter__(self) -> "TwitchClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # --- authorization ---
    def get_app_token(self) -> AppToken | ApiError:
        data = {
            "client_id": self._cfg.app_id,
            "client_secret": self._cfg.app_secret,
            "grant_type": "client_credentials",
        }
        result = self._post(
            self._cfg.token_url, data, {"Content-Type": FORM_CONTENT_TYPE}, expect_object=True
        )
        if isinstance(result, ApiError):
            return result
        return AppToken.from_payload(result)

    def get_user_token(self, auth_code: str, redirect_uri: str) -> UserToken | ApiError:
        data = {
            "client_id": self._cfg.app_id,
            "client_secret": self._cfg.app_secret,
            "code": auth_code,
            "grant_type": "authorization_code",
            "redirect_uri": redirect_uri,
        }
        result = self._post(
            self._cfg.token_url, data, {"Content-Type": FORM_CONTENT_TYPE}, expect_object=True
        )
        if isinstance(result, ApiError):
            return result
        return UserToken.from_payload(result)

    def refresh_user_token(self, refresh_token: str) -> UserToken | ApiError:
        data = {
            "client_id": self._cfg.app_id,
            "client_secret": self._cfg.app_secret,
            "grant_type": "refresh_token",
            "refresh_token": refresh_token,
        }
        result = self._post(
            self._cfg.token_url, data, {"Content-Type": FORM_CONTENT_TYPE}, expect_object=True
        )
        if isinstance(result, ApiError):
            return result
        return UserToken.from_payload(result)

    def authorization_url(
            self,
            redirect_uri: str,
            scope: str | Iterable[str],
            state: str | None = None,
    ) -> str:
        """Build the URL the end user is sent to in order to grant access.

        A string ``scope`` is used as-is and must already be URL encoded
        (``channel%3Aread%3Apolls+user%3Aread%3Aemail``). An iterable of
        scope names is joined and encoded here. ``redirect_uri`` is never
        encoded. Redirecting the user is left to the caller's web layer.
        """
        if not isinstance(scope, str):
            scope = quote_plus(" ".join(scope))
        url = (
            f"{self._cfg.authorize_url}?response_type=code"
            f"&client_id={self._cfg.app_id}"
            f"&redirect_uri={redirect_uri}"
            f"&scope={scope}"
        )
        if state is not None:
            url += f"&state={state}"
        return url

    def validate_access_token(self, token: str) -> ValidationResult | ApiError:
        headers = {
            "Content-Type": FORM_CONTENT_TYPE,
            "Authorization": f"OAuth {token}",
        }
        result = self._get(self._cfg.validate_url, headers, expect_object=True)
        if isinstance(result, ApiError):
            return result
        return ValidationResult.from_payload(result)

    # --- helix data ---
    def get_data(self, token: str, query: str) -> Any:
        """GET ``<api_base_url><query>``, e.g. ``users?login=twitchdev``."""
        return self._get(self._cfg.api_base_url + query, self._api_headers(token))

    def post_data(self, token: str, endpoint: str, data: Mapping[str, Any]) -> Any:
        return self._post(self._cfg.api_base_url + endpoint, data, self._api_headers(token))

    def put_data(self, token: str, endpoint: str, data: Mapping[str, Any]) -> int:
        """PUT and return the HTTP status only; 204 means success."""
        return self._put(self._cfg.api_base_url + endpoint, data, self._api_headers(token))

    def patch_data(self, token: str, endpoint: str, data: Mapping[str, Any]) -> Any:
        return self._patch(self._cfg.api_base_url + endpoint, data, self._api_headers(token))

    def delete_data(self, token: str, query: str) -> int:
        return self._delete(self._cfg.api_base_url + query, self._api_headers(token))

    def _api_headers(self, token: str) -> dict[str, str]:
        return {
            "Content-Type": FORM_CONTENT_TYPE,
            "Authorization": f"Bearer {token}",
            "Client-Id": self._cfg.app_id,
        }

    # --- verb executors ---
    def _get(self, url: str, headers: Mapping[str, str], *, expect_object: bool = False) -> Any:
        r = self._t.execute("GET", url, headers=headers)
        return _decode(r, expect_object=expect_object)

    def _post(
            self,
            url: str,
            data: Mapping[str, Any],
            headers: Mapping[str, str],
            *,
            expect_object: bool = False,
    ) -> Any:
        r = self._t.execute("POST", url, headers=headers, body=_form(data))
        return _decode(r, expect_object=expect_object)

    def _put(self, url: str, data: Mapping[str, Any], headers: Mapping[str, str]) -> int:
        r = self._t.execute("PUT", url, headers=headers, body=_form(data))
        return r.status_code

    def _patch(self, url: str, data: Mapping[str, Any], headers: Mapping[str, str]) -> Any:
        r = self._t.execute("PATCH", url, headers=headers, body=_form(data))
        return _decode(r)

    def _delete(self, url: str, headers: Mapping[str, str]) -> int:
        r = self._t.execute("DELETE", url, headers=headers)
        return r.status_code


def _form(data: Mapping[str, Any]) -> str:
    return urlencode({k: _form_value(v) for k, v in data.items()}, doseq=True)


def _form_value(value: Any) -> Any:
    # booleans go over the wire as "true"/"false"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return [_form_value(item) for item in value]
    return value


def _decode(r: HttpResponse, *, expect_object: bool = False) -> Any:
    """Decode a JSON body, or return the ApiError it describes.

    With ``expect_object`` a successful response must carry a JSON object;
    anything else (empty body, list, scalar) raises ``DecodeError``.
    """
    text = r.text
    if not text.strip():
        if not is_success(r.status_code):
            return make_api_error(r.status_code, None)
        if expect_object:
            raise DecodeError(r.status_code, text)
        return None
    try:
        data = json.loads(text)
    except ValueError as e:
        if not is_success(r.status_code):
            return make_api_error(r.status_code, text)
        raise DecodeError(r.status_code, text) from e

    if is_error_payload(r.status_code, data):
        return make_api_error(r.status_code, data)
    if expect_object and not isinstance(data, dict):
        raise DecodeError(r.status_code, text)
    return data
