from __future__ import annotations

from typing import Any, Mapping


class TwitchClientError(Exception):
    """Base client error."""


class TransportError(TwitchClientError):
    """Connection, DNS, TLS or timeout failure before any response arrived."""


class DecodeError(TwitchClientError):
    def __init__(self, status_code: int, text: str):
        super().__init__(f"response with status {status_code} is not the expected JSON")
        self.status_code = status_code
        self.text = text


class ApiError(TwitchClientError):
    """Error-shaped response from the platform.

    Twitch is not consistent about the shape of failures: the token endpoint
    answers ``{"status": 400, "message": "..."}``, Helix answers
    ``{"error": "Unauthorized", "status": 401, "message": "..."}`` and the
    authorize flow uses ``error`` + ``error_description``. The decoded body is
    kept as-is in ``body``; the properties below only read from it.
    """

    def __init__(self, status_code: int, body: Mapping[str, Any] | None = None):
        self.status_code = status_code
        self.body: dict[str, Any] = dict(body or {})
        super().__init__(self.message or self.error or f"request failed with {status_code}")

    @property
    def status(self) -> int | None:
        value = self.body.get("status")
        try:
            return int(value) if value is not None else None
        except (TypeError, ValueError):
            return None

    @property
    def message(self) -> str | None:
        value = self.body.get("message")
        return str(value) if value is not None else None

    @property
    def error(self) -> str | None:
        value = self.body.get("error")
        return str(value) if value is not None else None

    @property
    def error_description(self) -> str | None:
        value = self.body.get("error_description")
        return str(value) if value is not None else None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status_code={self.status_code!r}, body={self.body!r})"


class AuthError(ApiError):
    """Auth-related API error (401/403)."""
