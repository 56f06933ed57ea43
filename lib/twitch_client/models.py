"""Typed views over the token and validation payloads.

Every model keeps the decoded JSON in ``raw`` so fields the platform adds
later are never lost.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


def _int(value: Any, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _str_list(value: Any) -> list[str]:
    if isinstance(value, list):
        return [str(item) for item in value]
    if isinstance(value, str) and value:
        return value.split()
    return []


def _opt_str(value: Any) -> str | None:
    return str(value) if value is not None else None


@dataclass(frozen=True)
class AppToken:
    access_token: str
    expires_in: int
    token_type: str
    raw: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> "AppToken":
        return cls(
            access_token=str(data.get("access_token") or ""),
            expires_in=_int(data.get("expires_in")),
            token_type=str(data.get("token_type") or ""),
            raw=dict(data),
        )


@dataclass(frozen=True)
class UserToken(AppToken):
    refresh_token: str = ""
    scope: tuple[str, ...] = ()

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> "UserToken":
        return cls(
            access_token=str(data.get("access_token") or ""),
            expires_in=_int(data.get("expires_in")),
            token_type=str(data.get("token_type") or ""),
            refresh_token=str(data.get("refresh_token") or ""),
            scope=tuple(_str_list(data.get("scope"))),
            raw=dict(data),
        )


@dataclass(frozen=True)
class ValidationResult:
    client_id: str
    login: str | None
    scopes: frozenset[str]
    user_id: str | None
    expires_in: int
    raw: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> "ValidationResult":
        # app tokens validate without login/user_id
        return cls(
            client_id=str(data.get("client_id") or ""),
            login=_opt_str(data.get("login")),
            scopes=frozenset(_str_list(data.get("scopes"))),
            user_id=_opt_str(data.get("user_id")),
            expires_in=_int(data.get("expires_in")),
            raw=dict(data),
        )
