from __future__ import annotations

from typing import Any, NoReturn

import typer
from rich.markup import escape

from twitch_client import ApiError, TwitchClient
from twitch_client.errors import TwitchClientError

from .. import console
from ..config import AppConfig
from ..http import make_client

_RAW_DISPLAY_LIMIT = 1000


def require_client(cfg: AppConfig) -> TwitchClient:
    if not cfg.app_id or not cfg.app_secret:
        console.err("App credentials are not configured. Run `twitch-helix config set-credentials`.")
        raise typer.Exit(code=1)
    return make_client(cfg)


def resolve_token(cfg: AppConfig, token: str | None) -> str:
    value = (token or cfg.auth.access_token or "").strip()
    if not value:
        console.err("No access token. Pass --token or run `twitch-helix token user`.")
        raise typer.Exit(code=1)
    return value


def fail_api(exc: ApiError) -> NoReturn:
    label = exc.error or "error"
    detail = exc.message or exc.error_description or "-"
    console.err(escape(f"{label} ({exc.status_code}): {detail}"))
    if exc.body:
        console.print_json(_display_body(exc.body))
    raise typer.Exit(code=2)


def _display_body(body: dict[str, Any]) -> dict[str, Any]:
    raw = body.get("raw")
    if isinstance(raw, str) and len(raw) > _RAW_DISPLAY_LIMIT:
        return {**body, "raw": raw[:_RAW_DISPLAY_LIMIT] + "..."}
    return body


def fail_client(exc: TwitchClientError) -> NoReturn:
    console.err(escape(str(exc)))
    raise typer.Exit(code=3)


def print_result(data: Any) -> None:
    if data is None:
        console.ok("No content.")
        return
    console.print_json(data)
