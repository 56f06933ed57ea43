from __future__ import annotations

import typer
from rich.table import Table

from twitch_client import ApiError, UserToken
from twitch_client.errors import TwitchClientError

from .. import console
from ..config import load_config, save_config
from ..formatting import format_expires_in
from ._common import fail_api, fail_client, require_client, resolve_token

app = typer.Typer(help="Obtain, refresh and validate OAuth tokens.")


def _store_user_token(token: UserToken) -> str:
    cfg = load_config(use_env=False)
    cfg.auth.access_token = token.access_token
    cfg.auth.refresh_token = token.refresh_token
    cfg.auth.token_type = token.token_type or "bearer"
    return save_config(cfg)


@app.command("app")
def app_token(
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON response."),
) -> None:
    client = require_client(load_config())
    try:
        result = client.get_app_token()
    except TwitchClientError as e:
        fail_client(e)
    finally:
        client.close()

    if isinstance(result, ApiError):
        fail_api(result)
    if json_out:
        console.print_json(result.raw)
        return
    console.print(result.access_token)
    console.info(f"{result.token_type} token, expires in {format_expires_in(result.expires_in)}")


@app.command("user")
def user_token(
        code: str = typer.Option(..., "--code", prompt=True, help="Authorization code from the redirect."),
        redirect_uri: str = typer.Option(..., "--redirect-uri", help="Redirect URI used for the authorization."),
        save: bool = typer.Option(True, "--save/--no-save", help="Store the token in the config file."),
) -> None:
    client = require_client(load_config())
    try:
        result = client.get_user_token(code, redirect_uri)
    except TwitchClientError as e:
        fail_client(e)
    finally:
        client.close()

    if isinstance(result, ApiError):
        fail_api(result)
    if save:
        path = _store_user_token(result)
        console.ok(f"User token saved to {path}.")
    else:
        console.print_json(result.raw)


@app.command("refresh")
def refresh_token(
        refresh: str | None = typer.Option(None, "--refresh-token", help="Refresh token (defaults to stored one)."),
        save: bool = typer.Option(True, "--save/--no-save", help="Store the new token in the config file."),
) -> None:
    cfg = load_config()
    value = (refresh or cfg.auth.refresh_token).strip()
    if not value:
        console.err("No refresh token. Pass --refresh-token or run `twitch-helix token user`.")
        raise typer.Exit(code=1)
    client = require_client(cfg)
    try:
        result = client.refresh_user_token(value)
    except TwitchClientError as e:
        fail_client(e)
    finally:
        client.close()

    if isinstance(result, ApiError):
        fail_api(result)
    if save:
        path = _store_user_token(result)
        console.ok(f"Token refreshed, saved to {path}.")
    else:
        console.print_json(result.raw)


@app.command("validate")
def validate(
        token: str | None = typer.Option(None, "--token", help="Token to validate (defaults to stored one)."),
) -> None:
    cfg = load_config()
    value = resolve_token(cfg, token)
    client = require_client(cfg)
    try:
        result = client.validate_access_token(value)
    except TwitchClientError as e:
        fail_client(e)
    finally:
        client.close()

    if isinstance(result, ApiError):
        fail_api(result)

    table = Table(show_header=False)
    table.add_column("field")
    table.add_column("value")
    table.add_row("client_id", result.client_id)
    table.add_row("login", result.login or "-")
    table.add_row("user_id", result.user_id or "-")
    table.add_row("scopes", " ".join(sorted(result.scopes)) or "-")
    table.add_row("expires_in", format_expires_in(result.expires_in))
    console.print(table)
