from __future__ import annotations

import typer
from rich.markup import escape

from twitch_client import ApiError
from twitch_client.errors import TwitchClientError

from .. import console
from ..config import load_config
from ._common import fail_api, fail_client, print_result, require_client, resolve_token

app = typer.Typer(help="Raw Helix API calls.")


def _parse_fields(fields: list[str] | None) -> dict[str, str]:
    data: dict[str, str] = {}
    for item in fields or []:
        key, sep, value = item.partition("=")
        if not sep or not key.strip():
            console.err(escape(f"Invalid field {item!r}, expected key=value."))
            raise typer.Exit(code=1)
        data[key.strip()] = value
    return data


def _report_status(status_code: int) -> None:
    if status_code >= 400:
        console.err(f"HTTP {status_code}")
        raise typer.Exit(code=2)
    console.ok(f"HTTP {status_code}")


@app.command("get")
def get(query: str = typer.Argument(..., help="Path and query, e.g. users?login=twitchdev."),
        token: str | None = typer.Option(None, "--token", help="Access token (defaults to stored one).")) -> None:
    cfg = load_config()
    value = resolve_token(cfg, token)
    client = require_client(cfg)
    try:
        result = client.get_data(value, query)
    except TwitchClientError as e:
        fail_client(e)
    finally:
        client.close()
    if isinstance(result, ApiError):
        fail_api(result)
    print_result(result)


@app.command("post")
def post(endpoint: str = typer.Argument(..., help="Endpoint path, e.g. channels/commercial."),
         fields: list[str] | None = typer.Option(None, "--data", "-d", help="Form field key=value, repeat for several."),
         token: str | None = typer.Option(None, "--token", help="Access token (defaults to stored one).")) -> None:
    data = _parse_fields(fields)
    cfg = load_config()
    value = resolve_token(cfg, token)
    client = require_client(cfg)
    try:
        result = client.post_data(value, endpoint, data)
    except TwitchClientError as e:
        fail_client(e)
    finally:
        client.close()
    if isinstance(result, ApiError):
        fail_api(result)
    print_result(result)


@app.command("patch")
def patch(endpoint: str = typer.Argument(..., help="Endpoint path."),
          fields: list[str] | None = typer.Option(None, "--data", "-d", help="Form field key=value, repeat for several."),
          token: str | None = typer.Option(None, "--token", help="Access token (defaults to stored one).")) -> None:
    data = _parse_fields(fields)
    cfg = load_config()
    value = resolve_token(cfg, token)
    client = require_client(cfg)
    try:
        result = client.patch_data(value, endpoint, data)
    except TwitchClientError as e:
        fail_client(e)
    finally:
        client.close()
    if isinstance(result, ApiError):
        fail_api(result)
    print_result(result)


@app.command("put")
def put(endpoint: str = typer.Argument(..., help="Endpoint path."),
        fields: list[str] | None = typer.Option(None, "--data", "-d", help="Form field key=value, repeat for several."),
        token: str | None = typer.Option(None, "--token", help="Access token (defaults to stored one).")) -> None:
    data = _parse_fields(fields)
    cfg = load_config()
    value = resolve_token(cfg, token)
    client = require_client(cfg)
    try:
        status_code = client.put_data(value, endpoint, data)
    except TwitchClientError as e:
        fail_client(e)
    finally:
        client.close()
    _report_status(status_code)


@app.command("delete")
def delete(query: str = typer.Argument(..., help="Path and query of the resource to delete."),
           token: str | None = typer.Option(None, "--token", help="Access token (defaults to stored one).")) -> None:
    cfg = load_config()
    value = resolve_token(cfg, token)
    client = require_client(cfg)
    try:
        status_code = client.delete_data(value, query)
    except TwitchClientError as e:
        fail_client(e)
    finally:
        client.close()
    _report_status(status_code)
