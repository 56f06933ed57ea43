from __future__ import annotations

import typer

from .. import console
from ..config import config_path, load_config, normalize_base_url, save_config

app = typer.Typer(help="Local configuration.")


@app.command("show")
def show_config() -> None:
    cfg = load_config()
    secret_state = "(set)" if cfg.app_secret else "(empty)"
    token_state = "(set)" if cfg.auth.access_token else "(empty)"
    refresh_state = "(set)" if cfg.auth.refresh_token else "(empty)"
    console.print(
        f"app_id={cfg.app_id or '(empty)'} app_secret={secret_state} "
        f"api_base_url={cfg.api_base_url} timeout_s={cfg.timeout_s}"
    )
    console.print(f"access_token={token_state} refresh_token={refresh_state} token_type={cfg.auth.token_type}")


@app.command("path")
def show_path() -> None:
    console.print(config_path())


@app.command("set-credentials")
def set_credentials(
        app_id: str = typer.Option(..., "--app-id", prompt=True, help="Application (client) id."),
        app_secret: str = typer.Option(..., "--app-secret", prompt=True, hide_input=True, help="Application secret."),
        api_base_url: str | None = typer.Option(None, "--api-base-url", help="Override Helix base URL."),
        timeout: float | None = typer.Option(None, "--timeout", min=0.1, help="Request timeout, seconds."),
) -> None:
    cfg = load_config(use_env=False)
    cfg.app_id = app_id.strip()
    cfg.app_secret = app_secret.strip()
    if api_base_url is not None:
        cfg.api_base_url = normalize_base_url(api_base_url)
    if timeout is not None:
        cfg.timeout_s = timeout
    path = save_config(cfg)
    console.ok(f"Credentials saved to {path}.")
