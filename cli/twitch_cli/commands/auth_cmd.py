from __future__ import annotations

import typer

from twitch_client import generate_state

from .. import console
from ..config import load_config
from ._common import require_client

app = typer.Typer(help="User authorization helpers.")


@app.command("url")
def authorization_url(
        redirect_uri: str = typer.Option(..., "--redirect-uri", help="Page that receives the authorization code."),
        scope: list[str] = typer.Option(..., "--scope", "-s", help="Scope name, repeat for several."),
        state: str | None = typer.Option(None, "--state", help="Explicit state value."),
        random_state: bool = typer.Option(False, "--random-state", help="Generate a random state value."),
) -> None:
    if state is not None and random_state:
        console.err("Use either --state or --random-state.")
        raise typer.Exit(code=1)
    if random_state:
        state = generate_state()

    client = require_client(load_config())
    try:
        url = client.authorization_url(redirect_uri, scope, state)
    finally:
        client.close()

    console.console.print(url, soft_wrap=True, markup=False, highlight=False)
    if random_state:
        console.info(f"state={state}")
