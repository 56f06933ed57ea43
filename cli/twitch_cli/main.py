from __future__ import annotations

import typer

from .commands import api_cmd, auth_cmd, config_cmd, token_cmd
from .logging_ import setup_logging


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="twitch-helix",
        help="Twitch Helix API client.",
        no_args_is_help=True,
    )

    app.add_typer(config_cmd.app, name="config")
    app.add_typer(token_cmd.app, name="token")
    app.add_typer(auth_cmd.app, name="auth")
    app.add_typer(api_cmd.app, name="api")

    @app.callback()
    def _main(
            verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logs."),
    ):
        setup_logging(verbose)

    return app


app = _build_app()
