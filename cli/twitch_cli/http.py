from __future__ import annotations

from importlib import metadata

from twitch_client import TwitchClient
from twitch_client.config_types import ClientConfig

from .config import AppConfig, normalize_base_url


def cli_version() -> str:
    try:
        return metadata.version("twitch-helix")
    except metadata.PackageNotFoundError:
        return "0.0.0"


def make_client(cfg: AppConfig, *, base_url_override: str | None = None) -> TwitchClient:
    base_url = normalize_base_url(base_url_override or cfg.api_base_url)
    return TwitchClient(
        ClientConfig(
            app_id=cfg.app_id,
            app_secret=cfg.app_secret,
            api_base_url=base_url,
            token_url=cfg.token_url,
            timeout_s=cfg.timeout_s,
            user_agent=f"twitch-helix/{cli_version()}",
        )
    )
