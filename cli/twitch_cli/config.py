from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from typing import Any

import tomli_w
from platformdirs import user_config_dir

from twitch_client.config_types import API_BASE_URL, TOKEN_URL

APP_NAME = "twitch-helix"
CONFIG_FILENAME = "config.toml"
DEFAULT_TIMEOUT_S = 15.0

ENV_APP_ID = "TWITCH_APP_ID"
ENV_APP_SECRET = "TWITCH_APP_SECRET"
ENV_API_BASE_URL = "TWITCH_API_BASE_URL"
ENV_TIMEOUT_S = "TWITCH_TIMEOUT_S"


@dataclass
class AuthConfig:
    access_token: str = ""
    refresh_token: str = ""
    token_type: str = "bearer"


@dataclass
class AppConfig:
    app_id: str
    app_secret: str
    auth: AuthConfig
    api_base_url: str = API_BASE_URL
    token_url: str = TOKEN_URL
    timeout_s: float = DEFAULT_TIMEOUT_S


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig(
        app_id="",
        app_secret="",
        auth=AuthConfig(),
        api_base_url=API_BASE_URL,
        token_url=TOKEN_URL,
        timeout_s=DEFAULT_TIMEOUT_S,
    )


def normalize_base_url(raw: str | None) -> str:
    """Helix paths are appended verbatim, so keep exactly one trailing slash."""
    value = (raw or "").strip()
    if not value:
        return API_BASE_URL
    lowered = value.lower()
    if not (lowered.startswith("http://") or lowered.startswith("https://")):
        value = f"https://{value}"
    return value.rstrip("/") + "/"


def _parse_timeout(value: Any, default: float) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        return default
    return timeout if timeout > 0 else default


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    return {
        "app_id": cfg.app_id,
        "app_secret": cfg.app_secret,
        "api_base_url": cfg.api_base_url,
        "token_url": cfg.token_url,
        "timeout_s": cfg.timeout_s,
        "auth": {
            "access_token": cfg.auth.access_token,
            "refresh_token": cfg.auth.refresh_token,
            "token_type": cfg.auth.token_type,
        },
    }


def from_toml(data: dict[str, Any]) -> AppConfig:
    auth_raw = data.get("auth") or {}
    auth = AuthConfig()
    if isinstance(auth_raw, dict):
        auth = AuthConfig(
            access_token=str(auth_raw.get("access_token") or ""),
            refresh_token=str(auth_raw.get("refresh_token") or ""),
            token_type=str(auth_raw.get("token_type") or "bearer"),
        )
    return AppConfig(
        app_id=str(data.get("app_id") or "").strip(),
        app_secret=str(data.get("app_secret") or "").strip(),
        auth=auth,
        api_base_url=normalize_base_url(str(data.get("api_base_url") or "")),
        token_url=str(data.get("token_url") or "").strip() or TOKEN_URL,
        timeout_s=_parse_timeout(data.get("timeout_s"), DEFAULT_TIMEOUT_S),
    )


def apply_env(cfg: AppConfig) -> AppConfig:
    app_id = os.getenv(ENV_APP_ID, "").strip()
    if app_id:
        cfg.app_id = app_id
    app_secret = os.getenv(ENV_APP_SECRET, "").strip()
    if app_secret:
        cfg.app_secret = app_secret
    base_url = os.getenv(ENV_API_BASE_URL, "").strip()
    if base_url:
        cfg.api_base_url = normalize_base_url(base_url)
    timeout = os.getenv(ENV_TIMEOUT_S, "").strip()
    if timeout:
        cfg.timeout_s = _parse_timeout(timeout, cfg.timeout_s)
    return cfg


def load_config(*, use_env: bool = True) -> AppConfig:
    path = config_path()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        cfg = from_toml(data)
    except FileNotFoundError:
        cfg = default_config()
    return apply_env(cfg) if use_env else cfg


def ensure_parent_dir(path: str) -> None:
    os.makedirs(os.path.dirname(path), exist_ok=True)


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    ensure_parent_dir(path)
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(to_toml(cfg)).encode("utf-8"))
    os.chmod(path, 0o600)
    return path
