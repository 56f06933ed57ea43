from __future__ import annotations
from dataclasses import dataclass

API_BASE_URL = "https://api.twitch.tv/helix/"
TOKEN_URL = "https://id.twitch.tv/oauth2/token"
VALIDATE_URL = "https://id.twitch.tv/oauth2/validate"
AUTHORIZE_URL = "https://id.twitch.tv/oauth2/authorize"


@dataclass(frozen=True)
class ClientConfig:
    app_id: str
    app_secret: str
    api_base_url: str = API_BASE_URL
    token_url: str = TOKEN_URL
    validate_url: str = VALIDATE_URL
    authorize_url: str = AUTHORIZE_URL
    timeout_s: float = 15.0
    connect_timeout_s: float | None = None
    user_agent: str = "twitch-helix-client/0.1.0"
