from .client import TwitchClient, generate_state
from .config_types import ClientConfig
from .errors import ApiError, AuthError, DecodeError, TransportError, TwitchClientError
from .models import AppToken, UserToken, ValidationResult

__all__ = [
    "TwitchClient",
    "ClientConfig",
    "generate_state",
    "ApiError",
    "AuthError",
    "DecodeError",
    "TransportError",
    "TwitchClientError",
    "AppToken",
    "UserToken",
    "ValidationResult",
]
