from __future__ import annotations

import httpx
import pytest

from twitch_client import ClientConfig, TransportError, TwitchClient
from twitch_client.transport import Transport


def _refuse(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("[Errno 111] Connection refused", request=request)


def _time_out(request: httpx.Request) -> httpx.Response:
    raise httpx.ReadTimeout("timed out", request=request)


CALLS = [
    ("get_app_token", ()),
    ("get_user_token", ("code", "http://localhost/cb")),
    ("refresh_user_token", ("refresh",)),
    ("validate_access_token", ("token",)),
    ("get_data", ("token", "users")),
    ("post_data", ("token", "channels/commercial", {"length": 30})),
    ("put_data", ("token", "chat/settings", {"slow_mode": True})),
    ("patch_data", ("token", "channels", {"title": "t"})),
    ("delete_data", ("token", "schedule/segment?id=1")),
]


@pytest.mark.parametrize("handler", [_refuse, _time_out])
@pytest.mark.parametrize("method_name,args", CALLS)
def test_transport_failure_surfaces_as_transport_error(cfg, handler, method_name, args) -> None:
    client = TwitchClient(cfg, transport=Transport(cfg, transport=httpx.MockTransport(handler)))
    try:
        with pytest.raises(TransportError) as exc_info:
            getattr(client, method_name)(*args)
    finally:
        client.close()

    assert isinstance(exc_info.value.__cause__, httpx.RequestError)


def test_transport_error_message_omits_query_string(cfg) -> None:
    client = TwitchClient(cfg, transport=Transport(cfg, transport=httpx.MockTransport(_refuse)))
    with client, pytest.raises(TransportError) as exc_info:
        client.get_data("token", "users?login=secret-login")

    assert "secret-login" not in str(exc_info.value)
    assert "https://api.twitch.tv/helix/users" in str(exc_info.value)


def test_transport_applies_configured_timeouts() -> None:
    cfg = ClientConfig(app_id="a", app_secret="b", timeout_s=7.5, connect_timeout_s=2.0)
    transport = Transport(cfg, transport=httpx.MockTransport(lambda r: httpx.Response(200)))
    try:
        timeout = transport._client.timeout
        assert timeout.read == 7.5
        assert timeout.connect == 2.0
    finally:
        transport.close()


def test_transport_connect_timeout_defaults_to_overall_timeout() -> None:
    cfg = ClientConfig(app_id="a", app_secret="b", timeout_s=4.0)
    transport = Transport(cfg, transport=httpx.MockTransport(lambda r: httpx.Response(200)))
    try:
        assert transport._client.timeout.connect == 4.0
    finally:
        transport.close()


def test_transport_returns_status_and_body() -> None:
    cfg = ClientConfig(app_id="a", app_secret="b")
    transport = Transport(cfg, transport=httpx.MockTransport(lambda r: httpx.Response(418, content=b"teapot")))
    try:
        response = transport.execute("GET", "https://api.twitch.tv/helix/x", headers={})
    finally:
        transport.close()

    assert response.status_code == 418
    assert response.text == "teapot"
