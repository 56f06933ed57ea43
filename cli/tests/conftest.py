from __future__ import annotations

import json
from typing import Callable
from urllib.parse import parse_qs

import httpx
import pytest

from twitch_client import ClientConfig, TwitchClient
from twitch_client.transport import Transport


class Recorder:
    """Captures requests sent through an ``httpx.MockTransport``."""

    def __init__(self, responder: Callable[[httpx.Request], httpx.Response]):
        self.requests: list[httpx.Request] = []
        self._responder = responder

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._responder(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_form(self) -> dict[str, list[str]]:
        return parse_qs(self.last.content.decode("utf-8"), keep_blank_values=True)


def json_response(status_code: int, payload) -> Callable[[httpx.Request], httpx.Response]:
    def _respond(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, content=json.dumps(payload).encode("utf-8"))

    return _respond


@pytest.fixture
def cfg() -> ClientConfig:
    return ClientConfig(app_id="app-id-123", app_secret="app-secret-456")


@pytest.fixture
def make_client(cfg):
    created: list[TwitchClient] = []

    def _make(responder: Callable[[httpx.Request], httpx.Response], *, client_cfg: ClientConfig | None = None):
        recorder = Recorder(responder)
        used_cfg = client_cfg or cfg
        client = TwitchClient(used_cfg, transport=Transport(used_cfg, transport=httpx.MockTransport(recorder)))
        created.append(client)
        return client, recorder

    yield _make
    for client in created:
        client.close()
