from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Mapping, Protocol
from urllib.parse import urlsplit

import httpx

from .config_types import ClientConfig
from .errors import TransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpResponse:
    status_code: int
    content: bytes = b""
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")


class HttpTransport(Protocol):
    def execute(
            self,
            method: str,
            url: str,
            *,
            headers: Mapping[str, str],
            body: str | None = None,
    ) -> HttpResponse:
        ...

    def close(self) -> None:
        ...


class Transport:
    def __init__(self, cfg: ClientConfig, *, transport: httpx.BaseTransport | None = None):
        self._cfg = cfg
        timeout = httpx.Timeout(cfg.timeout_s, connect=cfg.connect_timeout_s or cfg.timeout_s)
        self._client = httpx.Client(
            timeout=timeout,
            headers={"User-Agent": cfg.user_agent},
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def execute(
            self,
            method: str,
            url: str,
            *,
            headers: Mapping[str, str],
            body: str | None = None,
    ) -> HttpResponse:
        content = body.encode("utf-8") if body is not None else None
        try:
            r = self._client.request(method, url, headers=dict(headers), content=content)
        except httpx.RequestError as e:
            raise TransportError(f"{method} {_redact(url)} failed: {e}") from e

        logger.debug("%s %s -> %s", method, _redact(url), r.status_code)
        return HttpResponse(status_code=r.status_code, content=r.content, headers=dict(r.headers))


def _redact(url: str) -> str:
    # path only, no query string
    parts = urlsplit(url)
    return f"{parts.scheme}://{parts.netloc}{parts.path}"
