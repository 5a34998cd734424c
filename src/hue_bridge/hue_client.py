from __future__ import annotations

import logging
import time
from typing import Any, Literal

import httpx

from hue_bridge.errors import DecodeError, HueTransportError, HueUpstreamError


logger = logging.getLogger(__name__)

RequestMethod = Literal["GET", "PUT", "POST", "DELETE"]


class HueClient:
    """Blocking transport for the bridge: one request, one fresh connection.

    Holds only configuration, so a single instance can be shared between threads.
    """

    def __init__(
        self,
        *,
        timeout_seconds: float = 10.0,
        connect_timeout_seconds: float = 3.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._timeout = httpx.Timeout(timeout_seconds, connect=connect_timeout_seconds)
        self._transport = transport

    @property
    def timeout(self) -> httpx.Timeout:
        return self._timeout

    def request_json(self, method: RequestMethod, url: str, *, json_body: Any | None = None) -> Any:
        start = time.perf_counter()
        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                if json_body is None:
                    resp = client.request(method, url)
                else:
                    resp = client.request(method, url, json=json_body)
        except httpx.RequestError as exc:
            raise HueTransportError(str(exc)) from exc

        duration_ms = (time.perf_counter() - start) * 1000
        logger.debug("%s %s -> %s (%.1fms)", method, _redact(resp.request.url), resp.status_code, duration_ms)

        if resp.status_code >= 400:
            try:
                body: Any = resp.json()
            except ValueError:
                body = resp.text
            raise HueUpstreamError(status_code=resp.status_code, body=body)

        try:
            return resp.json()
        except ValueError as exc:
            raise DecodeError(f"Bridge returned invalid JSON: {exc}") from exc

    def get_text(self, url: str) -> str:
        start = time.perf_counter()
        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport, follow_redirects=True) as client:
                resp = client.get(url)
        except httpx.RequestError as exc:
            raise HueTransportError(str(exc)) from exc

        duration_ms = (time.perf_counter() - start) * 1000
        logger.debug("GET %s -> %s (%.1fms)", _redact(resp.request.url), resp.status_code, duration_ms)
        if resp.status_code >= 400:
            raise HueUpstreamError(status_code=resp.status_code, body=resp.text)
        return resp.text


def _redact(url: httpx.URL) -> str:
    # /api/<username>/... carries the credential.
    parts = url.path.split("/")
    if len(parts) > 2 and parts[1] == "api" and parts[2]:
        parts[2] = "***"
    return f"{url.host}{'/'.join(parts)}"
