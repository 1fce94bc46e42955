"""
HTTPS client for the home-cloud backend.

One short-lived httpx.AsyncClient per call; the body is streamed and only
parsed once every chunk has arrived.
"""

import asyncio
import json
import logging
from typing import Any, Optional

import httpx

from smarthome_bridge.config import BASE_PATH, BridgeConfig
from smarthome_bridge.errors import BackendResponseError, BackendUnavailableError
from smarthome_bridge.logs import log_json, redact_headers
from smarthome_bridge.models.backend import BackendReply, BackendRequest

logger = logging.getLogger(__name__)

USER_AGENT = "alexa-smarthome-bridge/0.1.0"


class BackendClient:
    def __init__(self, config: BridgeConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        self._config = config
        self._transport = transport

    @property
    def config(self) -> BridgeConfig:
        return self._config

    def build_request(
        self,
        path: str,
        token: str,
        method: str = "GET",
        body: Optional[dict[str, Any]] = None,
        auth_host: bool = False,
        extra_headers: Optional[dict[str, str]] = None,
    ) -> BackendRequest:
        headers = {"accept": "*/*", "token": token.strip()}
        if extra_headers:
            headers.update(extra_headers)
        return BackendRequest(
            hostname=self._config.auth_hostname if auth_host else self._config.hostname,
            port=self._config.port,
            path=f"{BASE_PATH}{path}",
            method=method,
            headers=headers,
            body=json.dumps(body) if body is not None and method != "GET" else None,
        )

    async def send(self, request: BackendRequest) -> BackendReply:
        """Issue one request and wait for its single terminal outcome.

        Raises BackendUnavailableError on connection failures and timeouts,
        BackendResponseError when the body is not a JSON object.
        """
        log_json(logger, "Backend HTTP Request", {
            "method": request.method,
            "url": self._url(request),
            "headers": redact_headers(request.headers),
        })
        try:
            status_code, raw = await asyncio.wait_for(self._fetch(request), timeout=self._config.timeout)
        except asyncio.TimeoutError:
            raise BackendUnavailableError(f"Timed out after {self._config.timeout}s waiting for {request.path}")
        except httpx.HTTPError as e:
            raise BackendUnavailableError(f"{type(e).__name__}: {e}")

        reply = BackendReply(status_code=status_code, data=self._parse(raw, request.path))
        log_json(logger, "Backend HTTP Response", {"status": reply.status_code, "body": reply.data})
        return reply

    async def _fetch(self, request: BackendRequest) -> tuple[int, bytes]:
        headers = {"User-Agent": USER_AGENT, **request.headers}
        if request.body is not None:
            headers["Content-Type"] = "application/json"
        async with httpx.AsyncClient(transport=self._transport, timeout=self._config.timeout) as client:
            async with client.stream(
                request.method, self._url(request), headers=headers, content=request.body,
            ) as resp:
                chunks = [chunk async for chunk in resp.aiter_bytes()]
                return resp.status_code, b"".join(chunks)

    def _url(self, request: BackendRequest) -> str:
        return f"{self._config.scheme}://{request.hostname}:{request.port}{request.path}"

    @staticmethod
    def _parse(raw: bytes, path: str) -> dict[str, Any]:
        if not raw.strip():
            return {}
        try:
            data = json.loads(raw)
        except ValueError as e:
            raise BackendResponseError(
                f"Malformed JSON from {path}: {e}", details={"body": raw[:200].decode("utf-8", "replace")},
            )
        if not isinstance(data, dict):
            raise BackendResponseError(f"Expected a JSON object from {path}, got {type(data).__name__}")
        return data
