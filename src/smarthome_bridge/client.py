"""
SmartHomeBridge / AsyncSmartHomeBridge: wire config, backend client,
translators and router together.
"""

import asyncio
from typing import Any, Optional

import httpx

from smarthome_bridge.authorization import AuthorizationAPI
from smarthome_bridge.config import BridgeConfig
from smarthome_bridge.control import ControlAPI
from smarthome_bridge.discovery import DiscoveryAPI
from smarthome_bridge.router import DirectiveRouter, ResponseCallback
from smarthome_bridge.transport.http import BackendClient


class AsyncSmartHomeBridge:
    """Async bridge (primary)."""

    def __init__(
        self,
        config: Optional[BridgeConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config or BridgeConfig.from_env()
        self.http = BackendClient(self.config, transport=transport)
        self.discovery = DiscoveryAPI(self.http)
        self.authorization = AuthorizationAPI(self.http)
        self.control = ControlAPI(self.http)
        self.router = DirectiveRouter(self.discovery, self.authorization, self.control)

    async def handle(self, request: Any) -> Optional[dict[str, Any]]:
        return await self.router.dispatch(request)

    async def handle_with_callback(self, request: Any, callback: ResponseCallback) -> None:
        await self.router.dispatch_with_callback(request, callback)


class SmartHomeBridge:
    """Sync wrapper around AsyncSmartHomeBridge. Runs the event loop internally."""

    def __init__(self, **kwargs: Any):
        self._async = AsyncSmartHomeBridge(**kwargs)
        self._loop = asyncio.new_event_loop()

    def _run(self, coro: Any) -> Any:
        return self._loop.run_until_complete(coro)

    @property
    def config(self) -> BridgeConfig:
        return self._async.config

    def handle(self, request: Any) -> Optional[dict[str, Any]]:
        return self._run(self._async.handle(request))

    def handle_with_callback(self, request: Any, callback: ResponseCallback) -> None:
        self._run(self._async.handle_with_callback(request, callback))

    def close(self) -> None:
        self._loop.close()
