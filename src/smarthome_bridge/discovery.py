"""
Discovery translator: enumerate the user's devices on the home cloud.
"""

import logging
from typing import Any

from smarthome_bridge.errors import BackendUnavailableError
from smarthome_bridge.models.constants import MessageName, Namespace, PayloadVersion
from smarthome_bridge.models.directive import DirectiveV2, DirectiveV3, require_token
from smarthome_bridge.transport.envelope import (
    auth_error_event,
    create_directive,
    create_event,
    create_header,
    expired_token_directive,
    server_error_event,
    service_unavailable_directive,
)
from smarthome_bridge.transport.http import BackendClient

logger = logging.getLogger(__name__)

DISCOVERY_V2_PATH = "/voice/alexa/home_skill/discovery"
DISCOVERY_V3_PATH = "/voice/alexa/home_skill/v3/discovery"


class DiscoveryAPI:
    def __init__(self, http: BackendClient):
        self._http = http

    async def discover_v2(self, request: DirectiveV2) -> dict[str, Any]:
        """v2: GET the appliance list and wrap it in DiscoverAppliancesResponse."""
        token = require_token(request.access_token, "payload.accessToken")
        try:
            reply = await self._http.send(self._http.build_request(DISCOVERY_V2_PATH, token))
        except BackendUnavailableError as e:
            logger.error("v2 discovery failed: %s", e)
            return service_unavailable_directive()

        if reply.unauthorized:
            return expired_token_directive()

        appliances = (reply.data.get("payload") or {}).get("discoveredAppliances") or []
        header = create_header(Namespace.DISCOVERY_V2, MessageName.DISCOVER_RESPONSE_V2, PayloadVersion.V2)
        return create_directive(header, {"discoveredAppliances": appliances})

    async def discover_v3(self, request: DirectiveV3) -> dict[str, Any]:
        """v3: POST the directive and wrap the endpoints in Discover.Response."""
        directive = request.directive
        scope = directive.payload.get("scope") or {}
        token = require_token(scope.get("token"), "directive.payload.scope.token")
        try:
            reply = await self._http.send(self._http.build_request(
                DISCOVERY_V3_PATH, token, method="POST", body=request.raw_directive, auth_host=True,
            ))
        except BackendUnavailableError as e:
            logger.error("v3 discovery failed: %s", e)
            return server_error_event(str(e))

        if reply.unauthorized:
            return auth_error_event()

        event = reply.data.get("event") or {}
        endpoints = (event.get("payload") or {}).get("endpoints") or []
        header = create_header(Namespace.DISCOVERY_V3, MessageName.DISCOVER_RESPONSE_V3, PayloadVersion.V3)
        return create_event(header, {"endpoints": endpoints})
