"""
Control translator: forward a device action to the home cloud and relay
the confirmation.
"""

import logging
from typing import Any

from smarthome_bridge.errors import BackendUnavailableError
from smarthome_bridge.models.directive import DirectiveV2, DirectiveV3, require_token
from smarthome_bridge.transport.envelope import (
    auth_error_event,
    expired_token_directive,
    server_error_event,
    service_unavailable_directive,
)
from smarthome_bridge.transport.http import BackendClient

logger = logging.getLogger(__name__)

CONTROL_V2_PATH = "/voice/alexa/home_skill/control"
CONTROL_V3_PATH = "/voice/alexa/home_skill/v3/control"


class ControlAPI:
    def __init__(self, http: BackendClient):
        self._http = http

    async def control_v2(self, request: DirectiveV2) -> dict[str, Any]:
        token = require_token(request.access_token, "payload.accessToken")
        try:
            reply = await self._http.send(self._http.build_request(
                CONTROL_V2_PATH, token, method="POST", body=request.raw,
            ))
        except BackendUnavailableError as e:
            logger.error("v2 control failed: %s", e)
            return service_unavailable_directive()

        if reply.unauthorized:
            return expired_token_directive()

        # default until the backend confirms the action
        response = service_unavailable_directive()
        if reply.ok and reply.data.get("header"):
            response = {"header": reply.data["header"], "payload": reply.data.get("payload", {})}
        return response

    async def control_v3(self, request: DirectiveV3) -> dict[str, Any]:
        """Relay context + event from the backend; {} when it sends neither."""
        directive = request.directive
        correlation_token = directive.header.correlation_token
        endpoint_id = directive.endpoint_id
        scope = (directive.endpoint or {}).get("scope") or {}
        token = require_token(scope.get("token"), "directive.endpoint.scope.token")
        try:
            reply = await self._http.send(self._http.build_request(
                CONTROL_V3_PATH, token, method="POST", body=request.raw_directive,
            ))
        except BackendUnavailableError as e:
            logger.error("v3 control failed: %s", e)
            return server_error_event(str(e), correlation_token=correlation_token, endpoint_id=endpoint_id)

        if reply.unauthorized:
            return auth_error_event(correlation_token=correlation_token, endpoint_id=endpoint_id)

        response: dict[str, Any] = {}
        if reply.ok and reply.data.get("context") is not None:
            response["context"] = reply.data["context"]
            response["event"] = reply.data.get("event")
        return response
