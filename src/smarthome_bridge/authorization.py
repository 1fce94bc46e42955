"""
Authorization translator (v3 account linking): exchange a grant code with
the home cloud.
"""

import logging
from typing import Any

from smarthome_bridge.errors import BackendUnavailableError
from smarthome_bridge.logs import log_json
from smarthome_bridge.models.directive import DirectiveV3, require_token
from smarthome_bridge.transport.envelope import auth_error_event, server_error_event
from smarthome_bridge.transport.http import BackendClient

logger = logging.getLogger(__name__)

AUTHORIZE_V3_PATH = "/voice/alexa/home_skill/v3/authorize"


class AuthorizationAPI:
    def __init__(self, http: BackendClient):
        self._http = http

    async def authorize_v3(self, request: DirectiveV3) -> dict[str, Any]:
        """Forward AcceptGrant and pass the backend's event through untouched."""
        directive = request.directive
        correlation_token = directive.header.correlation_token
        grantee = directive.payload.get("grantee") or {}
        token = require_token(grantee.get("token"), "directive.payload.grantee.token")
        try:
            reply = await self._http.send(self._http.build_request(
                AUTHORIZE_V3_PATH, token, method="POST", body=request.raw_directive, auth_host=True,
                extra_headers={"alexaRegion": self._http.config.region},
            ))
        except BackendUnavailableError as e:
            logger.error("v3 authorization failed: %s", e)
            return server_error_event(str(e), correlation_token=correlation_token)

        if reply.unauthorized:
            return auth_error_event(correlation_token=correlation_token)

        response = {"event": reply.data.get("event")}
        log_json(logger, "Authorize Alexa Response", response)
        return response
