"""
Version & namespace dispatcher.

Detects the payload version of an inbound request, validates it into the
matching directive model and routes it to exactly one translator. Failures
inside a translator are logged and swallowed here; the caller then gets no
response at all.
"""

import logging
from typing import Any, Callable, Optional

from pydantic import ValidationError

from smarthome_bridge.authorization import AuthorizationAPI
from smarthome_bridge.control import ControlAPI
from smarthome_bridge.discovery import DiscoveryAPI
from smarthome_bridge.errors import DispatchError, InvalidDirectiveError
from smarthome_bridge.logs import log_json
from smarthome_bridge.models.constants import Namespace, PayloadVersion
from smarthome_bridge.models.directive import DirectiveV2, DirectiveV3, InboundRequest
from smarthome_bridge.transport.envelope import unexpected_information

logger = logging.getLogger(__name__)

ResponseCallback = Callable[[Optional[Exception], dict[str, Any]], None]


def request_version(raw: Any) -> str:
    """payloadVersion from directive.header, then header; "-1" if neither."""
    if isinstance(raw, dict):
        for container in (raw.get("directive"), raw):
            if isinstance(container, dict) and isinstance(container.get("header"), dict):
                version = container["header"].get("payloadVersion")
                if version is not None and version != "":
                    return str(version)
    logger.error("Invalid request version")
    return PayloadVersion.UNKNOWN


def parse_request(raw: Any) -> InboundRequest:
    version = request_version(raw)
    if version == PayloadVersion.UNKNOWN:
        raise DispatchError("Cannot determine payload version", details={"request": raw})
    try:
        if version == PayloadVersion.V3:
            return DirectiveV3.from_wire(raw)
        return DirectiveV2.from_wire(raw)
    except ValidationError as e:
        raise InvalidDirectiveError(f"Malformed v{version} directive: {e}")


class DirectiveRouter:
    def __init__(self, discovery: DiscoveryAPI, authorization: AuthorizationAPI, control: ControlAPI):
        self._discovery = discovery
        self._authorization = authorization
        self._control = control

    async def dispatch(self, raw: Any) -> Optional[dict[str, Any]]:
        """Translate one inbound request. Returns None if handling failed."""
        log_json(logger, "Receive SmartHome Request", raw)
        try:
            response = await self._route(parse_request(raw))
        except Exception:
            logger.exception("Failed to handle smart home request")
            return None
        log_json(logger, "SmartHome Response", response)
        return response

    async def dispatch_with_callback(self, raw: Any, callback: ResponseCallback) -> None:
        """Invoke callback(None, response) once; never when handling failed."""
        response = await self.dispatch(raw)
        if response is not None:
            callback(None, response)

    async def _route(self, request: InboundRequest) -> dict[str, Any]:
        if isinstance(request, DirectiveV3):
            return await self._route_v3(request)
        return await self._route_v2(request)

    async def _route_v3(self, request: DirectiveV3) -> dict[str, Any]:
        namespace = request.namespace
        if namespace == Namespace.DISCOVERY_V3:
            logger.info("DISCOVER %s", namespace)
            return await self._discovery.discover_v3(request)
        if namespace == Namespace.AUTHORIZATION_V3:
            logger.info("AUTHORIZE %s", namespace)
            return await self._authorization.authorize_v3(request)
        # every device-control interface (Alexa, Alexa.PowerController, ...)
        logger.info("CONTROL %s", namespace)
        return await self._control.control_v3(request)

    async def _route_v2(self, request: DirectiveV2) -> dict[str, Any]:
        namespace = request.header.namespace
        if namespace == Namespace.DISCOVERY_V2:
            logger.info("DISCOVER %s", namespace)
            return await self._discovery.discover_v2(request)
        if namespace == Namespace.CONTROL_V2:
            logger.info("CONTROL %s", namespace)
            return await self._control.control_v2(request)
        logger.error("No supported namespace: %s", namespace)
        return unexpected_information(namespace)
