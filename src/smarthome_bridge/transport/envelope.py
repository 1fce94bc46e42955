"""
Outbound message construction: headers, v2 directives and v3 events.
"""

import uuid
from typing import Any, Optional

from smarthome_bridge.models.constants import ErrorType, MessageName, Namespace, PayloadVersion
from smarthome_bridge.models.directive import DirectiveV2, Event, EventEnvelope, Header, wire_dict


def create_message_id() -> str:
    return str(uuid.uuid4())


def create_header(
    namespace: str,
    name: str,
    payload_version: str,
    correlation_token: Optional[str] = None,
) -> Header:
    """Build a header with a fresh messageId. correlationToken only when given."""
    header = Header(
        message_id=create_message_id(),
        namespace=namespace,
        name=name,
        payload_version=payload_version,
    )
    if correlation_token is not None:
        header.correlation_token = correlation_token
    return header


def create_directive(header: Header, payload: Optional[dict[str, Any]] = None) -> dict[str, Any]:
    """v2 message as a dict ready to return to the platform."""
    return wire_dict(DirectiveV2(header=header, payload=payload or {}))


def create_event(
    header: Header,
    payload: Optional[dict[str, Any]] = None,
    endpoint: Optional[dict[str, Any]] = None,
) -> dict[str, Any]:
    """v3 event envelope as a dict ready to return to the platform."""
    event = Event(header=header, payload=payload or {})
    if endpoint is not None:
        event.endpoint = endpoint
    return wire_dict(EventEnvelope(event=event))


def create_error_event(
    error_type: str,
    message: str = "",
    endpoint_id: Optional[str] = None,
    correlation_token: Optional[str] = None,
) -> dict[str, Any]:
    """v3 Alexa.ErrorResponse event."""
    header = create_header(
        Namespace.CONTROL_V3, MessageName.ERROR_RESPONSE, PayloadVersion.V3,
        correlation_token=correlation_token,
    )
    endpoint = {"endpointId": endpoint_id} if endpoint_id else None
    payload = {"type": error_type}
    if message:
        payload["message"] = message
    return create_event(header, payload, endpoint=endpoint)


def auth_error_event(correlation_token: Optional[str] = None, endpoint_id: Optional[str] = None) -> dict[str, Any]:
    return create_error_event(
        ErrorType.INVALID_AUTHORIZATION_CREDENTIAL,
        "The access token is invalid or has expired.",
        endpoint_id=endpoint_id,
        correlation_token=correlation_token,
    )


def server_error_event(
    message: str = "", correlation_token: Optional[str] = None, endpoint_id: Optional[str] = None,
) -> dict[str, Any]:
    return create_error_event(
        ErrorType.INTERNAL_ERROR,
        message or "The home cloud service is unavailable.",
        endpoint_id=endpoint_id,
        correlation_token=correlation_token,
    )


def expired_token_directive() -> dict[str, Any]:
    header = create_header(Namespace.CONTROL_V2, MessageName.EXPIRED_ACCESS_TOKEN, PayloadVersion.V2)
    return create_directive(header)


def service_unavailable_directive() -> dict[str, Any]:
    header = create_header(Namespace.CONTROL_V2, MessageName.DEPENDENT_SERVICE_UNAVAILABLE, PayloadVersion.V2)
    return create_directive(header)


def unexpected_information(fault: Optional[str]) -> dict[str, Any]:
    """v2 UnexpectedInformationReceivedError naming the faulting parameter."""
    header = create_header(Namespace.CONTROL_V2, MessageName.UNEXPECTED_INFORMATION, PayloadVersion.V2)
    return create_directive(header, {"faultingParameter": fault if fault is not None else ""})
