"""
Directive and event models for the v2 and v3 smart-home payloads.

Inbound requests keep the dict they were parsed from, so the backend
receives the directive exactly as the platform sent it. The parsed model is
only used for inspection (version, namespace, tokens).
"""

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from smarthome_bridge.errors import InvalidDirectiveError


class Header(BaseModel):
    # numbers are read as strings for inspection; forwarding uses the raw dict
    model_config = ConfigDict(extra="allow", populate_by_name=True, coerce_numbers_to_str=True)

    message_id: Optional[str] = Field(default=None, alias="messageId")
    namespace: Optional[str] = None
    name: Optional[str] = None
    payload_version: Optional[str] = Field(default=None, alias="payloadVersion")
    correlation_token: Optional[str] = Field(default=None, alias="correlationToken")  # v3 only


class WireModel(BaseModel):
    model_config = ConfigDict(extra="allow")

    _raw: Optional[dict[str, Any]] = PrivateAttr(default=None)

    @classmethod
    def from_wire(cls, raw: dict[str, Any]):
        """Validate an inbound dict and remember it for forwarding."""
        model = cls.model_validate(raw)
        model._raw = raw
        return model

    @property
    def raw(self) -> dict[str, Any]:
        if self._raw is not None:
            return self._raw
        return wire_dict(self)


class DirectiveV2(WireModel):
    """v2 message: {header, payload}. Inbound requests and outbound responses."""

    header: Header
    payload: dict[str, Any] = {}

    @property
    def access_token(self) -> Optional[str]:
        return self.payload.get("accessToken")


class DirectiveBody(BaseModel):
    model_config = ConfigDict(extra="allow")

    header: Header
    payload: dict[str, Any] = {}
    endpoint: Optional[dict[str, Any]] = None

    @property
    def endpoint_id(self) -> Optional[str]:
        if self.endpoint:
            return self.endpoint.get("endpointId")
        return None


class DirectiveV3(WireModel):
    """Inbound v3 request: {directive: {header, payload, endpoint?}}"""

    directive: DirectiveBody

    @property
    def header(self) -> Header:
        return self.directive.header

    @property
    def namespace(self) -> Optional[str]:
        return self.directive.header.namespace

    @property
    def raw_directive(self) -> dict[str, Any]:
        return self.raw["directive"]


class Event(BaseModel):
    model_config = ConfigDict(extra="allow")

    header: Header
    endpoint: Optional[dict[str, Any]] = None
    payload: dict[str, Any] = {}


class EventEnvelope(BaseModel):
    """Outbound v3 response: {event: {header, endpoint?, payload}, context?}"""
    model_config = ConfigDict(extra="allow")

    event: Event
    context: Optional[dict[str, Any]] = None


InboundRequest = Union[DirectiveV2, DirectiveV3]


def wire_dict(model: BaseModel) -> dict[str, Any]:
    """Dump a model to its camelCase wire shape with only the fields it was given.

    Dict-valued fields (payloads) are emitted as-is, None values included.
    """
    return model.model_dump(by_alias=True, exclude_unset=True)


def require_token(value: Any, field: str) -> str:
    """Return the trimmed token or raise if it is missing or blank."""
    if not isinstance(value, str) or not value.strip():
        raise InvalidDirectiveError(f"Missing access token at {field}", details={"field": field})
    return value.strip()
