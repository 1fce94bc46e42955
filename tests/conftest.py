"""Shared fixtures: a recording fake home-cloud backend and sample directives."""

import json
from typing import Any, Optional

import httpx
import pytest

from smarthome_bridge import AsyncSmartHomeBridge, BridgeConfig

CONFIG = BridgeConfig(
    hostname="api.example.com",
    auth_hostname="auth.example.com",
    port=8443,
    region="EU",
    timeout=2.0,
)


class FakeBackend:
    """MockTransport handler that records requests and answers with a canned reply."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body: Any = {}
        self.error: Optional[Exception] = None

    def reply(self, body: Any, status_code: int = 200) -> None:
        self.body = body
        self.status_code = status_code

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if isinstance(self.body, bytes):
            return httpx.Response(self.status_code, content=self.body)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def bridge(backend: FakeBackend) -> AsyncSmartHomeBridge:
    return AsyncSmartHomeBridge(config=CONFIG, transport=httpx.MockTransport(backend))


@pytest.fixture
def v2_discovery_request() -> dict[str, Any]:
    return {
        "header": {
            "messageId": "6d6d6e14-8aee-473e-8c24-0d31ff9c17a2",
            "name": "DiscoverAppliancesRequest",
            "namespace": "Alexa.ConnectedHome.Discovery",
            "payloadVersion": "2",
        },
        "payload": {"accessToken": "  tok123 \n"},
    }


@pytest.fixture
def v2_control_request() -> dict[str, Any]:
    return {
        "header": {
            "messageId": "01ebf625-0b89-4c4d-b3aa-32340e894688",
            "name": "TurnOnRequest",
            "namespace": "Alexa.ConnectedHome.Control",
            "payloadVersion": "2",
        },
        "payload": {
            "accessToken": "tok123",
            "appliance": {"applianceId": "a1", "additionalApplianceDetails": {}},
        },
    }


@pytest.fixture
def v3_discovery_request() -> dict[str, Any]:
    return {
        "directive": {
            "header": {
                "namespace": "Alexa.Discovery",
                "name": "Discover",
                "payloadVersion": "3",
                "messageId": "1bd5d003-31b9-476f-ad03-71d471922820",
            },
            "payload": {"scope": {"type": "BearerToken", "token": "access-token-v3"}},
        }
    }


@pytest.fixture
def v3_authorize_request() -> dict[str, Any]:
    return {
        "directive": {
            "header": {
                "namespace": "Alexa.Authorization",
                "name": "AcceptGrant",
                "payloadVersion": "3",
                "messageId": "5f8a426e-01e4-4cc9-8b79-65f8bd0fd8a4",
            },
            "payload": {
                "grant": {"type": "OAuth2.AuthorizationCode", "code": "VGhpcyBpcyBhbiBhdXRob3JpemF0aW9uIGNvZGUuIDotKQ=="},
                "grantee": {"type": "BearerToken", "token": "grantee-token"},
            },
        }
    }


@pytest.fixture
def v3_control_request() -> dict[str, Any]:
    return {
        "directive": {
            "header": {
                "namespace": "Alexa.PowerController",
                "name": "TurnOn",
                "payloadVersion": "3",
                "messageId": "1bd5d003-31b9-476f-ad03-71d471922820",
                "correlationToken": "dFMb0z+PgpgdDmluhJ1LddFvSqZ/jCc8ptlAKulUj90jSqg==",
            },
            "endpoint": {
                "scope": {"type": "BearerToken", "token": "endpoint-token"},
                "endpointId": "light-1",
                "cookie": {},
            },
            "payload": {},
        }
    }
