"""BackendClient: request building, chunked bodies, timeouts, parse failures."""

import asyncio
import logging

import httpx
import pytest

from smarthome_bridge import BackendResponseError, BackendUnavailableError, BridgeConfig
from smarthome_bridge.transport.http import BackendClient

from conftest import CONFIG


def make_client(handler, config: BridgeConfig = CONFIG) -> BackendClient:
    return BackendClient(config, transport=httpx.MockTransport(handler))


def test_build_request_defaults():
    client = BackendClient(CONFIG)
    request = client.build_request("/voice/alexa/home_skill/discovery", "  tok \t")
    assert request.hostname == "api.example.com"
    assert request.port == 8443
    assert request.path == "/v1/voice/alexa/home_skill/discovery"
    assert request.method == "GET"
    assert request.headers == {"accept": "*/*", "token": "tok"}
    assert request.body is None


def test_build_request_post_on_auth_host():
    client = BackendClient(CONFIG)
    request = client.build_request(
        "/voice/alexa/home_skill/v3/authorize", "tok", method="POST",
        body={"header": {"name": "AcceptGrant"}}, auth_host=True, extra_headers={"alexaRegion": "EU"},
    )
    assert request.hostname == "auth.example.com"
    assert request.headers["alexaRegion"] == "EU"
    assert request.body == '{"header": {"name": "AcceptGrant"}}'


@pytest.mark.asyncio
async def test_body_accumulated_across_chunks():
    async def chunks():
        yield b'{"res_code": 200, "pay'
        yield b'load": {"discoveredAppliances": '
        yield b'[{"applianceId": "a1"}]}}'

    client = make_client(lambda request: httpx.Response(200, content=chunks()))
    reply = await client.send(client.build_request("/voice/alexa/home_skill/discovery", "tok"))
    assert reply.ok
    assert reply.res_code == 200
    assert reply.data["payload"]["discoveredAppliances"] == [{"applianceId": "a1"}]


@pytest.mark.asyncio
async def test_empty_body_is_empty_object():
    client = make_client(lambda request: httpx.Response(204))
    reply = await client.send(client.build_request("/voice/alexa/home_skill/control", "tok", method="POST", body={}))
    assert reply.status_code == 204
    assert reply.data == {}
    assert not reply.unauthorized


@pytest.mark.asyncio
async def test_string_res_code_recognized():
    client = make_client(lambda request: httpx.Response(200, json={"res_code": "401"}))
    reply = await client.send(client.build_request("/voice/alexa/home_skill/discovery", "tok"))
    assert reply.unauthorized


@pytest.mark.asyncio
@pytest.mark.parametrize("content", [b"<html>502 Bad Gateway</html>", b"[1, 2, 3]"])
async def test_unparsable_body_raises(content):
    client = make_client(lambda request: httpx.Response(502, content=content))
    with pytest.raises(BackendResponseError):
        await client.send(client.build_request("/voice/alexa/home_skill/discovery", "tok"))


@pytest.mark.asyncio
async def test_connection_error_maps_to_unavailable():
    def handler(request):
        raise httpx.ConnectError("Name or service not known")

    client = make_client(handler)
    with pytest.raises(BackendUnavailableError) as exc_info:
        await client.send(client.build_request("/voice/alexa/home_skill/discovery", "tok"))
    assert exc_info.value.code == "backend_unavailable"


@pytest.mark.asyncio
async def test_timeout_maps_to_unavailable():
    async def slow(request):
        await asyncio.sleep(1.0)
        return httpx.Response(200, json={})

    config = CONFIG.model_copy(update={"timeout": 0.05})
    client = make_client(slow, config)
    with pytest.raises(BackendUnavailableError, match="Timed out"):
        await client.send(client.build_request("/voice/alexa/home_skill/v3/control", "tok", method="POST", body={}))


@pytest.mark.asyncio
async def test_token_not_logged(caplog):
    client = make_client(lambda request: httpx.Response(200, json={}))
    with caplog.at_level(logging.INFO, logger="smarthome_bridge"):
        await client.send(client.build_request("/voice/alexa/home_skill/discovery", "secret-token"))
    assert "Backend HTTP Request" in caplog.text
    assert "secret-token" not in caplog.text
