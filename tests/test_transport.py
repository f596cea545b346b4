from __future__ import annotations

import asyncio
from collections.abc import Mapping
from typing import Any
from urllib.parse import urlsplit

import aiohttp
import pytest
from aiohttp import test_utils, web

from pycarryover._constants import GET_FOR_PLAY2_PATH, GameVersion
from pycarryover._transport import OfficialServerTransport, ServiceResponse
from pycarryover.carryover import _probe_cpd
from pycarryover.config import CarryoverConfig
from pycarryover.exceptions import CarryoverTransportError
from pycarryover.session import OfficialSession


def _app(seen: list[dict[str, Any]]) -> web.Application:
    async def profile(request: web.Request) -> web.Response:
        seen.append(
            {
                "method": request.method,
                "authorization": request.headers.get("authorization"),
                "version": request.headers.get("version"),
                "body": await request.json(),
            }
        )
        return web.json_response({"Id": "p-1"})

    async def forbidden(request: web.Request) -> web.Response:
        return web.Response(status=403, text="nope")

    async def garbage(request: web.Request) -> web.Response:
        return web.Response(status=200, text="<html>")

    async def page(request: web.Request) -> web.Response:
        seen.append({"method": request.method, "query": dict(request.query)})
        return web.json_response({"data": {}})

    async def slow(request: web.Request) -> web.Response:
        await asyncio.sleep(1)
        return web.json_response({})

    app = web.Application()
    app.router.add_post("/profile", profile)
    app.router.add_post("/forbidden", forbidden)
    app.router.add_get("/garbage", garbage)
    app.router.add_get("/page", page)
    app.router.add_post("/slow", slow)
    app.router.add_post(f"/{GET_FOR_PLAY2_PATH}", slow)
    return app


def _session() -> OfficialSession:
    return OfficialSession(player_id="p-1", access_token="secret-token", client_version="8.15.0")


@pytest.mark.asyncio
async def test_post_sends_bearer_token_and_json_body() -> None:
    seen: list[dict[str, Any]] = []
    async with test_utils.TestServer(_app(seen)) as server, aiohttp.ClientSession() as http:
        transport = OfficialServerTransport(CarryoverConfig(), _session(), http)
        response = await transport.call(str(server.make_url("/profile")), False, {"id": "x"})

    assert response.ok
    assert response.data == {"Id": "p-1"}
    assert seen == [
        {"method": "POST", "authorization": "bearer secret-token", "version": "8.15.0", "body": {"id": "x"}}
    ]


@pytest.mark.asyncio
async def test_get_keeps_query_string() -> None:
    seen: list[dict[str, Any]] = []
    async with test_utils.TestServer(_app(seen)) as server, aiohttp.ClientSession() as http:
        transport = OfficialServerTransport(CarryoverConfig(), _session(), http)
        response = await transport.call(str(server.make_url("/page")) + "?page=1&type=Arcade", True)

    assert response.data == {"data": {}}
    assert seen == [{"method": "GET", "query": {"page": "1", "type": "Arcade"}}]


@pytest.mark.asyncio
async def test_error_status_is_returned_not_raised() -> None:
    async with test_utils.TestServer(_app([])) as server, aiohttp.ClientSession() as http:
        transport = OfficialServerTransport(CarryoverConfig(), _session(), http)
        response = await transport.call(str(server.make_url("/forbidden")), False, {})

    assert response.status == 403
    assert not response.ok


@pytest.mark.asyncio
async def test_invalid_json_on_success_raises() -> None:
    async with test_utils.TestServer(_app([])) as server, aiohttp.ClientSession() as http:
        transport = OfficialServerTransport(CarryoverConfig(), _session(), http)
        with pytest.raises(CarryoverTransportError, match="Invalid JSON") as exc_info:
            await transport.call(str(server.make_url("/garbage")), True)

    assert exc_info.value.status_code == 200


class _LocalServerTransport:
    """Sends official-server URLs to the local test server, keeping the path."""

    def __init__(self, inner: OfficialServerTransport, server: test_utils.TestServer) -> None:
        self._inner = inner
        self._server = server

    async def call(self, endpoint: str, use_get: bool, body: Mapping[str, Any] | None = None) -> ServiceResponse:
        return await self._inner.call(str(self._server.make_url(urlsplit(endpoint).path)), use_get, body)


@pytest.mark.asyncio
async def test_timeout_raises_transport_error() -> None:
    config = CarryoverConfig(request_timeout=0.2)
    async with test_utils.TestServer(_app([])) as server, aiohttp.ClientSession() as http:
        transport = OfficialServerTransport(config, _session(), http)
        endpoint = str(server.make_url("/slow"))
        with pytest.raises(CarryoverTransportError) as exc_info:
            await transport.call(endpoint, False, {})

    assert exc_info.value.endpoint == endpoint
    assert isinstance(exc_info.value.__cause__, TimeoutError)


@pytest.mark.asyncio
async def test_timed_out_cpd_request_is_tolerated() -> None:
    config = CarryoverConfig(request_timeout=0.2)
    async with test_utils.TestServer(_app([])) as server, aiohttp.ClientSession() as http:
        transport = _LocalServerTransport(OfficialServerTransport(config, _session(), http), server)
        payload = await _probe_cpd(config, transport, GameVersion.H3, "mission-1")

    assert payload is None
