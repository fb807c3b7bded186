"""
Pytest configuration and common fixtures for wacloudapi tests.

Provides an in-process aiohttp server that stands in for the Graph API
and a client wired to it.
"""

import json
from collections.abc import AsyncGenerator
from typing import Any

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from tests.helpers import TEST_API_VERSION, TEST_PHONE_ID, TEST_TOKEN
from wacloudapi.client import WhatsAppClient
from wacloudapi.core.logging import clear_request_context


@pytest.fixture(autouse=True)
def _reset_request_context():
    yield
    clear_request_context()


class GraphApiStub:
    """Records requests and replays canned responses keyed by (method, path)."""

    def __init__(self):
        self.routes: dict[tuple[str, str], tuple[int, Any]] = {}
        self.requests: list[dict[str, Any]] = []

    def add(self, method: str, path: str, status: int = 200, body: Any = None) -> None:
        self.routes[(method.upper(), path)] = (status, {} if body is None else body)

    async def handle(self, request: web.Request) -> web.Response:
        raw = await request.read()
        record: dict[str, Any] = {
            "method": request.method,
            "path": request.path,
            "query": dict(request.query),
            "headers": dict(request.headers),
            "content_type": request.content_type,
            "raw": raw,
        }
        if request.content_type == "application/json" and raw:
            record["json"] = json.loads(raw)
        self.requests.append(record)

        route = self.routes.get((request.method, request.path))
        if route is None:
            return web.Response(status=404, text="route not stubbed")
        status, body = route
        if isinstance(body, (bytes, str)):
            return web.Response(status=status, body=body)
        return web.json_response(body, status=status)

    @property
    def last(self) -> dict[str, Any]:
        return self.requests[-1]


@pytest.fixture
def graph_api() -> GraphApiStub:
    return GraphApiStub()


@pytest_asyncio.fixture
async def graph_server(graph_api: GraphApiStub) -> AsyncGenerator[TestServer, None]:
    app = web.Application()
    app.router.add_route("*", "/{tail:.*}", graph_api.handle)
    server = TestServer(app)
    await server.start_server()
    yield server
    await server.close()


@pytest_asyncio.fixture
async def client(graph_server: TestServer) -> AsyncGenerator[WhatsAppClient, None]:
    base_url = str(graph_server.make_url("")).rstrip("/")
    async with WhatsAppClient(
        TEST_TOKEN, TEST_PHONE_ID, api_version=TEST_API_VERSION, base_url=base_url
    ) as wa_client:
        yield wa_client
