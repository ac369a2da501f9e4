# faas-client — OpenFaaS gateway client
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Shared test fixtures: an in-process mock gateway and clients pointed at it."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any

import aiohttp
import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from faas_client.client import AsyncGatewayClient
from faas_client.models import BasicAuthCredentials


@dataclass
class RecordedRequest:
    method: str
    path: str
    query_string: str
    query: Any
    headers: dict[str, str]
    body: bytes


class MockGateway:
    """Scriptable stand-in for an OpenFaaS gateway.

    Routes are keyed by ``(method, path)``. Unscripted routes answer 404.
    """

    def __init__(self) -> None:
        self.url = ""
        self.requests: list[RecordedRequest] = []
        self.release = asyncio.Event()
        self._routes: dict[tuple[str, str], Any] = {}
        self.app = web.Application()
        self.app.router.add_route("*", "/{tail:.*}", self._handle)

    def respond(self, method: str, path: str, status: int = 200, body: bytes | str = b"") -> None:
        if isinstance(body, str):
            body = body.encode()
        self._routes[(method, path)] = ("static", status, body)

    def echo(self, method: str, path: str, status: int = 200) -> None:
        self._routes[(method, path)] = ("echo", status, b"")

    def hang(self, method: str, path: str) -> None:
        """Hold requests until the fixture is torn down."""
        self._routes[(method, path)] = ("hang", 200, b"[]")

    async def _handle(self, request: web.Request) -> web.Response:
        body = await request.read()
        self.requests.append(
            RecordedRequest(
                method=request.method,
                path=request.path,
                query_string=request.query_string,
                query=request.query.copy(),
                headers=dict(request.headers),
                body=body,
            )
        )
        kind, status, payload = self._routes.get((request.method, request.path), ("static", 404, b""))
        if kind == "echo":
            payload = body
        elif kind == "hang":
            await self.release.wait()
        return web.Response(status=status, body=payload)


@pytest_asyncio.fixture
async def gateway() -> MockGateway:
    gw = MockGateway()
    server = TestServer(gw.app)
    await server.start_server()
    gw.url = str(server.make_url("/")).rstrip("/")
    yield gw
    gw.release.set()
    await server.close()


@pytest_asyncio.fixture
async def session() -> aiohttp.ClientSession:
    async with aiohttp.ClientSession() as s:
        yield s


@pytest.fixture
def credentials() -> BasicAuthCredentials:
    return BasicAuthCredentials(user="admin", password="s3cret")


@pytest.fixture
def client(session, gateway) -> AsyncGatewayClient:
    """Client without credentials."""
    return AsyncGatewayClient(session, gateway.url)


@pytest.fixture
def auth_client(session, gateway, credentials) -> AsyncGatewayClient:
    """Client with Basic Auth credentials."""
    return AsyncGatewayClient(session, gateway.url, credentials)
