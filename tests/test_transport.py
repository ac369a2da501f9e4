# faas-client — OpenFaaS gateway client
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Tests for timeouts, concurrent use and response release."""

import asyncio

import aiohttp
import pytest

from faas_client.client import AsyncGatewayClient
from faas_client.errors import AuthenticationError, NotFoundError, TransportError
from faas_client.models import Invocation

INVOCATION = Invocation(message=b"ping", content_type="text/plain")

OPERATIONS = {
    "invoke_sync": ("POST", "/function/slow", lambda c, t: c.invoke_sync("slow", INVOCATION, timeout=t)),
    "invoke_async": ("POST", "/async-function/slow", lambda c, t: c.invoke_async("slow", INVOCATION, timeout=t)),
    "has_namespace_support": ("GET", "/system/namespaces", lambda c, t: c.has_namespace_support(timeout=t)),
    "get_namespaces": ("GET", "/system/namespaces", lambda c, t: c.get_namespaces(timeout=t)),
    "get_functions": ("GET", "/system/functions", lambda c, t: c.get_functions("prod", timeout=t)),
}


@pytest.mark.asyncio
@pytest.mark.parametrize("operation", sorted(OPERATIONS))
async def test_timeout_before_response_is_transport_error(client, gateway, operation):
    method, path, call = OPERATIONS[operation]
    gateway.hang(method, path)

    with pytest.raises(TransportError) as exc_info:
        await asyncio.wait_for(call(client, 0.2), timeout=5)
    assert isinstance(exc_info.value.__cause__, (asyncio.TimeoutError, aiohttp.ClientError))


@pytest.mark.asyncio
async def test_transport_error_names_invoked_function(client, gateway):
    gateway.hang("POST", "/function/slow")
    with pytest.raises(TransportError) as exc_info:
        await client.invoke_sync("slow", INVOCATION, timeout=0.2)
    assert exc_info.value.function_name == "slow"


@pytest.mark.asyncio
async def test_discovery_transport_error_has_no_function(client, gateway):
    gateway.hang("GET", "/system/namespaces")
    with pytest.raises(TransportError, match="namespaces") as exc_info:
        await client.get_namespaces(timeout=0.2)
    assert exc_info.value.function_name is None


@pytest.mark.asyncio
async def test_concurrent_invocations_get_their_own_results(client, gateway):
    gateway.echo("POST", "/function/echo")
    payloads = [f"payload-{i}".encode() for i in range(25)]

    results = await asyncio.gather(
        *(client.invoke_sync("echo", Invocation(message=p)) for p in payloads)
    )
    assert results == payloads
    assert len(gateway.requests) == 25


@pytest.mark.asyncio
async def test_responses_released_on_every_exit_path(gateway):
    """A single-connection pool only survives if every response is released."""
    gateway.respond("POST", "/function/ok", 200, b"ok")
    gateway.respond("POST", "/function/locked", 401, b"x" * 65536)
    gateway.respond("POST", "/function/gone", 404, b"y" * 65536)
    gateway.respond("GET", "/system/namespaces", 401, "nope")

    connector = aiohttp.TCPConnector(limit=1)
    async with aiohttp.ClientSession(connector=connector) as session:
        client = AsyncGatewayClient(session, gateway.url)

        async def exercise() -> None:
            for _ in range(3):
                assert await client.invoke_sync("ok", INVOCATION) == b"ok"
                with pytest.raises(AuthenticationError):
                    await client.invoke_sync("locked", INVOCATION)
                with pytest.raises(NotFoundError):
                    await client.invoke_async("gone", INVOCATION)
                with pytest.raises(AuthenticationError):
                    await client.get_namespaces()

        await asyncio.wait_for(exercise(), timeout=10)
