# faas-client — OpenFaaS gateway client
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Tests for the capability protocols."""

from unittest.mock import MagicMock

import pytest

from faas_client.capabilities import FunctionCrawler, FunctionFetcher, Invoker, NamespaceFetcher
from faas_client.client import AsyncGatewayClient
from faas_client.models import Invocation


class FakeInvoker:
    def __init__(self):
        self.calls = []

    async def invoke_sync(self, name, invocation, *, timeout=None):
        self.calls.append(("sync", name, invocation.message))
        return invocation.message or b""

    async def invoke_async(self, name, invocation, *, timeout=None):
        self.calls.append(("async", name, invocation.message))
        return True


async def forward(invoker: Invoker, topic: str, body: bytes) -> bool:
    return await invoker.invoke_async(topic, Invocation(message=body, topic=topic))


def test_gateway_client_satisfies_all_capabilities():
    client = AsyncGatewayClient(MagicMock(), "http://gateway:8080")
    assert isinstance(client, Invoker)
    assert isinstance(client, NamespaceFetcher)
    assert isinstance(client, FunctionFetcher)
    assert isinstance(client, FunctionCrawler)


def test_invoker_fake_is_not_a_crawler():
    fake = FakeInvoker()
    assert isinstance(fake, Invoker)
    assert not isinstance(fake, NamespaceFetcher)
    assert not isinstance(fake, FunctionCrawler)


@pytest.mark.asyncio
async def test_fake_substitutes_for_client():
    fake = FakeInvoker()
    assert await forward(fake, "orders", b"{}") is True
    assert fake.calls == [("async", "orders", b"{}")]

