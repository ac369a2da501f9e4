# faas-client — OpenFaaS gateway client
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level OpenFaaS gateway clients.

Usage (async, with a caller-owned session)::

    async with aiohttp.ClientSession() as session:
        client = AsyncGatewayClient(session, "http://gateway:8080")
        body = await client.invoke_sync("echo", Invocation(message=b"hi"))

Usage (sync, safe in Jupyter)::

    client = GatewayClient()
    functions = client.get_functions("openfaas-fn")
    client.close()
"""

from __future__ import annotations

import asyncio
import concurrent.futures
import threading
from typing import Any

import aiohttp

from .api import DiscoveryAPI, InvocationAPI
from .config import GatewayConfig
from .errors import TransportError
from .models import BasicAuthCredentials, FunctionStatus, Invocation
from ._transport import GatewayTransport


class AsyncGatewayClient:
    """Async client for invoking and discovering functions on a gateway.

    The client holds no per-call state, so one instance can serve many
    concurrent tasks. Connection pooling is the session's business; the
    session is never closed by the client.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession,
        gateway_url: str,
        credentials: BasicAuthCredentials | None = None,
    ):
        self._credentials = credentials
        self._transport = GatewayTransport(session, gateway_url, credentials)

        self.invocation = InvocationAPI(self._transport)
        self.discovery = DiscoveryAPI(self._transport)

    @classmethod
    def from_config(
        cls, session: aiohttp.ClientSession, config: GatewayConfig
    ) -> "AsyncGatewayClient":
        return cls(session, config.gateway_url, config.credentials())

    @property
    def url(self) -> str:
        return self._transport.url

    @property
    def credentials(self) -> BasicAuthCredentials | None:
        return self._credentials

    async def invoke_sync(
        self, name: str, invocation: Invocation, *, timeout: float | None = None
    ) -> bytes:
        """Invoke a function and return its raw response body."""
        return await self.invocation.invoke_sync(name, invocation, timeout=timeout)

    async def invoke_async(
        self, name: str, invocation: Invocation, *, timeout: float | None = None
    ) -> bool:
        """Queue a function invocation. Returns True once the gateway accepts it."""
        return await self.invocation.invoke_async(name, invocation, timeout=timeout)

    async def has_namespace_support(self, *, timeout: float | None = None) -> bool:
        return await self.discovery.has_namespace_support(timeout=timeout)

    async def get_namespaces(self, *, timeout: float | None = None) -> list[str]:
        return await self.discovery.get_namespaces(timeout=timeout)

    async def get_functions(
        self, namespace: str = "", *, timeout: float | None = None
    ) -> list[FunctionStatus]:
        return await self.discovery.get_functions(namespace, timeout=timeout)


class GatewayClient:
    """Synchronous client backed by a background event loop.

    Safe to use in Jupyter notebooks and other environments where an event
    loop may already be running::

        with GatewayClient() as client:
            client.invoke_async("echo", Invocation(message=b"hi"))
    """

    # extra time allowed on top of the request timeout before giving up on the loop
    _grace = 5.0

    def __init__(self, config: GatewayConfig | None = None):
        self.config = config or GatewayConfig.from_env()
        credentials = self.config.credentials()
        self._loop = asyncio.new_event_loop()
        self._thread = threading.Thread(target=self._loop.run_forever, daemon=True)
        self._thread.start()
        self._session = asyncio.run_coroutine_threadsafe(
            self._create_session(), self._loop
        ).result(timeout=10)
        self._client = AsyncGatewayClient(self._session, self.config.gateway_url, credentials)

    async def _create_session(self) -> aiohttp.ClientSession:
        return aiohttp.ClientSession(
            timeout=aiohttp.ClientTimeout(total=self.config.request_timeout)
        )

    def _run(self, coro: Any, timeout: float | None) -> Any:
        future = asyncio.run_coroutine_threadsafe(coro, self._loop)
        wait = (timeout or self.config.request_timeout) + self._grace
        try:
            return future.result(timeout=wait)
        except concurrent.futures.TimeoutError as e:
            future.cancel()
            raise TransportError(f"no response from gateway within {wait}s") from e

    @property
    def url(self) -> str:
        return self._client.url

    def invoke_sync(
        self, name: str, invocation: Invocation, *, timeout: float | None = None
    ) -> bytes:
        return self._run(self._client.invoke_sync(name, invocation, timeout=timeout), timeout)

    def invoke_async(
        self, name: str, invocation: Invocation, *, timeout: float | None = None
    ) -> bool:
        return self._run(self._client.invoke_async(name, invocation, timeout=timeout), timeout)

    def has_namespace_support(self, *, timeout: float | None = None) -> bool:
        return self._run(self._client.has_namespace_support(timeout=timeout), timeout)

    def get_namespaces(self, *, timeout: float | None = None) -> list[str]:
        return self._run(self._client.get_namespaces(timeout=timeout), timeout)

    def get_functions(
        self, namespace: str = "", *, timeout: float | None = None
    ) -> list[FunctionStatus]:
        return self._run(self._client.get_functions(namespace, timeout=timeout), timeout)

    def close(self) -> None:
        asyncio.run_coroutine_threadsafe(self._session.close(), self._loop).result(timeout=5)
        self._loop.call_soon_threadsafe(self._loop.stop)
        self._thread.join(timeout=5)

    def __enter__(self) -> "GatewayClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
