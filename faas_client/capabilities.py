# faas-client — OpenFaaS gateway client
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Capability protocols implemented by :class:`AsyncGatewayClient`.

Depend on the narrowest one you need, so a fake is easy to substitute::

    async def forward(invoker: Invoker, topic: str, body: bytes) -> None:
        await invoker.invoke_async(topic, Invocation(message=body))
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .models import FunctionStatus, Invocation


@runtime_checkable
class Invoker(Protocol):
    """Invokes deployed functions."""

    async def invoke_sync(
        self, name: str, invocation: Invocation, *, timeout: float | None = None
    ) -> bytes: ...

    async def invoke_async(
        self, name: str, invocation: Invocation, *, timeout: float | None = None
    ) -> bool: ...


@runtime_checkable
class NamespaceFetcher(Protocol):
    """Explores the namespaces of a gateway installation."""

    async def has_namespace_support(self, *, timeout: float | None = None) -> bool: ...

    async def get_namespaces(self, *, timeout: float | None = None) -> list[str]: ...


@runtime_checkable
class FunctionFetcher(Protocol):
    """Explores the functions deployed on a gateway installation."""

    async def get_functions(
        self, namespace: str = "", *, timeout: float | None = None
    ) -> list[FunctionStatus]: ...


@runtime_checkable
class FunctionCrawler(NamespaceFetcher, FunctionFetcher, Invoker, Protocol):
    """Everything needed to crawl a gateway for functions and invoke them."""
