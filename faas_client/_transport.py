# faas-client — OpenFaaS gateway client
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Low-level request execution against the gateway.

Every operation goes through :meth:`GatewayTransport.request`, which
attaches credentials and the per-call timeout, reads the whole body while
the response is held open and hands back a plain :class:`GatewayResponse`.
Anything that stops the exchange from completing is raised as
:class:`~faas_client.errors.TransportError`; status interpretation is left
to the caller.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any

import aiohttp

from .errors import AuthenticationError, TransportError
from .models import BasicAuthCredentials

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GatewayResponse:
    status: int
    body: bytes

    def raise_for_auth(self) -> None:
        if self.status == 401:
            raise AuthenticationError()


class GatewayTransport:
    """Issues authenticated requests to a gateway over a shared session."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        gateway_url: str,
        credentials: BasicAuthCredentials | None = None,
    ) -> None:
        self._session = session
        self._url = gateway_url.rstrip("/")
        self._authorization = (
            aiohttp.BasicAuth(credentials.user, credentials.password).encode()
            if credentials is not None
            else None
        )

    @property
    def url(self) -> str:
        return self._url

    async def request(
        self,
        method: str,
        path: str,
        *,
        failure: str,
        function_name: str | None = None,
        data: bytes | None = None,
        headers: dict[str, str] | None = None,
        params: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> GatewayResponse:
        """Execute one request and return its status and fully-read body.

        ``failure`` is the message a :class:`TransportError` carries when the
        exchange cannot be completed.
        """
        url = f"{self._url}{path}"
        headers = dict(headers or {})
        if self._authorization is not None:
            headers["Authorization"] = self._authorization
        kwargs: dict[str, Any] = {}
        if timeout is not None:
            kwargs["timeout"] = aiohttp.ClientTimeout(total=timeout)

        logger.debug("%s %s", method, url)
        try:
            async with self._session.request(
                method,
                url,
                data=data,
                headers=headers,
                params=params,
                **kwargs,
            ) as resp:
                body = await resp.read()
                status = resp.status
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(f"{failure}: {e!r}", function_name=function_name) from e

        logger.debug("%s %s -> %d (%d bytes)", method, url, status, len(body))
        return GatewayResponse(status=status, body=body)
