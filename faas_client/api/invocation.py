# faas-client — OpenFaaS gateway client
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Invocation API — call deployed functions synchronously or asynchronously."""

from __future__ import annotations

from typing import NoReturn

from .base import BaseAPI
from .._transport import GatewayResponse
from ..errors import NotFoundError, UnexpectedStatusError
from ..models import Invocation


class InvocationAPI(BaseAPI):

    async def invoke_sync(
        self, name: str, invocation: Invocation, *, timeout: float | None = None
    ) -> bytes:
        """Invoke ``name`` and wait for its response body."""
        res = await self._post(f"/function/{name}", name, invocation, timeout)
        if res.status == 200:
            return res.body
        self._raise_for_status(res, name)

    async def invoke_async(
        self, name: str, invocation: Invocation, *, timeout: float | None = None
    ) -> bool:
        """Queue ``name`` for later execution. Returns True once accepted."""
        res = await self._post(f"/async-function/{name}", name, invocation, timeout)
        if res.status == 202:
            return True
        self._raise_for_status(res, name)

    async def _post(
        self, path: str, name: str, invocation: Invocation, timeout: float | None
    ) -> GatewayResponse:
        return await self._t.request(
            "POST",
            path,
            failure=f"unable to invoke function {name}",
            function_name=name,
            data=invocation.message,
            headers={
                "Content-Type": invocation.content_type,
                "Content-Encoding": invocation.content_encoding,
            },
            timeout=timeout,
        )

    @staticmethod
    def _raise_for_status(res: GatewayResponse, name: str) -> NoReturn:
        res.raise_for_auth()
        if res.status == 404:
            raise NotFoundError(name)
        raise UnexpectedStatusError(res.status)
