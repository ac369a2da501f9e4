# faas-client — OpenFaaS gateway client
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Discovery API — namespaces and deployed functions of a gateway.

Namespace discovery is deliberately lenient: a gateway edition without
namespace support answers with an empty list (or something that is not a
list at all), and that must read as "no namespaces" rather than an error.
"""

from __future__ import annotations

import logging
from typing import Optional

from pydantic import TypeAdapter, ValidationError

from .base import BaseAPI
from .._transport import GatewayResponse
from ..errors import DecodeError
from ..models import FunctionStatus

logger = logging.getLogger(__name__)

NAMESPACES_PATH = "/system/namespaces"
FUNCTIONS_PATH = "/system/functions"

# JSON null decodes to an empty listing
_namespace_list = TypeAdapter(Optional[list[str]])
_function_list = TypeAdapter(Optional[list[FunctionStatus]])


class DiscoveryAPI(BaseAPI):

    async def has_namespace_support(self, *, timeout: float | None = None) -> bool:
        """Check whether the gateway reports any namespaces."""
        res = await self._get(
            NAMESPACES_PATH, "unable to determine namespace support", timeout=timeout
        )
        res.raise_for_auth()
        if res.status != 200:
            return False
        try:
            namespaces = _namespace_list.validate_json(res.body) or []
        except ValidationError:
            logger.warning("Namespace listing is not a list of names, assuming no namespace support")
            return False
        return len(namespaces) > 0

    async def get_namespaces(self, *, timeout: float | None = None) -> list[str]:
        """Return all namespaces functions can be deployed to."""
        res = await self._get(NAMESPACES_PATH, "unable to obtain namespaces", timeout=timeout)
        try:
            return _namespace_list.validate_json(res.body) or []
        except ValidationError:
            res.raise_for_auth()
            logger.warning(
                "Unable to decode namespaces (status %d), continuing with none", res.status
            )
            return []

    async def get_functions(
        self, namespace: str = "", *, timeout: float | None = None
    ) -> list[FunctionStatus]:
        """List functions in ``namespace``, or in the gateway's default one."""
        params = {"namespace": namespace} if namespace else None
        res = await self._get(
            FUNCTIONS_PATH, "unable to obtain functions", params=params, timeout=timeout
        )
        try:
            return _function_list.validate_json(res.body) or []
        except ValidationError as e:
            res.raise_for_auth()
            raise DecodeError(res.status, "function listing") from e

    async def _get(
        self,
        path: str,
        failure: str,
        params: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> GatewayResponse:
        return await self._t.request(
            "GET", path, failure=failure, params=params, timeout=timeout
        )
