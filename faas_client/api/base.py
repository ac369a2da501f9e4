# faas-client — OpenFaaS gateway client
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Base class for gateway operation groups."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .._transport import GatewayTransport


class BaseAPI:
    """Base class for all operation groups."""

    def __init__(self, transport: GatewayTransport) -> None:
        self._t = transport
