# faas-client — OpenFaaS gateway client
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Operation groups backing the gateway clients."""

from .base import BaseAPI
from .invocation import InvocationAPI
from .discovery import DiscoveryAPI

__all__ = [
    "BaseAPI",
    "InvocationAPI",
    "DiscoveryAPI",
]
