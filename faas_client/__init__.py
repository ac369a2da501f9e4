# faas-client — OpenFaaS gateway client
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later
"""OpenFaaS gateway client — invoke functions and discover namespaces."""

__version__ = "0.1.0"

from .config import GatewayConfig
from .client import AsyncGatewayClient, GatewayClient
from .capabilities import Invoker, NamespaceFetcher, FunctionFetcher, FunctionCrawler
from .errors import (
    GatewayError,
    ConfigurationError,
    AuthenticationError,
    NotFoundError,
    UnexpectedStatusError,
    DecodeError,
    TransportError,
)
from .models import BasicAuthCredentials, Invocation, FunctionStatus

__all__ = [
    # Clients
    "AsyncGatewayClient",
    "GatewayClient",
    # Capabilities
    "Invoker",
    "NamespaceFetcher",
    "FunctionFetcher",
    "FunctionCrawler",
    # Config
    "GatewayConfig",
    # Errors
    "GatewayError",
    "ConfigurationError",
    "AuthenticationError",
    "NotFoundError",
    "UnexpectedStatusError",
    "DecodeError",
    "TransportError",
    # Models
    "BasicAuthCredentials",
    "Invocation",
    "FunctionStatus",
]
