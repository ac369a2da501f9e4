# faas-client — OpenFaaS gateway client
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Exceptions raised by the gateway client.

Callers are expected to branch on the concrete type: an
:class:`AuthenticationError` is a configuration problem, a
:class:`NotFoundError` a deploy-time mismatch and a :class:`TransportError`
is usually worth retrying.
"""

from __future__ import annotations


class GatewayError(Exception):
    """Base class for all gateway client errors."""


class ConfigurationError(GatewayError):
    """Raised when the client configuration cannot be loaded."""


class AuthenticationError(GatewayError):
    """The gateway rejected the configured credentials (HTTP 401)."""

    def __init__(self, message: str = "OpenFaaS credentials are invalid") -> None:
        super().__init__(message)


class NotFoundError(GatewayError):
    """The invoked function is not deployed (HTTP 404)."""

    def __init__(self, function_name: str) -> None:
        self.function_name = function_name
        super().__init__(f"Function {function_name} is not deployed")


class UnexpectedStatusError(GatewayError):
    """The gateway answered with a status the operation does not expect."""

    def __init__(self, status_code: int, message: str | None = None) -> None:
        self.status_code = status_code
        super().__init__(message or f"Received unexpected status code {status_code}")


class DecodeError(UnexpectedStatusError):
    """A structured response body could not be decoded."""

    def __init__(self, status_code: int, what: str) -> None:
        super().__init__(
            status_code,
            f"Unable to decode {what} (status code {status_code})",
        )


class TransportError(GatewayError):
    """The request never completed: network failure, refused connection or timeout.

    The underlying exception is available as ``__cause__``.
    """

    def __init__(self, message: str, function_name: str | None = None) -> None:
        self.function_name = function_name
        super().__init__(message)
