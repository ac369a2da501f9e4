# faas-client — OpenFaaS gateway client
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Pydantic v2 models for gateway requests and responses."""

from .core import (
    BasicAuthCredentials,
    Invocation,
    FunctionStatus,
)

__all__ = [
    "BasicAuthCredentials",
    "Invocation",
    "FunctionStatus",
]
