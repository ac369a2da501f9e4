# faas-client — OpenFaaS gateway client
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Pydantic models exchanged with the OpenFaaS gateway.

Response models use ``extra="allow"`` so fields added by newer gateway
releases are kept rather than dropped.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class _Frozen(BaseModel):
    model_config = {"frozen": True}


# ── Requests ─────────────────────────────────────────────────────────

class BasicAuthCredentials(_Frozen):
    user: str
    password: str = Field(repr=False)


class Invocation(_Frozen):
    """A payload to hand to a function, with its declared encoding."""

    message: Optional[bytes] = None  # None sends no body at all
    content_type: str = ""
    content_encoding: str = ""
    topic: str = ""  # where the orchestrator received it; never sent


# ── Responses ────────────────────────────────────────────────────────

class FunctionStatus(BaseModel):
    model_config = {"extra": "allow", "populate_by_name": True}

    name: str
    image: str = ""
    invocation_count: float = Field(0.0, alias="invocationCount")
    replicas: int = 0
    available_replicas: int = Field(0, alias="availableReplicas")
    env_process: str = Field("", alias="envProcess")
    namespace: str = ""
    labels: Optional[dict[str, str]] = None
    annotations: Optional[dict[str, str]] = None
    created_at: Optional[str] = Field(None, alias="createdAt")
