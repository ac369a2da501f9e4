# faas-client — OpenFaaS gateway client
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later
"""Release metadata reported by the CLI."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEV_VERSION = "dev"
DEV_COMMIT = "local"


@dataclass(frozen=True)
class ReleaseInfo:
    version: str = DEV_VERSION
    commit: str = DEV_COMMIT

    @classmethod
    def from_env(cls, version: str = "") -> ReleaseInfo:
        """Build release info. ``FAAS_CLIENT_VERSION`` overrides ``version``; unset values fall back to dev markers."""
        return cls(
            version=os.environ.get("FAAS_CLIENT_VERSION", "") or version or DEV_VERSION,
            commit=os.environ.get("GIT_COMMIT", "") or DEV_COMMIT,
        )
