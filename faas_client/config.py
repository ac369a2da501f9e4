# faas-client — OpenFaaS gateway client
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later
"""Gateway configuration loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .errors import ConfigurationError
from .models import BasicAuthCredentials

USER_SECRET = "basic-auth-user"
PASSWORD_SECRET = "basic-auth-password"


@dataclass(frozen=True)
class GatewayConfig:
    """Where the gateway lives and how to authenticate against it."""

    gateway_url: str = "http://gateway:8080"
    basic_auth: bool = False
    secret_mount_path: Path = Path("/var/openfaas/secrets/")
    request_timeout: float = 30.0

    @classmethod
    def from_env(cls) -> GatewayConfig:
        """Load configuration from environment variables."""
        return cls(
            gateway_url=os.environ.get("OPEN_FAAS_GW_URL", "http://gateway:8080"),
            basic_auth=os.environ.get("basic_auth", "false").lower() in ("1", "true"),
            secret_mount_path=Path(os.environ.get("secret_mount_path", "/var/openfaas/secrets/")),
            request_timeout=float(os.environ.get("REQUEST_TIMEOUT", "30")),
        )

    def credentials(self) -> BasicAuthCredentials | None:
        """Read Basic Auth credentials from the mounted secrets, if enabled."""
        if not self.basic_auth:
            return None
        return BasicAuthCredentials(
            user=self._read_secret(USER_SECRET),
            password=self._read_secret(PASSWORD_SECRET),
        )

    def _read_secret(self, name: str) -> str:
        path = self.secret_mount_path / name
        try:
            return path.read_text().strip()
        except OSError as e:
            raise ConfigurationError(f"unable to read secret {path}: {e}") from e
