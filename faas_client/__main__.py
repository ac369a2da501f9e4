# faas-client — OpenFaaS gateway client
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later
"""Allow ``python -m faas_client``."""

from .cli import main

main()
