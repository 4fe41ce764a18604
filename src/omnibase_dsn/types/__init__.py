# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Types module for omnibase_dsn."""

from omnibase_dsn.types.type_dsn import ModelDSN

__all__: list[str] = [
    "ModelDSN",
]
