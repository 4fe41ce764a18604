# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Configuration model for the omnibase-dsn CLI."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Final

__all__: list[str] = [
    "ModelDsnCliConfig",
]

_DEFAULT_LOG_LEVEL: Final[str] = "WARNING"
_DEFAULT_MASK: Final[str] = "***"


@dataclass(frozen=True)
class ModelDsnCliConfig:
    """Configuration for the omnibase-dsn CLI.

    Attributes:
        dsn: DSN used when a command is invoked without one. ``None`` when
            unset; an empty string is a valid (empty) DSN.
        log_level: Logging level name.
        mask: Replacement shown for passwords.
    """

    dsn: str | None = None
    log_level: str = _DEFAULT_LOG_LEVEL
    mask: str = _DEFAULT_MASK

    @classmethod
    def from_env(cls) -> ModelDsnCliConfig:
        """Create config from environment variables.

        Reads OMNIBASE_DSN, OMNIBASE_DSN_LOG_LEVEL and OMNIBASE_DSN_MASK.
        Falls back to the defaults if not set.

        Returns:
            ModelDsnCliConfig populated from environment.
        """
        return cls(
            dsn=os.environ.get("OMNIBASE_DSN"),
            log_level=os.environ.get("OMNIBASE_DSN_LOG_LEVEL", _DEFAULT_LOG_LEVEL).upper(),
            mask=os.environ.get("OMNIBASE_DSN_MASK", _DEFAULT_MASK),
        )
