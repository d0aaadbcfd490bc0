"""
Configuration settings for license issuing and checking.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path


def _level_from_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if not value:
        return default
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    return level if isinstance(level, int) else default


class Config:
    """Central configuration class for all system settings."""

    def __init__(self) -> None:
        # Artifact format
        self.SCHEMA_VERSION: int = 1
        self.DATE_FORMAT: str = "%Y-%m-%d"
        self.JSON_INDENT: int = 2

        # Prefix of every signed message, ahead of the key phrase context
        self.SIGNING_DOMAIN: bytes = b"offlic.license.v1"

        # File paths
        self.LICENSE_FILE_PATH: Path = Path(
            os.getenv("OFFLIC_LICENSE_FILE", "license.json")
        )

        # Logging
        self.LOG_LEVEL: int = _level_from_env("OFFLIC_LOG_LEVEL", logging.INFO)
