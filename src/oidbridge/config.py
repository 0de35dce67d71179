"""Configuration for oidbridge.

Reads from config/oidbridge.ini if present, environment variables override.
"""

from __future__ import annotations

import configparser
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from oidbridge.converter import DEFAULT_FILLER

_CONFIG_FILE = Path(__file__).resolve().parent.parent.parent / "config" / "oidbridge.ini"

logger = logging.getLogger("oidbridge.config")


@dataclass(frozen=True)
class OidBridgeConfig:
    """Conversion settings. Immutable once loaded."""

    # Last four hex characters of every encoded UUID. Never read back.
    filler: str = DEFAULT_FILLER


def load_config(config_path: Path | None = None) -> OidBridgeConfig:
    """Load config from INI file, then override with environment variables."""
    path = config_path or _CONFIG_FILE
    kwargs: dict = {}

    if path.exists():
        logger.debug("Reading config from %s", path)
        parser = configparser.ConfigParser()
        parser.read(path)
        if parser.has_section("encoding"):
            val = parser.get("encoding", "filler", fallback=None)
            if val is not None:
                kwargs["filler"] = val.strip()

    env_map = {
        "OIDBRIDGE_FILLER": "filler",
    }
    for env_key, config_key in env_map.items():
        val = os.getenv(env_key)
        if val is not None:
            kwargs[config_key] = val.strip()

    kwargs = {k: v for k, v in kwargs.items() if v}
    return OidBridgeConfig(**kwargs)
