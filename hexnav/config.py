# hexnav/config.py
from __future__ import annotations

import logging
import os
from typing import Optional

log = logging.getLogger(__name__)

DEFAULT_HEX_SIZE = 0.6
OBSTACLE_CHANCE = 0.3
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
HANDLER_NAME = "hexnav"


def hex_size() -> float:
    raw = os.environ.get("HEXNAV_HEX_SIZE")
    if raw is None or not raw.strip():
        return DEFAULT_HEX_SIZE
    try:
        value = float(raw)
    except ValueError:
        log.warning(f"Ignoring HEXNAV_HEX_SIZE={raw!r}: not a number")
        return DEFAULT_HEX_SIZE
    if not value > 0:
        log.warning(f"Ignoring HEXNAV_HEX_SIZE={raw!r}: must be > 0")
        return DEFAULT_HEX_SIZE
    return value


def map_path() -> Optional[str]:
    raw = os.environ.get("HEXNAV_MAP_PATH", "").strip()
    return raw or None


def log_level() -> str:
    return os.environ.get("HEXNAV_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL


def setup_logging(level: Optional[str] = None) -> None:
    """Install one stream handler on the root logger. Entry points only."""
    root = logging.getLogger()
    name = (level or log_level()).upper()
    root.setLevel(getattr(logging, name, logging.INFO))
    if any(h.get_name() == HANDLER_NAME for h in root.handlers):
        return
    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
