"""Root logger setup shared by the app entry point and the settings toolbar.

The environment always wins over the GUI preference so a debug session can be
forced without touching ``user_prefs.json``:

  - ``ROTA_LOG_LEVEL``: explicit level, by name (``debug``) or number (``10``)
  - ``ROTA_DEBUG``: truthy -> DEBUG
"""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"
LEVEL_ENV_VAR = "ROTA_LOG_LEVEL"
DEBUG_ENV_VAR = "ROTA_DEBUG"

_TRUTHY = {"1", "true", "yes", "on"}


def parse_level(value: Optional[str]) -> Optional[int]:
    """Return the numeric level for ``value`` or None if it is not a level."""
    text = (value or "").strip()
    if not text:
        return None
    if text.isdigit():
        return int(text)
    candidate = logging.getLevelName(text.upper())
    return candidate if isinstance(candidate, int) else None


def env_level(environ: Optional[Mapping[str, str]] = None) -> Optional[int]:
    """Level forced by the environment, if any."""
    env = os.environ if environ is None else environ
    explicit = parse_level(env.get(LEVEL_ENV_VAR))
    if explicit is not None:
        return explicit
    if env.get(DEBUG_ENV_VAR, "").strip().lower() in _TRUTHY:
        return logging.DEBUG
    return None


def configure_root(default_level: int = logging.INFO) -> int:
    """Install the compact root handler once and return the effective level."""
    forced = env_level()
    effective = forced if forced is not None else default_level
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=effective, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    root.setLevel(effective)
    return effective


def apply_gui_preferences(debug_enabled: bool) -> int:
    """Apply the ``debug_logging`` setting unless the environment overrides it."""
    forced = env_level()
    level = forced if forced is not None else (logging.DEBUG if debug_enabled else logging.INFO)
    logging.getLogger().setLevel(level)
    return level


def env_requests_debug() -> bool:
    """Return True if environment variables force DEBUG logging."""
    forced = env_level()
    return forced is not None and forced <= logging.DEBUG
