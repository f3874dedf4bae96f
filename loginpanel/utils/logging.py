from __future__ import annotations

import logging
import os

_DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DEFAULT_DATEFMT = "%H:%M:%S"


def configure_root(default_level: int = logging.INFO) -> int:
    """
    Configure the root logger once and return the effective level.

    LOGINPANEL_LOG_LEVEL takes a level name or number; unknown names keep
    ``default_level``. Without it, a truthy LOGINPANEL_DEBUG selects DEBUG.
    """
    level = default_level
    requested = os.getenv("LOGINPANEL_LOG_LEVEL", "").strip()
    if requested.isdigit():
        level = int(requested)
    elif requested:
        named = getattr(logging, requested.upper(), None)
        if isinstance(named, int):
            level = named
    elif os.getenv("LOGINPANEL_DEBUG", "").strip().lower() in {"1", "true", "yes", "on"}:
        level = logging.DEBUG

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=_DEFAULT_FORMAT, datefmt=_DEFAULT_DATEFMT)
    root.setLevel(level)
    return level
