from __future__ import annotations

import logging
import os
from typing import Any, Optional

_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
    "NOTSET": logging.NOTSET,
}


def _parse_level(s: Optional[str]) -> Optional[int]:
    if not s:
        return None
    return _LEVELS.get(str(s).strip().upper())


def resolve_level(args: Any = None) -> int:
    """Pick the log level.

    Priority (highest first):
    - env PLAYSIM_LOG_LEVEL
    - CLI flags: --basic_debug, then --quiet
    - default: INFO
    """
    env_level = _parse_level(os.environ.get("PLAYSIM_LOG_LEVEL"))
    if env_level is not None:
        return int(env_level)
    if bool(getattr(args, "basic_debug", False)):
        return logging.DEBUG
    if bool(getattr(args, "quiet", False)):
        return logging.WARNING
    return logging.INFO


def setup_logging(args: Any = None, *, name: str = "playsim") -> None:
    """Configure python logging once."""
    root = logging.getLogger()
    if root.handlers:
        return

    level = resolve_level(args)
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )
    logging.getLogger(name).debug("logging initialized (level=%s)", logging.getLevelName(level))
