from __future__ import annotations
import logging
import os
from typing import Optional

FATAL_POLICIES = ("exit", "raise")
_DEFAULT_FATAL_POLICY = "exit"
_DEFAULT_LOG_LEVEL = "WARNING"


def get_fatal_policy() -> str:
    """How fatal errors end an evaluation: 'exit' the process or 'raise' to the caller."""
    raw = os.environ.get("JACK_ON_FATAL", "").strip().lower()
    return raw if raw in FATAL_POLICIES else _DEFAULT_FATAL_POLICY


def get_log_level() -> int:
    raw = os.environ.get("JACK_LOG_LEVEL", "").strip().upper() or _DEFAULT_LOG_LEVEL
    level = logging.getLevelName(raw)
    # getLevelName maps unknown names to the string "Level <name>"
    return level if isinstance(level, int) else logging.getLevelName(_DEFAULT_LOG_LEVEL)


def configure_logging(level: Optional[int] = None) -> logging.Logger:
    """Attach a stderr handler to the `jack` logger and set its level."""
    logger = logging.getLogger("jack")
    logger.setLevel(get_log_level() if level is None else level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
    return logger
