"""Logging utilities for mintri.

Provides a consistent logger hierarchy and formatting without modifying the
process root logger. All mintri code should obtain loggers via get_logger().
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, Union

_FORMAT = logging.Formatter('%(levelname)s %(name)s: %(message)s')


def _ensure_mintri_root() -> logging.Logger:
    """Ensure the 'mintri' logger has a single stream handler and is isolated
    from the process root logger. Returns the 'mintri' logger.
    """
    mintri_root = logging.getLogger('mintri')
    has_non_null = any(not isinstance(h, logging.NullHandler) for h in mintri_root.handlers)
    if not has_non_null:
        # Remove the NullHandler added by the package __init__ so logs are not swallowed
        for h in list(mintri_root.handlers):
            if isinstance(h, logging.NullHandler):
                mintri_root.removeHandler(h)
        handler = logging.StreamHandler(stream=sys.stdout)
        handler.setFormatter(_FORMAT)
        mintri_root.addHandler(handler)
    mintri_root.propagate = False
    return mintri_root


def _to_level(level: Union[str, int, None], default: int = logging.INFO) -> int:
    if level is None:
        return default
    if isinstance(level, int):
        return level
    lvl = getattr(logging, str(level).upper(), None)
    return lvl if isinstance(lvl, int) else default


def configure_logging(level: Union[str, int] = 'INFO') -> None:
    """Configure the 'mintri' logger family level.

    This does NOT modify the process root logger.
    """
    mintri_root = _ensure_mintri_root()
    mintri_root.setLevel(_to_level(level))


def get_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """Return a logger under the 'mintri' namespace.

    If a level is provided, it sets the logger's level; otherwise the logger
    is left at NOTSET so it inherits from the 'mintri' parent configured via
    configure_logging(). No handler is attached here: until configure_logging()
    is called the package-level NullHandler keeps library use silent.
    """
    if not name.startswith('mintri'):
        name = f'mintri.{name}'
    log = logging.getLogger(name)
    if level is not None:
        log.setLevel(_to_level(level))
    return log


__all__ = ['get_logger', 'configure_logging']
