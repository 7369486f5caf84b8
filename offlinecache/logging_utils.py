"""Mini README: Logging helpers shared by the offline cache engine.

Structure:
    * configure_root_logger - one-shot root logger configuration.
    * get_logger - factory returning module loggers with the baseline setup.

Usage:
    Modules call ``get_logger(__name__)`` at import time. The classifier's
    missing-asset warnings travel through these loggers unless a caller
    injects its own reporting callable.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False


def configure_root_logger(level: Optional[Union[int, str]] = None) -> None:
    """Attach a single stream handler to the root logger.

    The handler is added once; an explicit ``level`` is applied on every call
    so a later caller such as the CLI can still raise or lower verbosity.
    """

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    if level is not None:
        root_logger.setLevel(level.upper() if isinstance(level, str) else level)
    if _LOGGER_INITIALISED:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    if level is None:
        root_logger.setLevel(logging.INFO)
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    configure_root_logger()
    return logging.getLogger(name)
