"""Logging configuration shared by the library and its scripts."""

from __future__ import annotations

import logging

from storehours.core.config import Settings, get_settings

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """Attach a console handler to the ``storehours`` logger tree."""

    settings = settings or get_settings()
    logger = logging.getLogger("storehours")
    logger.setLevel(settings.log_level)
    if not any(getattr(handler, "_storehours", False) for handler in logger.handlers):
        console = logging.StreamHandler()
        console.setFormatter(logging.Formatter(_FORMAT))
        console._storehours = True  # type: ignore[attr-defined]
        logger.addHandler(console)
    return logger


__all__ = ["configure_logging"]
