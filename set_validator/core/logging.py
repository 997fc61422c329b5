"""Loguru sink setup."""

import sys
from typing import Optional

from loguru import logger

from .config_schema import LoggingConfig


def setup_logging(cfg: Optional[LoggingConfig] = None) -> None:
    """Replace loguru's default sink with the configured ones.

    Args:
        cfg: Logging configuration (defaults used if None)
    """
    cfg = cfg or LoggingConfig()

    logger.remove()
    logger.add(sys.stderr, level=cfg.level, format=cfg.format)

    if cfg.file:
        logger.add(
            cfg.file,
            level=cfg.level,
            format=cfg.format,
            rotation=cfg.rotation,
            encoding="utf-8",
        )
        logger.debug(f"Logging to file: {cfg.file}")
