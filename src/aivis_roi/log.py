"""Loguru sink configuration for applications embedding the projector."""

from __future__ import annotations

import sys

from loguru import logger

_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)


def configure_logging(level: str = "INFO") -> None:
    """Replace loguru's default handler with a stderr sink and enable package logs."""
    logger.remove()
    logger.add(sys.stderr, level=level, format=_FORMAT, backtrace=True, diagnose=False)
    logger.enable("aivis_roi")
