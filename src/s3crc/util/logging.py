"""Logging setup utilities for the s3crc command."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

DEFAULT_FORMAT = "%(levelname)s %(name)s - %(message)s"


def configure_logging(
    *,
    level: int | str = logging.WARNING,
    fmt: str = DEFAULT_FORMAT,
    log_path: Path | None = None,
) -> logging.Logger:
    """Configure project-wide logging handlers.

    Diagnostics always go to stderr so stdout carries checksums only. Calling
    this again re-binds the stream handler to the current ``sys.stderr``.
    """

    logger = logging.getLogger("s3crc")
    logger.setLevel(level)

    formatter = logging.Formatter(fmt=fmt, datefmt="%Y-%m-%d %H:%M:%S")

    stream_handlers = [
        h for h in logger.handlers if type(h) is logging.StreamHandler  # FileHandler is a subclass
    ]
    existing_files = {getattr(h, "baseFilename", None) for h in logger.handlers}

    if stream_handlers:
        for handler in stream_handlers:
            handler.setStream(sys.stderr)
            handler.setFormatter(formatter)
    else:
        stream_handler = logging.StreamHandler(stream=sys.stderr)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    if log_path and os.path.abspath(log_path) not in existing_files:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


__all__ = ["DEFAULT_FORMAT", "configure_logging"]
