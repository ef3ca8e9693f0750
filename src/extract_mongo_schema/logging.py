"""
Logging helpers for the command line surface.

Console output for users goes through ``typer.echo``; this module only wires
diagnostic logging. File logging is opt-in.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

ROOT_LOGGER_NAME = "extract_mongo_schema"

logger = logging.getLogger(ROOT_LOGGER_NAME)
logger.setLevel(logging.INFO)

_FILE_HANDLER: logging.Handler | None = None
_STREAM_HANDLER: logging.Handler | None = None


def _install_handlers(log_path: Path | None) -> Path | None:
    """Configure the console handler and, when requested, a rotating file handler."""
    global _FILE_HANDLER, _STREAM_HANDLER

    # Rebind to the current stderr so redirected streams are honoured
    if _STREAM_HANDLER is not None:
        logger.removeHandler(_STREAM_HANDLER)
    _STREAM_HANDLER = logging.StreamHandler(sys.stderr)
    _STREAM_HANDLER.setLevel(logging.WARNING)
    _STREAM_HANDLER.setFormatter(logging.Formatter("%(levelname)s - %(message)s"))
    logger.addHandler(_STREAM_HANDLER)

    if _FILE_HANDLER is not None:
        logger.removeHandler(_FILE_HANDLER)
        _FILE_HANDLER.close()
        _FILE_HANDLER = None

    if log_path is None:
        return None

    log_target = Path(log_path).expanduser()
    log_target.parent.mkdir(parents=True, exist_ok=True)
    _FILE_HANDLER = RotatingFileHandler(
        log_target,
        maxBytes=1_048_576,
        backupCount=3,
        encoding="utf-8",
    )
    _FILE_HANDLER.setFormatter(logging.Formatter("%(asctime)s - %(levelname)s - %(message)s"))
    logger.addHandler(_FILE_HANDLER)
    return log_target


def configure_logging(log_file: str | Path | None = None, level: int | None = None) -> Path | None:
    """
    Configure package logging handlers.

    Args:
        log_file: Optional path for the rotating log file.
        level: Optional logging level override.

    Returns:
        Path to the active log file, or ``None`` when only console logging is enabled.
    """
    path = _install_handlers(Path(log_file) if log_file else None)
    if level is not None:
        logger.setLevel(level)
    if path is not None:
        logger.info("Logging configured. Writing to %s", path)
    return path


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Return a namespaced logger."""
    return logging.getLogger(name)
