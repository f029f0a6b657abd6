"""Application-wide logging writing to platformdirs user_log_dir."""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "tasklist"
_LOG_FILE = "tasklist.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3

_configured = False


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the application logger, or a child of it for *name*.

    Module names are accepted as-is: ``tasklist.services.persistence`` and
    ``persistence`` both map into the ``tasklist`` namespace.
    """
    if not name or name == _APP_NAME:
        return logging.getLogger(_APP_NAME)
    if name.startswith(_APP_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_APP_NAME}.{name}")


def setup_logging(level: str = "INFO", log_dir: Path | None = None) -> logging.Logger:
    """Attach the rotating file handler to the application logger.

    Safe to call more than once; the handler is only added the first time,
    later calls just adjust the level.
    """
    global _configured
    logger = get_logger()
    logger.setLevel(level)
    if _configured:
        return logger

    log_dir = log_dir or Path(user_log_dir(_APP_NAME))
    log_dir.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        log_dir / _LOG_FILE,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )
    logger.addHandler(handler)
    logger.propagate = False

    _configured = True
    return logger


def reset_logging() -> None:
    """Detach handlers added by setup_logging (used by tests)."""
    global _configured
    logger = get_logger()
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
    _configured = False
