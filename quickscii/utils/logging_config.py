"""Logging setup shared by the quickscii CLI and HTTP server.

Usage:
    from quickscii.utils.logging_config import setup_logging
    setup_logging(debug=args.debug, log_file=args.log_file)
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

MAX_BYTES = 5 * 1024 * 1024  # 5 MB
BACKUP_COUNT = 3

# Libraries that are chatty at DEBUG
_QUIET_LOGGERS = ("PIL", "multipart", "httpx")


def setup_logging(
    level: int = logging.INFO,
    log_file: str | Path | None = None,
    fmt: str = DEFAULT_FORMAT,
    max_bytes: int = MAX_BYTES,
    backup_count: int = BACKUP_COUNT,
    *,
    debug: bool = False,
) -> None:
    """Configure the root logger once per entry point.

    Logs go to stderr so stdout stays clean for ASCII output. With
    *log_file*, a RotatingFileHandler capped at *max_bytes* is added.
    Repeated calls are no-ops (basicConfig semantics).
    """
    if debug:
        level = logging.DEBUG

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                str(log_file),
                maxBytes=max_bytes,
                backupCount=backup_count,
            )
        )
    logging.basicConfig(level=level, format=fmt, handlers=handlers)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.INFO))
