# util/logger.py
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional
from config.settings import settings

logging.captureWarnings(True)

LINE_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"

# Libraries whose defaults are too chatty for a single-user service.
_QUIET = {
    "httpx": logging.WARNING,
    "httpcore": logging.WARNING,
    "fitz": logging.WARNING,
    "uvicorn.error": logging.INFO,
    "uvicorn.access": logging.INFO,
}

_installed: list[logging.Handler] = []


class LevelColorFormatter(logging.Formatter):
    """Paints the level name only; message text stays untouched."""

    PALETTE = {
        logging.DEBUG: "\033[37m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[41m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        painted = logging.makeLogRecord(record.__dict__)
        color = self.PALETTE.get(record.levelno)
        if color:
            painted.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(painted)


def _resolve_level(name: Optional[str]) -> int:
    level = logging.getLevelName((name or "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def _console(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    if sys.stdout.isatty():
        handler.setFormatter(LevelColorFormatter(LINE_FORMAT, datefmt=DATE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(LINE_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _rotating_file(level: int) -> logging.Handler:
    os.makedirs(settings.LOG_DIR, exist_ok=True)
    handler = RotatingFileHandler(
        os.path.join(settings.LOG_DIR, settings.LOG_FILE_NAME),
        maxBytes=settings.LOG_MAX_BYTES,
        backupCount=settings.LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LINE_FORMAT, datefmt=DATE_FORMAT))
    return handler


def init_logger() -> logging.Logger:
    """
    Configure the root logger once per process and return the app logger.

    Console output goes to stdout, colored only on a terminal. A size-rotated file
    under LOG_DIR is added when LOG_TO_FILE is set. Calling again is a no-op.
    """
    app_logger = logging.getLogger(settings.LOGGER_NAME)
    if _installed:
        return app_logger

    level = _resolve_level(settings.LOG_LEVEL)
    root = logging.getLogger()
    root.setLevel(level)
    for h in list(root.handlers):
        root.removeHandler(h)

    handlers = [_console(level)]
    if settings.LOG_TO_FILE:
        handlers.append(_rotating_file(level))
    for h in handlers:
        root.addHandler(h)
        _installed.append(h)

    for name, lib_level in _QUIET.items():
        logging.getLogger(name).setLevel(lib_level)

    app_logger.debug(
        "logger.init level=%s file=%s",
        logging.getLevelName(level),
        settings.LOG_TO_FILE,
    )
    return app_logger


def shutdown_logger() -> None:
    """Detach and close whatever init_logger installed."""
    root = logging.getLogger()
    while _installed:
        h = _installed.pop()
        root.removeHandler(h)
        h.close()
