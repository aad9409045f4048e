# examcsv/logging_config.py
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import List

from .config import Settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)


def _file_handler(settings: Settings, formatter: logging.Formatter) -> logging.Handler:
    os.makedirs(settings.log_dir, exist_ok=True)
    handler = RotatingFileHandler(
        os.path.join(settings.log_dir, settings.log_file),
        maxBytes=settings.log_max_bytes,
        backupCount=settings.log_backup_count,
        encoding="utf-8",
    )
    handler.setLevel(_level(settings.log_level))
    handler.setFormatter(formatter)
    return handler


def _console_handler(settings: Settings, formatter: logging.Formatter) -> logging.Handler:
    # stdout занят JSON-результатом, поэтому только stderr
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(_level(settings.log_console_level))
    handler.setFormatter(formatter)
    return handler


def setup_logging(settings: Settings) -> None:
    """
    Логирование для CLI:
    - файл с ротацией, уровень settings.log_level
    - консоль (stderr) по флагу settings.log_console, уровень
      settings.log_console_level, чтобы DEBUG/INFO не шумели рядом с JSON
    """
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    handlers: List[logging.Handler] = [_file_handler(settings, formatter)]
    if settings.log_console:
        handlers.append(_console_handler(settings, formatter))

    root = logging.getLogger()
    root.setLevel(min(h.level for h in handlers))
    root.handlers.clear()
    for handler in handlers:
        root.addHandler(handler)
