"""JSON logging for the ``telegrambot`` logger tree.

Library modules only call ``logging.getLogger(__name__)`` and pass context
through ``extra``; nothing is printed until an application calls
:meth:`BotLogger.get_logger`, which attaches a stdout handler and, with a log
directory, a size-rotated file.
"""

import json
import logging
import os
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from typing import List, Optional

LOGGER_NAME = "telegrambot"

LOG_FILE = "telegrambot.log"
LOG_FILE_MAX_BYTES = 5 * 1024 * 1024
LOG_FILE_BACKUPS = 5

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", (), None))
) | {"message", "asctime"}


class _JsonFormatter(logging.Formatter):
    """One JSON object per line: fixed keys first, then the call's ``extra``."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "func_name": record.funcName,
        }
        entry.update(
            (key, value)
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and key not in entry
        )
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def _build_handlers(level: int, log_dir: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        handlers.append(RotatingFileHandler(
            os.path.join(log_dir, LOG_FILE),
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUPS,
            encoding="utf-8",
        ))
    formatter = _JsonFormatter()
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
    return handlers


class BotLogger:
    """Process-wide owner of the ``telegrambot`` logger's handlers.

    The first instantiation fixes level and handlers; later ones return the
    same object until :meth:`reset`.
    """

    _instance: Optional["BotLogger"] = None

    def __new__(cls, level: int = logging.INFO, log_dir: Optional[str] = None) -> "BotLogger":
        if cls._instance is None:
            instance = super().__new__(cls)
            instance.logger = logging.getLogger(LOGGER_NAME)
            instance.logger.setLevel(level)
            if not instance.logger.handlers:
                for handler in _build_handlers(level, log_dir):
                    instance.logger.addHandler(handler)
            cls._instance = instance
        return cls._instance

    @staticmethod
    def get_logger(level: int = logging.INFO, log_dir: Optional[str] = None) -> logging.Logger:
        """Return the configured ``telegrambot`` logger."""
        return BotLogger(level, log_dir).logger

    def cleanup(self) -> None:
        """Flush, close and detach every handler."""
        for handler in list(self.logger.handlers):
            handler.flush()
            handler.close()
            self.logger.removeHandler(handler)

    @classmethod
    def reset(cls) -> None:
        if cls._instance is not None:
            cls._instance.cleanup()
        cls._instance = None


def parse_level(name: Optional[str], default: int = logging.INFO) -> int:
    """Map a level name such as ``"debug"`` to its numeric value."""
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default
