"""Logging setup: default logger, output formats and a registry of named loggers."""

from __future__ import annotations

import itertools
import logging
import sys
import threading
from dataclasses import dataclass
from enum import Enum
from logging.handlers import RotatingFileHandler
from pathlib import Path

TRACE = 5
OFF = logging.CRITICAL + 10
logging.addLevelName(TRACE, "TRACE")
logging.addLevelName(OFF, "OFF")

MAX_FILE_SIZE = 5 * 1024 * 1024
MAX_FILES = 24


class LoggingFormat(Enum):
    """Output layouts for log handlers."""

    FILE = (
        "[%(asctime)s.%(msecs)03d][%(levelname)s][%(name)s][pid %(process)d]"
        "[tid %(thread)d][%(filename)s:%(funcName)s():%(lineno)d] %(message)s",
        "%Y-%m-%d %H:%M:%S",
    )
    CONSOLE = (
        "[%(asctime)s.%(msecs)03d][%(levelname)s][%(name)s]"
        "[%(filename)s:%(funcName)s():%(lineno)d] %(message)s",
        "%H:%M:%S",
    )
    UNIT_TESTS = (
        "[%(levelname)s][%(filename)s:%(funcName)s():%(lineno)d] %(message)s",
        None,
    )

    def __init__(self, pattern: str, datefmt: str | None) -> None:
        self.pattern = pattern
        self.datefmt = datefmt


def _make_fallback_logger() -> logging.Logger:
    logger = logging.Logger("", logging.INFO)
    logger.addHandler(logging.StreamHandler(sys.stdout))
    logger.propagate = False
    return logger


_default_lock = threading.Lock()
_default: logging.Logger = _make_fallback_logger()


def _get_default() -> logging.Logger:
    with _default_lock:
        return _default


def _set_default(logger: logging.Logger) -> None:
    global _default
    with _default_lock:
        _default = logger


def _clone(source: logging.Logger, name: str) -> logging.Logger:
    """A new logger with ``name`` that shares the handlers and level of ``source``."""
    logger = logging.Logger(name, source.level)
    for handler in source.handlers:
        logger.addHandler(handler)
    logger.propagate = False
    return logger


def _rotating_handler(path: str | Path) -> RotatingFileHandler:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    return RotatingFileHandler(
        path, mode="a", maxBytes=MAX_FILE_SIZE, backupCount=MAX_FILES, encoding="utf-8"
    )


@dataclass
class _LoggerInfo:
    logger: logging.Logger
    last_retrieved: int


class NamedLoggerRegistry:
    """Keeps named clones of the default logger, dropping the least recently used.

    In debug mode every new named logger also writes to its own rotating file,
    placed next to the default logger's log file.
    """

    def __init__(self, max_loggers: int = 256, *, debug: bool = False) -> None:
        self._max_loggers = max_loggers
        self._debug = debug
        self._loggers: dict[str, _LoggerInfo] = {}
        self._clock = itertools.count()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._loggers)

    def __contains__(self, name: object) -> bool:
        return name in self._loggers

    def _named_log_path(self, logger: logging.Logger, name: str) -> str:
        for handler in logger.handlers:
            if isinstance(handler, RotatingFileHandler):
                base = handler.baseFilename
                pos = base.rfind(".")
                if pos != -1:
                    base = base[:pos]
                return f"{base}_{name}.log"
        return f"{name}.log"

    def get_logger(self, name: str) -> logging.Logger:
        """Return the logger for ``name``, creating it from the default logger if needed."""
        evicted = False
        with self._lock:
            info = self._loggers.get(name)
            if info is not None:
                info.last_retrieved = next(self._clock)
                result = info.logger
            else:
                result = _clone(_get_default(), name)
                if self._debug:
                    handler = _rotating_handler(self._named_log_path(result, name))
                    set_sink_logging_format(LoggingFormat.FILE, handler)
                    result.addHandler(handler)
                self._loggers[name] = _LoggerInfo(result, next(self._clock))

            if len(self._loggers) > self._max_loggers:
                oldest = min(self._loggers, key=lambda key: self._loggers[key].last_retrieved)
                del self._loggers[oldest]
                evicted = True

        if evicted:
            _get_default().info("Automatic deletion of old named loggers.")
        return result


def set_logger_name(name: str) -> logging.Logger:
    """Replace the default logger by a copy of it called ``name`` and return the copy."""
    logger = _clone(_get_default(), name)
    _set_default(logger)
    return logger


def set_sink_logging_format(format: LoggingFormat, handler: logging.Handler) -> None:
    """Apply the layout ``format`` to a single handler."""
    handler.setFormatter(logging.Formatter(format.pattern, format.datefmt))


def set_logging_format(format: LoggingFormat, logger: logging.Logger | None = None) -> None:
    """Apply ``format`` to every handler of ``logger`` (the default logger if omitted)."""
    target = logger if logger is not None else _get_default()
    for handler in target.handlers:
        set_sink_logging_format(format, handler)


def init_logging(log_file_path: str | Path, min_log_level: int | None = None) -> logging.Logger:
    """Install a default logger writing to stdout and to a rotating file.

    Both outputs log at INFO and above; ``min_log_level`` can raise that threshold.
    Returns the new default logger.
    """
    console = logging.StreamHandler(sys.stdout)
    set_sink_logging_format(LoggingFormat.CONSOLE, console)

    file_handler = _rotating_handler(log_file_path)
    set_sink_logging_format(LoggingFormat.FILE, file_handler)

    logger = logging.Logger("irsol")
    logger.addHandler(console)
    logger.addHandler(file_handler)
    logger.propagate = False

    console_level = logging.INFO
    file_level = logging.INFO
    if min_log_level is not None:
        console_level = max(console_level, min_log_level)
        file_level = max(file_level, min_log_level)

    console.setLevel(console_level)
    file_handler.setLevel(file_level)
    logger.setLevel(min(console_level, file_level))

    _set_default(logger)
    return logger