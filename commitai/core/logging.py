from __future__ import annotations

import logging
import os
import sys
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

# Attributes every LogRecord has; anything else on a record is caller context.
_RESERVED_RECORD_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "message",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "thread",
        "threadName",
        "exc_info",
        "exc_text",
        "stack_info",
        "taskName",
        "asctime",
        "level_color",
        "name_color",
        "source_color",
        "reset",
        "color_message",
    }
)

_LOG_CONTEXT: ContextVar[dict[str, Any] | None] = ContextVar("commitai_log_context", default=None)

DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

APP_LOGGER_PREFIX = "commitai"

PLAIN_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(filename)s:%(lineno)d | %(message)s"
COLOR_FORMAT = (
    "%(level_color)s%(asctime)s | %(levelname)s%(reset)s | "
    "%(name_color)s%(name)s%(reset)s | "
    "%(source_color)s%(filename)s:%(lineno)d%(reset)s | "
    "%(level_color)s%(message)s%(reset)s"
)

_THIRD_PARTY_LEVELS: dict[str, int] = {
    "uvicorn": logging.WARNING,
    "uvicorn.error": logging.INFO,
    "uvicorn.access": logging.WARNING,
    "fastapi": logging.WARNING,
    "starlette": logging.WARNING,
    "httpx": logging.WARNING,
    "httpcore": logging.WARNING,
    "asyncio": logging.WARNING,
}

# uvicorn.error carries the "Uvicorn running on ..." banner.
_ALLOW_BELOW_WARNING = frozenset({"uvicorn.error"})


def _matches(name: str, prefix: str) -> bool:
    return name == prefix or name.startswith(prefix + ".")


def is_app_logger(name: str) -> bool:
    return name == "__main__" or _matches(name, APP_LOGGER_PREFIX)


def third_party_level(name: str) -> int:
    """Return the most specific configured level for a third-party logger."""

    best_level = logging.WARNING
    best_len = -1
    for prefix, level in _THIRD_PARTY_LEVELS.items():
        if _matches(name, prefix) and len(prefix) > best_len:
            best_level, best_len = level, len(prefix)

    if best_level < logging.WARNING and not any(_matches(name, p) for p in _ALLOW_BELOW_WARNING):
        return logging.WARNING
    return best_level


class ContextInjectionFilter(logging.Filter):
    """Copies the active log_context() fields onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in (_LOG_CONTEXT.get() or {}).items():
            if key not in _RESERVED_RECORD_ATTRS:
                setattr(record, key, value)
        return True


class ThirdPartyNoiseFilter(logging.Filter):
    """Drops third-party records below their configured threshold."""

    def filter(self, record: logging.LogRecord) -> bool:
        if is_app_logger(record.name):
            return True
        return record.levelno >= third_party_level(record.name)


class ContextFormatter(logging.Formatter):
    """Appends extra record fields as a trailing [key=value ...] block."""

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        extras = {key: value for key, value in record.__dict__.items() if key not in _RESERVED_RECORD_ATTRS}
        if not extras:
            return base
        return base + " [" + " ".join(f"{key}={value}" for key, value in extras.items()) + "]"


class ColorFormatter(ContextFormatter):
    _RESET = "\x1b[0m"
    _LEVEL_COLORS = {
        "DEBUG": "\x1b[36m",
        "INFO": "\x1b[32m",
        "WARNING": "\x1b[33m",
        "ERROR": "\x1b[31m",
        "CRITICAL": "\x1b[1;31m",
    }
    _NAME_COLOR = "\x1b[34m"
    _SOURCE_COLOR = "\x1b[94m"

    def format(self, record: logging.LogRecord) -> str:
        record.level_color = self._LEVEL_COLORS.get(record.levelname, "")  # type: ignore[attr-defined]
        record.name_color = self._NAME_COLOR  # type: ignore[attr-defined]
        record.source_color = self._SOURCE_COLOR  # type: ignore[attr-defined]
        record.reset = self._RESET  # type: ignore[attr-defined]
        return super().format(record)


@contextmanager
def log_context(**kwargs: Any) -> Iterator[None]:
    """Temporarily attach context fields to all log lines in this scope."""

    token = _LOG_CONTEXT.set({**(_LOG_CONTEXT.get() or {}), **kwargs})
    try:
        yield
    finally:
        _LOG_CONTEXT.reset(token)


def get_log_context() -> Mapping[str, Any]:
    return _LOG_CONTEXT.get() or {}


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _resolve_level(log_level: str | None) -> int:
    raw = (log_level or os.getenv("LOG_LEVEL", "INFO")).upper().strip()
    level = getattr(logging, raw, logging.INFO)
    return level if isinstance(level, int) else logging.INFO


def setup_logging(*, log_level: str | None = None) -> None:
    """
    Configure process-wide logging for the API.

    Environment variables:
    - LOG_LEVEL: DEBUG, INFO, WARNING, ERROR, CRITICAL (default: INFO)
    - LOG_COLOR: enable ANSI colors (default: auto when TTY)
    """
    root_level = _resolve_level(log_level)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    logging.captureWarnings(True)

    handler = logging.StreamHandler(sys.stdout)
    formatter: logging.Formatter
    if _env_flag("LOG_COLOR", sys.stdout.isatty()):
        formatter = ColorFormatter(COLOR_FORMAT, datefmt=DEFAULT_DATE_FORMAT)
    else:
        formatter = ContextFormatter(PLAIN_FORMAT, datefmt=DEFAULT_DATE_FORMAT)
    handler.setFormatter(formatter)
    handler.addFilter(ContextInjectionFilter())
    handler.addFilter(ThirdPartyNoiseFilter())
    root_logger.addHandler(handler)
    root_logger.setLevel(root_level)

    logging.getLogger(APP_LOGGER_PREFIX).setLevel(root_level)
    for name in _THIRD_PARTY_LEVELS:
        logging.getLogger(name).setLevel(third_party_level(name))

    logging.getLogger(__name__).info(
        "Logging configured",
        extra={"log_level": logging.getLevelName(root_level)},
    )
