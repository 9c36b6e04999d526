from __future__ import annotations

import logging
import os
import sys
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

# LogRecord attributes that are never rendered as key=value context.
_RESERVED_RECORD_ATTRS = frozenset(logging.makeLogRecord({}).__dict__) | {
    "message",
    "asctime",
    "taskName",
    "level_color",
    "name_color",
    "source_color",
    "reset",
    "color_message",
}

_LOG_CONTEXT: ContextVar[dict[str, Any] | None] = ContextVar("log_context", default=None)

DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

APP_LOGGER_PREFIX = "hello_service"

# Third-party loggers are held at WARNING unless listed here. Nothing from uvicorn
# below WARNING reaches stdout, which carries the startup banner.
_THIRD_PARTY_LEVELS: dict[str, int] = {
    "uvicorn": logging.WARNING,
    "uvicorn.error": logging.WARNING,
    "uvicorn.access": logging.WARNING,
    "asyncio": logging.WARNING,
    "httpx": logging.WARNING,
    "httpcore": logging.WARNING,
}

_PLAIN_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(filename)s:%(lineno)d | %(message)s"
_COLOR_FORMAT = (
    "%(level_color)s%(asctime)s | %(levelname)s%(reset)s | "
    "%(name_color)s%(name)s%(reset)s | "
    "%(source_color)s%(filename)s:%(lineno)d%(reset)s | "
    "%(level_color)s%(message)s%(reset)s"
)


def _is_app_logger(name: str) -> bool:
    return name in ("__main__", APP_LOGGER_PREFIX) or name.startswith(f"{APP_LOGGER_PREFIX}.")


def third_party_level(name: str) -> int:
    """Return the level for a non-app logger, using the most specific prefix match."""

    best_level = logging.WARNING
    best_len = -1
    for prefix, level in _THIRD_PARTY_LEVELS.items():
        if (name == prefix or name.startswith(prefix + ".")) and len(prefix) > best_len:
            best_level = level
            best_len = len(prefix)
    return best_level


class ContextInjectionFilter(logging.Filter):
    """Injects contextvars-based fields into every log record."""

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in (_LOG_CONTEXT.get() or {}).items():
            if key not in _RESERVED_RECORD_ATTRS:
                setattr(record, key, value)
        return True


class ThirdPartyFilter(logging.Filter):
    """Drop third-party chatter below its configured threshold."""

    def filter(self, record: logging.LogRecord) -> bool:
        if _is_app_logger(record.name):
            return True
        return record.levelno >= third_party_level(record.name)


class SmartContextFormatter(logging.Formatter):
    """Formatter that appends all extra fields as key=value context."""

    def format(self, record: logging.LogRecord) -> str:
        base_message = super().format(record)
        extra_fields = {key: value for key, value in record.__dict__.items() if key not in _RESERVED_RECORD_ATTRS}
        if not extra_fields:
            return base_message

        context_str = " ".join(f"{key}={value}" for key, value in extra_fields.items())
        return f"{base_message} [{context_str}]"


class ColorFormatter(SmartContextFormatter):
    """Colorize timestamp+level+message by level, name/source by fixed blues."""

    _RESET = "\x1b[0m"
    _LEVEL_COLORS = {
        "DEBUG": "\x1b[36m",  # cyan
        "INFO": "\x1b[32m",  # green
        "WARNING": "\x1b[33m",  # yellow
        "ERROR": "\x1b[31m",  # red
        "CRITICAL": "\x1b[1;31m",  # bold red
    }
    _NAME_COLOR = "\x1b[34m"  # blue
    _SOURCE_COLOR = "\x1b[94m"  # bright blue

    def format(self, record: logging.LogRecord) -> str:
        record.level_color = self._LEVEL_COLORS.get(record.levelname, "")  # type: ignore[attr-defined]
        record.name_color = self._NAME_COLOR  # type: ignore[attr-defined]
        record.source_color = self._SOURCE_COLOR  # type: ignore[attr-defined]
        record.reset = self._RESET  # type: ignore[attr-defined]
        return super().format(record)


@contextmanager
def log_context(**kwargs: Any) -> Iterator[None]:
    """Temporarily attach context fields to all log lines in this scope."""

    current = _LOG_CONTEXT.get() or {}
    token = _LOG_CONTEXT.set({**current, **kwargs})
    try:
        yield
    finally:
        _LOG_CONTEXT.reset(token)


def get_log_context() -> Mapping[str, Any]:
    """Return the current logging context (useful for debugging/tests)."""

    return _LOG_CONTEXT.get() or {}


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def resolve_log_level(log_level: str | None = None) -> int:
    """Explicit level wins, then LOG_LEVEL, then INFO. Unknown names fall back to INFO."""

    raw_level = (log_level or os.getenv("LOG_LEVEL") or "INFO").upper().strip()
    level = logging.getLevelName(raw_level)
    return level if isinstance(level, int) else logging.INFO


def build_formatter(use_color: bool) -> logging.Formatter:
    if use_color:
        return ColorFormatter(_COLOR_FORMAT, datefmt=DEFAULT_DATE_FORMAT)
    return SmartContextFormatter(_PLAIN_FORMAT, datefmt=DEFAULT_DATE_FORMAT)


def setup_logging(*, log_level: str | None = None) -> None:
    """
    Configure global, context-aware logging for the service.

    Environment variables:
    - LOG_LEVEL: DEBUG, INFO, WARNING, ERROR, CRITICAL (default: INFO)
    - LOG_COLOR: enable ANSI colors (default: auto when TTY)
    """
    root_level = resolve_log_level(log_level)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # uvicorn installs its own handlers unless told otherwise; route everything through root.
    for name in list(logging.root.manager.loggerDict):
        existing = logging.getLogger(name)
        existing.handlers = []
        existing.propagate = True
        existing.setLevel(root_level if _is_app_logger(name) else third_party_level(name))

    logging.captureWarnings(True)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(build_formatter(_env_flag("LOG_COLOR", sys.stdout.isatty())))
    handler.addFilter(ContextInjectionFilter())
    handler.addFilter(ThirdPartyFilter())
    root_logger.addHandler(handler)
    root_logger.setLevel(root_level)

    logging.getLogger(__name__).debug(
        "Logging configured",
        extra={"log_level": logging.getLevelName(root_level)},
    )
