"""Structured logging for the SDK.

All SDK modules log through children of one ``mistral_client`` logger. That
logger owns the handlers: a console handler writing one JSON object per line
to stderr, and optionally a rotating file handler added by
``configure_logger``. Children carry no handlers and propagate upward, so an
application reconfiguring the SDK only ever touches one logger.

Events are emitted with ``log_event`` (free-form fields) or
``normalized_log_event``, which always carries ``phase``, ``attempt`` and
``emitted`` plus ``error_code`` on failures, so terminal events of different
components can be filtered the same way.

Environment:
    MISTRAL_LOG_LEVEL  level name for the shared logger (default INFO)
"""
from __future__ import annotations

import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, Optional

from .log_support import JsonFormatter, LogContext

BASE_LOGGER_NAME = "mistral_client"
LOG_LEVEL_ENV = "MISTRAL_LOG_LEVEL"

_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
_LEVEL_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}
_FILE_MAX_BYTES = 10 * 1024 * 1024
_FILE_BACKUPS = 5


class _ConsoleHandler(logging.StreamHandler):
    """Stream handler bound to the *current* ``sys.stderr``.

    Looking the stream up at emit time keeps output visible when stderr is
    swapped after import (pytest capture, daemonization).
    """

    @property  # type: ignore[override]
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, _value) -> None:
        pass


class _ManagedFileHandler(RotatingFileHandler):
    """Rotating file handler installed by ``configure_logger``."""


def _formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT)


def _parse_level(value: str | None, default: int = logging.INFO) -> int:
    """Translate a level name (case-insensitive, ``WARN`` accepted) to its number.

    Unknown or empty names yield ``default``.
    """
    if not value:
        return default
    name = value.strip().upper()
    level = logging.getLevelName(_LEVEL_ALIASES.get(name, name))
    return level if isinstance(level, int) else default


def _sync_handler(handler: logging.Handler, level: int, json_mode: bool) -> None:
    handler.setLevel(level)
    if json_mode != isinstance(handler.formatter, JsonFormatter):
        handler.setFormatter(_formatter(json_mode))


def _ensure_base_logger(json_mode: bool, level: int) -> logging.Logger:
    """Return the shared logger, installing its console handler on first use.

    ``level`` applies on first use only. A set ``MISTRAL_LOG_LEVEL`` wins on
    every call.
    """
    logger = logging.getLogger(BASE_LOGGER_NAME)
    env_level = os.getenv(LOG_LEVEL_ENV)
    consoles = [h for h in logger.handlers if isinstance(h, _ConsoleHandler)]
    if not consoles:
        console = _ConsoleHandler()
        logger.addHandler(console)
        consoles = [console]
        logger.propagate = False
        logger.setLevel(_parse_level(env_level, default=level))
    elif env_level:
        logger.setLevel(_parse_level(env_level, default=logger.level))
    for console in consoles:
        _sync_handler(console, logger.level, json_mode)
    return logger


def get_logger(name: str = BASE_LOGGER_NAME, json_mode: bool = True, level: int = logging.INFO) -> logging.Logger:
    """Return ``name`` as a handler-less child of the shared SDK logger."""
    base = _ensure_base_logger(json_mode=json_mode, level=level)
    if name == BASE_LOGGER_NAME:
        return base
    child = logging.getLogger(name)
    child.setLevel(logging.NOTSET)
    child.propagate = True
    return child


def configure_logger(
    *,
    level: int | str | None = None,
    file_path: Optional[str] = None,
    json_mode: bool = True,
) -> logging.Logger:
    """Adjust the shared logger at runtime.

    Args:
        level: New level, numeric or by name. ``None`` keeps the current one.
        file_path: Path of a rotating log file (10 MB, 5 backups). Passing a
            new path replaces the previous SDK file handler; ``None`` removes
            it. Directories are created as needed.
        json_mode: JSON lines when ``True``, plain text otherwise.

    Handlers added by the application are left alone.
    """
    logger = _ensure_base_logger(json_mode=json_mode, level=logging.INFO)
    if level is not None:
        logger.setLevel(_parse_level(level, default=logger.level) if isinstance(level, str) else level)

    target = os.path.abspath(os.path.expanduser(file_path)) if file_path else None
    kept: Optional[_ManagedFileHandler] = None
    for handler in list(logger.handlers):
        if not isinstance(handler, _ManagedFileHandler):
            continue
        if target is not None and handler.baseFilename == target and kept is None:
            kept = handler
            continue
        logger.removeHandler(handler)
        handler.close()

    if target is not None and kept is None:
        os.makedirs(os.path.dirname(target), exist_ok=True)
        kept = _ManagedFileHandler(target, maxBytes=_FILE_MAX_BYTES, backupCount=_FILE_BACKUPS, encoding="utf-8")
        logger.addHandler(kept)

    for handler in logger.handlers:
        if isinstance(handler, (_ConsoleHandler, _ManagedFileHandler)):
            _sync_handler(handler, logger.level, json_mode)
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    keep_none: bool = False,
    **fields: Any,
) -> None:
    """Log ``event`` as one JSON object.

    The payload is ``{"event": event}`` followed by the context fields and
    then ``fields``. ``None`` values are dropped unless ``keep_none`` is set.
    Nothing is serialized when ``level`` is disabled.
    """
    if not logger.isEnabledFor(level):
        return
    payload: Dict[str, Any] = {"event": event}
    if ctx is not None:
        payload.update(ctx.to_dict())
    payload.update(fields if keep_none else {k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


REQUIRED_NORMALIZED_KEYS = ("phase", "attempt", "error_code", "emitted")


def normalized_log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    phase: str,
    attempt: int | None = None,
    error_code: str | None = None,
    emitted: bool | None = None,
    level: int = logging.INFO,
    **extra_fields: Any,
) -> None:
    """Log a terminal or phase event with the canonical keys.

    ``phase``, ``attempt`` and ``emitted`` are always present (``null`` when
    unknown); ``error_code`` only on failures. Extra fields cannot shadow
    them and ``None`` extras are dropped.
    """
    fields: Dict[str, Any] = {k: v for k, v in extra_fields.items() if v is not None}
    fields.update(phase=phase, attempt=attempt, emitted=emitted)
    if error_code is not None:
        fields["error_code"] = error_code
    log_event(logger, event, ctx, level=level, keep_none=True, **fields)


__all__ = [
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
    "normalized_log_event",
    "REQUIRED_NORMALIZED_KEYS",
]
