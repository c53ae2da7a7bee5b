"""Request timeouts.

Two knobs, both in seconds and both overridable from the environment:

``MISTRAL_TIMEOUT_HTTP_SECONDS`` (default 30)
    connect, write, pool and read limit for ordinary calls.
``MISTRAL_TIMEOUT_STREAM_SECONDS`` (default 60)
    read limit while a streaming response waits for its next line.

Invalid or non-positive values are ignored. The parsed values are cached
until either variable changes.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Tuple

import httpx

HTTP_TIMEOUT_ENV = "MISTRAL_TIMEOUT_HTTP_SECONDS"
STREAM_TIMEOUT_ENV = "MISTRAL_TIMEOUT_STREAM_SECONDS"


@dataclass(frozen=True)
class TimeoutConfig:
    http_timeout_seconds: float = 30.0
    stream_timeout_seconds: float = 60.0


_cache: Optional[Tuple[Tuple[Optional[str], Optional[str]], TimeoutConfig]] = None


def _positive_seconds(raw: Optional[str], fallback: float) -> float:
    try:
        seconds = float(raw) if raw else fallback
    except ValueError:
        return fallback
    return seconds if seconds > 0 else fallback


def get_timeout_config() -> TimeoutConfig:
    """Return the current :class:`TimeoutConfig`, reparsing only on env change."""
    global _cache  # noqa: PLW0603 - module-level cache
    raw = (os.getenv(HTTP_TIMEOUT_ENV), os.getenv(STREAM_TIMEOUT_ENV))
    if _cache is not None and _cache[0] == raw:
        return _cache[1]
    defaults = TimeoutConfig()
    cfg = TimeoutConfig(
        http_timeout_seconds=_positive_seconds(raw[0], defaults.http_timeout_seconds),
        stream_timeout_seconds=_positive_seconds(raw[1], defaults.stream_timeout_seconds),
    )
    _cache = (raw, cfg)
    return cfg


def httpx_timeout(*, stream: bool = False) -> httpx.Timeout:
    """Build the ``httpx.Timeout`` for one request."""
    cfg = get_timeout_config()
    read = cfg.stream_timeout_seconds if stream else cfg.http_timeout_seconds
    return httpx.Timeout(cfg.http_timeout_seconds, read=read)


__all__ = ["TimeoutConfig", "get_timeout_config", "httpx_timeout"]
