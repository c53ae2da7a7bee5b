"""Client configuration resolved from several layers.

Each layer overrides the one before it:

1. ``DEFAULTS`` (production base URL, 2 second poll interval)
2. a JSON or YAML file named by ``MISTRAL_CONFIG_FILE``
3. ``MISTRAL_API_KEY``, ``MISTRAL_BASE_URL``, ``MISTRAL_USER_AGENT`` and
   ``MISTRAL_POLL_INTERVAL_SECONDS``
4. keyword overrides handed to :func:`get_client_config` (``None`` skipped)

Before the environment is read for the first time, a dotenv file
(``DOTENV_FILE``, default ``.env``) may seed variables that are missing or
hold placeholder values. YAML files need PyYAML; without it only JSON files
are understood.

A config file looks like::

    base_url: https://api.mistral.ai
    poll_interval: 5
"""
from __future__ import annotations

import json
import math
import os
from pathlib import Path
from typing import Any, Dict, Optional

from .defaults import DEFAULT_BASE_URL, DEFAULT_POLL_INTERVAL_SECONDS
from .env import CONFIG_FILE_ENV, DOTENV_FILE_ENV, ENV_FIELD_MAP, is_placeholder

try:  # YAML config files are optional
    import yaml  # type: ignore
except ImportError:  # pragma: no cover
    yaml = None  # type: ignore


DEFAULTS: Dict[str, Any] = {
    "base_url": DEFAULT_BASE_URL,
    "poll_interval": DEFAULT_POLL_INTERVAL_SECONDS,
}

_file_config: Optional[Dict[str, Any]] = None
_dotenv_done = False


def _parse_dotenv_line(line: str) -> Optional[tuple]:
    line = line.strip()
    if not line or line.startswith("#"):
        return None
    key, sep, value = line.partition("=")
    key = key.strip()
    if not sep or not key:
        return None
    return key, value.strip().strip("'\"")


def _seed_from_dotenv() -> None:
    global _dotenv_done
    if _dotenv_done:
        return
    _dotenv_done = True
    path = Path(os.getenv(DOTENV_FILE_ENV, ".env"))
    if not path.is_file():
        return
    for raw in path.read_text(encoding="utf-8").splitlines():
        parsed = _parse_dotenv_line(raw)
        if parsed is None:
            continue
        key, value = parsed
        current = os.environ.get(key)
        if current is None or is_placeholder(current):
            os.environ[key] = value


def _decode_config_text(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        if yaml is None:
            return {}
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError:
        return {}


def _file_layer() -> Dict[str, Any]:
    global _file_config
    if _file_config is None:
        location = os.getenv(CONFIG_FILE_ENV)
        data: Any = {}
        if location and Path(location).is_file():
            data = _decode_config_text(Path(location).read_text(encoding="utf-8"))
        _file_config = data if isinstance(data, dict) else {}
    return _file_config


def _env_layer() -> Dict[str, Any]:
    layer: Dict[str, Any] = {}
    for key, variable in ENV_FIELD_MAP.items():
        value = os.getenv(variable)
        if value:
            layer[key] = value
    return layer


def _poll_interval(value: Any) -> float:
    try:
        seconds = float(value)
    except (TypeError, ValueError):
        return DEFAULT_POLL_INTERVAL_SECONDS
    return seconds if math.isfinite(seconds) and seconds > 0 else DEFAULT_POLL_INTERVAL_SECONDS


def get_client_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Resolve the configuration dict used by ``MistralClient``.

    Keys are ``base_url``, ``poll_interval`` (float seconds, always
    positive) and, when resolved, ``api_key`` and ``user_agent``. A
    missing or placeholder API key leaves ``api_key`` out entirely.
    """
    _seed_from_dotenv()
    cfg: Dict[str, Any] = {**DEFAULTS, **_file_layer(), **_env_layer()}
    for key, value in (overrides or {}).items():
        if value is not None:
            cfg[key] = value

    api_key = cfg.pop("api_key", None)
    if api_key and not is_placeholder(api_key):
        cfg["api_key"] = api_key
    cfg["poll_interval"] = _poll_interval(cfg.get("poll_interval"))
    return cfg


def reset_config_cache() -> None:
    """Drop the cached config file and allow the dotenv file to be read again."""
    global _file_config, _dotenv_done
    _file_config = None
    _dotenv_done = False


__all__ = ["get_client_config", "reset_config_cache", "DEFAULTS"]
