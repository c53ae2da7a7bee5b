"""Shared fixtures for the SDK test suite.

- Isolates every test from the developer's environment (``MISTRAL_*``
  variables, ``.env`` files and cached configuration).
- Captures structured log events emitted under the ``mistral_client`` logger.
- Builds clients whose HTTP traffic is served by ``httpx.MockTransport``.
- Closes pooled HTTP clients after the session.
"""

from __future__ import annotations

import json
import logging
import time
from typing import Any, Callable, Dict, Iterator, List, Optional

import httpx
import pytest

from mistral_client import MistralClient
from mistral_client.base.http import close_all_clients
from mistral_client.base.logging import get_logger
from mistral_client.config import reset_config_cache

TEST_BASE_URL = "https://api.test.local"
TEST_API_KEY = "test-key"  # pragma: allowlist secret


class _ListHandler(logging.Handler):
    """Capture log records into a list for assertions."""

    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.records: List[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    """Clear SDK environment variables and point DOTENV_FILE at nothing."""
    for name in (
        "MISTRAL_API_KEY",
        "MISTRAL_BASE_URL",
        "MISTRAL_USER_AGENT",
        "MISTRAL_POLL_INTERVAL_SECONDS",
        "MISTRAL_CONFIG_FILE",
        "MISTRAL_LOG_LEVEL",
        "MISTRAL_TIMEOUT_HTTP_SECONDS",
        "MISTRAL_TIMEOUT_STREAM_SECONDS",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DOTENV_FILE", str(tmp_path / "missing.env"))
    reset_config_cache()
    yield
    reset_config_cache()


@pytest.fixture()
def log_events(monkeypatch: pytest.MonkeyPatch) -> Iterator[Callable[..., List[Dict[str, Any]]]]:
    """Capture SDK log events; call the fixture value to get decoded payloads.

    ``log_events()`` returns every event, ``log_events("batch.poll")`` only
    the events with that name.
    """
    base = get_logger()
    previous_level = base.level
    monkeypatch.setenv("MISTRAL_LOG_LEVEL", "DEBUG")
    get_logger()
    handler = _ListHandler()
    base.addHandler(handler)

    def _events(name: Optional[str] = None) -> List[Dict[str, Any]]:
        decoded = [json.loads(r.getMessage()) for r in handler.records]
        return [e for e in decoded if name is None or e.get("event") == name]

    try:
        yield _events
    finally:
        base.removeHandler(handler)
        base.setLevel(previous_level)


@pytest.fixture()
def fake_clock(monkeypatch: pytest.MonkeyPatch):
    """Provide a deterministic perf_counter; ``fake_clock.advance(ms)`` moves it."""
    state = {"t": 0.0}

    def perf_counter() -> float:
        return state["t"]

    def advance(ms: float) -> None:
        state["t"] += ms / 1000.0

    monkeypatch.setattr(time, "perf_counter", perf_counter)
    return type("Clock", (), {"advance": staticmethod(advance)})


@pytest.fixture()
def make_client() -> Iterator[Callable[..., MistralClient]]:
    """Factory building a client backed by ``httpx.MockTransport(handler)``."""
    opened: List[httpx.Client] = []

    def _make(handler: Callable[[httpx.Request], httpx.Response], **kwargs: Any) -> MistralClient:
        http = httpx.Client(transport=httpx.MockTransport(handler))
        opened.append(http)
        kwargs.setdefault("base_url", TEST_BASE_URL)
        return MistralClient(TEST_API_KEY, http_client=http, **kwargs)

    yield _make
    for http in opened:
        http.close()


@pytest.fixture(scope="session", autouse=True)
def close_pooled_clients() -> Iterator[None]:
    yield
    close_all_clients()

