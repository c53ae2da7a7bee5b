"""Unit tests for centralized timeout configuration."""
from __future__ import annotations

from mistral_client.base.timeouts import TimeoutConfig, get_timeout_config, httpx_timeout


def test_defaults_when_env_unset():
    cfg = get_timeout_config()
    assert cfg == TimeoutConfig(http_timeout_seconds=30.0, stream_timeout_seconds=60.0)  # nosec B101


def test_env_overrides_are_picked_up_and_cached(monkeypatch):
    monkeypatch.setenv("MISTRAL_TIMEOUT_HTTP_SECONDS", "5")
    monkeypatch.setenv("MISTRAL_TIMEOUT_STREAM_SECONDS", "90")
    first = get_timeout_config()
    assert first.http_timeout_seconds == 5.0 and first.stream_timeout_seconds == 90.0  # nosec B101
    assert get_timeout_config() is first  # nosec B101


def test_invalid_or_non_positive_values_fall_back(monkeypatch):
    monkeypatch.setenv("MISTRAL_TIMEOUT_HTTP_SECONDS", "abc")
    monkeypatch.setenv("MISTRAL_TIMEOUT_STREAM_SECONDS", "-1")
    cfg = get_timeout_config()
    assert cfg.http_timeout_seconds == 30.0 and cfg.stream_timeout_seconds == 60.0  # nosec B101


def test_stream_timeout_only_affects_read(monkeypatch):
    monkeypatch.setenv("MISTRAL_TIMEOUT_HTTP_SECONDS", "7")
    monkeypatch.setenv("MISTRAL_TIMEOUT_STREAM_SECONDS", "70")
    plain = httpx_timeout()
    stream = httpx_timeout(stream=True)
    assert plain.read == 7.0 and plain.connect == 7.0  # nosec B101
    assert stream.read == 70.0 and stream.connect == 7.0  # nosec B101
