"""Tests for layered client configuration and env helpers."""
from __future__ import annotations

import json

from mistral_client.config import DEFAULTS, get_client_config, reset_config_cache
from mistral_client.config.env import ENV_FIELD_MAP, is_placeholder


def test_env_field_map_names():
    assert ENV_FIELD_MAP["api_key"] == "MISTRAL_API_KEY"  # nosec B101
    assert ENV_FIELD_MAP["poll_interval"] == "MISTRAL_POLL_INTERVAL_SECONDS"  # nosec B101


def test_is_placeholder_heuristics():
    assert is_placeholder("placeholder-value")  # nosec B101
    assert is_placeholder("ChangeMe123")  # nosec B101
    assert is_placeholder("example-key")  # nosec B101
    assert is_placeholder("test_token")  # nosec B101
    assert not is_placeholder("real-value")  # nosec B101
    assert not is_placeholder(None)  # nosec B101


def test_defaults_without_any_source():
    cfg = get_client_config()
    assert cfg["base_url"] == DEFAULTS["base_url"] == "https://api.mistral.ai"  # nosec B101
    assert cfg["poll_interval"] == 2.0 and "api_key" not in cfg  # nosec B101


def test_env_overrides_defaults(monkeypatch):
    monkeypatch.setenv("MISTRAL_API_KEY", "sk-real")
    monkeypatch.setenv("MISTRAL_BASE_URL", "https://eu.example.org")
    monkeypatch.setenv("MISTRAL_POLL_INTERVAL_SECONDS", "0.5")
    cfg = get_client_config()
    assert cfg["api_key"] == "sk-real"  # nosec B101
    assert cfg["base_url"] == "https://eu.example.org" and cfg["poll_interval"] == 0.5  # nosec B101


def test_placeholder_key_is_treated_as_unset(monkeypatch):
    monkeypatch.setenv("MISTRAL_API_KEY", "changeme")
    assert "api_key" not in get_client_config()  # nosec B101


def test_invalid_poll_interval_falls_back(monkeypatch):
    monkeypatch.setenv("MISTRAL_POLL_INTERVAL_SECONDS", "-3")
    assert get_client_config()["poll_interval"] == 2.0  # nosec B101
    monkeypatch.setenv("MISTRAL_POLL_INTERVAL_SECONDS", "soon")
    assert get_client_config()["poll_interval"] == 2.0  # nosec B101


def test_overrides_win_and_none_is_ignored(monkeypatch):
    monkeypatch.setenv("MISTRAL_BASE_URL", "https://env.local")
    cfg = get_client_config({"base_url": "https://override.local", "user_agent": None})
    assert cfg["base_url"] == "https://override.local" and "user_agent" not in cfg  # nosec B101


def test_external_json_file_is_layered_below_env(monkeypatch, tmp_path):
    path = tmp_path / "mistral.json"
    path.write_text(json.dumps({"base_url": "https://file.local", "poll_interval": 9}), encoding="utf-8")
    monkeypatch.setenv("MISTRAL_CONFIG_FILE", str(path))
    reset_config_cache()
    cfg = get_client_config()
    assert cfg["base_url"] == "https://file.local" and cfg["poll_interval"] == 9.0  # nosec B101

    monkeypatch.setenv("MISTRAL_BASE_URL", "https://env.local")
    assert get_client_config()["base_url"] == "https://env.local"  # nosec B101


def test_dotenv_fills_only_unset_variables(monkeypatch, tmp_path):
    dotenv = tmp_path / ".env"
    dotenv.write_text(
        "# comment\nMISTRAL_API_KEY='sk-from-dotenv'\nMISTRAL_BASE_URL=https://dotenv.local\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("DOTENV_FILE", str(dotenv))
    monkeypatch.setenv("MISTRAL_BASE_URL", "https://already.set")
    # the dotenv loader writes os.environ directly; registering the key lets monkeypatch undo it
    monkeypatch.setenv("MISTRAL_API_KEY", "")
    monkeypatch.delenv("MISTRAL_API_KEY")
    reset_config_cache()

    cfg = get_client_config()
    assert cfg["api_key"] == "sk-from-dotenv"  # nosec B101
    assert cfg["base_url"] == "https://already.set"  # nosec B101


def test_non_finite_poll_interval_falls_back(monkeypatch):
    for raw in ("inf", "-inf", "nan", "Infinity"):
        monkeypatch.setenv("MISTRAL_POLL_INTERVAL_SECONDS", raw)
        assert get_client_config()["poll_interval"] == 2.0  # nosec B101
    assert get_client_config({"poll_interval": float("nan")})["poll_interval"] == 2.0  # nosec B101
