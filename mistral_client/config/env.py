"""Environment variables read by :func:`mistral_client.config.get_client_config`."""

from __future__ import annotations

from typing import Optional

API_KEY_ENV = "MISTRAL_API_KEY"  # pragma: allowlist secret - variable name only
BASE_URL_ENV = "MISTRAL_BASE_URL"
USER_AGENT_ENV = "MISTRAL_USER_AGENT"
POLL_INTERVAL_ENV = "MISTRAL_POLL_INTERVAL_SECONDS"
CONFIG_FILE_ENV = "MISTRAL_CONFIG_FILE"
DOTENV_FILE_ENV = "DOTENV_FILE"

ENV_FIELD_MAP = {
    "api_key": API_KEY_ENV,  # pragma: allowlist secret
    "base_url": BASE_URL_ENV,
    "user_agent": USER_AGENT_ENV,
    "poll_interval": POLL_INTERVAL_ENV,
}

_PLACEHOLDER_MARKERS = ("placeholder", "changeme", "example")


def is_placeholder(val: Optional[str]) -> bool:
    """Whether ``val`` looks like a template value rather than a credential.

    Matches ``placeholder``, ``changeme`` or ``example`` anywhere and a
    ``test_`` prefix, ignoring case and surrounding blanks.
    """
    if val is None:
        return False
    text = str(val).strip().lower()
    return text.startswith("test_") or any(marker in text for marker in _PLACEHOLDER_MARKERS)


__all__ = [
    "API_KEY_ENV",
    "BASE_URL_ENV",
    "USER_AGENT_ENV",
    "POLL_INTERVAL_ENV",
    "CONFIG_FILE_ENV",
    "DOTENV_FILE_ENV",
    "ENV_FIELD_MAP",
    "is_placeholder",
]
