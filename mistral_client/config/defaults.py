"""mistral_client.config.defaults
===============================

Central place for small, stable default values used across the SDK. These
can be overridden via environment variables or an external config file.

This module must not import from other SDK packages, to prevent circular
dependencies. Only plain constants live here.
"""

from __future__ import annotations

# ---- API ----
DEFAULT_BASE_URL = "https://api.mistral.ai"
API_VERSION = "v1"
USER_AGENT_PREFIX = "mistral-client-python"
SDK_VERSION = "0.1.0"

# ---- Batch polling ----
# Seconds between two batch status checks.
DEFAULT_POLL_INTERVAL_SECONDS = 2.0

# ---- Batch submission ----
DEFAULT_BATCH_MAX_CONCURRENCY = 5
DEFAULT_CHAT_BATCH_CHUNK_SIZE = 100
DEFAULT_EMBEDDINGS_BATCH_CHUNK_SIZE = 1000

# ---- Embeddings ----
# Texts per request for EmbeddingsService.batch.
DEFAULT_EMBEDDINGS_BATCH_SIZE = 32


__all__ = [
    "DEFAULT_BASE_URL",
    "API_VERSION",
    "USER_AGENT_PREFIX",
    "SDK_VERSION",
    "DEFAULT_POLL_INTERVAL_SECONDS",
    "DEFAULT_BATCH_MAX_CONCURRENCY",
    "DEFAULT_CHAT_BATCH_CHUNK_SIZE",
    "DEFAULT_EMBEDDINGS_BATCH_CHUNK_SIZE",
    "DEFAULT_EMBEDDINGS_BATCH_SIZE",
]
