"""Top level client.

``MistralClient`` resolves configuration, builds one authenticated
:class:`~mistral_client.base.http.Transport` and attaches one service object
per API resource::

    client = MistralClient()                       # key from MISTRAL_API_KEY
    reply = client.chat.create(ChatCompletionRequest(...))

    with client.chat.create_stream(request) as stream:
        for chunk in stream:
            ...
"""
from __future__ import annotations

from typing import Optional

import httpx

from .base.http import Transport
from .config import get_client_config
from .config.defaults import SDK_VERSION, USER_AGENT_PREFIX
from .services import (
    AgentsService,
    BatchService,
    ChatService,
    ClassifiersService,
    EmbeddingsService,
    FilesService,
    FIMService,
    FineTuningService,
    ModelsService,
    ModerationsService,
    OCRService,
)

DEFAULT_USER_AGENT = f"{USER_AGENT_PREFIX}/{SDK_VERSION}"


class MistralClient:
    """Entry point to the hosted API.

    Parameters:
        api_key: Bearer token. Falls back to configuration (``MISTRAL_API_KEY``,
            ``.env`` or the external config file).
        base_url: API root; defaults to ``https://api.mistral.ai``.
        http_client: Caller-owned ``httpx.Client``. Without it a pooled client
            shared per base URL is used.
        user_agent: ``User-Agent`` override.

    Raises:
        APIError: with ``code=AUTH`` when no API key can be resolved.
        ValueError: when ``base_url`` has no scheme or host.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.Client] = None,
        user_agent: Optional[str] = None,
    ) -> None:
        cfg = get_client_config({"base_url": base_url, "user_agent": user_agent})
        self._transport = Transport(
            api_key if api_key is not None else cfg.get("api_key", ""),
            base_url=cfg["base_url"],
            user_agent=cfg.get("user_agent") or DEFAULT_USER_AGENT,
            http_client=http_client,
        )

        self.chat = ChatService(self._transport)
        self.models = ModelsService(self._transport)
        self.embeddings = EmbeddingsService(self._transport)
        self.files = FilesService(self._transport)
        self.fine_tuning = FineTuningService(self._transport)
        self.moderations = ModerationsService(self._transport)
        self.ocr = OCRService(self._transport)
        self.agents = AgentsService(self._transport)
        self.fim = FIMService(self._transport)
        self.classifiers = ClassifiersService(self._transport)
        self.batch = BatchService(self._transport, poll_interval=cfg["poll_interval"])

    @property
    def base_url(self) -> httpx.URL:
        return self._transport.base_url

    @property
    def http_client(self) -> httpx.Client:
        return self._transport.http_client

    @property
    def user_agent(self) -> str:
        return self._transport.user_agent

    @property
    def transport(self) -> Transport:
        return self._transport


__all__ = ["MistralClient", "DEFAULT_USER_AGENT"]
