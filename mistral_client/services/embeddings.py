"""Embeddings service, including similarity and chunked batch helpers."""
from __future__ import annotations

import dataclasses
import math
from typing import List, Sequence

import httpx

from ..base.errors import APIError, ErrorCode, classify_exception, is_retryable
from ..config.defaults import DEFAULT_EMBEDDINGS_BATCH_SIZE
from ..models.embeddings import (
    EmbeddingRequest,
    EmbeddingResponse,
    EnhancedEmbeddingRequest,
    EnhancedEmbeddingResponse,
)
from .base import BaseService


def cosine_similarity(vec1: Sequence[float], vec2: Sequence[float]) -> float:
    """Cosine similarity of two equal-length vectors.

    Raises:
        ValueError: on length mismatch or a zero-length (all zero) vector.
    """
    if len(vec1) != len(vec2):
        raise ValueError(f"embedding dimensions differ: {len(vec1)} != {len(vec2)}")
    dot = sum(a * b for a, b in zip(vec1, vec2))
    norm1 = math.sqrt(sum(a * a for a in vec1))
    norm2 = math.sqrt(sum(b * b for b in vec2))
    if norm1 == 0 or norm2 == 0:
        raise ValueError("cannot compute similarity of a zero vector")
    return dot / (norm1 * norm2)


def _chunk_error(index: int, exc: Exception) -> APIError:
    if isinstance(exc, APIError):
        return dataclasses.replace(exc, message=f"error processing batch {index}: {exc.message}")
    code = classify_exception(exc)
    return APIError(
        code=code,
        message=f"error processing batch {index}: {exc}",
        retryable=is_retryable(code),
    )


class EmbeddingsService(BaseService):
    service_name = "embeddings"

    def create(self, request: EmbeddingRequest) -> EmbeddingResponse:
        return self._post("embeddings", request, EmbeddingResponse)

    def create_enhanced(self, request: EnhancedEmbeddingRequest) -> EnhancedEmbeddingResponse:
        return self._post("embeddings/enhanced", request, EnhancedEmbeddingResponse)

    def similarity(self, text1: str, text2: str, model: str) -> float:
        """Cosine similarity of the normalized embeddings of two texts.

        Raises:
            APIError: when the response does not hold exactly two embeddings.
        """
        resp = self.create_enhanced(EnhancedEmbeddingRequest(model=model, input=[text1, text2], normalize=True))
        if len(resp.data) != 2:
            raise APIError(code=ErrorCode.UNKNOWN, message=f"expected 2 embeddings, got {len(resp.data)}")
        return cosine_similarity(resp.data[0].embedding, resp.data[1].embedding)

    def batch(self, texts: Sequence[str], model: str, batch_size: int = DEFAULT_EMBEDDINGS_BATCH_SIZE) -> List[List[float]]:
        """Embed ``texts`` in chunks of ``batch_size``, preserving input order.

        A non-positive ``batch_size`` falls back to the default. The first
        failing chunk aborts the whole call with an :class:`APIError` whose
        message names the zero-based chunk index.
        """
        if batch_size <= 0:
            batch_size = DEFAULT_EMBEDDINGS_BATCH_SIZE
        embeddings: List[List[float]] = []
        for start in range(0, len(texts), batch_size):
            chunk = list(texts[start:start + batch_size])
            try:
                resp = self.create(EmbeddingRequest(model=model, input=chunk))
            except (APIError, httpx.HTTPError) as exc:
                raise _chunk_error(start // batch_size, exc) from exc
            embeddings.extend(item.embedding for item in resp.data)
        return embeddings


__all__ = ["EmbeddingsService", "cosine_similarity"]
