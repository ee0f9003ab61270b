"""Embedding infrastructure module."""

from src.infrastructure.embedding.provider import (
    EmbeddingProvider,
    get_embedding_provider,
    reset_embedding_provider,
)

__all__ = [
    "EmbeddingProvider",
    "get_embedding_provider",
    "reset_embedding_provider",
]
