"""Local sentence-transformer embeddings for knowledge-base search.

The model is loaded lazily on first use and shared by every request in the
process. Encoding is CPU-bound, so it runs in a worker thread to keep the
event loop free for the retrieval timeout race.
"""

import asyncio
import logging
from collections.abc import Sequence
from typing import Any

import numpy as np
from sentence_transformers import SentenceTransformer

from src.config.settings import Settings
from src.utils.text_processing import clean_for_embedding

logger = logging.getLogger(__name__)

QUERY_PREFIX = "query: "
PASSAGE_PREFIX = "passage: "


class EmbeddingProvider:
    """Multilingual sentence embeddings (384-d, L2-normalized)."""

    def __init__(
        self,
        model_name: str = "intfloat/multilingual-e5-small",
        max_chars: int = 8000,
        batch_size: int = 10,
        batch_delay: float = 0.1,
    ):
        self.model_name = model_name
        self.max_chars = max_chars
        self.batch_size = batch_size
        self.batch_delay = batch_delay
        self._model: SentenceTransformer | None = None
        self._init_lock = asyncio.Lock()

    @property
    def is_loaded(self) -> bool:
        return self._model is not None

    async def _get_model(self) -> SentenceTransformer:
        if self._model is not None:
            return self._model
        async with self._init_lock:
            if self._model is None:
                logger.info("Loading embedding model %s", self.model_name)
                self._model = await asyncio.to_thread(SentenceTransformer, self.model_name)
                logger.info("Embedding model %s loaded", self.model_name)
        return self._model

    def _prepare(self, text: str, prefix: str) -> str:
        return prefix + clean_for_embedding(text, self.max_chars)

    async def embed(self, text: str) -> list[float]:
        """Embed a search query."""
        model = await self._get_model()
        prepared = self._prepare(text, QUERY_PREFIX)
        vector: Any = await asyncio.to_thread(
            model.encode, prepared, normalize_embeddings=True, convert_to_numpy=True
        )
        return np.asarray(vector, dtype=np.float32).tolist()

    async def embed_batch(self, texts: Sequence[str]) -> list[list[float]]:
        """Embed knowledge-base passages in sequential batches.

        Batches of ``batch_size`` are encoded one after another with a short
        pause between them, which keeps a long population run from pinning
        the CPU.
        """
        model = await self._get_model()
        results: list[list[float]] = []
        for start in range(0, len(texts), self.batch_size):
            batch = [self._prepare(t, PASSAGE_PREFIX) for t in texts[start : start + self.batch_size]]
            vectors: Any = await asyncio.to_thread(
                model.encode, batch, normalize_embeddings=True, convert_to_numpy=True
            )
            results.extend(np.asarray(vectors, dtype=np.float32).tolist())
            if start + self.batch_size < len(texts) and self.batch_delay > 0:
                await asyncio.sleep(self.batch_delay)
        return results

    @staticmethod
    def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
        va, vb = np.asarray(a, dtype=np.float64), np.asarray(b, dtype=np.float64)
        norm = np.linalg.norm(va) * np.linalg.norm(vb)
        if norm == 0:
            return 0.0
        return float(np.dot(va, vb) / norm)


_provider: EmbeddingProvider | None = None


def get_embedding_provider(settings: Settings) -> EmbeddingProvider:
    """Get or create the shared embedding provider."""
    global _provider  # noqa: PLW0603
    if _provider is None:
        _provider = EmbeddingProvider(
            model_name=settings.embedding_model,
            max_chars=settings.embedding_max_chars,
            batch_size=settings.embedding_batch_size,
            batch_delay=settings.embedding_batch_delay,
        )
    return _provider


def reset_embedding_provider() -> None:
    """Drop the shared provider so the model is released."""
    global _provider  # noqa: PLW0603
    _provider = None
