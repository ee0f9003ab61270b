"""Retrieval orchestrator: vector search bounded by a timeout, keyword fallback."""

import asyncio
import logging
from typing import Any

from src.config.settings import Settings
from src.infrastructure.database.connection import execute_query
from src.infrastructure.database.helpers import to_vector_literal
from src.infrastructure.embedding.provider import EmbeddingProvider, get_embedding_provider
from src.services.retrieval.keyword_search import KeywordSearcher, QueryFn
from src.services.retrieval.models import RetrievedContext
from src.services.triage.classifier import is_statistics_question

logger = logging.getLogger(__name__)

VECTOR_SEARCH_SQL = "SELECT * FROM search_knowledge_base($1::text::vector, $2, $3)"


class Retriever:
    """Find knowledge-base contexts for a question.

    Statistics questions go straight to keyword search. Everything else runs
    vector search against ``retrieval_timeout``; if the timer wins the
    question proceeds with no context while the search keeps running in the
    background and its result is discarded.
    """

    def __init__(
        self,
        settings: Settings,
        embedder: EmbeddingProvider | None = None,
        query: QueryFn = execute_query,
        keyword_searcher: KeywordSearcher | None = None,
    ):
        self.settings = settings
        self._embedder = embedder
        self._query = query
        self.keyword_searcher = keyword_searcher or KeywordSearcher(settings, query=query)
        self._background: set[asyncio.Task] = set()

    @property
    def embedder(self) -> EmbeddingProvider:
        if self._embedder is None:
            self._embedder = get_embedding_provider(self.settings)
        return self._embedder

    async def retrieve(self, question: str) -> list[RetrievedContext]:
        """Return contexts for the question; never raises."""
        if is_statistics_question(question):
            return await self.keyword_searcher.search(question)
        return await self._vector_search_with_timeout(question)

    async def _vector_search_with_timeout(self, question: str) -> list[RetrievedContext]:
        task = asyncio.create_task(self.vector_search(question))
        done, _ = await asyncio.wait({task}, timeout=self.settings.retrieval_timeout)
        if task in done:
            return task.result()

        logger.warning(
            "Vector search exceeded %.1fs, continuing without context",
            self.settings.retrieval_timeout,
        )
        # Not cancelled: the search finishes on its own and the result is dropped
        self._background.add(task)
        task.add_done_callback(self._discard_late_result)
        return []

    def _discard_late_result(self, task: asyncio.Task) -> None:
        self._background.discard(task)
        if not task.cancelled() and task.exception() is not None:
            logger.warning("Late vector search failed: %s", task.exception())

    async def vector_search(self, question: str) -> list[RetrievedContext]:
        """Similarity search via ``search_knowledge_base``; keyword search on any error."""
        try:
            embedding = await self.embedder.embed(question)
            rows: list[dict[str, Any]] = await self._query(
                self.settings,
                VECTOR_SEARCH_SQL,
                (
                    to_vector_literal(embedding),
                    self.settings.similarity_threshold,
                    self.settings.similarity_limit,
                ),
            )
            return [RetrievedContext.from_row(row) for row in rows]
        except Exception as e:
            logger.error("Vector search failed, falling back to keyword search: %s", e)
            return await self.keyword_searcher.search(question)
