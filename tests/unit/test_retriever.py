"""Tests for the retrieval orchestrator."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.services.retrieval.retriever import VECTOR_SEARCH_SQL, Retriever


def _embedder(vector=(0.1, 0.2, 0.3)):
    embedder = MagicMock()
    embedder.embed = AsyncMock(return_value=list(vector))
    return embedder


def _keyword_searcher(result=None):
    searcher = MagicMock()
    searcher.search = AsyncMock(return_value=result or [])
    return searcher


# ==========================================
#  VECTOR SEARCH
# ==========================================


class TestVectorSearch:
    @pytest.mark.asyncio
    async def test_maps_rows_to_contexts(self, settings):
        query = AsyncMock(
            return_value=[
                {"id": 4, "content": "Passport belongs to you.", "reference": "Passports-Act", "source": "rights_guide", "similarity": 0.9},
                {"id": 5, "content": "Rest day weekly.", "reference": None, "source": "faq", "similarity": 0.8},
            ]
        )
        retriever = Retriever(settings, embedder=_embedder(), query=query, keyword_searcher=_keyword_searcher())

        contexts = await retriever.retrieve("Can my employer keep my passport?")

        assert [c.id for c in contexts] == [4, 5]
        assert contexts[0].reference == "Passports-Act"
        assert contexts[1].reference == ""
        args = query.await_args.args
        assert args[1] == VECTOR_SEARCH_SQL
        assert args[2] == ("[0.1,0.2,0.3]", settings.similarity_threshold, settings.similarity_limit)

    @pytest.mark.asyncio
    async def test_embedding_failure_falls_back_to_keywords(self, settings, contexts):
        embedder = MagicMock()
        embedder.embed = AsyncMock(side_effect=RuntimeError("model missing"))
        keywords = _keyword_searcher(contexts)
        query = AsyncMock()
        retriever = Retriever(settings, embedder=embedder, query=query, keyword_searcher=keywords)

        result = await retriever.retrieve("overtime pay")

        assert result == contexts
        keywords.search.assert_awaited_once_with("overtime pay")
        query.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_query_failure_falls_back_to_keywords(self, settings, contexts):
        keywords = _keyword_searcher(contexts)
        query = AsyncMock(side_effect=ConnectionError("db down"))
        retriever = Retriever(settings, embedder=_embedder(), query=query, keyword_searcher=keywords)

        assert await retriever.retrieve("overtime pay") == contexts

    @pytest.mark.asyncio
    async def test_empty_result_does_not_fall_back(self, settings):
        keywords = _keyword_searcher()
        retriever = Retriever(settings, embedder=_embedder(), query=AsyncMock(return_value=[]), keyword_searcher=keywords)

        assert await retriever.retrieve("overtime pay") == []
        keywords.search.assert_not_awaited()


# ==========================================
#  ROUTING AND TIMEOUT
# ==========================================


class TestRetrieve:
    @pytest.mark.asyncio
    async def test_statistics_question_skips_vector_search(self, settings, state_contexts):
        embedder = _embedder()
        keywords = _keyword_searcher(state_contexts)
        retriever = Retriever(settings, embedder=embedder, query=AsyncMock(), keyword_searcher=keywords)

        result = await retriever.retrieve("How many migrant workers in Selangor?")

        assert result == state_contexts
        embedder.embed.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_timeout_returns_empty_without_cancelling(self, settings):
        finished = asyncio.Event()

        async def slow_query(*_args, **_kwargs):
            await asyncio.sleep(settings.retrieval_timeout * 2)
            finished.set()
            return [{"id": 1, "content": "late", "reference": "x", "source": "faq"}]

        keywords = _keyword_searcher()
        retriever = Retriever(settings, embedder=_embedder(), query=slow_query, keyword_searcher=keywords)

        result = await retriever.retrieve("overtime pay")

        assert result == []
        keywords.search.assert_not_awaited()
        assert len(retriever._background) == 1

        # The late search still runs to completion and is then dropped
        await asyncio.wait_for(finished.wait(), timeout=2)
        await asyncio.sleep(0.05)
        assert retriever._background == set()

    @pytest.mark.asyncio
    async def test_fast_search_beats_timer(self, settings):
        query = AsyncMock(return_value=[{"id": 1, "content": "c", "reference": "r", "source": "faq"}])
        retriever = Retriever(settings, embedder=_embedder(), query=query, keyword_searcher=_keyword_searcher())

        result = await retriever.retrieve("annual leave")

        assert [c.content for c in result] == ["c"]
        assert retriever._background == set()
