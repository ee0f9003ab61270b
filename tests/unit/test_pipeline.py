"""Tests for the chatbot orchestrator."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from src.config.constants import SourceType
from src.config.prompts import OFF_TOPIC_MESSAGE
from src.orchestrator.pipeline import ChatbotOrchestrator, get_orchestrator, reset_orchestrator
from src.services.answer.synthesizer import AnswerSynthesizer


def _retriever(result):
    retriever = MagicMock()
    retriever.retrieve = AsyncMock(return_value=result)
    return retriever


def _orchestrator(settings, contexts, answer="Answer [ref:Passports-Act-1966]", save=None):
    complete = AsyncMock(return_value=answer)
    orchestrator = ChatbotOrchestrator(
        settings,
        retriever=_retriever(contexts),
        synthesizer=AnswerSynthesizer(settings, complete=complete),
        save_conversation=save or MagicMock(),
    )
    return orchestrator, complete


class TestChat:
    @pytest.mark.asyncio
    async def test_off_topic_makes_no_calls(self, settings):
        save = MagicMock()
        orchestrator, complete = _orchestrator(settings, [], save=save)

        response = await orchestrator.chat("Tell me a joke", "en", session_id="s-1")

        assert response.answer == OFF_TOPIC_MESSAGE
        assert response.source_type is SourceType.OFF_TOPIC
        assert response.citations == []
        orchestrator.retriever.retrieve.assert_not_awaited()
        complete.assert_not_awaited()
        save.assert_called_once()

    @pytest.mark.asyncio
    async def test_answer_with_contexts(self, settings, contexts):
        orchestrator, complete = _orchestrator(settings, contexts)

        response = await orchestrator.chat("Can my employer keep my passport?", "ne")

        assert response.source_type is SourceType.DATABASE
        assert response.citations == ["Passports-Act-1966"]
        assert response.response_time >= 0
        complete.assert_awaited_once()
        assert "Nepali" in complete.await_args.args[1][0]["content"]

    @pytest.mark.asyncio
    async def test_statistics_question_skips_llm(self, settings, state_contexts):
        orchestrator, complete = _orchestrator(settings, state_contexts)

        response = await orchestrator.chat("How many migrant workers are in Selangor?")

        assert response.answer.startswith("Based on our database:\n")
        assert "500,000" in response.answer
        assert "300,000" in response.answer
        assert response.citations == ["state-SGR", "state-JHR"]
        complete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_statistics_question_without_rows_uses_llm(self, settings):
        orchestrator, complete = _orchestrator(settings, [], answer="About 2 million.")

        response = await orchestrator.chat("How many migrant workers are in Malaysia?")

        assert response.answer == "About 2 million."
        assert response.source_type is SourceType.GENERAL
        complete.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_save_scheduled_only_with_session(self, settings, contexts):
        save = MagicMock()
        orchestrator, _ = _orchestrator(settings, contexts, save=save)

        await orchestrator.chat("What is my salary right?", "en")
        save.assert_not_called()

        response = await orchestrator.chat("What is my salary right?", "ms", session_id="abc")
        save.assert_called_once_with(settings, "abc", "What is my salary right?", response, "ms")

    @pytest.mark.asyncio
    async def test_save_failure_does_not_break_answer(self, settings, contexts):
        save = MagicMock(side_effect=RuntimeError("no loop"))
        orchestrator, _ = _orchestrator(settings, contexts, save=save)

        response = await orchestrator.chat("What is my salary right?", session_id="abc")

        assert response.source_type is SourceType.DATABASE

    @pytest.mark.asyncio
    async def test_retrieval_error_continues_without_context(self, settings):
        orchestrator, complete = _orchestrator(settings, [], answer="General salary answer.")
        orchestrator.retriever.retrieve = AsyncMock(side_effect=RuntimeError("boom"))

        response = await orchestrator.chat("What is my salary right?")

        assert response.answer == "General salary answer."
        assert response.source_type is SourceType.GENERAL
        complete.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_non_llm_error_still_answers_from_contexts(self, settings, contexts):
        orchestrator = ChatbotOrchestrator(
            settings,
            retriever=_retriever(contexts),
            synthesizer=AnswerSynthesizer(settings, complete=AsyncMock(side_effect=ValueError("bad response body"))),
            save_conversation=MagicMock(),
        )

        response = await orchestrator.chat("How is overtime calculated?", "en")

        assert response.answer
        assert response.source_type is SourceType.DATABASE


def test_get_orchestrator_is_shared(settings):
    reset_orchestrator()
    try:
        assert get_orchestrator(settings) is get_orchestrator(settings)
    finally:
        reset_orchestrator()
