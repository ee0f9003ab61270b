"""Answer synthesis: prompt building, LLM call, and templated fallback."""

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from src.config.constants import SourceType
from src.config.prompts import (
    SERVICE_UNAVAILABLE_MESSAGE,
    build_chatbot_system_prompt,
    build_context_message,
)
from src.config.settings import Settings
from src.infrastructure.llm.exceptions import LLMError, LLMNotConfiguredError
from src.infrastructure.llm.executor import run_chat_completion
from src.services.answer.citations import context_references, extract_citations
from src.services.answer.fallback import build_fallback_answer, format_database_answer
from src.services.answer.models import ChatResponse
from src.services.retrieval.models import RetrievedContext

logger = logging.getLogger(__name__)

CompletionFn = Callable[[Settings, list[dict[str, Any]]], Awaitable[str]]


class AnswerSynthesizer:
    """Turn a question plus retrieved contexts into a ChatResponse."""

    def __init__(self, settings: Settings, complete: CompletionFn = run_chat_completion):
        self.settings = settings
        self._complete = complete

    @staticmethod
    def build_messages(
        question: str, language: str, contexts: list[RetrievedContext]
    ) -> list[dict[str, str]]:
        """System prompt, optional context block, then the raw question."""
        messages = [{"role": "system", "content": build_chatbot_system_prompt(language)}]
        if contexts:
            messages.append(
                {
                    "role": "system",
                    "content": build_context_message(
                        [(ctx.content, ctx.reference) for ctx in contexts]
                    ),
                }
            )
        messages.append({"role": "user", "content": question})
        return messages

    @staticmethod
    def statistics_answer(contexts: list[RetrievedContext]) -> ChatResponse | None:
        """Answer statistics questions straight from state rows, or None if there are none."""
        migration = [ctx for ctx in contexts if ctx.is_migration_stats]
        if not migration:
            return None
        return ChatResponse(
            answer=format_database_answer(migration),
            source_type=SourceType.DATABASE,
            citations=context_references(migration),
        )

    async def generate(
        self, question: str, language: str, contexts: list[RetrievedContext]
    ) -> ChatResponse:
        """
        Ask the LLM, degrading to a templated answer if the call fails.

        Args:
            question: Raw user question
            language: Requested response language tag
            contexts: Retrieved contexts, possibly empty

        Returns:
            ChatResponse without timing; the caller stamps elapsed time
        """
        messages = self.build_messages(question, language, contexts)

        try:
            answer = await self._complete(self.settings, messages)
        except LLMNotConfiguredError as e:
            logger.warning("LLM not configured, using fallback answer: %s", e)
            return self.fallback(question, contexts)
        except LLMError as e:
            logger.error("LLM call failed (%s), using fallback answer: %s", type(e).__name__, e)
            return self.fallback(question, contexts)
        except Exception as e:
            logger.error("Unexpected error generating answer, using fallback answer: %s", e, exc_info=True)
            return self.fallback(question, contexts)

        return ChatResponse(
            answer=answer,
            source_type=SourceType.DATABASE if contexts else SourceType.GENERAL,
            citations=extract_citations(answer, contexts),
        )

    @staticmethod
    def fallback(question: str, contexts: list[RetrievedContext]) -> ChatResponse:
        """Templated answer from contexts, or an apology when there are none."""
        if contexts:
            return ChatResponse(
                answer=build_fallback_answer(question, contexts),
                source_type=SourceType.DATABASE,
                citations=context_references(contexts),
            )
        return ChatResponse(
            answer=SERVICE_UNAVAILABLE_MESSAGE,
            source_type=SourceType.GENERAL,
            citations=[],
        )
