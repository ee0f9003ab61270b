"""Main chatbot orchestrator."""

import logging
from collections.abc import Callable
from typing import Any

from src.config.constants import ChatStep, Language, SourceType
from src.config.prompts import OFF_TOPIC_MESSAGE
from src.config.settings import Settings
from src.infrastructure.logging.conversation_logger import schedule_conversation_save
from src.infrastructure.logging.logger import StructuredLogger
from src.orchestrator.state import ChatState
from src.orchestrator.step_timer import timed_step
from src.services.answer.models import ChatResponse
from src.services.answer.synthesizer import AnswerSynthesizer
from src.services.retrieval.retriever import Retriever
from src.services.triage.classifier import is_relevant, is_statistics_question

logger = logging.getLogger(__name__)

SaveFn = Callable[[Settings, str, str, ChatResponse, str], Any]


class ChatbotOrchestrator:
    """Relevance filter, retrieval and answer synthesis for one question."""

    def __init__(
        self,
        settings: Settings,
        retriever: Retriever | None = None,
        synthesizer: AnswerSynthesizer | None = None,
        save_conversation: SaveFn = schedule_conversation_save,
    ):
        """Initialize orchestrator with settings and optional collaborators."""
        self.settings = settings
        self.retriever = retriever or Retriever(settings)
        self.synthesizer = synthesizer or AnswerSynthesizer(settings)
        self._save_conversation = save_conversation
        self.structured_logger = StructuredLogger(__name__)

    async def chat(
        self,
        question: str,
        language: str = Language.ENGLISH.value,
        session_id: str | None = None,
    ) -> ChatResponse:
        """
        Answer a question.

        Off-topic questions are refused before any retrieval or LLM call.
        Statistics questions with state rows are answered from the rows
        directly. Everything else goes to the LLM with whatever context was
        found. With a session id the exchange is logged in the background.

        Args:
            question: Raw user question
            language: Requested response language tag
            session_id: Optional session id for the conversation log

        Returns:
            ChatResponse with elapsed time in milliseconds
        """
        state = ChatState(question=question, language=language, session_id=session_id)

        async with timed_step(ChatStep.RELEVANCE, self.structured_logger) as step:
            state.relevant = is_relevant(question)
            step.set_details(relevant=state.relevant)

        if not state.relevant:
            return self._finish(
                state,
                ChatResponse(answer=OFF_TOPIC_MESSAGE, source_type=SourceType.OFF_TOPIC),
            )

        async with timed_step(ChatStep.RETRIEVAL, self.structured_logger) as step:
            state.statistics_question = is_statistics_question(question)
            try:
                state.contexts = await self.retriever.retrieve(question)
            except Exception as e:
                logger.error("Retrieval failed, continuing without context: %s", e, exc_info=True)
                state.contexts = []
            step.set_details(
                statistics=state.statistics_question,
                contexts=len(state.contexts),
                sources=sorted({ctx.source for ctx in state.contexts}),
            )

        if state.statistics_question:
            direct = self.synthesizer.statistics_answer(state.contexts)
            if direct is not None:
                logger.info("%s: answered from state statistics", ChatStep.STATISTICS.value)
                return self._finish(state, direct)

        async with timed_step(ChatStep.GENERATION, self.structured_logger) as step:
            response = await self.synthesizer.generate(question, language, state.contexts)
            step.set_details(source_type=response.source_type.value, citations=response.citations)

        return self._finish(state, response)

    def _finish(self, state: ChatState, response: ChatResponse) -> ChatResponse:
        response.response_time = state.elapsed_ms()
        state.response = response
        self.structured_logger.log_step(
            ChatStep.RESPONSE.value,
            {
                "language": state.language,
                "source_type": response.source_type.value,
                "citations": len(response.citations),
            },
            duration_ms=float(response.response_time),
        )
        if state.session_id:
            try:
                self._save_conversation(
                    self.settings, state.session_id, state.question, response, state.language
                )
            except Exception:
                logger.warning(
                    "Could not schedule conversation save for %s", state.session_id, exc_info=True
                )
        return response


_orchestrator: ChatbotOrchestrator | None = None


def get_orchestrator(settings: Settings) -> ChatbotOrchestrator:
    """Get or create the shared orchestrator."""
    global _orchestrator  # noqa: PLW0603
    if _orchestrator is None:
        _orchestrator = ChatbotOrchestrator(settings)
    return _orchestrator


def reset_orchestrator() -> None:
    global _orchestrator  # noqa: PLW0603
    _orchestrator = None
