"""Chatbot executor for evaluation."""

import asyncio
import logging
from typing import Any

from src.config.settings import get_settings
from src.infrastructure.database.connection import ConnectionPool
from src.infrastructure.llm.factory import close_shared_client
from src.orchestrator.pipeline import ChatbotOrchestrator

logger = logging.getLogger(__name__)


class Executor:
    """Runs benchmark questions through the chatbot in-process."""

    def __init__(self, timeout: float = 30.0) -> None:
        self.settings = get_settings()
        self.timeout = timeout
        self._orchestrator: ChatbotOrchestrator | None = None

    async def __aenter__(self) -> "Executor":
        # No session ids are passed, so nothing is written to the conversation log
        self._orchestrator = ChatbotOrchestrator(self.settings)
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await ConnectionPool.close()
        await close_shared_client()

    async def ask(self, question: str, language: str = "en") -> dict[str, Any]:
        """Ask one question and return the response fields, or an error."""
        if not self._orchestrator:
            return {"error": "Executor not initialized"}

        try:
            response = await asyncio.wait_for(
                self._orchestrator.chat(question, language=language),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError:
            logger.error("Chat timed out after %.0fs", self.timeout)
            return {"error": f"timed out after {self.timeout}s"}
        except Exception as e:
            logger.error("Chat error: %s", e)
            return {"error": str(e)}

        return {
            "answer": response.answer,
            "source_type": response.source_type.value,
            "citations": response.citations,
            "response_time": response.response_time,
        }
