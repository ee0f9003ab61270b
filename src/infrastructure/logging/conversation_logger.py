"""Best-effort persistence of chatbot conversations.

Saving runs as a background task after the HTTP response has been built.
A failed save is logged and dropped; it never reaches the caller.
"""

import asyncio
import logging

from src.config.settings import Settings
from src.infrastructure.database.connection import execute_insert
from src.infrastructure.database.helpers import check_write_result
from src.services.answer.models import ChatResponse

logger = logging.getLogger(__name__)

INSERT_CONVERSATION_SQL = """
    INSERT INTO chatbot_conversations
        (session_id, user_question, bot_response, source_type, language, response_time_ms, citations)
    VALUES ($1, $2, $3, $4, $5, $6, $7)
"""

# Strong references to in-flight saves; asyncio only keeps weak ones.
_pending: set[asyncio.Task] = set()


async def save_conversation(
    settings: Settings,
    session_id: str,
    question: str,
    response: ChatResponse,
    language: str,
) -> bool:
    """Insert one conversation record. Returns True when the row was written."""
    result = await execute_insert(
        settings,
        INSERT_CONVERSATION_SQL,
        (
            session_id,
            question,
            response.answer,
            response.source_type.value,
            language,
            response.response_time,
            list(response.citations),
        ),
        max_retries=settings.conversation_log_max_retries,
        initial_delay=settings.conversation_log_retry_delay,
    )
    return check_write_result(result, "save conversation")


async def _save_conversation_bg(
    settings: Settings,
    session_id: str,
    question: str,
    response: ChatResponse,
    language: str,
) -> None:
    """Persist a conversation in background (fire-and-forget)."""
    try:
        await save_conversation(settings, session_id, question, response, language)
    except Exception:
        logger.warning("Background conversation save failed for %s", session_id, exc_info=True)


def schedule_conversation_save(
    settings: Settings,
    session_id: str,
    question: str,
    response: ChatResponse,
    language: str,
) -> asyncio.Task:
    """Start saving a conversation without waiting for it."""
    task = asyncio.create_task(
        _save_conversation_bg(settings, session_id, question, response, language)
    )
    _pending.add(task)
    task.add_done_callback(_pending.discard)
    return task


async def drain_pending_saves(timeout: float = 5.0) -> None:
    """Wait briefly for in-flight saves during shutdown."""
    if not _pending:
        return
    _, pending = await asyncio.wait(set(_pending), timeout=timeout)
    if pending:
        logger.warning("%d conversation saves still pending at shutdown", len(pending))
