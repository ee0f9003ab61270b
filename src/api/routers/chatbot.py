"""Chatbot, wage calculator and starter question endpoints."""

import logging
from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from src.api.dependencies import get_chatbot
from src.api.models import (
    ChatbotHealthResponse,
    ChatRequest,
    ChatResponse,
    StarterQuestionsResponse,
    WageRequest,
    WageResponse,
)
from src.config.constants import Language
from src.config.starter_questions import get_starter_questions
from src.orchestrator.pipeline import ChatbotOrchestrator
from src.services.wage.calculator import calculate_wage

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/chat", response_model=ChatResponse)
async def chat(
    request: ChatRequest,
    chatbot: ChatbotOrchestrator = Depends(get_chatbot),
) -> dict[str, Any]:
    """Answer a migrant-worker question with knowledge-base context."""
    try:
        response = await chatbot.chat(
            request.question,
            language=request.language.value,
            session_id=request.session_id,
        )
    except Exception as e:
        logger.error("Error processing chat request: %s", e, exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to process your question") from e
    return response.to_dict()


@router.post("/wage/check", response_model=WageResponse, response_model_exclude_none=True)
async def wage_check(request: WageRequest) -> dict[str, Any]:
    """Step-by-step daily, hourly and overtime pay."""
    try:
        return calculate_wage(request.monthly, request.ot_hours).to_dict()
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e


@router.get("/starter-questions", response_model=StarterQuestionsResponse)
async def starter_questions(language: str = Language.ENGLISH.value) -> StarterQuestionsResponse:
    """Suggested opening questions in the requested language."""
    return StarterQuestionsResponse(questions=get_starter_questions(language))


@router.get("/health", response_model=ChatbotHealthResponse)
async def chatbot_health() -> ChatbotHealthResponse:
    """Health check."""
    return ChatbotHealthResponse(
        ok=True,
        service="chatbot",
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
