"""FastAPI dependencies."""

from fastapi import Depends

from src.config.settings import Settings, get_settings
from src.orchestrator.pipeline import ChatbotOrchestrator, get_orchestrator


def get_chatbot(settings: Settings = Depends(get_settings)) -> ChatbotOrchestrator:
    """Shared chatbot orchestrator as a FastAPI dependency."""
    return get_orchestrator(settings)
