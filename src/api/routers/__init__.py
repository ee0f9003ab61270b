"""API sub-routers assembled into a single api_router."""

from fastapi import APIRouter

from src.api.routers.chatbot import router as chatbot_router
from src.api.routers.health import router as health_router
from src.api.routers.insights import router as insights_router

api_router = APIRouter()

api_router.include_router(health_router, tags=["health"])
api_router.include_router(chatbot_router, prefix="/chatbot", tags=["chatbot"])
api_router.include_router(insights_router, prefix="/insights", tags=["insights"])
