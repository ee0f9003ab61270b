"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from src.api.routers import api_router
from src.config.settings import Settings, get_settings
from src.infrastructure.database.connection import ConnectionPool
from src.infrastructure.llm.factory import close_shared_client
from src.infrastructure.logging.conversation_logger import drain_pending_saves
from src.infrastructure.logging.logger import setup_logging

settings = get_settings()

setup_logging(
    level=settings.log_level,
    json_output=not settings.debug,
    silence_noisy_loggers=True,
)

logger = logging.getLogger(__name__)


def _validate_startup_config(settings: Settings) -> None:
    """Validate required configuration at startup."""
    if not settings.deepseek_api_key:
        logger.warning(
            "DEEPSEEK_API_KEY not configured, chatbot answers will use database fallbacks only"
        )

    if not settings.database_url:
        logger.warning("database_url is empty, knowledge-base search will return no context")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Startup and shutdown lifecycle."""
    logger.info("Starting %s", settings.app_name)
    _validate_startup_config(settings)

    # Eagerly create the pool so the first request doesn't pay the handshake
    if settings.database_url:
        try:
            await ConnectionPool.get_pool(settings)
            logger.info("Postgres pool initialised")
        except Exception as e:
            logger.warning("Failed to pre-initialise Postgres pool: %s", e)

    yield
    logger.info("Shutting down %s", settings.app_name)
    try:
        await drain_pending_saves()
    except Exception as e:
        logger.error("Error waiting for conversation saves: %s", e, exc_info=True)
    try:
        await ConnectionPool.close()
    except Exception as e:
        logger.error("Error closing Postgres pool: %s", e, exc_info=True)
    try:
        await close_shared_client()
        logger.info("Shared LLM client closed")
    except Exception as e:
        logger.error("Error closing shared LLM client: %s", e, exc_info=True)


app = FastAPI(
    title=settings.app_name,
    description="Migrant worker support API with a multilingual RAG chatbot",
    version=settings.app_version,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials="*" not in settings.allowed_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(ProxyHeadersMiddleware, trusted_hosts=["*"])

app.include_router(api_router, prefix="/api")
