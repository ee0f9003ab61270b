"""LLM client factory helpers."""

import logging

from openai import AsyncOpenAI

from src.config.settings import Settings
from src.infrastructure.llm.exceptions import LLMNotConfiguredError

logger = logging.getLogger(__name__)

_shared_client: AsyncOpenAI | None = None


def get_shared_client(settings: Settings) -> AsyncOpenAI:
    """
    Get or create the shared DeepSeek chat-completions client.

    All requests reuse one client so its HTTP connection pool stays warm.
    Retries are disabled at the client level; callers decide how to degrade.

    Raises:
        LLMNotConfiguredError: If no API key is configured
    """
    global _shared_client  # noqa: PLW0603
    if not settings.deepseek_api_key:
        raise LLMNotConfiguredError()
    if _shared_client is None:
        _shared_client = AsyncOpenAI(
            api_key=settings.deepseek_api_key,
            base_url=settings.deepseek_api_url,
            timeout=settings.llm_timeout,
            max_retries=0,
        )
        logger.info("DeepSeek client created (%s)", settings.deepseek_api_url)
    return _shared_client


async def close_shared_client() -> None:
    """
    Close the shared client.

    Should be called during application shutdown to release HTTP connections.
    """
    global _shared_client  # noqa: PLW0603
    if _shared_client is not None:
        await _shared_client.close()
        _shared_client = None
