"""
Chat-completion executor for the DeepSeek provider.
"""
import logging
from typing import Any

import openai

from src.config.settings import Settings
from src.infrastructure.llm.exceptions import (
    LLMAuthenticationError,
    LLMConnectionError,
    LLMRateLimitError,
    LLMServiceError,
    LLMTimeoutError,
)
from src.infrastructure.llm.factory import get_shared_client

logger = logging.getLogger(__name__)


async def run_chat_completion(settings: Settings, messages: list[dict[str, Any]]) -> str:
    """
    Send a chat-completions request and return the first choice's text.

    No retries: a failed call is reported once and the caller falls back.

    Raises:
        LLMNotConfiguredError: No API key configured (no request is sent)
        LLMTimeoutError: Request exceeded ``llm_timeout``
        LLMAuthenticationError: Provider rejected the API key
        LLMRateLimitError: Provider returned 429
        LLMConnectionError: Connection dropped or reset
        LLMServiceError: Any other provider failure or an empty completion
    """
    client = get_shared_client(settings)

    try:
        response = await client.chat.completions.create(
            model=settings.deepseek_model,
            messages=messages,  # type: ignore[arg-type]
            temperature=settings.llm_temperature,
            max_tokens=settings.llm_max_tokens,
            timeout=settings.llm_timeout,
        )
    # APITimeoutError subclasses APIConnectionError, so it is checked first
    except openai.APITimeoutError as e:
        logger.error("DeepSeek API timeout: %s", e)
        raise LLMTimeoutError() from e
    except openai.AuthenticationError as e:
        logger.error("DeepSeek API authentication failed: %s", e)
        raise LLMAuthenticationError() from e
    except openai.RateLimitError as e:
        logger.error("DeepSeek API rate limited: %s", e)
        raise LLMRateLimitError() from e
    except openai.APIConnectionError as e:
        logger.error("DeepSeek API connection error: %s", e)
        raise LLMConnectionError() from e
    except openai.APIError as e:
        logger.error("DeepSeek API error: %s", e)
        raise LLMServiceError(f"Failed to get response from AI: {e}") from e

    if not response.choices or not response.choices[0].message.content:
        raise LLMServiceError("Failed to get response from AI: empty completion")
    return response.choices[0].message.content
