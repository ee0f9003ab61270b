"""LLM infrastructure module."""

from src.infrastructure.llm.exceptions import (
    LLMAuthenticationError,
    LLMConnectionError,
    LLMError,
    LLMNotConfiguredError,
    LLMRateLimitError,
    LLMServiceError,
    LLMTimeoutError,
)
from src.infrastructure.llm.executor import run_chat_completion
from src.infrastructure.llm.factory import close_shared_client, get_shared_client

__all__ = [
    "LLMAuthenticationError",
    "LLMConnectionError",
    "LLMError",
    "LLMNotConfiguredError",
    "LLMRateLimitError",
    "LLMServiceError",
    "LLMTimeoutError",
    "close_shared_client",
    "get_shared_client",
    "run_chat_completion",
]
