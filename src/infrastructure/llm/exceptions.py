"""LLM provider error types.

Each failure mode of the chat-completions call maps to its own class so the
synthesizer can log it distinctly. Messages are safe to log but are never
shown to end users.
"""


class LLMError(Exception):
    """Base class for LLM provider failures."""


class LLMNotConfiguredError(LLMError):
    """No API key configured; raised before any network call."""

    def __init__(self, message: str = "DeepSeek API key not configured"):
        super().__init__(message)


class LLMTimeoutError(LLMError):
    def __init__(self, message: str = "AI service request timed out. Please try again."):
        super().__init__(message)


class LLMAuthenticationError(LLMError):
    def __init__(
        self,
        message: str = "Invalid API key. Please check your DeepSeek API configuration.",
    ):
        super().__init__(message)


class LLMRateLimitError(LLMError):
    def __init__(self, message: str = "Rate limit exceeded. Please try again later."):
        super().__init__(message)


class LLMConnectionError(LLMError):
    def __init__(self, message: str = "Connection to AI service was reset. Please try again."):
        super().__init__(message)


class LLMServiceError(LLMError):
    """Any other provider failure, including empty completions."""
