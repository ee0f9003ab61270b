"""Application settings using Pydantic BaseSettings."""

import logging
from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Right4All Backend"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        upper = v.upper()
        if upper not in _VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {_VALID_LOG_LEVELS}, got '{v}'")
        return upper

    @model_validator(mode="after")
    def validate_timeouts_positive(self) -> "Settings":
        for field_name in (
            "llm_timeout",
            "retrieval_timeout",
            "db_command_timeout",
            "insights_timeout",
        ):
            value = getattr(self, field_name)
            if value <= 0:
                raise ValueError(f"{field_name} must be positive, got {value}")
        return self

    @model_validator(mode="after")
    def validate_retrieval_limits(self) -> "Settings":
        if not 0.0 <= self.similarity_threshold <= 1.0:
            raise ValueError(
                f"similarity_threshold must be between 0 and 1, got {self.similarity_threshold}"
            )
        if self.similarity_limit < 1:
            raise ValueError(f"similarity_limit must be at least 1, got {self.similarity_limit}")
        if self.embedding_batch_size < 1:
            raise ValueError(
                f"embedding_batch_size must be at least 1, got {self.embedding_batch_size}"
            )
        return self

    @model_validator(mode="after")
    def warn_wildcard_origins(self) -> "Settings":
        if self.allowed_origins == ["*"]:
            logging.getLogger(__name__).warning(
                "allowed_origins is set to ['*'], consider restricting in production"
            )
        return self

    # CORS
    allowed_origins: list[str] = ["*"]

    # Database (Postgres + pgvector)
    database_url: str = ""
    db_pool_min_size: int = 1
    db_pool_max_size: int = 10
    db_pool_idle_lifetime: float = 60.0
    db_connect_timeout: float = 30.0
    db_command_timeout: float = 30.0

    # DeepSeek (OpenAI-compatible chat completions)
    deepseek_api_key: str | None = None
    deepseek_api_url: str = "https://api.deepseek.com/v1"
    deepseek_model: str = "deepseek-chat"
    llm_temperature: float = 0.7
    llm_max_tokens: int = 500
    llm_timeout: float = 30.0

    # Retrieval
    retrieval_timeout: float = 3.0
    similarity_threshold: float = 0.7
    similarity_limit: int = 10

    # Embeddings
    embedding_model: str = "intfloat/multilingual-e5-small"
    embedding_dim: int = 384
    embedding_max_chars: int = 8000
    embedding_batch_size: int = 10
    embedding_batch_delay: float = 0.1

    # Insights fallback (sibling endpoint, used when the states query fails)
    insights_api_url: str = "http://localhost:3000/api/insights/states"
    insights_timeout: float = 5.0

    # Conversation log retries
    conversation_log_max_retries: int = 3
    conversation_log_retry_delay: float = 1.0


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
