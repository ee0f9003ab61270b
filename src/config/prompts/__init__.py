"""System prompts for the chatbot."""

from src.config.prompts.chatbot import (
    CONTEXT_HEADER,
    OFF_TOPIC_MESSAGE,
    SERVICE_UNAVAILABLE_MESSAGE,
    build_chatbot_system_prompt,
    build_context_message,
    language_name,
)

__all__ = [
    "CONTEXT_HEADER",
    "OFF_TOPIC_MESSAGE",
    "SERVICE_UNAVAILABLE_MESSAGE",
    "build_chatbot_system_prompt",
    "build_context_message",
    "language_name",
]
