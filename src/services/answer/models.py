"""Chatbot answer model."""

from dataclasses import dataclass, field

from src.config.constants import SourceType


@dataclass
class ChatResponse:
    """Answer returned by the chatbot for one question."""

    answer: str
    source_type: SourceType
    citations: list[str] = field(default_factory=list)
    response_time: int = 0  # elapsed milliseconds

    def to_dict(self) -> dict:
        return {
            "answer": self.answer,
            "sourceType": self.source_type.value,
            "citations": list(self.citations),
            "responseTime": self.response_time,
        }
