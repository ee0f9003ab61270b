"""Chat pipeline state model."""

import time
from dataclasses import dataclass, field
from typing import Optional, List

from src.config.constants import Language
from src.services.answer.models import ChatResponse
from src.services.retrieval.models import RetrievedContext


@dataclass
class ChatState:
    """State object passed through the chat pipeline."""

    # Input
    question: str
    language: str = Language.ENGLISH.value
    session_id: Optional[str] = None

    # Step 1: Relevance
    relevant: bool = False

    # Step 2: Retrieval
    statistics_question: bool = False
    contexts: List[RetrievedContext] = field(default_factory=list)

    # Step 3: Answer
    response: Optional[ChatResponse] = None

    started_at: float = field(default_factory=time.perf_counter)

    def elapsed_ms(self) -> int:
        return int((time.perf_counter() - self.started_at) * 1000)
