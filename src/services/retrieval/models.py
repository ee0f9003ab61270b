"""Retrieved knowledge-base context."""

from dataclasses import dataclass
from typing import Any

from src.config.constants import KnowledgeSource


@dataclass(frozen=True)
class RetrievedContext:
    """One knowledge item supplied to the answer synthesizer.

    ``reference`` may be empty; empty references are never cited.
    ``source`` is a KnowledgeSource value, kept as a plain string because the
    vector search procedure may return tables added after this code.
    """

    id: Any
    content: str
    reference: str
    source: str

    @property
    def is_migration_stats(self) -> bool:
        return self.source == KnowledgeSource.MIGRATION_STATS.value

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "RetrievedContext":
        return cls(
            id=row.get("id"),
            content=str(row.get("content") or ""),
            reference=str(row.get("reference") or ""),
            source=str(row.get("source") or ""),
        )
