"""Shared database operation helpers."""

import logging
from collections.abc import Sequence
from typing import Any

logger = logging.getLogger(__name__)


def to_vector_literal(embedding: Sequence[float]) -> str:
    """Render an embedding as a pgvector text literal (``[0.1,0.2,...]``).

    asyncpg has no codec for the ``vector`` type, so vectors are sent as text
    and cast server-side with ``$1::text::vector``.
    """
    return "[" + ",".join(repr(float(x)) for x in embedding) + "]"


def ilike_pattern(term: str) -> str:
    """Wrap a search term as an ILIKE substring pattern."""
    return f"%{term}%"


def check_write_result(result: dict[str, Any], operation: str) -> bool:
    """Log and report whether an execute_insert result succeeded."""
    if not result.get("success") or result.get("error"):
        logger.error("Failed to %s: %s", operation, result.get("error"))
        return False
    return True
