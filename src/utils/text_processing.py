"""Text processing utilities."""

import re
from collections.abc import Iterable
from typing import Any

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """
    Collapse runs of whitespace into single spaces and trim.

    Args:
        text: Input text

    Returns:
        Normalized text
    """
    return _WHITESPACE_RE.sub(" ", text).strip()


def clean_for_embedding(text: str, max_chars: int = 8000) -> str:
    """Normalize text and truncate it to the embedding model's input budget."""
    return normalize_text(text)[:max_chars]


def contains_any(text: str, needles: Iterable[str]) -> bool:
    """True if any needle is a substring of text."""
    return any(needle in text for needle in needles)


def word_count(text: str) -> int:
    """Number of whitespace-separated tokens; an empty string counts as one."""
    return len(_WHITESPACE_RE.split(text))


def format_count(value: Any) -> str:
    """Render an integer count with thousands separators (``1,234,567``)."""
    try:
        return f"{int(value):,}"
    except (TypeError, ValueError):
        return str(value)
