"""Relevance and statistics classification for chatbot questions.

Both checks are keyword-based and pure, so they are cheap enough to run
before any database or LLM call.
"""

from src.config.keywords import GREETING_PREFIXES, RELEVANCE_KEYWORDS
from src.utils.text_processing import contains_any, word_count

SHORT_MESSAGE_MAX_WORDS = 3

_STATISTICS_STATES = ("selangor", "johor", "penang", "kuala lumpur")


def is_relevant(question: str) -> bool:
    """
    Decide whether a question is in the migrant-worker / labour-rights domain.

    Short messages (three words or fewer) that open with a greeting or a
    question word are accepted so that "hi" or "how?" reach the assistant.
    Longer messages need at least one domain keyword as a substring.

    Args:
        question: Raw user question

    Returns:
        True if the question should be answered
    """
    text = question.strip().lower()

    if word_count(text) <= SHORT_MESSAGE_MAX_WORDS and text.startswith(GREETING_PREFIXES):
        return True

    return contains_any(text, RELEVANCE_KEYWORDS)


def is_statistics_question(question: str) -> bool:
    """True for questions about migrant-worker counts or state statistics."""
    text = question.lower()
    return (
        "statistics" in text
        or "number" in text
        or ("migrant" in text and "workers" in text)
        or ("how many" in text and "workers" in text)
        or ("workers" in text and "in" in text and contains_any(text, _STATISTICS_STATES))
    )
