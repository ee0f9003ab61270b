"""Templated answers used when the LLM is unavailable."""

import re

from src.services.retrieval.models import RetrievedContext
from src.utils.text_processing import contains_any

OVERTIME_ANSWER = (
    "Based on Malaysian Employment Act, overtime is calculated at 1.5 times the hourly "
    "rate for work beyond normal working hours. For more precise calculation, please "
    "use our wage calculator tool."
)
WAGE_ANSWER = (
    "The minimum wage in Malaysia varies by region. For current rates and calculations, "
    "please use our wage calculator tool."
)
LEAVE_ANSWER = (
    "Employees in Malaysia are entitled to annual leave, sick leave, and public holidays "
    "as per the Employment Act. The exact entitlement depends on your length of service."
)

_STATISTICS_TERMS = (
    "migrant",
    "worker",
    "statistics",
    "number",
    "state",
    "selangor",
    "johor",
    "penang",
    "kuala lumpur",
)
# Short abbreviations only count as whole words ("ot" must not match "not")
_KL_RE = re.compile(r"\bkl\b")
_OT_RE = re.compile(r"\bot\b")


def format_database_answer(contexts: list[RetrievedContext]) -> str:
    """``Based on our database:`` followed by one or more context contents."""
    if len(contexts) == 1:
        return f"Based on our database: {contexts[0].content}"
    return "Based on our database:\n" + "\n".join(ctx.content for ctx in contexts)


def build_fallback_answer(question: str, contexts: list[RetrievedContext]) -> str:
    """
    Pick a templated answer from the question's topic and the retrieved contexts.

    Buckets are tried in order: migration statistics (only when statistics
    contexts exist), overtime, wage or salary, leave or holiday, and finally
    the top-ranked context.

    Args:
        question: Raw user question
        contexts: Non-empty list of retrieved contexts

    Returns:
        Answer text
    """
    text = question.lower()

    if contains_any(text, _STATISTICS_TERMS) or _KL_RE.search(text):
        migration = [ctx for ctx in contexts if ctx.is_migration_stats]
        if migration:
            return format_database_answer(migration)

    if "overtime" in text or _OT_RE.search(text):
        return OVERTIME_ANSWER
    if "wage" in text or "salary" in text:
        return WAGE_ANSWER
    if "leave" in text or "holiday" in text:
        return LEAVE_ANSWER
    return f"Based on our database: {contexts[0].content}"
