"""
Constants, enums, and static values.
"""

from enum import Enum


class Language(str, Enum):
    """Supported response languages."""

    ENGLISH = "en"
    MALAY = "ms"
    NEPALI = "ne"
    HINDI = "hi"
    BENGALI = "bn"


LANGUAGE_NAMES: dict[str, str] = {
    Language.ENGLISH.value: "English",
    Language.MALAY.value: "Bahasa Malaysia",
    Language.NEPALI.value: "Nepali",
    Language.HINDI.value: "Hindi",
    Language.BENGALI.value: "Bengali",
}


class SourceType(str, Enum):
    """Where a chatbot answer came from."""

    DATABASE = "database" # Grounded in retrieved contexts
    GENERAL = "general" # LLM answer without contexts, or apology
    OFF_TOPIC = "off-topic" # Rejected by the relevance filter


class KnowledgeSource(str, Enum):
    """Knowledge tables a retrieved context can come from."""

    RIGHTS_GUIDE = "rights_guide"
    FAQ = "faq"
    EMPLOYMENT_LAWS = "employment_laws"
    MIGRATION_STATS = "migration_stats"
    WAGE_RULES = "wage_rules"


class ChatStep(str, Enum):
    """Chatbot pipeline steps."""
    RELEVANCE = "relevance"
    RETRIEVAL = "retrieval"
    STATISTICS = "statistics"
    GENERATION = "generation"
    RESPONSE = "response"


# Employment Act wage arithmetic
WORKING_DAYS_PER_MONTH = 26
WORKING_HOURS_PER_DAY = 8
OVERTIME_MULTIPLIER = 1.5
OVERTIME_CITATION = "[ref:EA-Section-60I]"

# Chat request limits
MAX_QUESTION_LENGTH = 1000

STATES_OVERVIEW_REFERENCE = "states-overview"
STATES_OVERVIEW_LIMIT = 10
