"""ILIKE keyword search over the knowledge tables.

Used directly for statistics questions and as the fallback when vector
search fails. Each table contributes a fixed number of rows in a fixed
order: rights guide, FAQ, employment laws, then state statistics.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from src.config.constants import (
    STATES_OVERVIEW_LIMIT,
    STATES_OVERVIEW_REFERENCE,
    KnowledgeSource,
)
from src.config.settings import Settings
from src.infrastructure.database.connection import execute_query
from src.infrastructure.database.helpers import ilike_pattern
from src.infrastructure.insights.client import fetch_state_rows
from src.services.retrieval.models import RetrievedContext
from src.utils.text_processing import contains_any, format_count

logger = logging.getLogger(__name__)

QueryFn = Callable[[Settings, str, tuple[Any, ...] | None], Awaitable[list[dict[str, Any]]]]
StatesFn = Callable[[Settings], Awaitable[list[dict[str, Any]]]]

RIGHTS_GUIDE_SQL = """
    SELECT id, question, answer, law_ref
    FROM rights_guide
    WHERE question ILIKE $1 OR answer ILIKE $1
    LIMIT 3
"""

FAQ_SQL = """
    SELECT id, question, answer
    FROM faq
    WHERE question ILIKE $1 OR answer ILIKE $1
    LIMIT 3
"""

EMPLOYMENT_LAWS_SQL = """
    SELECT id, title, section, content
    FROM employment_laws
    WHERE content ILIKE $1 OR title ILIKE $1
    LIMIT 2
"""

STATES_SQL = """
    SELECT state_code, state_name_en, migrant_number, risk_level,
           manuf_perc_in_state, const_perc_in_state, agric_percent_in_state
    FROM states
    WHERE state_name_en ILIKE $1 OR $1 ILIKE '%' || state_name_en || '%'
    LIMIT 5
"""

STATES_OVERVIEW_SQL = f"""
    SELECT state_name_en, migrant_number, risk_level
    FROM states
    ORDER BY migrant_number DESC
    LIMIT {STATES_OVERVIEW_LIMIT}
"""

_OVERVIEW_TRIGGERS = ("statistics", "number", "workers", "migration")


def format_state(row: dict[str, Any]) -> RetrievedContext:
    """Build a state statistics context from a states / insights row."""
    return RetrievedContext(
        id=row.get("state_code"),
        content=(
            f"State: {row.get('state_name_en')}"
            f" - Migrant Workers: {format_count(row.get('migrant_number'))}"
            f" - Risk Level: {row.get('risk_level')}"
            f" - Manufacturing: {row.get('manuf_perc_in_state')}%"
            f" - Construction: {row.get('const_perc_in_state')}%"
            f" - Agriculture: {row.get('agric_percent_in_state')}%"
        ),
        reference=f"state-{row.get('state_code')}",
        source=KnowledgeSource.MIGRATION_STATS.value,
    )


def state_name_matches(state_name: str, question: str) -> bool:
    """Case-insensitive substring match in either direction."""
    name = state_name.lower()
    term = question.lower()
    return bool(name) and (name in term or term in name)


class KeywordSearcher:
    """Keyword search across rights guide, FAQ, employment laws and states."""

    def __init__(
        self,
        settings: Settings,
        query: QueryFn = execute_query,
        fetch_states: StatesFn = fetch_state_rows,
    ):
        self.settings = settings
        self._query = query
        self._fetch_states = fetch_states

    async def search(self, question: str) -> list[RetrievedContext]:
        """
        Search all knowledge tables for the question text.

        Never raises: a failure outside the states lookup returns an empty list.
        """
        logger.info("Using keyword search")
        pattern = ilike_pattern(question)
        contexts: list[RetrievedContext] = []

        try:
            for row in await self._query(self.settings, RIGHTS_GUIDE_SQL, (pattern,)):
                contexts.append(
                    RetrievedContext(
                        id=row.get("id"),
                        content=f"Q: {row.get('question')}\nA: {row.get('answer')}",
                        reference=row.get("law_ref") or "",
                        source=KnowledgeSource.RIGHTS_GUIDE.value,
                    )
                )

            for row in await self._query(self.settings, FAQ_SQL, (pattern,)):
                contexts.append(
                    RetrievedContext(
                        id=row.get("id"),
                        content=f"Q: {row.get('question')}\nA: {row.get('answer')}",
                        reference="",
                        source=KnowledgeSource.FAQ.value,
                    )
                )

            for row in await self._query(self.settings, EMPLOYMENT_LAWS_SQL, (pattern,)):
                title, section = row.get("title"), row.get("section")
                contexts.append(
                    RetrievedContext(
                        id=row.get("id"),
                        content=f"{title} - {section}: {row.get('content')}",
                        reference=f"{title}-{section}",
                        source=KnowledgeSource.EMPLOYMENT_LAWS.value,
                    )
                )

            contexts.extend(await self._search_states(question, pattern))
        except Exception as e:
            logger.error("Keyword search failed: %s", e, exc_info=True)
            return []

        return contexts

    async def _search_states(self, question: str, pattern: str) -> list[RetrievedContext]:
        try:
            rows = await self._query(self.settings, STATES_SQL, (pattern,))
            contexts = [format_state(row) for row in rows]

            if not rows and contains_any(question.lower(), _OVERVIEW_TRIGGERS):
                overview = await self._query(self.settings, STATES_OVERVIEW_SQL, None)
                contexts.extend(
                    RetrievedContext(
                        id=0,
                        content=(
                            f"{row.get('state_name_en')}: "
                            f"{format_count(row.get('migrant_number'))} migrant workers "
                            f"({row.get('risk_level')} risk)"
                        ),
                        reference=STATES_OVERVIEW_REFERENCE,
                        source=KnowledgeSource.MIGRATION_STATS.value,
                    )
                    for row in overview
                )
            return contexts
        except Exception as e:
            logger.warning("States query failed, using insights endpoint instead: %s", e)
            return await self._search_states_via_insights(question)

    async def _search_states_via_insights(self, question: str) -> list[RetrievedContext]:
        try:
            rows = await self._fetch_states(self.settings)
        except Exception as e:
            logger.warning("Insights endpoint fallback also failed: %s", e)
            return []
        return [
            format_state(row)
            for row in rows
            if state_name_matches(str(row.get("state_name_en") or ""), question)
        ]
